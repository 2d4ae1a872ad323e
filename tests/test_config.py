from shared.config import Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings.port == 3000
    assert settings.mongo_url == "mongodb://vegetable-app-mongodb-svc:27017/vegetable_order_app"
    assert settings.max_body_bytes == 100 * 1024
    assert settings.static_dir == "public"
    assert settings.log_level == "INFO"


def test_overrides():
    settings = Settings.from_env({
        "PORT": "8080",
        "MONGO_URL": "mongodb://db:27017/veg",
        "MAX_BODY_BYTES": "2048",
        "STATIC_DIR": "web",
        "LOG_LEVEL": "debug",
    })
    assert settings.port == 8080
    assert settings.mongo_url == "mongodb://db:27017/veg"
    assert settings.max_body_bytes == 2048
    assert settings.static_dir == "web"
    assert settings.log_level == "DEBUG"


def test_empty_values_fall_back():
    settings = Settings.from_env({"PORT": "", "MONGO_URL": ""})
    assert settings.port == 3000
    assert settings.mongo_url.endswith("/vegetable_order_app")
