"""Health, static frontend and app lifecycle."""

from fastapi.testclient import TestClient

from services.api.main import create_app
from shared.config import Settings
from tests.fakes import FakeStore


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "OK", "service": "vegetable-app"}


def test_health_ignores_storage_state(broken_client):
    response = broken_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "OK", "service": "vegetable-app"}


def test_static_index_served(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Fresh Vegetables" in response.text


def test_static_file_served(client, settings, tmp_path):
    (tmp_path / "public" / "app.js").write_text("console.log('veg');")
    response = client.get("/app.js")
    assert response.status_code == 200
    assert "veg" in response.text


def test_unknown_path_is_404(client):
    assert client.get("/missing.css").status_code == 404


def test_missing_static_dir_still_serves_api(tmp_path):
    settings = Settings(static_dir=str(tmp_path / "nope"))
    with TestClient(create_app(FakeStore(), settings)) as c:
        assert c.get("/health").status_code == 200
        assert c.get("/").status_code == 404


def test_store_closed_on_shutdown(settings):
    store = FakeStore()
    with TestClient(create_app(store, settings)) as c:
        c.get("/health")
        assert not store.closed
    assert store.closed
