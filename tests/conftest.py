import pytest
from fastapi.testclient import TestClient

from shared.config import Settings
from services.api.main import create_app
from tests.fakes import FakeStore


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def settings(tmp_path):
    static = tmp_path / "public"
    static.mkdir()
    (static / "index.html").write_text("<h1>Fresh Vegetables</h1>")
    return Settings(static_dir=str(static))


@pytest.fixture
def client(store, settings):
    with TestClient(create_app(store, settings)) as c:
        yield c


@pytest.fixture
def broken_client(settings):
    with TestClient(create_app(FakeStore(fail=True), settings)) as c:
        yield c
