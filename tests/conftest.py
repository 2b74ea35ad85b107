# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from server.config import Settings, get_settings
from server.core.credentials import CredentialStore
from server.core.sheets import SheetStore
from server.main import app


PASSWORD = "Pw1"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        secret_key="test-secret",
        token_expire_minutes=480,
        data_dir=tmp_path / "data",
        backup_dir=tmp_path / "backups",
        backup_keep=3,
        backup_timeout=60,
    )


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def users(settings):
    return CredentialStore(settings.users_file)


@pytest.fixture
def sheets(settings):
    return SheetStore(settings.data_dir)


@pytest.fixture
def register(client):
    def _register(username, password=PASSWORD):
        res = client.post("/api/register", json={"username": username, "password": password})
        assert res.status_code == 200, res.text
        return res
    return _register


@pytest.fixture
def login(client):
    def _login(username, password=PASSWORD):
        res = client.post("/api/login", json={"username": username, "password": password})
        assert res.status_code == 200, res.text
        return res.json()["token"]
    return _login


@pytest.fixture
def auth_headers(register, login):
    """Registers a user and returns Authorization headers for it."""
    def _headers(username, password=PASSWORD):
        register(username, password)
        return {"Authorization": f"Bearer {login(username, password)}"}
    return _headers


@pytest.fixture
def admin_headers(auth_headers, users):
    headers = auth_headers("root")
    users.set_admin("root", True)
    return headers
