# tests/test_client_api.py

import pytest
import requests

from app.services import api


class FakeResponse:
    def __init__(self, status_code, payload=None):
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("no body")
        return self._payload


class Recorder(list):
    pass


@pytest.fixture
def recorder(monkeypatch):
    recorder = Recorder()
    recorder.responses = []

    def fake_request(method, url, **kwargs):
        recorder.append((method, url, kwargs))
        return recorder.responses.pop(0)

    monkeypatch.setattr(api.requests, "request", fake_request)
    return recorder


def test_login_posts_json(recorder):
    recorder.responses.append(FakeResponse(200, {"token": "t", "username": "alice"}))

    assert api.login_user("alice", "Pw1") == {"token": "t", "username": "alice"}

    method, url, kwargs = recorder[0]
    assert method == "POST"
    assert url == f"{api.FASTAPI_URL}/api/login"
    assert kwargs["json"] == {"username": "alice", "password": "Pw1"}


def test_sheet_calls_send_bearer_token(recorder):
    sheet = {"columns": ["A"], "rows": []}
    recorder.responses.append(FakeResponse(200, {"ok": True, "savedAt": "now"}))

    api.save_sheet("tok", "alice", sheet)

    method, url, kwargs = recorder[0]
    assert url.endswith("/api/sheet/alice")
    assert kwargs["headers"] == {"Authorization": "Bearer tok"}
    assert kwargs["json"] == {"sheet": sheet}


def test_error_responses_become_error_dicts(recorder):
    recorder.responses.append(FakeResponse(409, {"detail": "user exists"}))
    assert api.register_user("alice", "Pw1") == {"error": "user exists", "status": 409}

    recorder.responses.append(FakeResponse(500, {"detail": "backup failed", "details": "disk full"}))
    assert api.trigger_backup("tok") == {"error": "backup failed", "status": 500, "details": "disk full"}

    recorder.responses.append(FakeResponse(502))
    assert api.ping() == {"error": "Status 502", "status": 502}


def test_backup_uses_longer_timeout(recorder):
    recorder.responses.append(FakeResponse(200, {"ok": True, "output": "done"}))
    api.trigger_backup("tok")
    assert recorder[0][2]["timeout"] == api.BACKUP_TIMEOUT


def test_connection_errors_are_reported(monkeypatch):
    def boom(method, url, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(api.requests, "request", boom)
    assert api.get_me("tok") == {"error": "refused"}
