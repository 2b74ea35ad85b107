# tests/test_admin_api.py

import pytest


ADMIN_ROUTES = [
    ("GET", "/api/admin/users", None),
    ("POST", "/api/admin/users", {"username": "carol", "password": "Pw1"}),
    ("DELETE", "/api/admin/users/alice", None),
    ("POST", "/api/admin/users/alice/set-admin", {"isAdmin": True}),
    ("POST", "/api/admin/backup", None),
]


@pytest.mark.parametrize("method,path,body", ADMIN_ROUTES)
def test_non_admin_is_forbidden(client, auth_headers, method, path, body):
    headers = auth_headers("alice")

    res = client.request(method, path, headers=headers, json=body)
    assert res.status_code == 403
    assert res.json() == {"detail": "admin required"}


@pytest.mark.parametrize("method,path,body", ADMIN_ROUTES)
def test_anonymous_is_unauthorized(client, method, path, body):
    res = client.request(method, path, json=body)
    assert res.status_code == 401


def test_list_users_hides_password_hashes(client, admin_headers, register):
    register("alice")

    res = client.get("/api/admin/users", headers=admin_headers)
    assert res.status_code == 200

    users = res.json()["users"]
    assert set(users) == {"root", "alice"}
    assert users["root"]["isAdmin"] is True
    assert users["alice"]["isAdmin"] is False
    assert set(users["alice"]) == {"createdAt", "isAdmin"}
    assert "passwordHash" not in res.text


def test_create_user(client, admin_headers, login, settings):
    res = client.post(
        "/api/admin/users",
        headers=admin_headers,
        json={"username": "carol", "password": "secret", "isAdmin": True},
    )
    assert res.status_code == 200
    assert res.json() == {"ok": True, "user": {"username": "carol", "isAdmin": True}}

    assert (settings.data_dir / "carol.json").exists()
    assert login("carol", "secret")


def test_create_user_defaults_to_non_admin(client, admin_headers, users):
    client.post("/api/admin/users", headers=admin_headers, json={"username": "dave", "password": "x"})
    assert users.get("dave").is_admin is False


def test_create_user_errors(client, admin_headers, register):
    register("alice")

    res = client.post("/api/admin/users", headers=admin_headers, json={"username": "alice", "password": "x"})
    assert res.status_code == 409

    res = client.post("/api/admin/users", headers=admin_headers, json={"username": "erin"})
    assert res.status_code == 400


def test_delete_user_removes_record_and_sheet(client, admin_headers, register, settings):
    register("alice")
    assert (settings.data_dir / "alice.json").exists()

    res = client.delete("/api/admin/users/alice", headers=admin_headers)
    assert res.status_code == 200
    assert res.json() == {"ok": True}

    assert not (settings.data_dir / "alice.json").exists()
    res = client.post("/api/login", json={"username": "alice", "password": "Pw1"})
    assert res.status_code == 401


def test_delete_user_without_sheet_file(client, admin_headers, register, settings):
    register("alice")
    (settings.data_dir / "alice.json").unlink()

    assert client.delete("/api/admin/users/alice", headers=admin_headers).status_code == 200


def test_unknown_user_is_not_found(client, admin_headers):
    assert client.delete("/api/admin/users/ghost", headers=admin_headers).status_code == 404

    res = client.post("/api/admin/users/ghost/set-admin", headers=admin_headers, json={"isAdmin": True})
    assert res.status_code == 404
    assert res.json() == {"detail": "user not found"}


def test_set_admin_promotes_and_demotes(client, admin_headers, auth_headers):
    alice = auth_headers("alice")
    assert client.get("/api/admin/users", headers=alice).status_code == 403

    res = client.post("/api/admin/users/alice/set-admin", headers=admin_headers, json={"isAdmin": True})
    assert res.json() == {"ok": True, "user": {"username": "alice", "isAdmin": True}}
    assert client.get("/api/admin/users", headers=alice).status_code == 200

    # Same token, next request: the flag is re-read from users.json.
    client.post("/api/admin/users/alice/set-admin", headers=admin_headers, json={"isAdmin": False})
    assert client.get("/api/admin/users", headers=alice).status_code == 403


def test_set_admin_without_body_demotes(client, admin_headers, register, users):
    register("alice")
    users.set_admin("alice", True)

    res = client.post("/api/admin/users/alice/set-admin", headers=admin_headers)
    assert res.status_code == 200
    assert users.is_admin("alice") is False


def test_deleted_admin_token_loses_access(client, admin_headers, users):
    users.delete("root")
    assert client.get("/api/admin/users", headers=admin_headers).status_code == 403
