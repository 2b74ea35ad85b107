# app/services/api.py

import os
import requests
from dotenv import load_dotenv

load_dotenv()

# Base URL of the FastAPI backend
FASTAPI_URL = os.getenv("FASTAPI_URL", "http://localhost:3000")

REQUEST_TIMEOUT = 15
# The server itself waits up to BACKUP_TIMEOUT (120s) for the script.
BACKUP_TIMEOUT = 150


def _auth(token):
    return {"Authorization": f"Bearer {token}"}


def _result(res):
    """
    Returns the JSON body on success, otherwise {"error": ..., "status": ...}.
    """
    try:
        data = res.json()
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}

    if res.ok:
        return data

    error = {"error": data.get("detail") or f"Status {res.status_code}", "status": res.status_code}
    if data.get("details"):
        error["details"] = data["details"]
    return error


def _request(method, path, timeout=REQUEST_TIMEOUT, **kwargs):
    try:
        res = requests.request(method, f"{FASTAPI_URL}{path}", timeout=timeout, **kwargs)
    except requests.RequestException as e:
        return {"error": str(e)}
    return _result(res)


# -------------------------------
# Authentication-related functions
# -------------------------------

def register_user(username, password):
    return _request("POST", "/api/register", json={"username": username, "password": password})


def login_user(username, password):
    """
    Logs in a user and returns {"token", "username"}.
    """
    return _request("POST", "/api/login", json={"username": username, "password": password})


def get_me(token):
    """
    Retrieves the username and admin flag of the token's owner.
    """
    return _request("GET", "/api/me", headers=_auth(token))


# -------------------------
# Sheets
# -------------------------

def get_sheet(token, username):
    return _request("GET", f"/api/sheet/{username}", headers=_auth(token))


def save_sheet(token, username, sheet):
    return _request("POST", f"/api/sheet/{username}", headers=_auth(token), json={"sheet": sheet})


# -------------------------
# Administration
# -------------------------

def list_users(token):
    return _request("GET", "/api/admin/users", headers=_auth(token))


def create_user(token, username, password, is_admin=False):
    payload = {"username": username, "password": password, "isAdmin": is_admin}
    return _request("POST", "/api/admin/users", headers=_auth(token), json=payload)


def delete_user(token, username):
    return _request("DELETE", f"/api/admin/users/{username}", headers=_auth(token))


def set_admin(token, username, is_admin):
    return _request(
        "POST",
        f"/api/admin/users/{username}/set-admin",
        headers=_auth(token),
        json={"isAdmin": is_admin},
    )


def trigger_backup(token):
    return _request("POST", "/api/admin/backup", headers=_auth(token), timeout=BACKUP_TIMEOUT)


def ping():
    return _request("GET", "/ping")
