# server/api/admin.py

import logging
from typing import Any
from pydantic import BaseModel
from fastapi import APIRouter, Body, Depends

from server.api.auth import require_admin
from server.config import Settings, get_settings
from server.core.backup import trigger_backup
from server.core.credentials import CredentialStore
from server.core.sheets import SheetStore
from server.storage import get_credential_store, get_sheet_store


logger = logging.getLogger(__name__)

# Initialize FastAPI router
router = APIRouter()


class CreateUserRequest(BaseModel):
    """
    Request schema for creating a user from the admin page.
    """
    username: str | None = None
    password: str | None = None
    isAdmin: Any = False


# -------------------------------
# User Management Endpoints
# -------------------------------

@router.get("/api/admin/users")
def list_users(
    admin: str = Depends(require_admin),
    users: CredentialStore = Depends(get_credential_store),
):
    """
    Lists every account with its creation time and admin flag.
    Password hashes are never returned.
    """
    return {"users": {name: record.public() for name, record in users.load().items()}}


@router.post("/api/admin/users")
def create_user(
    req: CreateUserRequest,
    admin: str = Depends(require_admin),
    users: CredentialStore = Depends(get_credential_store),
    sheets: SheetStore = Depends(get_sheet_store),
):
    """
    Creates an account together with its empty sheet.
    """
    record = users.create(req.username, req.password, is_admin=bool(req.isAdmin))
    sheets.create(req.username)
    logger.info("Admin %s created user %s (admin=%s)", admin, req.username, record.is_admin)
    return {"ok": True, "user": {"username": req.username, "isAdmin": record.is_admin}}


@router.delete("/api/admin/users/{username}")
def delete_user(
    username: str,
    admin: str = Depends(require_admin),
    users: CredentialStore = Depends(get_credential_store),
    sheets: SheetStore = Depends(get_sheet_store),
):
    """
    Removes the account, then the sheet file if it can be removed.
    """
    users.delete(username)
    sheets.delete(username)
    logger.info("Admin %s deleted user %s", admin, username)
    return {"ok": True}


@router.post("/api/admin/users/{username}/set-admin")
def set_admin(
    username: str,
    data: dict | None = Body(None),
    admin: str = Depends(require_admin),
    users: CredentialStore = Depends(get_credential_store),
):
    is_admin = bool((data or {}).get("isAdmin"))
    record = users.set_admin(username, is_admin)
    logger.info("Admin %s set isAdmin=%s for %s", admin, record.is_admin, username)
    return {"ok": True, "user": {"username": username, "isAdmin": record.is_admin}}


# -------------------------------
# Backup Endpoint
# -------------------------------

@router.post("/api/admin/backup")
def backup(
    admin: str = Depends(require_admin),
    settings: Settings = Depends(get_settings),
):
    logger.info("Admin %s triggered a backup", admin)
    output = trigger_backup(settings)
    return {"ok": True, "output": output}
