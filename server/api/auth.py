# server/api/auth.py

import logging
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from pydantic import BaseModel
from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordBearer

from server.config import Settings, get_settings
from server.core.credentials import CredentialStore
from server.core.errors import Forbidden, NotFound, Unauthorized, ValidationFailed
from server.core.sheets import SheetStore
from server.storage import get_credential_store, get_sheet_store


ALGORITHM = "HS256"

logger = logging.getLogger(__name__)

router = APIRouter()


class Credentials(BaseModel):
    username: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    token: str
    username: str


class Me(BaseModel):
    username: str
    isAdmin: bool


# -------------------------------
# Tokens
# -------------------------------

def create_access_token(data: dict, secret_key: str, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + (expires_delta or timedelta(minutes=15))
    to_encode.update({"iat": issued_at, "exp": expire})
    return jwt.encode(to_encode, secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str, secret_key: str) -> str:
    """Returns the username embedded in a valid, unexpired token."""
    try:
        payload = jwt.decode(token, secret_key, algorithms=[ALGORITHM])
    except JWTError:
        raise Unauthorized("invalid token")

    username = payload.get("sub")
    if not username:
        raise Unauthorized("invalid token")
    return username


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/login", auto_error=False)


def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    if not token:
        raise Unauthorized("missing authorization")
    return decode_access_token(token, settings.secret_key)


def require_admin(
    current_user: str = Depends(get_current_user),
    users: CredentialStore = Depends(get_credential_store),
) -> str:
    # The admin flag lives in users.json, not in the token, so a demotion
    # takes effect on the very next request.
    if not users.is_admin(current_user):
        raise Forbidden("admin required")
    return current_user


# -------------------------------
# Endpoints
# -------------------------------

@router.post("/api/register")
def register(
    creds: Credentials,
    users: CredentialStore = Depends(get_credential_store),
    sheets: SheetStore = Depends(get_sheet_store),
):
    users.create(creds.username, creds.password)
    sheets.create(creds.username)
    logger.info("Registered user %s", creds.username)
    return {"ok": True}


@router.post("/api/login", response_model=LoginResponse)
def login(
    creds: Credentials,
    users: CredentialStore = Depends(get_credential_store),
    settings: Settings = Depends(get_settings),
):
    if not creds.username or not creds.password:
        raise ValidationFailed("username and password required")

    if not users.verify(creds.username, creds.password):
        logger.warning("Failed login for %s", creds.username)
        raise Unauthorized("invalid credentials")

    token = create_access_token(
        data={"sub": creds.username},
        secret_key=settings.secret_key,
        expires_delta=timedelta(minutes=settings.token_expire_minutes),
    )
    logger.info("User %s logged in", creds.username)
    return {"token": token, "username": creds.username}


@router.get("/api/me", response_model=Me)
def read_me(
    current_user: str = Depends(get_current_user),
    users: CredentialStore = Depends(get_credential_store),
):
    record = users.get(current_user)
    if record is None:
        raise NotFound("user not found")
    return {"username": current_user, "isAdmin": record.is_admin}
