# server/core/credentials.py

import logging
from pathlib import Path
from passlib.context import CryptContext

from server.core.errors import Conflict, Internal, NotFound, ValidationFailed
from server.core.utils import read_json, validate_username, write_json
from server.models import UserRecord


logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        logger.warning("Stored password hash could not be parsed")
        return False


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


class CredentialStore:
    """
    users.json: a single mapping of username -> {passwordHash, createdAt, isAdmin}.

    Every mutation re-reads the whole file and writes it back. There is no
    locking, so two concurrent writers race and the later write wins.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def init(self):
        if not self.path.exists():
            self.save({})

    def load(self) -> dict[str, UserRecord]:
        if not self.path.exists():
            return {}
        try:
            raw = read_json(self.path) if self.path.stat().st_size else {}
            return {name: UserRecord.model_validate(record) for name, record in raw.items()}
        except (OSError, ValueError, AttributeError) as e:
            logger.warning("Could not read %s, treating it as empty: %s", self.path, e)
            return {}

    def save(self, users: dict[str, UserRecord]):
        try:
            write_json(self.path, {name: record.to_json() for name, record in users.items()})
        except OSError as e:
            logger.error("Failed to write %s: %s", self.path, e)
            raise Internal("failed to save users")

    def get(self, username: str) -> UserRecord | None:
        return self.load().get(username)

    def create(self, username: str, password: str, is_admin: bool = False) -> UserRecord:
        if not username or not password:
            raise ValidationFailed("username and password required")
        validate_username(username)

        users = self.load()
        if username in users:
            raise Conflict("user exists")

        record = UserRecord(password_hash=get_password_hash(password), is_admin=bool(is_admin))
        users[username] = record
        self.save(users)
        return record

    def verify(self, username: str, password: str) -> bool:
        record = self.get(username)
        if record is None:
            return False
        return verify_password(password, record.password_hash)

    def is_admin(self, username: str) -> bool:
        record = self.get(username)
        return bool(record and record.is_admin)

    def set_admin(self, username: str, is_admin: bool) -> UserRecord:
        users = self.load()
        if username not in users:
            raise NotFound("user not found")
        users[username].is_admin = bool(is_admin)
        self.save(users)
        return users[username]

    def delete(self, username: str):
        users = self.load()
        if username not in users:
            raise NotFound("user not found")
        del users[username]
        self.save(users)
