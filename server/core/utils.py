# server/core/utils.py

import json
import os
import re
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from server.core.errors import ValidationFailed


# Usernames double as sheet file names inside DATA_DIR.
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_-][A-Za-z0-9._-]{0,63}$")
RESERVED_USERNAMES = {"users"}


def utc_now_iso() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def validate_username(username: str) -> str:
    if not isinstance(username, str) or not USERNAME_PATTERN.match(username):
        raise ValidationFailed("invalid username")
    if username.lower() in RESERVED_USERNAMES:
        raise ValidationFailed("username is reserved")
    return username


def read_json(path: Path):
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, data) -> None:
    """Writes to a temp file beside the target, then swaps it in with os.replace."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
    ) as tmp:
        temp_path = Path(tmp.name)
        try:
            json.dump(data, tmp, indent=2, ensure_ascii=False)
        except Exception:
            tmp.close()
            temp_path.unlink(missing_ok=True)
            raise
    try:
        os.replace(temp_path, path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
