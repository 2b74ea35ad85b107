# server/models/sheet.py

from typing import Any
from pydantic import BaseModel, ConfigDict


DEFAULT_COLUMNS = ["Timestamp", "Task", "Progress"]


class Sheet(BaseModel):
    # Extra top-level keys sent by a client are stored as-is.
    model_config = ConfigDict(extra="allow")

    columns: list[str]
    rows: list[dict[str, Any]]


def default_sheet() -> Sheet:
    return Sheet(columns=list(DEFAULT_COLUMNS), rows=[])
