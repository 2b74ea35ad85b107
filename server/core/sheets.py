# server/core/sheets.py

import logging
from pathlib import Path
from pydantic import ValidationError

from server.core.errors import Internal, InvalidFormat
from server.core.utils import read_json, validate_username, write_json
from server.models import Sheet, default_sheet


logger = logging.getLogger(__name__)


class SheetStore:
    """
    One <username>.json per user in the data directory.
    Saves replace the whole document; there is no merge or versioning.
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def path_for(self, username: str) -> Path:
        return self.data_dir / f"{validate_username(username)}.json"

    def create(self, username: str) -> Sheet:
        sheet = default_sheet()
        self._write(self.path_for(username), sheet)
        return sheet

    def get(self, username: str) -> Sheet:
        path = self.path_for(username)
        if not path.exists():
            return self.create(username)

        try:
            return Sheet.model_validate(read_json(path))
        except (OSError, ValueError) as e:
            logger.error("Failed to read sheet %s: %s", path, e)
            raise Internal("failed to read sheet")

    def put(self, username: str, data) -> Sheet:
        path = self.path_for(username)
        try:
            sheet = Sheet.model_validate(data)
        except ValidationError:
            raise InvalidFormat("invalid sheet format")

        self._write(path, sheet)
        return sheet

    def delete(self, username: str):
        """Best effort: a missing or undeletable file is only logged."""
        try:
            self.path_for(username).unlink(missing_ok=True)
        except Exception as e:
            logger.warning("Could not remove sheet for %s: %s", username, e)

    def _write(self, path: Path, sheet: Sheet):
        try:
            write_json(path, sheet.model_dump())
        except OSError as e:
            logger.error("Failed to write sheet %s: %s", path, e)
            raise Internal("failed to save sheet")
