# server/models/__init__.py

from .user import UserRecord
from .sheet import Sheet, DEFAULT_COLUMNS, default_sheet

__all__ = ["UserRecord", "Sheet", "DEFAULT_COLUMNS", "default_sheet"]
