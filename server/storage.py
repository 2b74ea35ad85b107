# server/storage.py

import logging
from fastapi import Depends

from server.config import Settings, get_settings
from server.core.credentials import CredentialStore
from server.core.sheets import SheetStore


logger = logging.getLogger(__name__)


def init_storage(settings: Settings):
    """Create the data directory and an empty users.json when missing."""
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    CredentialStore(settings.users_file).init()
    logger.info("Data directory: %s", settings.data_dir.resolve())


def get_credential_store(settings: Settings = Depends(get_settings)) -> CredentialStore:
    return CredentialStore(settings.users_file)


def get_sheet_store(settings: Settings = Depends(get_settings)) -> SheetStore:
    return SheetStore(settings.data_dir)
