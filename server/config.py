# server/config.py

import os
from functools import lru_cache
from pathlib import Path
from dotenv import load_dotenv


load_dotenv()


ROOT_DIR = Path(__file__).resolve().parent.parent
DEFAULT_SECRET = "please_change_this_secret_for_prod"


# -------------------------------
# Settings
# -------------------------------

class Settings:
    """
    Runtime configuration read from the environment (and .env, if present).
    """

    def __init__(
        self,
        secret_key: str = DEFAULT_SECRET,
        token_expire_minutes: int = 8 * 60,
        data_dir: Path = Path("data"),
        backup_script: Path = ROOT_DIR / "scripts" / "backup_data.py",
        backup_dir: Path = Path("backups"),
        backup_keep: int = 7,
        backup_timeout: int = 120,
        host: str = "0.0.0.0",
        port: int = 3000,
        log_level: str = "INFO",
    ):
        self.secret_key = secret_key
        self.token_expire_minutes = token_expire_minutes
        self.data_dir = Path(data_dir)
        self.backup_script = Path(backup_script)
        self.backup_dir = Path(backup_dir)
        self.backup_keep = backup_keep
        self.backup_timeout = backup_timeout
        self.host = host
        self.port = port
        self.log_level = log_level

    @property
    def users_file(self) -> Path:
        return self.data_dir / "users.json"

    @classmethod
    def from_env(cls) -> "Settings":
        default = cls()
        return cls(
            secret_key=os.getenv("JWT_SECRET_KEY", DEFAULT_SECRET),
            token_expire_minutes=int(os.getenv("JWT_EXPIRE_MINUTES", default.token_expire_minutes)),
            data_dir=Path(os.getenv("DATA_DIR", str(default.data_dir))),
            backup_script=Path(os.getenv("BACKUP_SCRIPT", str(default.backup_script))),
            backup_dir=Path(os.getenv("BACKUP_DIR", str(default.backup_dir))),
            backup_keep=int(os.getenv("BACKUP_KEEP", default.backup_keep)),
            backup_timeout=int(os.getenv("BACKUP_TIMEOUT", default.backup_timeout)),
            host=os.getenv("HOST", default.host),
            port=int(os.getenv("PORT", default.port)),
            log_level=os.getenv("LOG_LEVEL", default.log_level),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
