# server/core/backup.py

import logging
import os
import subprocess
import sys

from server.config import Settings
from server.core.errors import ServiceUnavailable


logger = logging.getLogger(__name__)


def build_command(settings: Settings) -> list[str]:
    script = str(settings.backup_script)
    if settings.backup_script.suffix == ".sh":
        return ["bash", script]
    return [sys.executable, script]


def trigger_backup(settings: Settings) -> str:
    """
    Runs the archival script synchronously and returns its stdout.
    The script owns the archive format and rotation; it receives the
    directories and retention count through DATA_DIR, BACKUP_DIR and KEEP_COUNT.
    """
    if not settings.backup_script.exists():
        logger.error("Backup script missing: %s", settings.backup_script)
        raise ServiceUnavailable("backup script missing")

    env = {
        **os.environ,
        "DATA_DIR": str(settings.data_dir.resolve()),
        "BACKUP_DIR": str(settings.backup_dir.resolve()),
        "KEEP_COUNT": str(settings.backup_keep),
    }

    try:
        result = subprocess.run(
            build_command(settings),
            capture_output=True,
            text=True,
            errors="replace",
            timeout=settings.backup_timeout,
            env=env,
        )
    except subprocess.TimeoutExpired:
        logger.error("Backup timed out after %ss", settings.backup_timeout)
        raise ServiceUnavailable("backup failed", details=f"timed out after {settings.backup_timeout}s")
    except OSError as e:
        logger.error("Backup could not be started: %s", e)
        raise ServiceUnavailable("backup failed", details=str(e))

    if result.returncode != 0:
        logger.error("Backup error (exit %s): %s", result.returncode, result.stderr.strip())
        raise ServiceUnavailable(
            "backup failed",
            details=result.stderr.strip() or f"exit status {result.returncode}",
        )

    logger.info("Backup finished")
    return result.stdout.strip()
