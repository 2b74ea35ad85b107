#!/usr/bin/env python3
# scripts/backup_data.py
"""
Creates a timestamped tar.gz of the data directory in the backup directory
and keeps only the newest N archives.

Settings come from the command line, falling back to the DATA_DIR,
BACKUP_DIR and KEEP_COUNT environment variables (the server sets these when
it triggers a backup).
"""

import argparse
import os
import shutil
import sys
from datetime import datetime, timezone
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parent.parent
ARCHIVE_PREFIX = "sheets-backup-"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Archive the task sheet data directory.")
    parser.add_argument("--data-dir", type=Path, default=Path(os.getenv("DATA_DIR", ROOT_DIR / "data")))
    parser.add_argument("--backup-dir", type=Path, default=Path(os.getenv("BACKUP_DIR", ROOT_DIR / "backups")))
    parser.add_argument("--keep", type=int, default=int(os.getenv("KEEP_COUNT", "7")))
    args = parser.parse_args(argv)
    if args.keep < 1:
        parser.error("--keep must be at least 1")
    return args


def create_archive(data_dir: Path, backup_dir: Path) -> Path:
    backup_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    base_name = backup_dir / f"{ARCHIVE_PREFIX}{timestamp}"
    archive = shutil.make_archive(
        str(base_name), "gztar", root_dir=data_dir.parent, base_dir=data_dir.name
    )
    return Path(archive)


def list_archives(backup_dir: Path) -> list[Path]:
    """Newest first."""
    return sorted(backup_dir.glob("*.tar.gz"), key=lambda p: p.stat().st_mtime, reverse=True)


def rotate(backup_dir: Path, keep: int) -> list[Path]:
    archives = list_archives(backup_dir)
    for old in archives[keep:]:
        old.unlink()
    return archives[:keep]


def main(argv=None) -> int:
    args = parse_args(argv)
    data_dir = args.data_dir.resolve()
    backup_dir = args.backup_dir.resolve()

    if not data_dir.is_dir():
        print(f"No data directory ({data_dir}) found, nothing to backup.", file=sys.stderr)
        return 1

    archive = create_archive(data_dir, backup_dir)
    print(f"Backup created: {archive}")

    kept = rotate(backup_dir, args.keep)
    print(f"Kept last {args.keep} backups.")

    print("Current backups:")
    for path in kept:
        print(path.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
