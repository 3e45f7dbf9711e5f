"""Project backup before a reinstall.

The backup is a plain directory next to package.json. It is never cleaned
up automatically; restoring is a manual copy back.
"""

import shutil
from datetime import datetime, timezone
from pathlib import Path

from eazypm.exceptions import BackupError
from eazypm.utils.constants import BACKUP_FILES, BACKUP_PREFIX, DEPENDENCY_CACHE_DIR
from eazypm.utils.logging import logger


def backup_timestamp(now: datetime | None = None) -> str:
    """UTC ISO-8601 instant with ':' and '.' replaced, safe in file names.

    2024-05-01T10:20:30.123Z -> 2024-05-01T10-20-30-123Z
    """
    now = now or datetime.now(timezone.utc)
    now = now.astimezone(timezone.utc)
    millis = now.microsecond // 1000
    return now.strftime("%Y-%m-%dT%H-%M-%S-") + f"{millis:03d}Z"


def backup_project(root: Path, prefix: str = BACKUP_PREFIX, now: datetime | None = None) -> Path:
    """Copy manifest and lockfiles into a fresh backup directory and move node_modules into it.

    Args:
        root: Project root
        prefix: Backup directory name prefix
        now: Timestamp override for tests

    Returns:
        Path of the created backup directory

    Raises:
        BackupError: If the directory already exists or any copy/move fails
    """
    root = Path(root)
    backup_dir = root / f"{prefix}{backup_timestamp(now)}"

    try:
        backup_dir.mkdir()

        for name in BACKUP_FILES:
            src = root / name
            if src.exists():
                shutil.copy2(src, backup_dir / name)
                logger.debug(f"Backed up {name}")

        cache_dir = root / DEPENDENCY_CACHE_DIR
        if cache_dir.exists():
            cache_dir.rename(backup_dir / DEPENDENCY_CACHE_DIR)
            logger.debug(f"Moved {DEPENDENCY_CACHE_DIR} into {backup_dir}")
    except OSError as e:
        raise BackupError(f"Could not back up project to {backup_dir}: {e}") from e

    return backup_dir
