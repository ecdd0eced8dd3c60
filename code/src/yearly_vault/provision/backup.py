"""Backup of an existing vault before it is overwritten."""

import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"


class BackupError(Exception):
    """Raised when a vault backup cannot be created."""

    pass


def backup_path_for(target_path: Path, now: datetime) -> Path:
    """Get the sibling backup path, e.g. Vault-2026-backup-20261019-093000."""
    return target_path.with_name(f"{target_path.name}-backup-{now.strftime(BACKUP_TIMESTAMP_FORMAT)}")


def backup_vault(target_path: Path, now: Optional[datetime] = None) -> Path:
    """Copy an existing vault to a timestamped sibling directory.

    Args:
        target_path: Vault about to be overwritten
        now: Timestamp used in the backup name (default: current time)

    Returns:
        Path of the backup

    Raises:
        BackupError: If the vault is missing or the copy fails
    """
    if now is None:
        now = datetime.now()

    backup_path = backup_path_for(target_path, now)

    if not target_path.is_dir():
        raise BackupError(f"Cannot back up {target_path}: not a directory")
    if backup_path.exists():
        raise BackupError(f"Backup path already exists: {backup_path}")

    logger.info(f"Backing up {target_path} to {backup_path}")
    try:
        shutil.copytree(target_path, backup_path, symlinks=True)
    except (OSError, shutil.Error) as e:
        raise BackupError(f"Failed to back up {target_path} to {backup_path}: {e}") from e

    logger.info(f"Backup created: {backup_path}")
    return backup_path
