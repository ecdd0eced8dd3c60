"""Vault provisioner.

Builds a new vault from the previous one in five steps, always in this order:

1. copy_complete: copy whole folders (e.g. .obsidian, Templates)
2. exclude_from_obsidian: prune machine-local state brought in by step 1
3. copy_files: copy individual files
4. create_empty_folders: scaffold empty folders
5. create_base_files: write files rendered from templates

Pruning runs after the folder copy and before anything is created, so scaffolded
content is never removed. Each step handles all of its entries before the next
step starts. A failing entry is logged and recorded; it never stops later
entries or steps.
"""

import datetime
import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from yearly_vault.config.models import VaultConfig
from yearly_vault.provision.templates import render_template

logger = logging.getLogger(__name__)

STEP_COPY_COMPLETE = "copy_complete"
STEP_EXCLUDE = "exclude_from_obsidian"
STEP_COPY_FILES = "copy_files"
STEP_CREATE_FOLDERS = "create_empty_folders"
STEP_CREATE_FILES = "create_base_files"

PIPELINE_STEPS = (
    STEP_COPY_COMPLETE,
    STEP_EXCLUDE,
    STEP_COPY_FILES,
    STEP_CREATE_FOLDERS,
    STEP_CREATE_FILES,
)


@dataclass
class EntryError:
    """A configured entry that could not be processed."""

    step: str
    entry: str
    message: str


@dataclass
class ProvisionResult:
    """Result of provisioning a vault."""

    target_path: Path
    target_year: int
    folders_copied: list[str] = field(default_factory=list)
    folders_skipped: list[str] = field(default_factory=list)
    paths_excluded: list[str] = field(default_factory=list)
    files_copied: list[str] = field(default_factory=list)
    folders_created: list[str] = field(default_factory=list)
    files_written: list[str] = field(default_factory=list)
    errors: list[EntryError] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.errors

    def stats(self) -> dict[str, int | str]:
        """Counts per step, for summaries and commit messages."""
        stats: dict[str, int | str] = {
            "folders_copied": len(self.folders_copied),
            "paths_excluded": len(self.paths_excluded),
            "files_copied": len(self.files_copied),
            "folders_created": len(self.folders_created),
            "files_written": len(self.files_written),
        }
        if self.folders_skipped:
            stats["folders_skipped"] = len(self.folders_skipped)
        if self.errors:
            stats["errors"] = len(self.errors)
        return stats


def _record_error(result: ProvisionResult, step: str, entry: str, error: Exception) -> None:
    logger.error(f"[{step}] {entry}: {error}")
    result.errors.append(EntryError(step=step, entry=entry, message=str(error)))


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def copy_complete_folders(
    config: VaultConfig, source_path: Path, target_path: Path, result: ProvisionResult
) -> None:
    """Step 1: copy each configured folder recursively, replacing target contents."""
    for entry in config.copy_complete:
        source = source_path / entry
        target = target_path / entry
        if not source.exists():
            logger.warning(f"Folder not found in source vault, skipping: {entry}")
            result.folders_skipped.append(entry)
            continue
        try:
            if source.is_dir():
                shutil.copytree(source, target, symlinks=True, dirs_exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(source, target)
            logger.info(f"Copied folder: {entry}")
            result.folders_copied.append(entry)
        except (OSError, shutil.Error) as e:
            _record_error(result, STEP_COPY_COMPLETE, entry, e)


def prune_excluded(config: VaultConfig, target_path: Path, result: ProvisionResult) -> None:
    """Step 2: delete excluded paths from the target; absent paths are ignored."""
    for entry in config.exclude_from_obsidian:
        target = target_path / entry
        # is_symlink: a dangling link does not exist() but is still pruned
        if not (target.exists() or target.is_symlink()):
            continue
        try:
            _remove(target)
            logger.info(f"Excluded: {entry}")
            result.paths_excluded.append(entry)
        except OSError as e:
            _record_error(result, STEP_EXCLUDE, entry, e)


def copy_single_files(
    config: VaultConfig, source_path: Path, target_path: Path, result: ProvisionResult
) -> None:
    """Step 3: copy individual files, creating parent folders.

    Missing source files are skipped without a warning, unlike step 1.
    """
    for entry in config.copy_files:
        source = source_path / entry
        target = target_path / entry
        if not source.exists():
            continue
        try:
            if source.is_dir():
                raise IsADirectoryError(f"Expected a file, found a directory: {source}")
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, target)
            logger.info(f"Copied file: {entry}")
            result.files_copied.append(entry)
        except OSError as e:
            _record_error(result, STEP_COPY_FILES, entry, e)


def create_empty_folders(config: VaultConfig, target_path: Path, result: ProvisionResult) -> None:
    """Step 4: ensure each configured folder exists."""
    for entry in config.create_empty_folders:
        try:
            (target_path / entry).mkdir(parents=True, exist_ok=True)
            logger.info(f"Created folder: {entry}")
            result.folders_created.append(entry)
        except OSError as e:
            _record_error(result, STEP_CREATE_FOLDERS, entry, e)


def create_base_files(
    config: VaultConfig,
    target_path: Path,
    target_year: int,
    today: datetime.date,
    result: ProvisionResult,
) -> None:
    """Step 5: write each templated file, overwriting existing ones.

    Files are written in the order they appear in the configuration.
    """
    for path_template, content_template in config.create_base_files.items():
        relative = render_template(path_template, target_year, today)
        content = render_template(content_template, target_year, today)
        try:
            target = target_path / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
            logger.info(f"Created file: {relative}")
            result.files_written.append(relative)
        except OSError as e:
            _record_error(result, STEP_CREATE_FILES, relative, e)


def provision_vault(
    config: VaultConfig,
    source_path: Path,
    target_path: Path,
    target_year: int,
    today: Optional[datetime.date] = None,
) -> ProvisionResult:
    """Provision a vault from the source vault according to the configuration.

    The caller is expected to have validated the run. The target directory is
    created if missing; no cleanup happens if the process is interrupted.

    Args:
        config: Loaded configuration
        source_path: Vault copied from
        target_path: Vault being created
        target_year: Year substituted into templates
        today: Date substituted into templates (default: today)

    Returns:
        ProvisionResult describing what each step did

    Raises:
        OSError: If the target directory itself cannot be created
    """
    if today is None:
        today = datetime.date.today()

    result = ProvisionResult(target_path=target_path, target_year=target_year)

    logger.info(f"Provisioning {target_path} from {source_path}")
    target_path.mkdir(parents=True, exist_ok=True)

    copy_complete_folders(config, source_path, target_path, result)
    logger.info(f"Step 1/5: copied {len(result.folders_copied)} folders")

    prune_excluded(config, target_path, result)
    logger.info(f"Step 2/5: excluded {len(result.paths_excluded)} paths")

    copy_single_files(config, source_path, target_path, result)
    logger.info(f"Step 3/5: copied {len(result.files_copied)} files")

    create_empty_folders(config, target_path, result)
    logger.info(f"Step 4/5: ensured {len(result.folders_created)} folders")

    create_base_files(config, target_path, target_year, today, result)
    logger.info(f"Step 5/5: wrote {len(result.files_written)} files")

    if result.errors:
        logger.warning(f"Provisioning finished with {len(result.errors)} failed entries")
    return result
