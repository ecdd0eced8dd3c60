"""Configuration models for yearly-vault."""

import re
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

YEAR_TOKEN = "{year}"

# Windows drive prefix such as "C:" or "c:\"
_DRIVE_RE = re.compile(r"^[A-Za-z]:")


def check_relative_path(value: str) -> str:
    """Validate that a configured path stays inside the vault.

    Both "/" and "\\" count as separators so a config written on Windows is
    checked the same way everywhere.

    Raises:
        ValueError: If the path is empty, absolute, contains "..", or names
            the vault root (e.g. "." or "./")
    """
    if not value.strip():
        raise ValueError("path must not be empty")
    if value.startswith(("/", "\\")) or _DRIVE_RE.match(value):
        raise ValueError(f"path must be relative to the vault: {value!r}")
    segments = re.split(r"[\\/]+", value)
    if ".." in segments:
        raise ValueError(f"path must not contain '..': {value!r}")
    if not [s for s in segments if s not in ("", ".")]:
        raise ValueError(f"path must name an entry inside the vault, not the vault itself: {value!r}")
    return value


class ProvisionOptions(BaseModel):
    """Optional behaviors of a provisioning run.

    Attributes:
        create_git_repo: Create a repository in the new vault and commit everything
        open_new_vault: Open the new vault in Obsidian when done
        backup_before_create: Back up an existing target before a forced overwrite
        log_operations: Append every log record to the operation log file
    """

    model_config = ConfigDict(frozen=True)

    create_git_repo: StrictBool = False
    open_new_vault: StrictBool = False
    backup_before_create: StrictBool = False
    log_operations: StrictBool = False


class VaultConfig(BaseModel):
    """Root configuration model describing how a new yearly vault is built.

    Attributes:
        base_vault_path: Directory under which all yearly vaults live
        name_pattern: Vault folder name containing the {year} token (e.g. "Vault-{year}")
        copy_complete: Folders copied recursively from the source vault
        exclude_from_obsidian: Paths pruned from the target after the folder copy
        copy_files: Single files copied from the source vault
        create_empty_folders: Folders created empty in the target
        create_base_files: Path template -> content template of generated files
        options: Optional run behaviors
    """

    model_config = ConfigDict(frozen=True)

    base_vault_path: StrictStr = Field(..., min_length=1)
    name_pattern: StrictStr = Field(..., min_length=1)
    copy_complete: Tuple[StrictStr, ...] = ()
    exclude_from_obsidian: Tuple[StrictStr, ...] = ()
    copy_files: Tuple[StrictStr, ...] = ()
    create_empty_folders: Tuple[StrictStr, ...] = ()
    create_base_files: Dict[StrictStr, StrictStr] = Field(default_factory=dict)
    options: ProvisionOptions = Field(default_factory=ProvisionOptions)

    @field_validator("base_vault_path")
    @classmethod
    def base_path_not_blank(cls, v: str) -> str:
        """Reject a base path made only of whitespace."""
        if not v.strip():
            raise ValueError("base_vault_path must not be empty")
        return v

    @field_validator("name_pattern")
    @classmethod
    def pattern_has_year(cls, v: str) -> str:
        """Validate that the name pattern contains the {year} token."""
        if YEAR_TOKEN not in v:
            raise ValueError(f"name_pattern must contain {YEAR_TOKEN}: {v!r}")
        return v

    @field_validator("copy_complete", "exclude_from_obsidian", "copy_files", "create_empty_folders")
    @classmethod
    def paths_are_relative(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        for entry in v:
            check_relative_path(entry)
        return v

    @field_validator("create_base_files")
    @classmethod
    def file_templates_are_relative(cls, v: Dict[str, str]) -> Dict[str, str]:
        for path_template in v:
            check_relative_path(path_template)
        return v
