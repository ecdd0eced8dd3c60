"""Pre-provisioning checks.

Validation only reads the filesystem. A successful result is the gate for the
provisioning pipeline, and the final answer of a validate-only run.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from yearly_vault.models.run import ProvisionRun

logger = logging.getLogger(__name__)

# Subdirectory whose presence marks a directory as an Obsidian vault
VAULT_MARKER = ".obsidian"


class VaultValidationError(Exception):
    """Raised when a run must not proceed."""

    pass


class SourceVaultMissingError(VaultValidationError):
    """Raised when the source vault does not exist or is not a vault."""

    pass


class TargetVaultExistsError(VaultValidationError):
    """Raised when the target exists and overwriting was not requested."""

    pass


class ValidationErrorCode(str, Enum):
    """Reason a run failed validation."""

    SOURCE_MISSING = "source_missing"
    TARGET_EXISTS = "target_exists"


@dataclass
class ValidationResult:
    """Result of validating a run."""

    source_path: Path
    target_path: Path
    valid: bool
    target_exists: bool = False
    error_code: Optional[ValidationErrorCode] = None
    error: Optional[str] = None

    def raise_for_error(self) -> None:
        """Raise the exception matching error_code, if any.

        Raises:
            SourceVaultMissingError: Source vault is not valid
            TargetVaultExistsError: Target exists without force
        """
        if self.error_code is ValidationErrorCode.SOURCE_MISSING:
            raise SourceVaultMissingError(self.error)
        if self.error_code is ValidationErrorCode.TARGET_EXISTS:
            raise TargetVaultExistsError(self.error)


def vault_exists(path: Path) -> bool:
    """Check whether path is an Obsidian vault.

    Args:
        path: Directory to check

    Returns:
        True if path is a directory containing a .obsidian entry
    """
    return path.is_dir() and (path / VAULT_MARKER).exists()


def validate_run(run: "ProvisionRun") -> ValidationResult:
    """Check that a run can proceed.

    Checks, in order: the source vault is valid; the target does not exist
    unless run.force is set.

    Args:
        run: Run to validate

    Returns:
        ValidationResult; valid is False with error_code set on failure
    """
    if not vault_exists(run.source_path):
        logger.error(f"Source vault not found or invalid: {run.source_path}")
        return ValidationResult(
            source_path=run.source_path,
            target_path=run.target_path,
            valid=False,
            error_code=ValidationErrorCode.SOURCE_MISSING,
            error=(
                f"Source vault for {run.source_year} not found or invalid: {run.source_path} "
                f"(expected a directory containing {VAULT_MARKER})"
            ),
        )
    logger.info(f"Source vault found: {run.source_path}")

    target_exists = run.target_path.exists()
    if target_exists and not run.force:
        logger.error(f"Target vault already exists: {run.target_path}")
        return ValidationResult(
            source_path=run.source_path,
            target_path=run.target_path,
            valid=False,
            target_exists=True,
            error_code=ValidationErrorCode.TARGET_EXISTS,
            error=(
                f"Target vault for {run.target_year} already exists: {run.target_path} "
                f"(use --force to overwrite)"
            ),
        )
    if target_exists:
        logger.warning(f"Target vault exists and will be overwritten: {run.target_path}")

    return ValidationResult(
        source_path=run.source_path,
        target_path=run.target_path,
        valid=True,
        target_exists=target_exists,
    )
