"""Vault paths and validation."""

from yearly_vault.vault.paths import resolve_vault_path, vault_name
from yearly_vault.vault.validator import (
    VAULT_MARKER,
    SourceVaultMissingError,
    TargetVaultExistsError,
    ValidationErrorCode,
    ValidationResult,
    VaultValidationError,
    validate_run,
    vault_exists,
)

__all__ = [
    "VAULT_MARKER",
    "resolve_vault_path",
    "vault_name",
    "vault_exists",
    "validate_run",
    "ValidationResult",
    "ValidationErrorCode",
    "VaultValidationError",
    "SourceVaultMissingError",
    "TargetVaultExistsError",
]
