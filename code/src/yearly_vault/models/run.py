"""Provisioning run model."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from yearly_vault.config.models import VaultConfig
from yearly_vault.vault.paths import resolve_vault_path


@dataclass(frozen=True)
class ProvisionRun:
    """One invocation of the provisioner.

    Attributes:
        source_year: Year of the vault copied from
        target_year: Year of the vault being created
        source_path: Resolved source vault directory
        target_path: Resolved target vault directory
        validate_only: Only run the checks, never write
        force: Allow provisioning into an existing target
    """

    source_year: int
    target_year: int
    source_path: Path
    target_path: Path
    validate_only: bool = False
    force: bool = False

    @classmethod
    def from_config(
        cls,
        config: VaultConfig,
        target_year: int,
        source_year: Optional[int] = None,
        validate_only: bool = False,
        force: bool = False,
    ) -> "ProvisionRun":
        """Build a run by resolving both vault paths from the configuration.

        Args:
            config: Loaded configuration
            target_year: Year of the new vault
            source_year: Year to copy from (default: target_year - 1)
            validate_only: Only validate
            force: Allow overwriting an existing target

        Returns:
            ProvisionRun with resolved paths

        Raises:
            ValueError: If a year is not a positive integer or both years are equal
        """
        if source_year is None:
            source_year = target_year - 1
        if source_year == target_year:
            raise ValueError(f"Source and target year are both {target_year}")

        return cls(
            source_year=source_year,
            target_year=target_year,
            source_path=resolve_vault_path(config.base_vault_path, config.name_pattern, source_year),
            target_path=resolve_vault_path(config.base_vault_path, config.name_pattern, target_year),
            validate_only=validate_only,
            force=force,
        )
