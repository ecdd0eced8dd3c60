"""Data models for yearly-vault."""

from yearly_vault.models.run import ProvisionRun

__all__ = ["ProvisionRun"]
