"""Vault provisioning: template rendering, the five-step pipeline, backups and runs."""

from yearly_vault.provision.backup import BackupError, backup_vault
from yearly_vault.provision.provisioner import (
    PIPELINE_STEPS,
    EntryError,
    ProvisionResult,
    provision_vault,
)
from yearly_vault.provision.runner import RunOutcome, execute_run
from yearly_vault.provision.templates import TEMPLATE_TOKENS, render_template

__all__ = [
    "BackupError",
    "backup_vault",
    "PIPELINE_STEPS",
    "EntryError",
    "ProvisionResult",
    "provision_vault",
    "RunOutcome",
    "execute_run",
    "TEMPLATE_TOKENS",
    "render_template",
]
