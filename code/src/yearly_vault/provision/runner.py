"""End-to-end provisioning run: validate, back up, provision, then run hooks."""

import datetime
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from yearly_vault.config.models import VaultConfig
from yearly_vault.lib.datalad_utils import create_repository, vault_commit_message
from yearly_vault.lib.launcher import ProcessLauncher, open_vault
from yearly_vault.models.run import ProvisionRun
from yearly_vault.provision.backup import backup_vault
from yearly_vault.provision.provisioner import ProvisionResult, provision_vault
from yearly_vault.vault.validator import ValidationResult, validate_run

logger = logging.getLogger(__name__)

# (vault path, commit message) -> success
RepositoryCreator = Callable[[Path, str], bool]


@dataclass
class RunOutcome:
    """Everything a run did."""

    validation: ValidationResult
    provision: Optional[ProvisionResult] = None
    backup_path: Optional[Path] = None
    repository_created: Optional[bool] = None
    vault_opened: Optional[bool] = None

    @property
    def succeeded(self) -> bool:
        """Failed pipeline entries and failed hooks do not count as failure."""
        return self.validation.valid


def execute_run(
    run: ProvisionRun,
    config: VaultConfig,
    create_repo: Optional[RepositoryCreator] = None,
    launcher: Optional[ProcessLauncher] = None,
    today: Optional[datetime.date] = None,
    now: Optional[datetime.datetime] = None,
) -> RunOutcome:
    """Execute a provisioning run.

    Args:
        run: Run parameters with resolved paths
        config: Loaded configuration
        create_repo: Repository hook (default: create_repository)
        launcher: Process launcher for the open hook
        today: Date used in templates (default: today)
        now: Time used for the backup name (default: now)

    Returns:
        RunOutcome; check .succeeded

    Raises:
        BackupError: If a requested backup fails; the target is left untouched
    """
    if create_repo is None:
        create_repo = create_repository

    validation = validate_run(run)
    outcome = RunOutcome(validation=validation)
    if not validation.valid:
        return outcome

    if run.validate_only:
        logger.info("Validation passed (validate-only, nothing written)")
        return outcome

    options = config.options
    if options.backup_before_create and validation.target_exists and run.force:
        outcome.backup_path = backup_vault(run.target_path, now=now)

    outcome.provision = provision_vault(
        config,
        run.source_path,
        run.target_path,
        run.target_year,
        today=today,
    )

    if options.create_git_repo:
        message = vault_commit_message(run.target_year, outcome.provision.stats())
        outcome.repository_created = create_repo(run.target_path, message)

    if options.open_new_vault:
        outcome.vault_opened = open_vault(run.target_path, launcher=launcher)

    logger.info(f"Vault for {run.target_year} ready: {run.target_path}")
    return outcome
