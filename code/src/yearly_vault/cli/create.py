"""CLI commands for creating and validating a yearly vault."""

import datetime
import logging
from pathlib import Path
from typing import Optional

import click

from yearly_vault.cli.log_setup import OPERATION_LOG_FILE, attach_operation_log
from yearly_vault.config import ConfigLoadError, load_config
from yearly_vault.models import ProvisionRun
from yearly_vault.provision import BackupError, RunOutcome, execute_run

logger = logging.getLogger(__name__)


def default_target_year() -> int:
    """Next calendar year, read from the clock."""
    return datetime.date.today().year + 1


def _echo_outcome(outcome: RunOutcome, run: ProvisionRun) -> None:
    validation = outcome.validation
    if not validation.valid:
        click.echo(f"Error: {validation.error}", err=True)
        return

    if run.validate_only:
        click.echo("✓ Validation passed")
        click.echo(f"  Source: {run.source_path}")
        note = " (exists, will be overwritten)" if validation.target_exists else ""
        click.echo(f"  Target: {run.target_path}{note}")
        return

    if outcome.backup_path is not None:
        click.echo(f"✓ Backup created: {outcome.backup_path}")

    result = outcome.provision
    if result is not None:
        click.echo(f"✓ Vault for {run.target_year} created: {run.target_path}")
        click.echo(f"  Folders copied: {len(result.folders_copied)}")
        if result.folders_skipped:
            click.echo(f"  Folders skipped (not in source): {', '.join(result.folders_skipped)}")
        click.echo(f"  Paths excluded: {len(result.paths_excluded)}")
        click.echo(f"  Files copied: {len(result.files_copied)}")
        click.echo(f"  Folders created: {len(result.folders_created)}")
        click.echo(f"  Files written: {len(result.files_written)}")
        for error in result.errors:
            click.echo(f"  Failed [{error.step}] {error.entry}: {error.message}", err=True)

    if outcome.repository_created is False:
        click.echo("Warning: repository could not be created (see log)", err=True)
    elif outcome.repository_created:
        click.echo("✓ Repository created and committed")

    if outcome.vault_opened is False:
        click.echo(f"Warning: open {run.target_path} in Obsidian manually", err=True)


def run_provisioning(
    ctx: click.Context,
    year: Optional[int],
    source_year: Optional[int],
    force: bool,
    validate_only: bool,
) -> None:
    """Load configuration, run the provisioner and exit non-zero on failure."""
    config_path = ctx.obj.get("config") if ctx.obj else None
    target_year = year if year is not None else default_target_year()

    try:
        cfg = load_config(config_path)
    except ConfigLoadError as e:
        logger.error(str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    if cfg.options.log_operations:
        log_level = ctx.obj.get("log_level", "INFO") if ctx.obj else "INFO"
        attach_operation_log(Path(OPERATION_LOG_FILE), log_level)

    try:
        run = ProvisionRun.from_config(
            cfg,
            target_year=target_year,
            source_year=source_year,
            validate_only=validate_only,
            force=force,
        )
    except ValueError as e:
        logger.error(str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    logger.info(f"Creating vault for {run.target_year} from {run.source_year}")

    try:
        outcome = execute_run(run, cfg)
    except BackupError as e:
        logger.error(str(e))
        click.echo(f"Backup failed, nothing was changed: {e}", err=True)
        ctx.exit(1)
    except OSError as e:
        logger.error(f"Provisioning failed: {e}")
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    _echo_outcome(outcome, run)
    if not outcome.succeeded:
        ctx.exit(1)


year_option = click.option(
    "--year",
    type=click.IntRange(min=1),
    default=None,
    help="Year of the vault to create [default: next year]",
)
source_year_option = click.option(
    "--source-year",
    type=click.IntRange(min=1),
    default=None,
    help="Year of the vault to copy from [default: year - 1]",
)
force_option = click.option(
    "--force",
    is_flag=True,
    help="Overwrite the target vault if it already exists",
)


@click.command()
@year_option
@source_year_option
@force_option
@click.option(
    "--validate-only",
    is_flag=True,
    help="Run all checks without writing anything",
)
@click.pass_context
def create(
    ctx: click.Context,
    year: Optional[int],
    source_year: Optional[int],
    force: bool,
    validate_only: bool,
) -> None:
    """Create the vault for a year from the previous year's vault.

    Copies the configured folders and files, prunes excluded paths, creates
    empty folders and templated files. Optionally backs up an existing
    target, creates a repository and opens the vault in Obsidian.

    \b
    Examples:
        yearly-vault create
        yearly-vault create --year 2027
        yearly-vault create --year 2027 --force
        yearly-vault --config my-vault.json create --validate-only
    """
    run_provisioning(ctx, year, source_year, force, validate_only)


@click.command()
@year_option
@source_year_option
@force_option
@click.pass_context
def validate(
    ctx: click.Context,
    year: Optional[int],
    source_year: Optional[int],
    force: bool,
) -> None:
    """Check that a vault can be created, without writing anything.

    Same as: yearly-vault create --validate-only

    \b
    Examples:
        yearly-vault validate
        yearly-vault validate --year 2027
    """
    run_provisioning(ctx, year, source_year, force, validate_only=True)
