"""Main CLI entry point for yearly-vault."""

from typing import Optional

import click

from yearly_vault import __version__
from yearly_vault.cli.create import create as create_cmd
from yearly_vault.cli.create import default_target_year
from yearly_vault.cli.create import validate as validate_cmd
from yearly_vault.cli.log_setup import LoggingSettings, configure_logging
from yearly_vault.config import (
    DEFAULT_CONFIG_PATH,
    ConfigLoadError,
    create_example_config,
    load_config,
)
from yearly_vault.vault import resolve_vault_path, vault_exists


@click.group()
@click.version_option(version=__version__, prog_name="yearly-vault")
@click.option(
    "--config",
    type=click.Path(dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    help="Configuration file path",
    show_default=True,
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help="Logging level",
    show_default=True,
)
@click.pass_context
def cli(ctx: click.Context, config: str, log_level: str) -> None:
    """yearly-vault: Create next year's Obsidian vault from this year's.

    The configuration file lists what to copy from the previous vault, what to
    prune, and which folders and files to create in the new one.
    """
    log_level = log_level.upper()
    configure_logging(LoggingSettings(level=log_level))

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = log_level


# Register commands
cli.add_command(create_cmd, name="create")
cli.add_command(validate_cmd, name="validate")


@cli.command(name="init-config")
@click.argument("path", type=click.Path(dir_okay=False), required=False)
@click.option("--overwrite", is_flag=True, help="Replace an existing configuration file")
@click.pass_context
def init_config(ctx: click.Context, path: Optional[str], overwrite: bool) -> None:
    """Write an example configuration file.

    PATH defaults to the global --config value. A .yaml or .yml suffix writes
    YAML, anything else JSON.

    \b
    Examples:
        yearly-vault init-config
        yearly-vault init-config vaults.yaml
    """
    output = path or ctx.obj["config"]
    try:
        written = create_example_config(output, overwrite=overwrite)
    except ConfigLoadError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    click.echo(f"✓ Example configuration written to {written}")
    click.echo("  Edit base_vault_path and name_pattern before running 'yearly-vault create'")


@cli.command()
@click.option(
    "--year",
    type=click.IntRange(min=1),
    default=None,
    help="Year of the vault to create [default: next year]",
)
@click.pass_context
def status(ctx: click.Context, year: Optional[int]) -> None:
    """Show the source and target vault paths and whether they exist.

    \b
    Examples:
        yearly-vault status
        yearly-vault status --year 2027
    """
    try:
        cfg = load_config(ctx.obj["config"])
    except ConfigLoadError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    target_year = year if year is not None else default_target_year()
    for label, vault_year in (("Source", target_year - 1), ("Target", target_year)):
        try:
            path = resolve_vault_path(cfg.base_vault_path, cfg.name_pattern, vault_year)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        if vault_exists(path):
            state = "vault"
        elif path.exists():
            state = "exists, not a vault"
        else:
            state = "missing"
        click.echo(f"{label} ({vault_year}): {path} [{state}]")


if __name__ == "__main__":
    cli()
