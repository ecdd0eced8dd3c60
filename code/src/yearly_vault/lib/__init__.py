"""Library utilities for yearly-vault."""

from yearly_vault.lib.datalad_utils import (
    create_repository,
    generate_stats_message,
    vault_commit_message,
)
from yearly_vault.lib.launcher import (
    LaunchError,
    ProcessLauncher,
    default_install_locations,
    obsidian_uri,
    open_vault,
)

__all__ = [
    "create_repository",
    "generate_stats_message",
    "vault_commit_message",
    "LaunchError",
    "ProcessLauncher",
    "default_install_locations",
    "obsidian_uri",
    "open_vault",
]
