"""Configuration module for yearly-vault."""

from yearly_vault.config.loader import (
    DEFAULT_CONFIG_PATH,
    ConfigLoadError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigSchemaError,
    create_example_config,
    load_config,
)
from yearly_vault.config.models import YEAR_TOKEN, ProvisionOptions, VaultConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "YEAR_TOKEN",
    "VaultConfig",
    "ProvisionOptions",
    "load_config",
    "create_example_config",
    "ConfigLoadError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigSchemaError",
]
