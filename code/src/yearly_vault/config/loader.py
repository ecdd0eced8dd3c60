"""Configuration loading utilities."""

import json
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from yearly_vault.config.models import VaultConfig

DEFAULT_CONFIG_PATH = "vault-config.json"

YAML_SUFFIXES = (".yaml", ".yml")


class ConfigLoadError(Exception):
    """Raised when configuration cannot be loaded or validated."""

    pass


class ConfigNotFoundError(ConfigLoadError):
    """Raised when the configuration file does not exist."""

    pass


class ConfigParseError(ConfigLoadError):
    """Raised when the configuration file is not well-formed JSON or YAML."""

    pass


class ConfigSchemaError(ConfigLoadError):
    """Raised when the parsed configuration does not match the expected shape."""

    pass


def _parse(config_file: Path, text: str) -> Any:
    if config_file.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigParseError(f"Invalid YAML in {config_file}: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {config_file}: {e}") from e


def load_config(config_path: Optional[str] = None) -> VaultConfig:
    """Load and validate configuration from a JSON (or YAML) file.

    Args:
        config_path: Path to configuration file. If None, defaults to
                    vault-config.json in current directory.

    Returns:
        Validated VaultConfig instance

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigParseError: If the file is empty or not valid JSON/YAML
        ConfigSchemaError: If the content does not describe a valid configuration
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    config_file = Path(config_path)

    if not config_file.is_file():
        raise ConfigNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Create one with: yearly-vault init-config {config_path}"
        )

    try:
        text = config_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(f"Failed to read {config_path}: {e}") from e

    if not text.strip():
        raise ConfigParseError(f"Configuration file is empty: {config_path}")

    config_data = _parse(config_file, text)

    if not isinstance(config_data, dict):
        raise ConfigSchemaError(
            f"Configuration in {config_path} must be an object, "
            f"got {type(config_data).__name__}"
        )

    # YAML allows keys such as 1 or true
    bad_keys = [key for key in config_data if not isinstance(key, str)]
    if bad_keys:
        raise ConfigSchemaError(
            f"Configuration keys in {config_path} must be strings, got: "
            + ", ".join(repr(key) for key in bad_keys)
        )

    try:
        return VaultConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigSchemaError(f"Configuration validation failed:\n{e}") from e


EXAMPLE_CONFIG: dict[str, Any] = {
    "base_vault_path": "~/Documents/Obsidian",
    "name_pattern": "Vault-{year}",
    "copy_complete": [".obsidian", "Templates", "Attachments/Reference"],
    "exclude_from_obsidian": [
        ".obsidian/workspace.json",
        ".obsidian/workspace-mobile.json",
        ".obsidian/cache",
    ],
    "copy_files": ["Home.md", "Areas/Goals.md"],
    "create_empty_folders": ["Inbox", "Daily", "Projects", "Archive"],
    "create_base_files": {
        "Home.md": "# {year}\n\nVault created on {date}.\n",
        "Daily/{year}-01-01.md": "# {year}-01-01\n",
    },
    "options": {
        "create_git_repo": False,
        "open_new_vault": True,
        "backup_before_create": True,
        "log_operations": True,
    },
}


def create_example_config(
    output_path: str = DEFAULT_CONFIG_PATH,
    overwrite: bool = False,
) -> Path:
    """Create an example configuration file.

    Args:
        output_path: Where to write the example config
        overwrite: Replace an existing file

    Returns:
        Path of the written file

    Raises:
        ConfigLoadError: If file exists (without overwrite) or cannot be written
    """
    output_file = Path(output_path)

    if output_file.exists() and not overwrite:
        raise ConfigLoadError(f"Configuration file already exists: {output_path}")

    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            if output_file.suffix.lower() in YAML_SUFFIXES:
                yaml.dump(EXAMPLE_CONFIG, f, default_flow_style=False, sort_keys=False)
            else:
                json.dump(EXAMPLE_CONFIG, f, indent=2)
                f.write("\n")
    except OSError as e:
        raise ConfigLoadError(f"Failed to write example config to {output_path}: {e}") from e

    return output_file
