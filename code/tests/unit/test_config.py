"""Unit tests for configuration loading."""

import json
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from yearly_vault.config import (
    ConfigLoadError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigSchemaError,
    ProvisionOptions,
    VaultConfig,
    create_example_config,
    load_config,
)


def write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data))
    return path


@pytest.mark.unit
class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_valid_config(self, tmp_path: Path) -> None:
        """Test loading a valid configuration file."""
        config_file = write_json(
            tmp_path / "vault-config.json",
            {
                "base_vault_path": "/vaults",
                "name_pattern": "Vault-{year}",
                "copy_complete": [".obsidian", "Templates"],
                "exclude_from_obsidian": [".obsidian/workspace.json"],
                "copy_files": ["Home.md"],
                "create_empty_folders": ["Inbox"],
                "create_base_files": {"Index.md": "# {year}"},
                "options": {"create_git_repo": True, "log_operations": True},
            },
        )

        config = load_config(str(config_file))
        assert config.base_vault_path == "/vaults"
        assert config.name_pattern == "Vault-{year}"
        assert config.copy_complete == (".obsidian", "Templates")
        assert config.create_base_files == {"Index.md": "# {year}"}
        assert config.options.create_git_repo is True
        assert config.options.log_operations is True
        assert config.options.open_new_vault is False
        assert config.options.backup_before_create is False

    def test_load_yaml_config(self, tmp_path: Path) -> None:
        """YAML files are accepted by suffix."""
        config_file = tmp_path / "vault-config.yaml"
        with open(config_file, "w") as f:
            yaml.dump({"base_vault_path": "/vaults", "name_pattern": "V{year}"}, f)

        config = load_config(str(config_file))
        assert config.name_pattern == "V{year}"

    def test_missing_config_file(self) -> None:
        """Test error when config file doesn't exist."""
        with pytest.raises(ConfigNotFoundError, match="Configuration file not found"):
            load_config("/nonexistent/vault-config.json")

    def test_missing_config_is_load_error(self) -> None:
        with pytest.raises(ConfigLoadError):
            load_config("/nonexistent/vault-config.json")

    def test_default_path_in_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without a path, vault-config.json in the working directory is used."""
        monkeypatch.chdir(tmp_path)
        write_json(tmp_path / "vault-config.json", {"base_vault_path": "/v", "name_pattern": "{year}"})

        assert load_config().name_pattern == "{year}"

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test error with invalid JSON syntax."""
        config_file = tmp_path / "bad.json"
        config_file.write_text('{"base_vault_path": "/vaults",')

        with pytest.raises(ConfigParseError, match="Invalid JSON"):
            load_config(str(config_file))

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test error with invalid YAML syntax."""
        config_file = tmp_path / "bad_config.yaml"
        config_file.write_text("invalid: yaml: syntax: here:")

        with pytest.raises(ConfigParseError, match="Invalid YAML"):
            load_config(str(config_file))

    def test_empty_config_file(self, tmp_path: Path) -> None:
        """Test error with empty config file."""
        config_file = tmp_path / "empty.json"
        config_file.touch()

        with pytest.raises(ConfigParseError, match="empty"):
            load_config(str(config_file))

    def test_top_level_not_object(self, tmp_path: Path) -> None:
        config_file = write_json(tmp_path / "list.json", ["Vault-{year}"])

        with pytest.raises(ConfigSchemaError, match="must be an object"):
            load_config(str(config_file))

    def test_missing_required_field(self, tmp_path: Path) -> None:
        """Test error with invalid config structure."""
        config_file = write_json(tmp_path / "c.json", {"name_pattern": "Vault-{year}"})

        with pytest.raises(ConfigSchemaError, match="validation failed"):
            load_config(str(config_file))

    def test_non_string_list_entry(self, tmp_path: Path) -> None:
        config_file = write_json(
            tmp_path / "c.json",
            {"base_vault_path": "/v", "name_pattern": "V-{year}", "copy_files": ["a.md", 3]},
        )

        with pytest.raises(ConfigSchemaError):
            load_config(str(config_file))

    def test_non_string_key_in_yaml(self, tmp_path: Path) -> None:
        """A YAML key such as 1 is a schema error, not a crash."""
        config_file = tmp_path / "vault-config.yaml"
        config_file.write_text("base_vault_path: /x\nname_pattern: V-{year}\n1: oops\n")

        with pytest.raises(ConfigSchemaError, match="must be strings"):
            load_config(str(config_file))

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        config_file = write_json(
            tmp_path / "c.json",
            {"base_vault_path": "/v", "name_pattern": "V-{year}", "future_feature": {"x": 1}},
        )

        config = load_config(str(config_file))
        assert not hasattr(config, "future_feature")

    def test_base_files_keep_file_order(self, tmp_path: Path) -> None:
        """create_base_files iterates in the order written in the file."""
        config_file = tmp_path / "c.json"
        config_file.write_text(
            '{"base_vault_path": "/v", "name_pattern": "V-{year}", '
            '"create_base_files": {"z.md": "", "a.md": "", "m/n.md": ""}}'
        )

        config = load_config(str(config_file))
        assert list(config.create_base_files) == ["z.md", "a.md", "m/n.md"]


@pytest.mark.unit
class TestVaultConfig:
    """Tests for VaultConfig model."""

    def test_defaults(self) -> None:
        """Absent lists are empty and options are all off."""
        config = VaultConfig(base_vault_path="/v", name_pattern="Vault-{year}")

        assert config.copy_complete == ()
        assert config.exclude_from_obsidian == ()
        assert config.copy_files == ()
        assert config.create_empty_folders == ()
        assert config.create_base_files == {}
        assert config.options == ProvisionOptions()

    def test_pattern_requires_year(self) -> None:
        with pytest.raises(ValidationError, match="must contain"):
            VaultConfig(base_vault_path="/v", name_pattern="Vault")

    @pytest.mark.parametrize("base", ["", "   "])
    def test_base_path_not_empty(self, base: str) -> None:
        with pytest.raises(ValidationError):
            VaultConfig(base_vault_path=base, name_pattern="Vault-{year}")

    @pytest.mark.parametrize(
        "entry",
        [
            "/etc",
            "\\share\\notes",
            "C:\\Users\\me",
            "../Vault-2024",
            "Notes/../../x",
            "a\\..\\b",
            "",
            ".",
            "./",
            ".\\",
            ".//.",
        ],
    )
    def test_rejects_paths_outside_vault(self, entry: str) -> None:
        with pytest.raises(ValidationError):
            VaultConfig(base_vault_path="/v", name_pattern="V-{year}", copy_files=[entry])

    @pytest.mark.parametrize("entry", [".", "./", "./."])
    def test_exclusion_cannot_name_vault_root(self, entry: str) -> None:
        """Pruning "." would delete the whole target vault."""
        with pytest.raises(ValidationError, match="not the vault itself"):
            VaultConfig(
                base_vault_path="/v",
                name_pattern="V-{year}",
                copy_complete=["Templates"],
                exclude_from_obsidian=[entry],
            )

    def test_accepts_dot_prefixed_entries(self) -> None:
        config = VaultConfig(base_vault_path="/v", name_pattern="V-{year}", copy_files=["./Home.md"])
        assert config.copy_files == ("./Home.md",)

    def test_path_lists_are_immutable(self) -> None:
        config = VaultConfig(base_vault_path="/v", name_pattern="V-{year}", copy_complete=["Templates"])
        with pytest.raises(AttributeError):
            config.copy_complete.append(".obsidian")  # type: ignore[attr-defined]
        assert config.copy_complete == ("Templates",)

    def test_rejects_absolute_base_file_path(self) -> None:
        with pytest.raises(ValidationError):
            VaultConfig(
                base_vault_path="/v",
                name_pattern="V-{year}",
                create_base_files={"/tmp/{year}.md": "x"},
            )

    def test_accepts_nested_and_dotted_paths(self) -> None:
        config = VaultConfig(
            base_vault_path="/v",
            name_pattern="V-{year}",
            exclude_from_obsidian=[".obsidian/workspace.json", "a..b/c"],
        )
        assert config.exclude_from_obsidian == (".obsidian/workspace.json", "a..b/c")

    def test_options_must_be_booleans(self) -> None:
        with pytest.raises(ValidationError):
            VaultConfig(
                base_vault_path="/v",
                name_pattern="V-{year}",
                options={"create_git_repo": "yes"},
            )

    def test_config_is_frozen(self) -> None:
        config = VaultConfig(base_vault_path="/v", name_pattern="V-{year}")
        with pytest.raises(ValidationError):
            config.name_pattern = "Other-{year}"


@pytest.mark.unit
class TestCreateExampleConfig:
    """Tests for create_example_config function."""

    def test_creates_loadable_json_config(self, tmp_path: Path) -> None:
        """The example configuration loads without errors."""
        output_path = tmp_path / "vault-config.json"
        create_example_config(str(output_path))

        config = load_config(str(output_path))
        assert "{year}" in config.name_pattern
        assert config.create_base_files

    def test_creates_yaml_config(self, tmp_path: Path) -> None:
        output_path = tmp_path / "vault-config.yml"
        create_example_config(str(output_path))

        with open(output_path) as f:
            data = yaml.safe_load(f)
        assert data["name_pattern"] == "Vault-{year}"

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """Test that parent directories are created if they don't exist."""
        output_path = tmp_path / "nested" / "dir" / "vault-config.json"
        create_example_config(str(output_path))

        assert output_path.exists()

    def test_refuses_to_overwrite(self, tmp_path: Path) -> None:
        output_path = tmp_path / "vault-config.json"
        output_path.write_text("{}")

        with pytest.raises(ConfigLoadError, match="already exists"):
            create_example_config(str(output_path))
        assert output_path.read_text() == "{}"

        create_example_config(str(output_path), overwrite=True)
        assert load_config(str(output_path)).name_pattern == "Vault-{year}"
