"""Shared fixtures: a base directory with last year's vault in it."""

from pathlib import Path
from typing import Any, Callable

import pytest

from yearly_vault.config import VaultConfig


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """Directory holding the yearly vaults."""
    base = tmp_path / "vaults"
    base.mkdir()
    return base


@pytest.fixture
def source_vault(base_dir: Path) -> Path:
    """A 2025 vault with settings, templates, notes and machine-local state."""
    vault = base_dir / "Vault-2025"
    (vault / ".obsidian" / "plugins" / "calendar").mkdir(parents=True)
    (vault / ".obsidian" / "app.json").write_text('{"theme": "dark"}')
    (vault / ".obsidian" / "workspace.json").write_text('{"open": ["Home.md"]}')
    (vault / ".obsidian" / "plugins" / "calendar" / "main.js").write_text("// plugin")
    (vault / "Templates").mkdir()
    (vault / "Templates" / "Daily.md").write_text("# {{date}}\n")
    (vault / "Templates" / "Meeting.md").write_text("## Attendees\n")
    (vault / "Areas").mkdir()
    (vault / "Areas" / "Goals.md").write_text("- read more\n")
    (vault / "Home.md").write_text("# 2025\n")
    (vault / "Daily").mkdir()
    (vault / "Daily" / "2025-03-01.md").write_text("notes")
    return vault


def _make_config(base_dir: Path, **overrides: Any) -> VaultConfig:
    data: dict[str, Any] = {
        "base_vault_path": str(base_dir),
        "name_pattern": "Vault-{year}",
    }
    data.update(overrides)
    return VaultConfig(**data)


@pytest.fixture
def make_config(base_dir: Path) -> Callable[..., VaultConfig]:
    """Build a configuration rooted at base_dir with the given fields."""

    def factory(**overrides: Any) -> VaultConfig:
        return _make_config(base_dir, **overrides)

    return factory


@pytest.fixture
def full_config(base_dir: Path) -> VaultConfig:
    """Configuration using every pipeline step."""
    return _make_config(
        base_dir,
        copy_complete=[".obsidian", "Templates"],
        exclude_from_obsidian=[".obsidian/workspace.json", ".obsidian/cache"],
        copy_files=["Areas/Goals.md"],
        create_empty_folders=["Inbox", "Daily"],
        create_base_files={
            "Home.md": "# {year}\n\nCreated {date}\n",
            "Daily/{year}-01-01.md": "# First day of {year}\n",
        },
    )
