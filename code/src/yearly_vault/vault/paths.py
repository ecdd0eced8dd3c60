"""Year-based vault path resolution."""

from pathlib import Path
from typing import Union

from yearly_vault.config.models import YEAR_TOKEN


def vault_name(pattern: str, year: int) -> str:
    """Get the vault folder name for a year.

    Args:
        pattern: Name pattern containing the {year} token (e.g. "Vault-{year}")
        year: Calendar year

    Returns:
        Pattern with every {year} replaced by the decimal year

    Raises:
        ValueError: If year is not a positive integer

    Examples:
        >>> vault_name("Vault-{year}", 2026)
        'Vault-2026'
    """
    if isinstance(year, bool) or not isinstance(year, int):
        raise ValueError(f"year must be an integer, got {year!r}")
    if year <= 0:
        raise ValueError(f"year must be positive, got {year}")
    return pattern.replace(YEAR_TOKEN, str(year))


def resolve_vault_path(base_path: Union[str, Path], pattern: str, year: int) -> Path:
    """Resolve the directory of the vault for a given year.

    No filesystem access is performed; a leading "~" in base_path is expanded.

    Args:
        base_path: Directory holding all yearly vaults
        pattern: Name pattern containing the {year} token
        year: Calendar year

    Returns:
        base_path joined with the vault name for year
    """
    return Path(base_path).expanduser() / vault_name(pattern, year)
