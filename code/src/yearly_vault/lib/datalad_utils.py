"""DataLad utility functions for putting a new vault under version control.

The vault becomes a DataLad dataset without git-annex, i.e. a plain git
repository, and everything in it is committed at once.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def generate_stats_message(
    base_message: str,
    stats: dict[str, int | str],
) -> str:
    """Generate a commit message with statistics.

    Args:
        base_message: Base commit message (first line)
        stats: Dictionary of stat name -> value

    Returns:
        Formatted commit message with stats

    Example:
        >>> generate_stats_message("Create vault for 2026", {"folders_copied": 3})
        'Create vault for 2026\\n\\nStatistics:\\n  folders_copied: 3'
    """
    lines = [base_message, "", "Statistics:"]
    for key, value in stats.items():
        lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def vault_commit_message(target_year: int, stats: dict[str, int | str]) -> str:
    """Commit message for the initial commit of a new vault."""
    return generate_stats_message(f"Create vault for {target_year}", stats)


def create_repository(path: Path, message: str) -> bool:
    """Create a repository in path and commit all files in it.

    Failures are logged, not raised: a vault without a repository is still
    a usable vault.

    Args:
        path: Vault directory
        message: Commit message

    Returns:
        True if the repository was created and saved, False otherwise
    """
    try:
        import datalad.api as dl

        logger.info(f"Creating repository in {path}")
        # force: the vault already has content
        dl.create(path=str(path), annex=False, force=True)
        dl.save(dataset=str(path), message=message)
        logger.info(f"Committed vault contents in {path}")
        return True
    except Exception as e:
        logger.error(f"Repository creation failed for {path}: {e}")
        return False
