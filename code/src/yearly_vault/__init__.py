"""yearly-vault: Provision next year's Obsidian vault from this year's one.

This package clones a curated subset of an existing year-dated vault into a new
one, driven by a declarative configuration file, with template substitution,
optional backup, repository creation and opening the result in Obsidian.
"""

__version__ = "0.20261019.0"
__license__ = "MIT"

__all__ = ["__version__", "__license__"]
