"""Command line interface for yearly-vault."""
