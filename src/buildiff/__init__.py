"""buildiff — list added, updated, and deleted files between two build outputs."""

__version__ = "0.1.0"
