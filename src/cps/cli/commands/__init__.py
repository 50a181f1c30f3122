"""CLI command modules."""

from . import add, list, switch, remove, scan

__all__ = [
    "add",
    "list",
    "switch",
    "remove",
    "scan",
]
