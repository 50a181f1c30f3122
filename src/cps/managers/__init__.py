"""Managers for cps operations."""

from cps.managers.project import ProjectManager, NotAProjectError

__all__ = [
    "ProjectManager",
    "NotAProjectError",
]
