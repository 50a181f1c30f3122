"""Core data models for cps."""

from .base import CPSBaseModel
from .project import Project, ProjectMetadata
from .git import GitInfo

__all__ = [
    "CPSBaseModel",
    "Project",
    "ProjectMetadata",
    "GitInfo",
]
