"""Repository detection result."""

from typing import Optional
from pydantic import Field
from .base import CPSBaseModel


class GitInfo(CPSBaseModel):
    """Transient result of detecting a git repository."""

    root: str = Field(description="Absolute path to the repository root")
    remote: Optional[str] = Field(default=None, description="First remote URL in .git/config")
    branch: Optional[str] = Field(default=None, description="Current branch (not populated)")
