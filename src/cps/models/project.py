"""Project model for cps."""

from typing import List, Optional
from pydantic import Field, field_validator
from .base import CPSBaseModel


class ProjectMetadata(CPSBaseModel):
    """Optional metadata attached to a project."""

    language: Optional[str] = Field(default=None, description="Primary language")
    framework: Optional[str] = Field(default=None, description="Framework in use")
    git_remote: Optional[str] = Field(default=None, description="Detected remote URL")


class Project(CPSBaseModel):
    """Represents a tracked project directory."""

    id: str = Field(description="Identifier derived from the project root path")
    name: str = Field(description="Display name")
    path: str = Field(description="Absolute path to the repository root")
    description: Optional[str] = Field(default=None, description="Project description")
    tags: List[str] = Field(default_factory=list, description="Project tags")
    group: Optional[str] = Field(default=None, description="Project group")
    created_at: int = Field(description="Creation time in ms since epoch")
    last_accessed: int = Field(description="Last access time in ms since epoch")
    access_count: int = Field(default=0, ge=0, description="Number of recorded accesses")
    metadata: Optional[ProjectMetadata] = Field(default=None)

    @field_validator("id")
    @classmethod
    def id_has_no_delimiters(cls, value: str) -> str:
        if "\t" in value or "\n" in value:
            raise ValueError("Project id cannot contain tabs or newlines")
        return value

    @property
    def git_remote(self) -> Optional[str]:
        return self.metadata.git_remote if self.metadata else None
