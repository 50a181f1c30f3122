"""Project registry persistence for cps."""

import json
import logging
from typing import Dict, List, Optional

from pydantic import ConfigDict, Field

from cps.core.path_utils import PathLike, get_config_path
from cps.utils.time_utils import now_ms
from cps.models import CPSBaseModel, Project

logger = logging.getLogger(__name__)

CONFIG_VERSION = "0.1.0"
DEFAULT_MAX_HISTORY_SIZE = 50


class Settings(CPSBaseModel):
    """User settings stored alongside the project list."""

    max_history_size: int = Field(
        default=DEFAULT_MAX_HISTORY_SIZE, description="Advisory cap on history"
    )
    auto_detect_git: bool = Field(default=True, description="Detect git roots")
    default_group: Optional[str] = Field(
        default=None, description="Group given to projects added without one"
    )


class ProjectConfig(CPSBaseModel):
    """The registry document stored in ~/.cps/projects.json."""

    model_config = ConfigDict(
        extra="allow"
    )  # Keep keys added by hand

    version: str = Field(default=CONFIG_VERSION, description="Document schema version")
    projects: List[Project] = Field(default_factory=list)
    groups: Dict[str, List[str]] = Field(
        default_factory=dict, description="Group name to project ids (derived)"
    )
    settings: Settings = Field(default_factory=Settings)

    def rebuild_groups(self) -> None:
        """Recompute the group index from the project list."""
        groups: Dict[str, List[str]] = {}
        for project in self.projects:
            if project.group:
                groups.setdefault(project.group, []).append(project.id)
        self.groups = groups


class Config:
    """Manages the project registry file.

    Every mutating operation rewrites the whole file before returning.
    There is no locking: concurrent invocations are last-write-wins.
    """

    def __init__(self, config_path: Optional[PathLike] = None):
        """Initialize config manager.

        Args:
            config_path: Path to the registry file. If None, uses CPS_CONFIG_PATH
                env var or ~/.cps/projects.json.
        """
        self.config_path = get_config_path(config_path)
        self._config: Optional[ProjectConfig] = None

    @property
    def exists(self) -> bool:
        """Check if the registry file exists."""
        return self.config_path.exists()

    @property
    def loaded(self) -> bool:
        return self._config is not None

    def load(self) -> ProjectConfig:
        """Load the registry from disk.

        A missing file is replaced by the default document, which is written
        immediately. Malformed files raise.

        Raises:
            json.JSONDecodeError: If the file is not valid JSON
            pydantic.ValidationError: If the document does not match the schema
        """
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.info(f"Creating default project registry at {self.config_path}")
            self._config = ProjectConfig()
            self.save()
            return self._config

        self._config = ProjectConfig.model_validate(data)
        logger.debug(
            f"Loaded {len(self._config.projects)} projects from {self.config_path}"
        )
        return self._config

    def ensure_loaded(self) -> ProjectConfig:
        """Return the in-memory document, loading it on first use."""
        if self._config is None:
            return self.load()
        return self._config

    def save(self, config: Optional[ProjectConfig] = None) -> None:
        """Save the registry to disk.

        Args:
            config: Document to save. If None, saves the current document.
        """
        if config:
            self._config = config

        if not self._config:
            raise ValueError("No configuration to save")

        self._config.rebuild_groups()

        # Ensure config directory exists
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(self._config.to_dict(), f, indent=2)
        logger.debug(f"Saved {len(self._config.projects)} projects to {self.config_path}")

    def list_all(self) -> List[Project]:
        """Return every registered project in insertion order."""
        return self.ensure_loaded().projects

    def get(self, project_id: str) -> Optional[Project]:
        """Return the project with the given id, if registered."""
        for project in self.list_all():
            if project.id == project_id:
                return project
        return None

    def upsert(self, project: Project) -> None:
        """Insert a project, replacing any existing entry with the same id."""
        config = self.ensure_loaded()

        for index, existing in enumerate(config.projects):
            if existing.id == project.id:
                config.projects[index] = project
                break
        else:
            config.projects.append(project)

        self.save()

    def touch_access(self, project_id: str) -> None:
        """Record an access: bump access_count and set last_accessed to now.

        Unknown ids are ignored.
        """
        project = self.get(project_id)
        if project is None:
            logger.debug(f"No project with id {project_id} to record access for")
            return

        project.last_accessed = max(now_ms(), project.last_accessed)
        project.access_count += 1
        self.save()

    def recent(self, limit: int = 10) -> List[Project]:
        """Return projects ordered by last access, most recent first."""
        projects = sorted(
            self.list_all(), key=lambda p: p.last_accessed, reverse=True
        )
        return projects[:max(limit, 0)]

    def replace_all(self, projects: List[Project]) -> None:
        """Replace the whole project list."""
        config = self.ensure_loaded()
        config.projects = list(projects)
        self.save()
