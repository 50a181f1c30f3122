"""Project service: the entry point CLI commands use."""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from cps.config import Config
from cps.core.path_utils import PathLike, directory_exists, expand_tilde, normalize_path
from cps.core.scanner import DEFAULT_MAX_DEPTH, ProjectScanner, ScanOptions
from cps.models import Project

logger = logging.getLogger(__name__)


class NotAProjectError(ValueError):
    """Raised when a directory is not inside a git repository."""

    pass


class ProjectManager:
    """Composes the scanner and the registry into user-level operations."""

    def __init__(
        self,
        config: Optional[Config] = None,
        scanner: Optional[ProjectScanner] = None,
    ):
        """Initialize project manager.

        Args:
            config: Registry to use (default: the user's registry file)
            scanner: Scanner to use for discovering repositories
        """
        self.config = config or Config()
        self.scanner = scanner or ProjectScanner()

    def add_current(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[List[str]] = None,
        group: Optional[str] = None,
        cwd: Optional[PathLike] = None,
    ) -> Project:
        """Register the repository enclosing the working directory.

        Args:
            name: Display name override
            description: Project description
            tags: Project tags
            group: Project group
            cwd: Directory to detect from (default: process working directory)

        Returns:
            The stored project

        Raises:
            NotAProjectError: If no git repository encloses the directory
        """
        project = self.scanner.scan_current(cwd)
        if project is None:
            raise NotAProjectError(
                "Current directory is not a valid project (no .git folder found)"
            )

        return self._store(project, name, description, tags, group)

    def add_by_path(
        self,
        path: PathLike,
        name: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[List[str]] = None,
        group: Optional[str] = None,
    ) -> Project:
        """Register the repository enclosing a given directory.

        Raises:
            FileNotFoundError: If the path is not an existing directory
            NotAProjectError: If no git repository encloses the directory
        """
        target = self.resolve_directory(path)

        project = self.scanner.scan_current(target)
        if project is None:
            raise NotAProjectError(
                f"Directory is not a valid project (no .git folder found): {path}"
            )

        return self._store(project, name, description, tags, group)

    def _store(
        self,
        project: Project,
        name: Optional[str],
        description: Optional[str],
        tags: Optional[List[str]],
        group: Optional[str],
    ) -> Project:
        if name:
            project.name = name
        if description:
            project.description = description
        if tags:
            project.tags = list(tags)
        if group:
            project.group = group
        else:
            project.group = self.config.ensure_loaded().settings.default_group

        self.config.upsert(project)
        logger.info(f"Registered project {project.name} ({project.id}) at {project.path}")
        return project

    def resolve_directory(self, path: PathLike) -> Path:
        """Expand ``~`` and resolve a user-supplied directory path.

        Raises:
            FileNotFoundError: If the result is not an existing directory
        """
        target = normalize_path(expand_tilde(str(path)))
        if not directory_exists(target):
            raise FileNotFoundError(f"Directory does not exist: {path}")
        return target

    def list_all(self) -> List[Project]:
        """Return every registered project."""
        return self.config.list_all()

    def list_recent(self, limit: int = 10) -> List[Project]:
        """Return the most recently accessed projects."""
        return self.config.recent(limit)

    def remove(self, project_id: str) -> bool:
        """Remove a project by id.

        Returns:
            True if a project was removed, False if the id was unknown
        """
        projects = self.config.list_all()
        remaining = [p for p in projects if p.id != project_id]

        if len(remaining) == len(projects):
            return False

        self.config.replace_all(remaining)
        logger.info(f"Removed project {project_id}")
        return True

    def find_by_name(self, name: str) -> Optional[Project]:
        """Find a project by name.

        An exact match wins over a substring match; within each kind the
        first registered project wins.
        """
        projects = self.config.list_all()

        for project in projects:
            if project.name == name:
                return project

        for project in projects:
            if name in project.name:
                return project

        return None

    def record_access(self, project_id: str) -> None:
        """Record that a project was switched to."""
        self.config.touch_access(project_id)

    def groups(self) -> Dict[str, List[str]]:
        """Group name to project ids, computed from the project list."""
        groups: Dict[str, List[str]] = {}
        for project in self.config.list_all():
            if project.group:
                groups.setdefault(project.group, []).append(project.id)
        return groups

    @staticmethod
    def filter_projects(
        projects: List[Project],
        group: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> List[Project]:
        """Filter projects by group and/or tag."""
        if group:
            projects = [p for p in projects if p.group == group]
        if tag:
            projects = [p for p in projects if tag in p.tags]
        return projects

    def scan_directory(
        self,
        path: PathLike,
        max_depth: int = DEFAULT_MAX_DEPTH,
        include_hidden: bool = False,
    ) -> List[Project]:
        """Discover repositories below a directory without registering them.

        Raises:
            FileNotFoundError: If the path is not an existing directory
        """
        target = self.resolve_directory(path)
        options = ScanOptions(include_hidden=include_hidden, max_depth=max_depth)
        return self.scanner.scan_tree(target, options)

    def add_projects(self, projects: List[Project]) -> List[Project]:
        """Register scanned projects that are not already registered.

        Returns:
            The projects that were added
        """
        known = {p.id for p in self.config.list_all()}
        added = []

        for project in projects:
            if project.id in known:
                continue
            if project.group is None:
                project.group = self.config.ensure_loaded().settings.default_group
            self.config.upsert(project)
            known.add(project.id)
            added.append(project)

        return added
