"""Project discovery by walking the filesystem for git repositories."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Set

from cps.core.git_detector import GitDetector
from cps.core.path_utils import PathLike
from cps.models import GitInfo, Project, ProjectMetadata
from cps.utils.ids import create_id
from cps.utils.time_utils import now_ms

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 2


@dataclass
class ScanOptions:
    """Options for a directory tree scan.

    Attributes:
        include_hidden: Descend into entries whose name starts with "."
        max_depth: Deepest level (0 = direct children of the root) examined
        follow_symlinks: Treat symlinks to directories as directories
    """
    include_hidden: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    follow_symlinks: bool = False


class ProjectScanner:
    """Turns git repositories found on disk into Project candidates."""

    def __init__(self, detector: Optional[GitDetector] = None):
        self.detector = detector or GitDetector()

    def scan_current(self, cwd: Optional[PathLike] = None) -> Optional[Project]:
        """Detect the repository enclosing a directory.

        Args:
            cwd: Directory to scan from. Defaults to the process working directory.

        Returns:
            A new Project for the repository root, or None if not inside one
        """
        start = Path(cwd) if cwd is not None else Path.cwd()
        git_info = self.detector.detect(start)
        if git_info is None:
            return None

        return self.build_project(git_info)

    def build_project(self, git_info: GitInfo, name: Optional[str] = None) -> Project:
        """Create a fresh Project for a detected repository."""
        timestamp = now_ms()
        return Project(
            id=create_id(git_info.root),
            name=name or Path(git_info.root).name,
            path=git_info.root,
            description="",
            tags=[],
            created_at=timestamp,
            last_accessed=timestamp,
            access_count=0,
            metadata=ProjectMetadata(git_remote=git_info.remote),
        )

    def scan_tree(
        self, root_dir: PathLike, options: Optional[ScanOptions] = None
    ) -> List[Project]:
        """Find repositories below a directory.

        Repositories are not descended into. The root directory itself is
        never reported, only entries below it. With ``max_depth=0`` only
        direct children of the root are examined.

        Args:
            root_dir: Directory to scan
            options: Scan options (defaults: depth 2, no hidden, no symlinks)

        Returns:
            Projects in discovery order

        Raises:
            OSError: If root_dir itself cannot be read
        """
        options = options or ScanOptions()
        root = Path(root_dir).resolve()
        projects: List[Project] = []
        seen: Set[str] = set()
        visited: Set[Path] = {root}

        # Errors listing the root propagate; deeper failures are skipped
        with os.scandir(root) as it:
            entries = list(it)

        self._scan_entries(entries, projects, seen, visited, 0, options)
        return projects

    def _scan_dir(
        self,
        dir_path: Path,
        projects: List[Project],
        seen: Set[str],
        visited: Set[Path],
        depth: int,
        options: ScanOptions,
    ) -> None:
        if depth > options.max_depth:
            return

        try:
            with os.scandir(dir_path) as it:
                entries = list(it)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {dir_path}: {e}")
            return

        self._scan_entries(entries, projects, seen, visited, depth, options)

    def _scan_entries(
        self,
        entries: List[os.DirEntry],
        projects: List[Project],
        seen: Set[str],
        visited: Set[Path],
        depth: int,
        options: ScanOptions,
    ) -> None:
        for entry in entries:
            if not options.include_hidden and entry.name.startswith("."):
                continue

            try:
                if not entry.is_dir(follow_symlinks=options.follow_symlinks):
                    continue
            except OSError:
                continue

            full_path = Path(entry.path)
            if options.follow_symlinks:
                real_path = full_path.resolve()
                if real_path in visited:
                    continue
                visited.add(real_path)

            if self.detector.is_repo_root(full_path):
                root = str(full_path.resolve())
                git_info = GitInfo(root=root, remote=self.detector.get_remote(root))
                project = self.build_project(git_info, name=entry.name)
                if project.id not in seen:
                    seen.add(project.id)
                    projects.append(project)
            else:
                self._scan_dir(full_path, projects, seen, visited, depth + 1, options)
