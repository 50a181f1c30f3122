"""Git repository detection."""

import logging
import re
from pathlib import Path
from typing import Optional

from cps.core.path_utils import PathLike
from cps.models import GitInfo

logger = logging.getLogger(__name__)

GIT_DIR = ".git"
_REMOTE_URL_PATTERN = re.compile(r"url\s*=\s*(.+)")


class GitDetector:
    """Detects git repository roots on the local filesystem.

    Only a ``.git`` *directory* marks a repository root. A ``.git`` file
    (worktree or submodule pointer) is not followed.
    """

    def is_repo_root(self, path: PathLike) -> bool:
        """Check whether a directory directly contains a .git directory."""
        try:
            return (Path(path) / GIT_DIR).is_dir()
        except OSError:
            return False

    def find_repo_root(self, start_path: PathLike) -> Optional[Path]:
        """Find the nearest repository root at or above a directory.

        Args:
            start_path: Directory to start searching from

        Returns:
            Path to the deepest enclosing repository root, or None
        """
        current = Path(start_path).resolve()

        while current != current.parent:
            if self.is_repo_root(current):
                return current
            current = current.parent

        return None

    def get_remote(self, repo_root: PathLike) -> Optional[str]:
        """Extract the first remote URL from a repository's config file.

        Returns None if the config is missing, unreadable or has no url.
        """
        config_path = Path(repo_root) / GIT_DIR / "config"
        try:
            if not config_path.is_file():
                return None
            content = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Could not read git config at {config_path}: {e}")
            return None

        match = _REMOTE_URL_PATTERN.search(content)
        if match:
            return match.group(1).strip()
        return None

    def detect(self, path: PathLike) -> Optional[GitInfo]:
        """Detect the repository enclosing a directory.

        Returns:
            GitInfo for the repository, or None if there is none
        """
        root = self.find_repo_root(path)
        if root is None:
            return None

        return GitInfo(root=str(root), remote=self.get_remote(root))
