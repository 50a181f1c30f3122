"""Path utilities for cps."""

import os
from pathlib import Path
from typing import Optional, Union

CONFIG_DIR = ".cps"
PROJECTS_FILE = "projects.json"
CONFIG_PATH_ENV = "CPS_CONFIG_PATH"

PathLike = Union[str, os.PathLike]


def get_config_path(config_path: Optional[PathLike] = None) -> Path:
    """Get the location of the project registry file.

    Args:
        config_path: Explicit path. If None, uses CPS_CONFIG_PATH env var
            or ~/.cps/projects.json.

    Returns:
        Path to the registry file
    """
    if config_path is None:
        env_path = os.environ.get(CONFIG_PATH_ENV)
        if env_path:
            config_path = env_path

    if config_path:
        return Path(expand_tilde(str(config_path)))

    return Path.home() / CONFIG_DIR / PROJECTS_FILE


def expand_tilde(path: str) -> str:
    """Expand a leading ``~`` to the current user's home directory.

    Only ``~`` and ``~/...`` are expanded; ``~user`` forms are left alone.
    """
    if path == "~" or path.startswith("~/"):
        return str(Path.home()) + path[1:]
    return path


def normalize_path(path: PathLike) -> Path:
    """Return an absolute path with symlinks and ``..`` segments resolved."""
    return Path(path).resolve()


def directory_exists(path: PathLike) -> bool:
    """Check whether a path exists and is a directory.

    Stat errors are treated as "does not exist".
    """
    try:
        return Path(path).is_dir()
    except OSError:
        return False
