"""cps - fast navigation between local git projects."""

from cps.config import Config, ProjectConfig, Settings
from cps.managers.project import ProjectManager, NotAProjectError
from cps.models import Project

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("cps")
except PackageNotFoundError:
    # Package metadata is not available (running from a source checkout)
    __version__ = "0.1.0"

__all__ = [
    "Config",
    "ProjectConfig",
    "Settings",
    "ProjectManager",
    "NotAProjectError",
    "Project",
]
