"""Interactive project selection through fzf."""

import shutil
import subprocess
from typing import List, Optional

from cps.models import Project

FIELD_DELIMITER = "\t"
INSTALL_HINT = "Install it from: https://github.com/junegunn/fzf"


class FzfNotInstalledError(RuntimeError):
    """Raised when the fzf binary cannot be found."""

    pass


class FzfSelector:
    """Selects projects with the external fzf fuzzy finder.

    Each project is fed to fzf as ``name<TAB>path<TAB>meta<TAB>id`` and the
    id field of the chosen line is mapped back to the project.
    """

    def __init__(self, binary: str = "fzf"):
        self.binary = binary
        self._available: Optional[bool] = None

    def is_available(self) -> bool:
        """Check whether fzf is on PATH (cached)."""
        if self._available is None:
            self._available = shutil.which(self.binary) is not None
        return self._available

    @staticmethod
    def format_line(project: Project) -> str:
        """Render a project as a single tab-delimited fzf input line."""
        meta_parts = []
        if project.tags:
            meta_parts.append(f"[{','.join(project.tags)}]")
        if project.group:
            meta_parts.append(f"@{project.group}")
        fields = [project.name, project.path, " ".join(meta_parts), project.id]
        return FIELD_DELIMITER.join(_clean_field(field) for field in fields)

    @staticmethod
    def parse_id(line: str) -> Optional[str]:
        """Extract the project id from a line produced by format_line."""
        fields = line.rstrip("\n").split(FIELD_DELIMITER)
        if len(fields) < 4 or not fields[3]:
            return None
        return fields[3]

    def select_project(
        self,
        projects: List[Project],
        prompt: str = "Select project> ",
        height: str = "40%",
    ) -> Optional[Project]:
        """Let the user pick one project.

        Returns:
            The chosen project, or None if nothing was selected

        Raises:
            FzfNotInstalledError: If fzf is not installed
        """
        args = [
            "--prompt", prompt,
            "--height", height,
            "--preview", "echo {2}",
            "--preview-window", "down:3:noborder",
            "--select-1",
            "--exit-0",
        ]
        selected = self._run(projects, args)
        if not selected:
            return None

        by_id = {p.id: p for p in projects}
        return by_id.get(self.parse_id(selected[0]))

    def select_multiple(
        self,
        projects: List[Project],
        prompt: str = "Select projects> ",
        height: str = "40%",
    ) -> List[Project]:
        """Let the user pick any number of projects."""
        args = [
            "--prompt", prompt,
            "--height", height,
            "--multi",
            "--preview", "echo {2}",
            "--preview-window", "down:3:noborder",
        ]
        selected_ids = {self.parse_id(line) for line in self._run(projects, args)}
        return [p for p in projects if p.id in selected_ids]

    def _run(self, projects: List[Project], args: List[str]) -> List[str]:
        if not self.is_available():
            raise FzfNotInstalledError(f"fzf is not installed. {INSTALL_HINT}")

        if not projects:
            return []

        lines = "\n".join(self.format_line(p) for p in projects)
        command = [
            self.binary,
            "--delimiter", FIELD_DELIMITER,
            "--with-nth", "1,3",
            "--ansi",
            *args,
        ]

        # fzf draws its UI on the terminal, so only stdin/stdout are captured
        result = subprocess.run(
            command, input=lines, stdout=subprocess.PIPE, text=True
        )
        # 1 = no match, 130 = cancelled
        if result.returncode != 0:
            return []

        return [line for line in result.stdout.splitlines() if line]


def _clean_field(value: str) -> str:
    return value.replace("\t", " ").replace("\n", " ")
