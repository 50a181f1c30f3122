"""Remove command for the cps CLI."""

from typing import List, Optional

import typer
from rich.markup import escape

from cps.cli.handlers.fzf_handler import FzfNotInstalledError, FzfSelector
from cps.cli.utils import (
    ProjectNotFoundError,
    console,
    find_project_or_fail,
    get_manager,
    print_error,
)
from cps.models import Project


def remove_project(name: Optional[str], force: bool, fzf: bool = False):
    """Remove projects from the registry by name or interactive selection."""
    manager = get_manager()

    if fzf:
        try:
            projects = FzfSelector().select_multiple(
                manager.list_all(), prompt="Remove projects> "
            )
        except FzfNotInstalledError as e:
            print_error(str(e))
            raise typer.Exit(1)
        if not projects:
            typer.secho("No project selected", fg=typer.colors.YELLOW, err=True)
            raise typer.Exit(1)
    elif name:
        try:
            projects = [find_project_or_fail(manager, name)]
        except ProjectNotFoundError as e:
            print_error(str(e))
            raise typer.Exit(1)
    else:
        print_error("Missing argument 'NAME' (or use --fzf)")
        raise typer.Exit(1)

    if not force and not confirm_removal(projects):
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit(0)

    for project in projects:
        if not manager.remove(project.id):
            print_error(f"Project not found: {project.name}")
            raise typer.Exit(1)
        console.print(f"[green]✅ Removed project '{escape(project.name)}'[/green]")


def confirm_removal(projects: List[Project]) -> bool:
    if len(projects) == 1:
        project = projects[0]
        return typer.confirm(f"Remove project '{project.name}' ({project.path})?")
    names = ", ".join(p.name for p in projects)
    return typer.confirm(f"Remove {len(projects)} projects ({names})?")
