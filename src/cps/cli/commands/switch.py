"""Switch command for the cps CLI."""

import shlex
from typing import Optional

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

LIST_LIMIT = 10


def cd_command(path: str) -> str:
    return f"cd {shlex.quote(path)}"


def switch_project(name: Optional[str], fzf: bool, recent: bool, claude: bool):
    """Resolve a project and print the command to switch to it."""
    manager = get_manager()

    if fzf:
        projects = manager.list_recent(LIST_LIMIT) if recent else manager.list_all()
        try:
            project = FzfSelector().select_project(projects)
        except FzfNotInstalledError as e:
            print_error(str(e))
            raise typer.Exit(1)
        if project is None:
            typer.secho("No project selected", fg=typer.colors.YELLOW, err=True)
            raise typer.Exit(1)
    elif name:
        try:
            project = find_project_or_fail(manager, name)
        except ProjectNotFoundError as e:
            print_error(str(e))
            raise typer.Exit(1)
    else:
        show_projects(manager, recent)
        return

    manager.record_access(project.id)

    if claude:
        typer.echo(cd_command(project.path))
        return

    console.print("\n[bold]To switch to this project, run:[/bold]")
    console.print(f"[cyan]  {escape(cd_command(project.path))}[/cyan]\n", highlight=False)


def show_projects(manager, recent: bool):
    projects = manager.list_recent(LIST_LIMIT) if recent else manager.list_all()

    if not projects:
        console.print("[yellow]No projects found.[/yellow]")
        return

    console.print("\n[bold]Recent projects:[/bold]\n")
    for index, project in enumerate(projects[:LIST_LIMIT], start=1):
        console.print(f"  [dim]{index}.[/dim] [green]{escape(project.name)}[/green]")
        console.print(f"     [dim]{escape(project.path)}[/dim]\n")

    console.print("[dim]Use: cps switch <name> to switch to a project[/dim]")
    console.print("[dim]Use: cps switch --fzf for interactive selection[/dim]")
