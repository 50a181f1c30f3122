"""Scan command for the cps CLI."""

from typing import Optional

import typer
from rich.table import Table as RichTable
from rich.text import Text

from cps.cli.utils import console, get_manager, print_error


def scan_projects(path: Optional[str], depth: int, hidden: bool, add: bool):
    """Find git repositories below a directory."""
    manager = get_manager()

    try:
        found = manager.scan_directory(path or ".", max_depth=depth, include_hidden=hidden)
    except OSError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if not found:
        console.print("[yellow]No projects found.[/yellow]")
        return

    known = {p.id for p in manager.list_all()}

    table = RichTable(title=f"Found {len(found)} repositories")
    table.add_column("Name", style="green")
    table.add_column("Path", style="dim", overflow="fold")
    table.add_column("Remote", style="cyan")
    table.add_column("Registered", style="yellow")

    for project in found:
        table.add_row(
            Text(project.name),
            Text(project.path),
            Text(project.git_remote or ""),
            "✓" if project.id in known else "",
        )
    console.print(table)

    if add:
        added = manager.add_projects(found)
        console.print(f"[green]✅ Added {len(added)} project(s)[/green]")
