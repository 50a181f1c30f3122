"""List command for the cps CLI."""

from datetime import datetime
from typing import List, Optional

from rich.markup import escape
from rich.table import Table as RichTable
from rich.text import Text

from cps.cli.utils import console, get_manager
from cps.models import Project

RECENT_LIMIT = 10


def format_timestamp(ms: int) -> str:
    """Render a millisecond timestamp for display."""
    return datetime.fromtimestamp(ms / 1000).strftime("%Y-%m-%d %H:%M")


def build_table(projects: List[Project], title: str) -> RichTable:
    # Registry values are rendered as Text so brackets are never read as markup
    table = RichTable(title=title)
    table.add_column("#", style="dim")
    table.add_column("Name", style="green")
    table.add_column("Path", style="dim", overflow="fold")
    table.add_column("Tags", style="yellow")
    table.add_column("Group", style="blue")
    table.add_column("Last Accessed")
    table.add_column("Uses", justify="right")

    for index, project in enumerate(projects):
        table.add_row(
            str(index),
            Text(project.name),
            Text(project.path),
            Text(", ".join(project.tags)),
            Text(f"@{project.group}" if project.group else ""),
            format_timestamp(project.last_accessed),
            str(project.access_count),
        )
    return table


def show_groups(manager):
    """Print each group with the names of its projects."""
    groups = manager.groups()
    if not groups:
        console.print("[yellow]No groups found.[/yellow]")
        return

    names = {p.id: p.name for p in manager.list_all()}
    table = RichTable(title=f"Found {len(groups)} group(s)")
    table.add_column("Group", style="blue")
    table.add_column("Projects", style="green")

    for group, ids in sorted(groups.items()):
        table.add_row(Text(f"@{group}"), Text(", ".join(names[i] for i in ids)))
    console.print(table)


def list_projects(
    recent: bool, group: Optional[str], tag: Optional[str], groups: bool = False
):
    """List registered projects."""
    manager = get_manager()

    if groups:
        show_groups(manager)
        return

    if recent:
        projects = manager.list_recent(RECENT_LIMIT)
    else:
        projects = manager.list_all()

    projects = manager.filter_projects(projects, group=group, tag=tag)

    if not projects:
        console.print("[yellow]No projects found.[/yellow]")
        console.print(f"[dim]{escape('Add a project with: cps add [path]')}[/dim]")
        return

    title = f"Found {len(projects)} project(s)"
    console.print(build_table(projects, title))
