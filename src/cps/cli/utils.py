"""Utility functions for CLI commands."""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from cps.managers.project import ProjectManager
from cps.models import Project

console = Console()
err_console = Console(stderr=True)


class ProjectNotFoundError(LookupError):
    """Raised when no registered project matches a name."""

    pass


def setup_logging(verbose: bool) -> None:
    """Configure logging for a CLI invocation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_manager() -> ProjectManager:
    """Get a ProjectManager backed by the user's registry.

    Raises:
        typer.Exit: If the registry file cannot be loaded
    """
    manager = ProjectManager()
    try:
        manager.config.ensure_loaded()
    except Exception as e:
        print_error(f"Could not load {manager.config.config_path}: {e}")
        raise typer.Exit(1)
    return manager


def parse_tags(tags: Optional[str]) -> List[str]:
    """Split a comma-separated tag option into a list."""
    if not tags:
        return []
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


def find_project_or_fail(manager: ProjectManager, name: str) -> Project:
    """Look a project up by name.

    Raises:
        ProjectNotFoundError: If no project matches
    """
    project = manager.find_by_name(name)
    if project is None:
        raise ProjectNotFoundError(f"Project not found: {name}")
    return project


def print_error(message: str) -> None:
    err_console.print(f"[red]❌ {escape(message)}[/red]")


def print_project_summary(project: Project) -> None:
    """Print the details shown after adding a project."""
    console.print(f"[green]✅ Added project: {escape(project.name)}[/green]")
    console.print(f"  Path: [dim]{escape(project.path)}[/dim]", highlight=False)
    if project.description:
        console.print(f"  Description: [dim]{escape(project.description)}[/dim]")
    if project.tags:
        console.print(f"  Tags: [yellow]{escape(', '.join(project.tags))}[/yellow]")
    if project.group:
        console.print(f"  Group: [blue]@{escape(project.group)}[/blue]")
