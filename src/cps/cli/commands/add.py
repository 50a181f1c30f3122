"""Add command for the cps CLI."""

from typing import Optional

import typer

from cps.cli.utils import get_manager, parse_tags, print_error, print_project_summary
from cps.managers.project import NotAProjectError


def add_project(
    path: Optional[str],
    name: Optional[str],
    description: Optional[str],
    tags: Optional[str],
    group: Optional[str],
):
    """Add the current directory, or PATH, as a project."""
    manager = get_manager()
    tag_list = parse_tags(tags)

    try:
        if path:
            project = manager.add_by_path(
                path, name=name, description=description, tags=tag_list, group=group
            )
        else:
            project = manager.add_current(
                name=name, description=description, tags=tag_list, group=group
            )
    except (FileNotFoundError, NotAProjectError) as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_project_summary(project)
