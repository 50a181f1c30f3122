"""Main CLI entry point for cps."""

import typer
from typing import Optional

from cps.cli.utils import setup_logging

app = typer.Typer(
    name="cps",
    help="cps - Fast project navigation",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging"
    ),
):
    """
    cps - Fast project navigation
    """
    setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        # No subcommand was invoked, show help
        print(ctx.get_help())
        raise typer.Exit(0)


@app.command()
def add(
    path: Optional[str] = typer.Argument(
        None, help="Directory to add (default: current directory)"
    ),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Project name"),
    description: Optional[str] = typer.Option(
        None, "--description", "-d", help="Project description"
    ),
    tags: Optional[str] = typer.Option(
        None, "--tags", "-t", help="Comma-separated tags"
    ),
    group: Optional[str] = typer.Option(None, "--group", "-g", help="Project group"),
):
    """Add a project to the switcher."""
    from cps.cli.commands.add import add_project

    add_project(path, name, description, tags, group)


@app.command(name="list")
def list_(
    recent: bool = typer.Option(
        False, "--recent", "-r", help="Show recently accessed projects"
    ),
    group: Optional[str] = typer.Option(None, "--group", "-g", help="Filter by group"),
    tag: Optional[str] = typer.Option(None, "--tag", "-t", help="Filter by tag"),
    groups: bool = typer.Option(
        False, "--groups", "-G", help="Show projects grouped by group"
    ),
):
    """List all projects."""
    from cps.cli.commands.list import list_projects

    list_projects(recent, group, tag, groups)


@app.command()
def switch(
    name: Optional[str] = typer.Argument(None, help="Project name to switch to"),
    fzf: bool = typer.Option(
        False, "--fzf", "-f", help="Use fzf for interactive selection"
    ),
    recent: bool = typer.Option(
        False, "--recent", "-r", help="Show recent projects only"
    ),
    claude: bool = typer.Option(
        False, "--claude", "-c", help="Output a bare cd command for shell integration"
    ),
):
    """Switch to a project."""
    from cps.cli.commands.switch import switch_project

    switch_project(name, fzf, recent, claude)


@app.command(name="s", hidden=True)
def switch_alias(
    name: Optional[str] = typer.Argument(None),
    fzf: bool = typer.Option(False, "--fzf", "-f"),
    recent: bool = typer.Option(False, "--recent", "-r"),
    claude: bool = typer.Option(False, "--claude", "-c"),
):
    """Alias for switch."""
    switch(name, fzf, recent, claude)


@app.command()
def remove(
    name: Optional[str] = typer.Argument(None, help="Name of the project to remove"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Remove without confirmation"
    ),
    fzf: bool = typer.Option(
        False, "--fzf", help="Pick projects to remove with fzf"
    ),
):
    """Remove a project."""
    from cps.cli.commands.remove import remove_project

    remove_project(name, force, fzf)


@app.command(name="rm", hidden=True)
def remove_alias(
    name: Optional[str] = typer.Argument(None),
    force: bool = typer.Option(False, "--force", "-f"),
    fzf: bool = typer.Option(False, "--fzf"),
):
    """Alias for remove."""
    remove(name, force, fzf)


@app.command()
def scan(
    path: Optional[str] = typer.Argument(
        None, help="Directory to scan (default: current directory)"
    ),
    depth: int = typer.Option(2, "--depth", "-d", help="Max scan depth"),
    hidden: bool = typer.Option(
        False, "--hidden", help="Include hidden directories"
    ),
    add: bool = typer.Option(False, "--add", "-a", help="Auto-add found projects"),
):
    """Scan a directory for projects."""
    from cps.cli.commands.scan import scan_projects

    scan_projects(path, depth, hidden, add)


@app.command()
def version():
    """Show cps version."""
    from cps import __version__

    typer.echo(f"cps version {__version__}")


if __name__ == "__main__":
    app()
