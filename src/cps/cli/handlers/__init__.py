"""Handlers for CLI commands that delegate to external tools."""

from cps.cli.handlers.fzf_handler import FzfSelector, FzfNotInstalledError

__all__ = ["FzfSelector", "FzfNotInstalledError"]
