"""Command-line interface for cps."""
