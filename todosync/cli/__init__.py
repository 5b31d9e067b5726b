"""Command-line host for todosync."""

from todosync.cli.main import main

__all__ = ["main"]
