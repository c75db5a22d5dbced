"""Shared console and logging helpers for the gotool CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from gotool.exceptions import CommandError

err_console = Console(stderr=True)


def configure_logging(debug: bool) -> None:
    """Route library logging through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def print_error(message: object) -> None:
    err_console.print(f"[red]✗[/red] {escape(str(message))}", soft_wrap=True)


def print_command_error(exc: CommandError) -> None:
    err_console.print(f"[red]✗[/red] Command failed: [bold]{escape(exc.full_command)}[/bold]", soft_wrap=True)
    stderr = exc.stderr.decode("utf-8", errors="replace").rstrip()
    if stderr:
        err_console.print(escape(stderr), style="red", highlight=False, soft_wrap=True)
    stdout = exc.stdout.strip().decode("utf-8", errors="replace")
    if stdout:
        err_console.print(escape(stdout), highlight=False, soft_wrap=True)


__all__ = ["configure_logging", "err_console", "print_command_error", "print_error"]
