"""gotool command-line entry point."""

from __future__ import annotations

import typer

from .commands import register_commands

app = typer.Typer(
    name="gotool",
    help="Run go build/install and report the import paths they touched",
    add_completion=False,
    no_args_is_help=True,
)
register_commands(app)


def main() -> None:
    app()


__all__ = ["app", "main"]
