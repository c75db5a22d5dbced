"""CLI command modules for gotool."""

from __future__ import annotations

import typer

from .go import build_command, install_command
from .which import which_command


def register_commands(app: typer.Typer) -> None:
    """Attach every gotool command to ``app``."""
    app.command("build")(build_command)
    app.command("install")(install_command)
    app.command("which")(which_command)


__all__ = ["register_commands"]
