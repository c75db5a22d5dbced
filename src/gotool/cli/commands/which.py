"""`gotool which` command."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gotool.cli.helpers import configure_logging, print_error
from gotool.config import default_config_path, load_options
from gotool.detection import go_bin
from gotool.exceptions import GoBinaryNotFoundError, GoToolConfigError


def which_command(
    config: Optional[Path] = typer.Option(None, "--config", help="Options file (default: ./.gotool.yaml)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Print the go binary gotool would run."""
    configure_logging(debug)
    try:
        options = load_options(config or default_config_path())
        typer.echo(go_bin(options.go_bin))
    except (GoBinaryNotFoundError, GoToolConfigError) as exc:
        print_error(exc)
        raise typer.Exit(1) from exc


__all__ = ["which_command"]
