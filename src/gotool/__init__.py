"""
gotool
======

Thin wrapper around the go toolchain: builds the go command line from a
`BuildOptions` record, runs it, and returns the import paths go reports
as affected.

Usage:
    from gotool import BuildOptions, build

    affected = build(BuildOptions(import_paths=["./cmd/app"], verbose=True))
"""

from __future__ import annotations

from .detection import GoBinaryCache, go_bin
from .exceptions import (
    CommandError,
    GoBinaryNotFoundError,
    GoToolConfigError,
    GoToolError,
)
from .options import BuildOptions
from .runner import build, install, parse_affected, run_command

__version__ = "0.1.0"

__all__ = [
    # Options
    "BuildOptions",
    # Execution
    "run_command",
    "build",
    "install",
    "parse_affected",
    # Discovery
    "GoBinaryCache",
    "go_bin",
    # Exceptions
    "GoToolError",
    "GoBinaryNotFoundError",
    "GoToolConfigError",
    "CommandError",
]
