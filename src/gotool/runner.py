"""Run go toolchain commands and collect the import paths they touched."""

from __future__ import annotations

import logging
import subprocess

from .detection import GoBinaryCache, go_bin
from .exceptions import CommandError
from .options import BuildOptions

logger = logging.getLogger(__name__)


def parse_affected(stderr: bytes) -> list[str]:
    """Split go's stderr into import paths, dropping blank lines."""
    return [
        segment.decode("utf-8", errors="replace")
        for segment in stderr.split(b"\n")
        if segment
    ]


def run_command(
    options: BuildOptions,
    command: str,
    *,
    cache: GoBinaryCache | None = None,
) -> list[str]:
    """Run ``go <command>`` with ``options`` and return the affected paths.

    The call blocks until go exits. On success go reports the import
    paths it touched on stderr (``-v``), which is parsed into the result.

    Raises:
        GoBinaryNotFoundError: No ``go_bin`` set and go is not on PATH.
        CommandError: go exited non-zero or could not be started.
    """
    args = options.build_args(command)
    binary = go_bin(options.go_bin, cache)
    full_command = binary + " " + " ".join(args)
    logger.debug("Running %s", full_command)

    try:
        completed = subprocess.run(
            [binary, *args],
            capture_output=True,
            check=False,
        )
    except (OSError, ValueError) as exc:
        # ValueError: an argument contains a NUL byte
        logger.warning("Could not start %s: %s", full_command, exc)
        raise CommandError(full_command) from exc

    if completed.returncode != 0:
        logger.warning("%s exited with status %d", full_command, completed.returncode)
        raise CommandError(full_command, completed.stdout, completed.stderr)

    affected = parse_affected(completed.stderr)
    logger.info("go %s affected %d import path(s)", command, len(affected))
    return affected


def build(options: BuildOptions, *, cache: GoBinaryCache | None = None) -> list[str]:
    return run_command(options, "build", cache=cache)


def install(options: BuildOptions, *, cache: GoBinaryCache | None = None) -> list[str]:
    return run_command(options, "install", cache=cache)


__all__ = ["build", "install", "parse_affected", "run_command"]
