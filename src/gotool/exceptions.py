"""Exception hierarchy for go toolchain invocations."""

from __future__ import annotations


class GoToolError(Exception):
    """Base exception for gotool errors."""

    pass


class GoBinaryNotFoundError(GoToolError):
    """Raised when no go binary is configured and none is found on PATH."""

    pass


class GoToolConfigError(GoToolError):
    """Raised when a gotool configuration file cannot be read."""

    pass


class CommandError(GoToolError):
    """A go command exited non-zero or could not be started.

    Keeps the exact command line and both captured streams so callers can
    render full diagnostics without re-running the command.
    """

    def __init__(self, full_command: str, stdout: bytes = b"", stderr: bytes = b""):
        self._full_command = full_command
        self._stdout = bytes(stdout)
        self._stderr = bytes(stderr)
        super().__init__(self._render())

    @property
    def full_command(self) -> str:
        return self._full_command

    @property
    def stdout(self) -> bytes:
        return self._stdout

    @property
    def stderr(self) -> bytes:
        return self._stderr

    def _render(self) -> str:
        err = self._stderr.decode("utf-8", errors="replace")
        out = self._stdout.strip().decode("utf-8", errors="replace")
        return f"error executing: {self._full_command}:\n{err}\n{out}"


__all__ = [
    "CommandError",
    "GoBinaryNotFoundError",
    "GoToolConfigError",
    "GoToolError",
]
