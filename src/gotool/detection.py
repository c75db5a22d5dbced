"""Go binary discovery.

The go binary is looked up on ``PATH`` once and remembered for the rest
of the process. Lookups are guarded by a lock so concurrent first calls
still perform a single lookup.

Usage:
    from gotool.detection import go_bin

    go_bin("")            # PATH lookup, cached
    go_bin("/opt/go/go")  # explicit override, returned as-is
"""

from __future__ import annotations

import logging
import shutil
import threading

from .exceptions import GoBinaryNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_TOOL_NAME = "go"


class GoBinaryCache:
    """Lazily resolved, never refreshed path to the go binary."""

    def __init__(self, tool_name: str = DEFAULT_TOOL_NAME) -> None:
        self.tool_name = tool_name
        self._path: str | None = None
        self._lock = threading.Lock()

    @property
    def cached(self) -> str | None:
        return self._path

    def resolve(self) -> str:
        """Return the cached path, looking it up on first use.

        Raises:
            GoBinaryNotFoundError: The tool is not on PATH.
        """
        if self._path is None:
            with self._lock:
                if self._path is None:
                    logger.debug("Looking up %s on PATH", self.tool_name)
                    found = shutil.which(self.tool_name)
                    if found is None:
                        raise GoBinaryNotFoundError(
                            f"Error finding go binary: {self.tool_name!r} not found in $PATH"
                        )
                    self._path = found
                    return found
        logger.debug("Using cached %s binary %s", self.tool_name, self._path)
        return self._path

    def reset(self) -> None:
        """Forget the cached path (for testing only)."""
        with self._lock:
            self._path = None


_default_cache = GoBinaryCache()


def default_cache() -> GoBinaryCache:
    """Return the process-wide cache used when callers pass none."""
    return _default_cache


def go_bin(explicit: str = "", cache: GoBinaryCache | None = None) -> str:
    """Return ``explicit`` if set, otherwise the cached PATH lookup."""
    if explicit:
        return explicit
    return (cache or _default_cache).resolve()


def reset_go_bin_cache() -> None:
    """Reset the process-wide cache (for testing only)."""
    _default_cache.reset()


__all__ = [
    "DEFAULT_TOOL_NAME",
    "GoBinaryCache",
    "default_cache",
    "go_bin",
    "reset_go_bin_cache",
]
