"""
Tests for go binary discovery and the process-wide cache.
"""

import logging
import threading
import time
from unittest.mock import patch

import pytest

from gotool.detection import GoBinaryCache, default_cache, go_bin, reset_go_bin_cache
from gotool.exceptions import GoBinaryNotFoundError, GoToolError


class _CountingWhich:
    def __init__(self, result="/usr/local/go/bin/go", delay=0.0):
        self.result = result
        self.delay = delay
        self.calls = 0

    def __call__(self, name):
        self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        return self.result


class TestGoBin:
    def test_explicit_override_used_verbatim(self):
        with patch("gotool.detection.shutil.which") as which:
            assert go_bin("/custom/go") == "/custom/go"
            which.assert_not_called()
        assert default_cache().cached is None

    def test_lookup_is_cached(self):
        which = _CountingWhich()
        with patch("gotool.detection.shutil.which", which):
            assert go_bin() == "/usr/local/go/bin/go"
            assert go_bin("") == "/usr/local/go/bin/go"
        assert which.calls == 1

    def test_cache_not_refreshed_when_path_changes(self):
        with patch("gotool.detection.shutil.which", return_value="/first/go"):
            go_bin()
        with patch("gotool.detection.shutil.which", return_value="/second/go"):
            assert go_bin() == "/first/go"

    def test_missing_binary(self):
        with patch("gotool.detection.shutil.which", return_value=None):
            with pytest.raises(GoBinaryNotFoundError, match="Error finding go binary"):
                go_bin()
        assert default_cache().cached is None

    def test_not_found_is_gotool_error(self):
        assert issubclass(GoBinaryNotFoundError, GoToolError)

    def test_failed_lookup_retried_on_next_call(self):
        with patch("gotool.detection.shutil.which", return_value=None):
            with pytest.raises(GoBinaryNotFoundError):
                go_bin()
        with patch("gotool.detection.shutil.which", return_value="/usr/bin/go"):
            assert go_bin() == "/usr/bin/go"

    def test_reset(self):
        with patch("gotool.detection.shutil.which", return_value="/usr/bin/go"):
            go_bin()
        reset_go_bin_cache()
        assert default_cache().cached is None


class TestGoBinaryCache:
    def test_private_cache_independent_of_default(self):
        cache = GoBinaryCache()
        with patch("gotool.detection.shutil.which", return_value="/private/go"):
            assert go_bin("", cache) == "/private/go"
        assert default_cache().cached is None

    def test_custom_tool_name(self):
        cache = GoBinaryCache("go1.22")
        with patch("gotool.detection.shutil.which", return_value="/sdk/go1.22") as which:
            assert cache.resolve() == "/sdk/go1.22"
        which.assert_called_once_with("go1.22")

    def test_concurrent_first_calls_look_up_once(self):
        cache = GoBinaryCache()
        which = _CountingWhich(delay=0.05)
        results = []

        def _worker():
            results.append(cache.resolve())

        with patch("gotool.detection.shutil.which", which):
            threads = [threading.Thread(target=_worker) for _ in range(8)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        assert which.calls == 1
        assert results == ["/usr/local/go/bin/go"] * 8


class TestDetectionLogging:
    def test_lookup_then_cache_hit(self, caplog):
        caplog.set_level(logging.DEBUG, logger="gotool.detection")
        cache = GoBinaryCache()

        with patch("gotool.detection.shutil.which", return_value="/usr/bin/go"):
            cache.resolve()
            cache.resolve()

        records = [(r.levelno, r.getMessage()) for r in caplog.records if r.name == "gotool.detection"]
        assert records == [
            (logging.DEBUG, "Looking up go on PATH"),
            (logging.DEBUG, "Using cached go binary /usr/bin/go"),
        ]

    def test_explicit_override_logs_nothing(self, caplog):
        caplog.set_level(logging.DEBUG, logger="gotool.detection")

        go_bin("/custom/go")

        assert not [r for r in caplog.records if r.name == "gotool.detection"]
