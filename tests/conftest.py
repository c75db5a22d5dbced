from __future__ import annotations

import json
import os
import stat
import sys
from pathlib import Path
from typing import Callable

import pytest

from gotool.detection import reset_go_bin_cache

FAKE_GO_TEMPLATE = """#!{python}
import json
import sys

with open({args_file!r}, "w", encoding="utf-8") as handle:
    json.dump(sys.argv[1:], handle)
sys.stdout.buffer.write({stdout!r})
sys.stderr.buffer.write({stderr!r})
sys.exit({exit_code})
"""


class FakeGo:
    """Executable stand-in for the go binary with scripted output."""

    def __init__(self, path: Path, args_file: Path):
        self.path = path
        self.args_file = args_file

    def __str__(self) -> str:
        return str(self.path)

    @property
    def received_args(self) -> list[str] | None:
        if not self.args_file.exists():
            return None
        return json.loads(self.args_file.read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def clear_go_bin_cache(monkeypatch):
    """Start every test with an empty go binary cache and no env override."""
    monkeypatch.delenv("GOTOOL_GO_BIN", raising=False)
    reset_go_bin_cache()
    yield
    reset_go_bin_cache()


@pytest.fixture()
def make_fake_go(tmp_path: Path) -> Callable[..., FakeGo]:
    if os.name == "nt":
        pytest.skip("fake go script relies on a shebang")

    def _make(
        *,
        exit_code: int = 0,
        stdout: bytes = b"",
        stderr: bytes = b"",
        name: str = "go",
    ) -> FakeGo:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        script = bin_dir / name
        args_file = tmp_path / f"{name}.args.json"
        script.write_text(
            FAKE_GO_TEMPLATE.format(
                python=sys.executable,
                args_file=str(args_file),
                stdout=stdout,
                stderr=stderr,
                exit_code=exit_code,
            ),
            encoding="utf-8",
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return FakeGo(script, args_file)

    return _make
