"""Build options stored in a project-level .gotool.yaml."""

from __future__ import annotations

import os
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .exceptions import GoToolConfigError
from .options import BuildOptions

CONFIG_FILENAME = ".gotool.yaml"
GO_BIN_ENV = "GOTOOL_GO_BIN"


def default_config_path(cwd: Path | None = None) -> Path:
    return (cwd or Path.cwd()) / CONFIG_FILENAME


def _read_payload(config_path: Path) -> dict:
    yaml = YAML()
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            payload = yaml.load(handle)
    except (OSError, YAMLError) as exc:
        raise GoToolConfigError(f"Failed to parse {config_path}: {exc}") from exc

    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise GoToolConfigError(f"{config_path} must contain a mapping, got {type(payload).__name__}")
    return payload


def load_options(config_path: Path, command: str | None = None) -> BuildOptions:
    """Load options from ``config_path``.

    Top-level keys form the base; a section named after ``command`` (for
    example ``build:``) is layered over them. A missing file yields empty
    options. ``GOTOOL_GO_BIN`` fills ``go_bin`` when the file leaves it
    unset.
    """
    payload = _read_payload(config_path) if config_path.exists() else {}

    base = {key: value for key, value in payload.items() if not isinstance(value, dict)}
    if command:
        section = payload.get(command)
        if isinstance(section, dict):
            base.update(section)

    options = BuildOptions.from_dict(base)
    if not options.go_bin:
        env_bin = os.environ.get(GO_BIN_ENV, "").strip()
        if env_bin:
            options.go_bin = env_bin
    return options


def save_options(config_path: Path, options: BuildOptions, command: str | None = None) -> None:
    """Write ``options`` into ``config_path``, preserving other sections."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    yaml = YAML()
    yaml.preserve_quotes = True

    payload = _read_payload(config_path) if config_path.exists() else {}

    if command:
        payload[command] = options.to_dict()
    else:
        payload = {key: value for key, value in payload.items() if isinstance(value, dict)}
        payload.update(options.to_dict())

    with config_path.open("w", encoding="utf-8") as handle:
        yaml.dump(payload, handle)


__all__ = [
    "CONFIG_FILENAME",
    "GO_BIN_ENV",
    "default_config_path",
    "load_options",
    "save_options",
]
