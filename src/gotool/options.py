"""Build options and their translation into go command arguments."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any


@dataclass(slots=True)
class BuildOptions:
    """Flags for a single go build/install invocation.

    Every field is optional. An empty string, ``False``, ``0`` or an empty
    list means the matching flag is left off the command line.
    """

    go_bin: str = ""
    import_paths: list[str] = field(default_factory=list)
    output: str = ""
    force_all: bool = False
    parallel: int = 0
    compiler: str = ""
    gccgo_flags: str = ""
    gc_flags: str = ""
    ld_flags: str = ""
    tags: str = ""
    verbose: bool = False

    def build_args(self, command: str) -> list[str]:
        """Return the argument vector for ``go <command>``.

        Flag order is fixed so identical options always yield identical
        vectors; import paths come last in the order given.
        """
        args = [command]
        if self.output:
            args.extend(["-o", self.output])
        if self.force_all:
            args.append("-a")
        if self.parallel > 0:
            args.extend(["-p", str(self.parallel)])
        if self.compiler:
            args.extend(["-compiler", self.compiler])
        if self.gccgo_flags:
            args.extend(["-gccgoflags", self.gccgo_flags])
        if self.gc_flags:
            args.extend(["-gcflags", self.gc_flags])
        if self.ld_flags:
            args.extend(["-ldflags", self.ld_flags])
        if self.tags:
            args.extend(["-tags", self.tags])
        if self.verbose:
            args.append("-v")
        args.extend(self.import_paths)
        return args

    def merged(self, **overrides: Any) -> "BuildOptions":
        """Return a copy with every override that is not ``None`` applied.

        An explicit ``False``, ``0`` or ``""`` clears a value set earlier.
        """
        known = {f.name for f in fields(self)}
        changes = {key: value for key, value in overrides.items() if key in known and value is not None}
        return replace(self, **changes)

    def to_dict(self) -> dict[str, object]:
        """Return only the fields that are set."""
        payload: dict[str, object] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value:
                payload[f.name] = list(value) if isinstance(value, list) else value
        return payload

    @classmethod
    def from_dict(cls, data: dict[str, object] | None) -> "BuildOptions":
        if not isinstance(data, dict):
            return cls()

        def _str(key: str) -> str:
            value = data.get(key)
            return value.strip() if isinstance(value, str) else ""

        def _bool(key: str) -> bool:
            value = data.get(key)
            return value if isinstance(value, bool) else False

        parallel = data.get("parallel")
        if isinstance(parallel, bool) or not isinstance(parallel, int):
            parallel = 0

        import_paths = data.get("import_paths")
        if isinstance(import_paths, str):
            import_paths = [import_paths]
        if isinstance(import_paths, list):
            import_paths = [str(path).strip() for path in import_paths if str(path).strip()]
        else:
            import_paths = []

        return cls(
            go_bin=_str("go_bin"),
            import_paths=import_paths,
            output=_str("output"),
            force_all=_bool("force_all"),
            parallel=max(parallel, 0),
            compiler=_str("compiler"),
            gccgo_flags=_str("gccgo_flags"),
            gc_flags=_str("gc_flags"),
            ld_flags=_str("ld_flags"),
            tags=_str("tags"),
            verbose=_bool("verbose"),
        )


__all__ = ["BuildOptions"]
