"""`gotool build` / `gotool install` commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, List, Optional

import typer

from gotool.cli.helpers import configure_logging, print_command_error, print_error
from gotool.config import default_config_path, load_options
from gotool.exceptions import CommandError, GoBinaryNotFoundError, GoToolConfigError
from gotool.options import BuildOptions
from gotool.runner import run_command


def _resolve_options(config: Optional[Path], command: str, **cli_values) -> BuildOptions:
    config_path = config or default_config_path()
    return load_options(config_path, command).merged(**cli_values)


def go_command(command: str) -> Callable[..., None]:
    """Create the typer callback for ``go <command>``.

    Options left off the command line keep their config file value; an
    explicit value, including ``--no-verbose`` or ``-p 0``, replaces it.
    """

    def _command(
        import_paths: Optional[List[str]] = typer.Argument(None, help="Import paths to pass to go"),
        go_bin: Optional[str] = typer.Option(None, "--go-bin", help="Path to the go binary (default: looked up on PATH)"),
        output: Optional[str] = typer.Option(
            None, "--output", "-o", help='Output file or directory (-o); "" clears the configured one'
        ),
        force_all: Optional[bool] = typer.Option(
            None, "--force-all/--no-force-all", "-a", help="Force rebuilding of packages (-a)"
        ),
        parallel: Optional[int] = typer.Option(
            None, "--parallel", "-p", min=0, help="Number of parallel builds (-p); 0 leaves it to go"
        ),
        compiler: Optional[str] = typer.Option(None, "--compiler", help="Compiler name, gc or gccgo (-compiler)"),
        gccgo_flags: Optional[str] = typer.Option(None, "--gccgoflags", help="Arguments for gccgo (-gccgoflags)"),
        gc_flags: Optional[str] = typer.Option(None, "--gcflags", help="Arguments for the gc compiler (-gcflags)"),
        ld_flags: Optional[str] = typer.Option(None, "--ldflags", help="Arguments for the linker (-ldflags)"),
        tags: Optional[str] = typer.Option(None, "--tags", help="Build tags (-tags)"),
        verbose: Optional[bool] = typer.Option(
            None, "--verbose/--no-verbose", "-v", help="Ask go to list affected packages (-v)"
        ),
        config: Optional[Path] = typer.Option(None, "--config", help="Options file (default: ./.gotool.yaml)"),
        dry_run: bool = typer.Option(False, "--dry-run", help="Print the go command line without running it"),
        json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
        debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    ) -> None:
        configure_logging(debug)
        try:
            options = _resolve_options(
                config,
                command,
                go_bin=go_bin,
                import_paths=list(import_paths) if import_paths else None,
                output=output,
                force_all=force_all,
                parallel=parallel,
                compiler=compiler,
                gccgo_flags=gccgo_flags,
                gc_flags=gc_flags,
                ld_flags=ld_flags,
                tags=tags,
                verbose=verbose,
            )
        except GoToolConfigError as exc:
            print_error(exc)
            raise typer.Exit(1) from exc

        args = options.build_args(command)
        if dry_run:
            if json_output:
                typer.echo(json.dumps({"go_bin": options.go_bin or None, "args": args}, indent=2))
            else:
                typer.echo(" ".join([options.go_bin or "go", *args]))
            return

        try:
            affected = run_command(options, command)
        except GoBinaryNotFoundError as exc:
            print_error(exc)
            raise typer.Exit(1) from exc
        except CommandError as exc:
            if json_output:
                typer.echo(
                    json.dumps(
                        {
                            "command": exc.full_command,
                            "error": True,
                            "stdout": exc.stdout.decode("utf-8", errors="replace"),
                            "stderr": exc.stderr.decode("utf-8", errors="replace"),
                        },
                        indent=2,
                    )
                )
            else:
                print_command_error(exc)
            raise typer.Exit(1) from exc

        if json_output:
            typer.echo(json.dumps({"command": command, "affected": affected}, indent=2))
            return
        for import_path in affected:
            typer.echo(import_path)

    _command.__name__ = f"{command}_command"
    _command.__doc__ = f"Run `go {command}` and list the import paths it reports as affected."
    return _command


build_command = go_command("build")
install_command = go_command("install")


__all__ = ["build_command", "go_command", "install_command"]
