"""Command-line interface for Sorbet.

Responsibilities:
- Expose commands to check, query, reformat, and convert Sorbet files.
- Resolve `SorbetConfig` from `--config`, environment, and CLI options.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from .cli_rendering import echo_parse_summary, exit_with_command_error
from .config import ConfigLoader, SorbetConfig
from .diagnostics import ConsoleDiagnosticSink, DiagnosticCollector, fan_out
from .errors import CommandError, SorbetSyntaxError
from .formatter import format_mapping, round_trip_problem
from .io.files import dump_file, load_file, read_text
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="sorbet",
    no_args_is_help=True,
    help="Sorbet CLI.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
StrictOption = Annotated[
    bool | None,
    typer.Option("--strict/--no-strict", help="Fail when any line is malformed."),
]
VerboseOption = Annotated[
    bool | None,
    typer.Option("--verbose/--no-verbose", help="Log command events and parser details."),
]


def _resolve_config(config_file: Path | None, **overrides: object) -> SorbetConfig:
    """Resolve effective config and map loader failures to stage errors."""

    try:
        return ConfigLoader.resolve(config_path=config_file, overrides=overrides)
    except FileNotFoundError as exc:
        raise CommandError(
            stage="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandError(
            stage="config",
            detail=f"Invalid configuration: {exc}",
            hint="Fix config file values or `SORBET_*` environment variables and rerun.",
        ) from exc


def _run_logger(config: SorbetConfig) -> RunLogger | None:
    """Create a run logger only for verbose invocations."""

    if not config.verbose:
        return None
    return RunLogger(level="DEBUG")


def _load_document(
    path: Path, config: SorbetConfig, strict: bool
) -> tuple[dict[str, str], DiagnosticCollector]:
    """Parse a file, echoing diagnostics to stderr and collecting them.

    Raises `SorbetSyntaxError` after parsing when `strict` is set and any
    diagnostic was reported.
    """

    collector = DiagnosticCollector()
    entries = load_file(
        path,
        sink=fan_out(collector, ConsoleDiagnosticSink()),
        encoding=config.encoding,
    )
    if strict and collector.has_errors:
        raise SorbetSyntaxError(tuple(collector.diagnostics))
    return entries, collector


def _fail(command_name: str, exc: Exception, run_logger: RunLogger | None) -> NoReturn:
    if run_logger is not None:
        run_logger.log_command_failure(command_name, type(exc).__name__)
    exit_with_command_error(command_name, exc)


@app.command("check")
def check_command(
    path: Annotated[Path, typer.Argument(help="Path to a Sorbet file.")],
    config_file: ConfigOption = None,
    verbose: VerboseOption = None,
) -> None:
    """Parse a file and report malformed lines; exit 1 if any were found."""

    run_logger = None
    try:
        config = _resolve_config(config_file, verbose=verbose)
        run_logger = _run_logger(config)
        if run_logger is not None:
            run_logger.log_command_start("check", path=path)
        entries, collector = _load_document(path, config, strict=False)
    except Exception as exc:
        _fail("check", exc, run_logger)

    echo_parse_summary(len(entries), len(collector.diagnostics))
    if run_logger is not None:
        run_logger.log_command_complete(
            "check", entries=len(entries), diagnostics=len(collector.diagnostics)
        )
    if collector.has_errors:
        raise typer.Exit(code=1)


@app.command("get")
def get_command(
    path: Annotated[Path, typer.Argument(help="Path to a Sorbet file.")],
    key: Annotated[str, typer.Argument(help="Key to look up.")],
    config_file: ConfigOption = None,
    strict: StrictOption = None,
    verbose: VerboseOption = None,
) -> None:
    """Print the value stored under one key."""

    run_logger = None
    try:
        config = _resolve_config(config_file, strict=strict, verbose=verbose)
        run_logger = _run_logger(config)
        if run_logger is not None:
            run_logger.log_command_start("get", path=path, key=key)
        entries, _ = _load_document(path, config, strict=config.strict)
        if key not in entries:
            raise CommandError(
                stage="lookup",
                detail=f"Key `{key}` not found in `{path}`.",
                hint=f"Available keys: {', '.join(entries) or '(none)'}.",
            )
    except Exception as exc:
        _fail("get", exc, run_logger)

    typer.echo(entries[key])
    if run_logger is not None:
        run_logger.log_command_complete("get", key=key)


@app.command("fmt")
def fmt_command(
    path: Annotated[Path, typer.Argument(help="Path to a Sorbet file.")],
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write formatted text here instead of stdout."),
    ] = None,
    sort_keys: Annotated[
        bool | None,
        typer.Option("--sort-keys/--no-sort-keys", help="Emit entries in sorted key order."),
    ] = None,
    config_file: ConfigOption = None,
    strict: StrictOption = None,
    verbose: VerboseOption = None,
) -> None:
    """Re-emit a file in canonical `key => value` form."""

    run_logger = None
    try:
        config = _resolve_config(
            config_file, strict=strict, verbose=verbose, sort_keys=sort_keys
        )
        run_logger = _run_logger(config)
        if run_logger is not None:
            run_logger.log_command_start("fmt", path=path)
        entries, _ = _load_document(path, config, strict=config.strict)
        if out is not None:
            dump_file(
                out,
                entries,
                encoding=config.encoding,
                sort_keys=config.sort_keys,
                trailing_newline=config.trailing_newline,
            )
    except Exception as exc:
        _fail("fmt", exc, run_logger)

    if out is None:
        typer.echo(format_mapping(entries, sort_keys=config.sort_keys))
    else:
        typer.echo(f"Written: {out}")
    if run_logger is not None:
        run_logger.log_command_complete("fmt", entries=len(entries))


@app.command("to-json")
def to_json_command(
    path: Annotated[Path, typer.Argument(help="Path to a Sorbet file.")],
    config_file: ConfigOption = None,
    strict: StrictOption = None,
    verbose: VerboseOption = None,
) -> None:
    """Print a Sorbet file as a JSON object."""

    run_logger = None
    try:
        config = _resolve_config(config_file, strict=strict, verbose=verbose)
        run_logger = _run_logger(config)
        if run_logger is not None:
            run_logger.log_command_start("to-json", path=path)
        entries, _ = _load_document(path, config, strict=config.strict)
    except Exception as exc:
        _fail("to-json", exc, run_logger)

    typer.echo(json.dumps(entries, ensure_ascii=False, indent=2))
    if run_logger is not None:
        run_logger.log_command_complete("to-json", entries=len(entries))


def _load_json_mapping(path: Path, encoding: str) -> dict[str, str]:
    """Read a JSON object whose values are all strings."""

    try:
        payload = json.loads(read_text(path, encoding=encoding))
    except json.JSONDecodeError as exc:
        raise CommandError(stage="json", detail=f"Invalid JSON in `{path}`: {exc}") from exc

    if not isinstance(payload, dict):
        raise CommandError(
            stage="json",
            detail=f"JSON document `{path}` must contain a top-level object.",
        )
    non_string = sorted(key for key, value in payload.items() if not isinstance(value, str))
    if non_string:
        raise CommandError(
            stage="json",
            detail=f"JSON values must be strings; offending key(s): {', '.join(non_string)}.",
            hint="Sorbet stores every value as text; quote numbers and booleans.",
        )
    problems = {
        key: problem
        for key in sorted(payload)
        if (problem := round_trip_problem(key, payload[key])) is not None
    }
    if problems:
        listing = "; ".join(f"{key!r}: {problem}" for key, problem in problems.items())
        raise CommandError(
            stage="json",
            detail=f"Entries would not read back unchanged: {listing}.",
            hint=(
                "Keys must be non-empty single lines without `=>`; values must not "
                "contain `=>` or whitespace around any line."
            ),
        )
    return payload


@app.command("from-json")
def from_json_command(
    path: Annotated[Path, typer.Argument(help="Path to a JSON object file.")],
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write Sorbet text here instead of stdout."),
    ] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = None,
) -> None:
    """Convert a JSON object of string values to Sorbet text."""

    run_logger = None
    try:
        config = _resolve_config(config_file, verbose=verbose)
        run_logger = _run_logger(config)
        if run_logger is not None:
            run_logger.log_command_start("from-json", path=path)
        entries = _load_json_mapping(path, config.encoding)
        if out is not None:
            dump_file(
                out,
                entries,
                encoding=config.encoding,
                sort_keys=config.sort_keys,
                trailing_newline=config.trailing_newline,
            )
    except Exception as exc:
        _fail("from-json", exc, run_logger)

    if out is None:
        typer.echo(format_mapping(entries, sort_keys=config.sort_keys))
    else:
        typer.echo(f"Written: {out}")
    if run_logger is not None:
        run_logger.log_command_complete("from-json", entries=len(entries))


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
