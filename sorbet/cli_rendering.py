"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command failures
and parse summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import CommandError, SorbetSyntaxError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    elif isinstance(exc, SorbetSyntaxError):
        typer.secho(
            f"{command_name} failed at stage `parse`: "
            f"{len(exc.diagnostics)} malformed line(s).",
            fg=typer.colors.RED,
            err=True,
        )
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_parse_summary(entry_count: int, diagnostic_count: int) -> None:
    """Print entry and diagnostic counts for a parsed document."""

    typer.echo(f"Entries: {entry_count}")
    typer.echo(f"Diagnostics: {diagnostic_count}")
