"""Diagnostic sinks that receive malformed-input reports from the parser.

Responsibilities:
- Define the sink contract: any callable accepting one `Diagnostic`.
- Provide console, collecting, and loguru-forwarding sink implementations.

Sinks are fire-and-forget from the parser's perspective: delivery goes through
`deliver`, which logs and contains sink failures, so sinks never change
parsing results.
"""

from __future__ import annotations

from typing import Callable, TextIO

import typer
from loguru import logger

from .models.datatypes import Diagnostic, DiagnosticKind

DiagnosticSink = Callable[[Diagnostic], None]


class ConsoleDiagnosticSink:
    """Print kind-prefixed diagnostic lines to a text stream (stderr by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def __call__(self, diagnostic: Diagnostic) -> None:
        typer.echo(diagnostic.render(), file=self._stream, err=True)


class DiagnosticCollector:
    """Record every reported diagnostic for later inspection.

    Wrapping parsing with a collector is the way to treat any diagnostic as a
    soft failure signal without changing parse results.
    """

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    @property
    def has_errors(self) -> bool:
        """Whether at least one diagnostic was recorded."""

        return bool(self.diagnostics)

    def count(self, kind: DiagnosticKind) -> int:
        """Return how many recorded diagnostics have the given kind."""

        return sum(1 for diagnostic in self.diagnostics if diagnostic.kind is kind)

    def clear(self) -> None:
        """Forget all recorded diagnostics."""

        self.diagnostics.clear()


class LoggingDiagnosticSink:
    """Forward diagnostics to loguru as warnings."""

    def __call__(self, diagnostic: Diagnostic) -> None:
        logger.bind(kind=diagnostic.kind.value).warning(diagnostic.render())


def deliver(sink: DiagnosticSink, diagnostic: Diagnostic) -> None:
    """Report one diagnostic; a failing sink is logged and never propagates."""

    try:
        sink(diagnostic)
    except Exception:
        logger.opt(exception=True).error(
            "diagnostic sink {!r} failed on kind={}", sink, diagnostic.kind.value
        )


def fan_out(*sinks: DiagnosticSink) -> DiagnosticSink:
    """Return a sink that reports each diagnostic to every given sink in order.

    A sink that raises does not prevent delivery to the sinks after it.
    """

    def _report(diagnostic: Diagnostic) -> None:
        for sink in sinks:
            deliver(sink, diagnostic)

    return _report
