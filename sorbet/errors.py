"""Domain exceptions for strict parsing and CLI diagnostics."""

from __future__ import annotations

from .models.datatypes import Diagnostic


class CommandError(RuntimeError):
    """Raised when a specific command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class SorbetSyntaxError(ValueError):
    """Raised by strict parsing when the input produced any diagnostic."""

    def __init__(self, diagnostics: tuple[Diagnostic, ...]) -> None:
        self.diagnostics = diagnostics
        lines = "; ".join(diagnostic.render() for diagnostic in diagnostics)
        super().__init__(f"{len(diagnostics)} diagnostic(s) reported: {lines}")
