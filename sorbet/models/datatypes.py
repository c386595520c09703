"""Core datatypes shared across Sorbet modules.

Responsibilities:
- Represent diagnostics reported for malformed input lines.
- Hold the transient fold state threaded through one parse call.

Key types:
- `DiagnosticKind`, `Diagnostic`, and `ParseState`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DiagnosticKind(str, Enum):
    """Kinds of non-fatal malformed-input reports."""

    SYNTAX = "Syntax"
    SYNTAX_EXCEPTION = "SyntaxException"

    @property
    def label(self) -> str:
        """Human-readable prefix used when surfacing a diagnostic."""

        if self is DiagnosticKind.SYNTAX:
            return "Syntax Error"
        return "Syntax Exception"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A malformed-input report sent to a diagnostic sink.

    Attributes:
        kind: Diagnostic category.
        message: Free-text description including the offending line.
    """

    kind: DiagnosticKind
    message: str

    def render(self) -> str:
        """Return the operator-facing `<label>: <message>` line."""

        return f"{self.kind.label}: {self.message}"


@dataclass(slots=True)
class ParseState:
    """Fold state carried across lines during one parse call.

    Attributes:
        entries: Committed key/value pairs so far.
        current_key: Key whose value block is still open, or `None` before the
            first pair line and after a malformed one.
        value: Untrimmed value text accumulated for `current_key`.
    """

    entries: dict[str, str] = field(default_factory=dict)
    current_key: str | None = None
    value: str = ""

    def commit(self) -> None:
        """Store the open value block, if any, under its key."""

        if self.current_key is not None:
            self.entries[self.current_key] = self.value.strip()

    def begin(self, key: str, value: str) -> None:
        """Start a new value block for `key`."""

        self.current_key = key
        self.value = value

    def reset(self) -> None:
        """Drop the open value block without committing it."""

        self.current_key = None
        self.value = ""

    def append(self, text: str) -> None:
        """Append one continuation line to the open value block."""

        if self.value:
            self.value = f"{self.value}\n{text}"
        else:
            self.value = text
