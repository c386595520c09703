"""Structured run logging utilities.

Responsibilities:
- Route `sorbet` loguru records to one text stream with deterministic formatting.
- Emit concise command-level runtime events for the CLI.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context pairs in sorted key order."""

    if not context:
        return ""
    return " " + " ".join(
        f"{key}={_sanitize_context_value(context[key])}" for key in sorted(context)
    )


class RunLogger:
    """Emit deterministic command logs and surface library debug records."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Configure a single loguru handler and enable `sorbet` records."""

        self._sink = sink or sys.stderr
        logger.remove()
        logger.add(self._sink, format="{message}", level=level, colorize=False)
        logger.enable("sorbet")

    def _emit(self, level: str, event: str, command: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        logger.log(
            level,
            f"[sorbet] level={level} command={command} event={event}{_format_context(context)}",
        )

    def log_command_start(self, command: str, **context: object) -> None:
        self._emit("INFO", "start", command, **context)

    def log_command_complete(self, command: str, **context: object) -> None:
        self._emit("INFO", "complete", command, **context)

    def log_command_failure(self, command: str, error_type: str) -> None:
        """Emit a failure event carrying only the exception type name."""

        self._emit("ERROR", "failure", command, error_type=error_type)
