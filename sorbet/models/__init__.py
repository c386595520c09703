"""Shared typed data models for Sorbet.

This package contains the diagnostic records and parse state used by the
parser, the sinks, and the CLI.
"""

from .datatypes import Diagnostic, DiagnosticKind, ParseState

__all__ = ["Diagnostic", "DiagnosticKind", "ParseState"]
