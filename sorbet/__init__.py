"""Top-level package for Sorbet.

Sorbet is a line-oriented `key => value` text format with `> ` continuation
lines for multi-line values. The main entry points are `parse`,
`format_pair`, and `format_mapping`.
"""

from loguru import logger

from .diagnostics import (
    ConsoleDiagnosticSink,
    DiagnosticCollector,
    DiagnosticSink,
    LoggingDiagnosticSink,
)
from .errors import CommandError, SorbetSyntaxError
from .formatter import format_mapping, format_pair
from .io.files import dump_file, load_file
from .models.datatypes import Diagnostic, DiagnosticKind
from .parser import parse, parse_strict

logger.disable("sorbet")

__all__ = [
    "CommandError",
    "ConsoleDiagnosticSink",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticKind",
    "DiagnosticSink",
    "LoggingDiagnosticSink",
    "SorbetSyntaxError",
    "__version__",
    "dump_file",
    "format_mapping",
    "format_pair",
    "load_file",
    "parse",
    "parse_strict",
]

__version__ = "0.1.0"
