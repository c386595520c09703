"""Input/output helpers for Sorbet documents on disk."""

from .files import dump_file, load_file, read_text

__all__ = ["dump_file", "load_file", "read_text"]
