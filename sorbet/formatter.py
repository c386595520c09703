"""Sorbet text formatter.

Emits text that `sorbet.parser.parse` reads back to the same mapping for
values without surrounding whitespace.
"""

from __future__ import annotations

from typing import Mapping


def format_pair(key: str, value: str) -> str:
    """Format one entry, spilling extra value lines into `> ` continuations."""

    if "\n" not in value:
        return f"{key} => {value}"

    lines = value.split("\n")
    if not lines:
        return f"{key} => "
    first, *rest = lines
    return "\n".join([f"{key} => {first}", *(f"> {line}" for line in rest)])


def format_mapping(mapping: Mapping[str, str], *, sort_keys: bool = False) -> str:
    """Format every entry in iteration order (or sorted key order), newline-joined.

    No trailing newline is appended.
    """

    keys = sorted(mapping) if sort_keys else list(mapping)
    return "\n".join(format_pair(key, mapping[key]) for key in keys)


def round_trip_problem(key: str, value: str) -> str | None:
    """Describe why an entry would not parse back unchanged, or return `None`.

    The parser strips keys, values and every continuation line, and treats
    any `=>` as a separator, so entries relying on either are rejected.
    """

    if not key.strip():
        return "key is empty"
    if "\n" in key or "=>" in key:
        return "key contains a line break or `=>`"
    if key != key.strip():
        return "key has surrounding whitespace"
    if "=>" in value:
        return "value contains `=>`"
    if value != value.strip():
        return "value has surrounding whitespace or blank lines"
    if any(line != line.strip() for line in value.split("\n")):
        return "a value line has surrounding whitespace"
    return None
