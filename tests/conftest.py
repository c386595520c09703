"""Shared pytest fixtures for the full Sorbet test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from loguru import logger

from sorbet.diagnostics import DiagnosticCollector

_SORBET_ENV_KEYS = (
    "SORBET_ENCODING",
    "SORBET_STRICT",
    "SORBET_SORT_KEYS",
    "SORBET_TRAILING_NEWLINE",
    "SORBET_VERBOSE",
)

SAMPLE_DOCUMENT = """name => sorbet
description => A minimal format
> with continuation lines
> for long values

owner => ops-team
"""


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear `SORBET_*` variables and restore loguru handlers around each test."""

    for key in _SORBET_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    logger.remove()
    logger.disable("sorbet")


@pytest.fixture
def collector() -> DiagnosticCollector:
    """Provide a fresh diagnostic collector."""

    return DiagnosticCollector()


@pytest.fixture
def sample_path(tmp_path: Path) -> Path:
    """Write the sample document to a temporary file and return its path."""

    path = tmp_path / "service.sorbet"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    return path
