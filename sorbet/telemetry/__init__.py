"""Telemetry and observability helpers.

This package emits deterministic command events for CLI runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
