"""Reporting module for acunit output."""

from acunit.reports.base import MultiReporter, Reporter
from acunit.reports.console import ConsoleReporter
from acunit.reports.registry import (
    get_reporter_registry,
    register_builtin,
    reporter,
    resolve_reporter,
    resolve_reporters,
)
from acunit.reports.stream import MemoryReporter, StreamReporter

register_builtin(ConsoleReporter)
register_builtin(StreamReporter)
register_builtin(MemoryReporter)

__all__ = [
    "ConsoleReporter",
    "MemoryReporter",
    "MultiReporter",
    "Reporter",
    "StreamReporter",
    "get_reporter_registry",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
