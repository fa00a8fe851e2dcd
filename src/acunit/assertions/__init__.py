"""Assertion engine and result types."""

from .base import AssertionOutcome, Diagnostic, SourceLocation
from .engine import AssertionEngine


__all__ = [
    "AssertionEngine",
    "AssertionOutcome",
    "Diagnostic",
    "SourceLocation",
]
