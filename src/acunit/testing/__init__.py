"""Test registration, discovery and the sequential run driver."""

from .discovery import collect
from .result import RunResult, TestResult, TestStatus
from .runner import Runner, run
from .suite import Suite, TestProcedure


__all__ = [
    "Suite",
    "TestProcedure",
    "collect",
    "Runner",
    "RunResult",
    "TestResult",
    "TestStatus",
    "run",
]
