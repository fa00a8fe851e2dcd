"""acunit - minimal sequential test harness.

Failing checks never raise: they report a diagnostic, mark the current test
failed and return an outcome that the test procedure acts on by returning.
"""

from .assertions import AssertionEngine, AssertionOutcome, Diagnostic, SourceLocation
from .reports import ConsoleReporter, MemoryReporter, Reporter, StreamReporter
from .state import RunState, RunSummary
from .testing import Runner, RunResult, Suite, TestProcedure, TestResult, TestStatus, collect, run
from .version import __version__


__all__ = [
    # Core
    "RunState",
    "RunSummary",
    "AssertionEngine",
    "AssertionOutcome",
    "Diagnostic",
    "SourceLocation",
    # Running
    "Suite",
    "TestProcedure",
    "Runner",
    "RunResult",
    "TestResult",
    "TestStatus",
    "collect",
    "run",
    # Reporting
    "Reporter",
    "StreamReporter",
    "MemoryReporter",
    "ConsoleReporter",
    "__version__",
]
