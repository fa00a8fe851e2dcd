"""Base reporter protocol for acunit output."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from acunit.assertions.base import Diagnostic
    from acunit.testing.result import RunResult, TestResult


@runtime_checkable
class Reporter(Protocol):
    """Protocol defining the interface for the reporting sink.

    Methods are synchronous: the harness runs one test at a time and writes
    each line as soon as it is known.
    """

    def on_assertion_failed(self, diagnostic: Diagnostic) -> None:
        """Called once per failing check, before the test procedure returns."""
        ...

    def on_test_complete(self, result: TestResult) -> None:
        """Called after each test procedure returns."""
        ...

    def on_run_complete(self, run_result: RunResult) -> None:
        """Called after all tests complete."""
        ...

    def on_no_tests_found(self) -> None:
        """Called when test selection finds no tests."""
        ...


class MultiReporter(Reporter):
    """Forward every event to several reporters, in order."""

    def __init__(self, reporters: Iterable[Reporter]) -> None:
        self.reporters = list(reporters)

    def on_assertion_failed(self, diagnostic: Diagnostic) -> None:
        for reporter in self.reporters:
            reporter.on_assertion_failed(diagnostic)

    def on_test_complete(self, result: TestResult) -> None:
        for reporter in self.reporters:
            reporter.on_test_complete(result)

    def on_run_complete(self, run_result: RunResult) -> None:
        for reporter in self.reporters:
            reporter.on_run_complete(run_result)

    def on_no_tests_found(self) -> None:
        for reporter in self.reporters:
            reporter.on_no_tests_found()


def format_test_line(result: TestResult) -> str:
    return f"{result.status.label}: {result.name}"


def format_summary_line(run_result: RunResult) -> str:
    summary = run_result.summary
    if summary.failed_count:
        return (
            f"Summary: FAILED: {summary.failed_count} failed out of "
            f"{summary.executed_count} test(s)"
        )
    return f"Summary: PASSED: {summary.executed_count} tests(s)"


__all__ = ["MultiReporter", "Reporter", "format_summary_line", "format_test_line"]
