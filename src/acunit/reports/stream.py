"""Plain line-oriented reporters."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from acunit.reports.base import Reporter, format_summary_line, format_test_line

if TYPE_CHECKING:
    from acunit.assertions.base import Diagnostic
    from acunit.testing.result import RunResult, TestResult


class StreamReporter(Reporter):
    """Write plain report lines to a text stream.

    The stream defaults to ``sys.stdout``, looked up on every write so that
    redirection after construction is honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        self.stream.write(line + "\n")

    def on_assertion_failed(self, diagnostic: Diagnostic) -> None:
        self.write_line(diagnostic.render())

    def on_test_complete(self, result: TestResult) -> None:
        self.write_line(format_test_line(result))

    def on_run_complete(self, run_result: RunResult) -> None:
        self.write_line(format_summary_line(run_result))
        self.stream.flush()

    def on_no_tests_found(self) -> None:
        self.write_line("No tests found.")


class MemoryReporter(StreamReporter):
    """Keep report lines in memory, for testing the harness itself."""

    def __init__(self) -> None:
        super().__init__()
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def on_run_complete(self, run_result: RunResult) -> None:
        self.write_line(format_summary_line(run_result))

    def getvalue(self) -> str:
        return "".join(line + "\n" for line in self.lines)


__all__ = ["MemoryReporter", "StreamReporter"]
