"""Rich console reporter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

from acunit.reports.base import Reporter, format_summary_line
from acunit.testing.result import TestStatus

if TYPE_CHECKING:
    from acunit.assertions.base import Diagnostic
    from acunit.testing.result import RunResult, TestResult


_STATUS_STYLES = {
    TestStatus.PASSED: "green",
    TestStatus.FAILED: "bold red",
}


class ConsoleReporter(Reporter):
    """Print report lines to a rich console, coloured by outcome.

    The text of every line is the same as :class:`StreamReporter` writes.

    Args:
        verbosity: Below zero, PASSED lines are hidden. Above zero, each test
            line is followed by its duration.
        console: Console to print to. Defaults to a stdout console.
    """

    def __init__(self, verbosity: int = 0, console: Console | None = None) -> None:
        self.verbosity = verbosity
        self.console = console or Console(highlight=False, soft_wrap=True)

    def on_assertion_failed(self, diagnostic: Diagnostic) -> None:
        self.console.print(Text(diagnostic.render(), style="red"))

    def on_test_complete(self, result: TestResult) -> None:
        if self.verbosity < 0 and result.status is TestStatus.PASSED:
            return
        line = Text.assemble(
            (result.status.label, _STATUS_STYLES[result.status]),
            f": {result.name}",
        )
        if self.verbosity > 0:
            line.append(f" ({result.duration_ms:.2f} ms)", style="dim")
        self.console.print(line)

    def on_run_complete(self, run_result: RunResult) -> None:
        style = "bold green" if run_result.succeeded else "bold red"
        self.console.print(Text(format_summary_line(run_result), style=style))

    def on_no_tests_found(self) -> None:
        self.console.print(Text("No tests found.", style="yellow"))


__all__ = ["ConsoleReporter"]
