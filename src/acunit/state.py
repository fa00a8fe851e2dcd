"""Run-scoped counters and the current test's failure flag."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple

logger = logging.getLogger(__name__)


class RunSummary(NamedTuple):
    """Snapshot of a run's counters.

    Attributes
    ----------
    failed_count
        Number of failing assertions observed across the run.
    executed_count
        Number of test procedures that completed.
    """

    failed_count: int
    executed_count: int

    @property
    def succeeded(self) -> bool:
        return self.failed_count == 0

    @property
    def exit_code(self) -> int:
        """Process exit status: non-zero iff any assertion failed."""
        return 0 if self.succeeded else 1


@dataclass(slots=True)
class RunState:
    """Mutable state for a single run.

    One instance lives for the whole run and is owned by the driver. It is
    not thread-safe: tests execute one at a time.

    Attributes
    ----------
    failed_flag
        Whether the currently executing test has failed. Reset by
        :meth:`begin_test`, so it is only meaningful while a test runs.
    executed_count
        Number of test procedures that have completed.
    failed_count
        Cumulative number of failing assertions, not failed tests.
    """

    failed_flag: bool = False
    executed_count: int = 0
    failed_count: int = 0

    def begin_test(self) -> None:
        """Reset the failure flag. Call before invoking a test procedure."""
        self.failed_flag = False

    def record_failure(self) -> None:
        """Mark the current test failed and count one assertion failure."""
        self.failed_flag = True
        self.failed_count += 1
        logger.debug("Assertion failure recorded (total=%d)", self.failed_count)

    def end_test(self) -> None:
        """Count a completed test procedure, whatever its outcome."""
        self.executed_count += 1

    def has_failed(self) -> bool:
        return self.failed_flag

    def summary(self) -> RunSummary:
        return RunSummary(
            failed_count=self.failed_count,
            executed_count=self.executed_count,
        )


__all__ = ["RunState", "RunSummary"]
