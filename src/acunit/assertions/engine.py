"""Assertion engine: checks that record failures instead of raising.

A failing check never raises. It reports a :class:`Diagnostic`, marks the
current test failed in the :class:`~acunit.state.RunState` and returns
:attr:`AssertionOutcome.FAIL`. The calling test procedure is expected to
return immediately::

    def acu_strings_differ(acu):
        if not acu.check("abc" != "def"):
            return

Helpers that perform checks are invoked through :meth:`AssertionEngine.guard`,
which re-checks the failure flag when the helper returns::

    def check_some_condition(acu):
        if not acu.check(a == b):
            return
        acu.check(a != c)

    def acu_no_fatal_failure(acu):
        if not acu.guard(check_some_condition, acu):
            return
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from acunit.assertions.base import AssertionOutcome, Diagnostic, SourceLocation
from acunit.assertions.source import capture_call_site

if TYPE_CHECKING:
    from acunit.reports.base import Reporter
    from acunit.state import RunState

logger = logging.getLogger(__name__)


class AssertionEngine:
    """Evaluates checks against a run's state and reports failures to a sink.

    Parameters
    ----------
    state:
        The run state mutated on failure. The engine has exclusive use of it
        for the duration of each call.
    sink:
        Reporter receiving one diagnostic per failing check.
    """

    def __init__(self, state: RunState, sink: Reporter) -> None:
        self.state = state
        self.sink = sink

    def evaluate(
        self,
        condition: object,
        location: SourceLocation,
        condition_text: str,
        message: str | None = None,
    ) -> AssertionOutcome:
        """Evaluate an already-located assertion.

        Passing conditions have no side effect. A failing condition emits a
        diagnostic, records the failure and returns ``FAIL``.
        """
        if condition:
            return AssertionOutcome.PASS

        diagnostic = Diagnostic(
            file=location.file,
            line=location.line,
            condition=condition_text,
            message=message,
        )
        self.sink.on_assertion_failed(diagnostic)
        self.state.record_failure()
        return AssertionOutcome.FAIL

    def check(
        self,
        condition: object,
        message: str | None = None,
        *,
        location: SourceLocation | None = None,
        condition_text: str | None = None,
    ) -> AssertionOutcome:
        """Assert ``condition``; on ``FAIL`` the caller must return at once.

        The location and condition text default to the calling line and the
        source of the first argument as written there.
        """
        passed = bool(condition)
        if passed:
            return AssertionOutcome.PASS

        if location is None or condition_text is None:
            site, text = capture_call_site(stacklevel=1)
            location = location or site
            condition_text = condition_text if condition_text is not None else text

        return self.evaluate(passed, location, condition_text, message)

    def guard(self, helper: Callable[..., Any], *args: Any, **kwargs: Any) -> AssertionOutcome:
        """Call a helper that may perform checks, then re-check the failure flag.

        Returns ``FAIL`` if the helper (or anything it delegated to) failed a
        check. No new diagnostic is emitted and no counter changes; the
        caller must return at once.
        """
        helper(*args, **kwargs)
        if self.state.has_failed():
            logger.debug("Guarded call to %s failed", getattr(helper, "__name__", helper))
            return AssertionOutcome.FAIL
        return AssertionOutcome.PASS

    def has_failed(self) -> bool:
        """Whether the current test has already failed."""
        return self.state.has_failed()


__all__ = ["AssertionEngine"]
