"""Shared fixtures for unit tests."""

import pytest

from acunit.assertions.engine import AssertionEngine
from acunit.reports.base import Reporter
from acunit.reports.stream import MemoryReporter
from acunit.state import RunState


class NullReporter(Reporter):
    """Silent reporter for testing."""

    def on_assertion_failed(self, diagnostic) -> None:
        pass

    def on_test_complete(self, result) -> None:
        pass

    def on_run_complete(self, run_result) -> None:
        pass

    def on_no_tests_found(self) -> None:
        pass


@pytest.fixture
def null_reporter() -> NullReporter:
    """Provide a silent reporter for tests."""
    return NullReporter()


@pytest.fixture
def memory_reporter() -> MemoryReporter:
    """Provide a reporter that keeps every line in memory."""
    return MemoryReporter()


@pytest.fixture
def state() -> RunState:
    return RunState()


@pytest.fixture
def engine(state: RunState, memory_reporter: MemoryReporter) -> AssertionEngine:
    """Engine bound to a fresh state, reporting into ``memory_reporter``."""
    return AssertionEngine(state, memory_reporter)
