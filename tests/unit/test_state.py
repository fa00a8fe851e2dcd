"""Tests for acunit.state."""

from acunit.state import RunState, RunSummary


class TestRunState:
    def test_starts_empty(self):
        state = RunState()

        assert state.has_failed() is False
        assert state.summary() == RunSummary(failed_count=0, executed_count=0)

    def test_record_failure_sets_flag_and_counts(self):
        state = RunState()
        state.begin_test()

        state.record_failure()

        assert state.has_failed() is True
        assert state.failed_count == 1

    def test_begin_test_resets_flag_but_not_counters(self):
        state = RunState()
        state.begin_test()
        state.record_failure()
        state.end_test()

        state.begin_test()

        assert state.has_failed() is False
        assert state.failed_count == 1
        assert state.executed_count == 1

    def test_end_test_counts_regardless_of_outcome(self):
        state = RunState()

        state.begin_test()
        state.end_test()
        state.begin_test()
        state.record_failure()
        state.end_test()

        assert state.executed_count == 2

    def test_failed_count_counts_assertions_not_tests(self):
        state = RunState()
        state.begin_test()
        state.record_failure()
        state.record_failure()
        state.end_test()

        assert state.summary().failed_count == 2
        assert state.summary().executed_count == 1

    def test_summary_is_idempotent(self):
        state = RunState()
        state.begin_test()
        state.record_failure()
        state.end_test()

        first = state.summary()
        second = state.summary()

        assert first == second
        assert state.failed_count == 1
        assert state.executed_count == 1


class TestRunSummary:
    def test_unpacks_as_pair(self):
        failed, executed = RunSummary(failed_count=1, executed_count=3)

        assert (failed, executed) == (1, 3)

    def test_success_signal(self):
        summary = RunSummary(failed_count=0, executed_count=2)

        assert summary.succeeded
        assert summary.exit_code == 0

    def test_failure_signal(self):
        summary = RunSummary(failed_count=1, executed_count=2)

        assert not summary.succeeded
        assert summary.exit_code == 1
