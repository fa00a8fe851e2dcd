"""Tests for acunit.testing.suite."""

import pytest

from acunit.testing.suite import Suite, TestProcedure


def make_suite() -> Suite:
    suite = Suite("sample")

    @suite.test
    def second_declared_first(acu):
        acu.check(True)

    @suite.test(name="renamed")
    def registered_under_other_name(acu):
        acu.check(True)

    @suite.test
    def fails(acu):
        if not acu.check(3 == 4):
            return

    return suite


class TestRegistration:
    def test_declaration_order_is_kept(self):
        suite = make_suite()

        assert [p.name for p in suite] == ["second_declared_first", "renamed", "fails"]
        assert len(suite) == 3

    def test_decorator_returns_function(self):
        suite = Suite()

        def sample(acu):
            pass

        assert suite.test(sample) is sample

    def test_add_returns_procedure(self):
        suite = Suite()

        def sample(acu):
            pass

        procedure = suite.add(sample, name="explicit")

        assert procedure == TestProcedure(name="explicit", fn=sample)
        assert procedure.full_name == "explicit"

    def test_procedures_is_a_copy(self):
        suite = make_suite()

        suite.procedures.clear()

        assert len(suite) == 3


class TestSuiteRun:
    def test_run_reports_each_test(self, memory_reporter):
        result = make_suite().run(reporters=[memory_reporter])

        assert result.summary == (1, 3)
        lines = memory_reporter.lines
        assert lines[:2] == ["PASSED: second_declared_first", "PASSED: renamed"]
        assert lines[2].endswith("Assertion failed: [3 == 4] is false")
        assert lines[3:] == [
            "FAILED: fails",
            "Summary: FAILED: 1 failed out of 3 test(s)",
        ]

    def test_main_exits_non_zero_on_failure(self, memory_reporter):
        with pytest.raises(SystemExit) as exc_info:
            make_suite().main(reporters=[memory_reporter])

        assert exc_info.value.code == 1

    def test_main_exits_zero_on_success(self, memory_reporter):
        suite = Suite()
        suite.add(lambda acu: acu.check(True), name="ok")

        with pytest.raises(SystemExit) as exc_info:
            suite.main(reporters=[memory_reporter])

        assert exc_info.value.code == 0

    def test_each_run_starts_fresh(self, null_reporter):
        suite = make_suite()

        suite.run(reporters=[null_reporter])
        result = suite.run(reporters=[null_reporter])

        assert result.summary == (1, 3)
