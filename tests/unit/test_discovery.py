"""Tests for acunit.testing.discovery."""

import sys
import textwrap
from pathlib import Path

import pytest

from acunit.errors import CollectionError
from acunit.testing.discovery import collect
from acunit.testing.runner import run


def write(path: Path, source: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(source))
    return path


SIMPLE = """
from os.path import join as acu_imported


def acu_zeta(acu):
    acu.check(1 == 1)


def helper(acu):
    acu.check(True)


def acu_alpha(acu):
    if not acu.check(3 == 4):
        return
"""

WITH_SUITE = """
from acunit import Suite

suite = Suite("s")


@suite.test
def first(acu):
    acu.check(True)


@suite.test
def acu_second(acu):
    acu.check(True)


def acu_third(acu):
    acu.check(True)
"""


class TestCollect:
    def test_collects_functions_in_definition_order(self, tmp_path):
        path = write(tmp_path / "acu_simple.py", SIMPLE)

        procedures = collect(path)

        assert [p.name for p in procedures] == ["acu_zeta", "acu_alpha"]
        assert procedures[0].full_name == "acu_simple::acu_zeta"
        assert procedures[0].module_path == path.resolve()

    def test_suite_procedures_are_collected_once(self, tmp_path):
        path = write(tmp_path / "acu_suite.py", WITH_SUITE)

        procedures = collect(path)

        assert [p.name for p in procedures] == ["first", "acu_second", "acu_third"]

    def test_directory_search_uses_file_pattern(self, tmp_path):
        write(tmp_path / "b" / "acu_b.py", "def acu_b(acu):\n    pass\n")
        write(tmp_path / "a" / "acu_a.py", "def acu_a(acu):\n    pass\n")
        write(tmp_path / "other.py", "def acu_other(acu):\n    pass\n")

        procedures = collect(tmp_path)

        assert [p.name for p in procedures] == ["acu_a", "acu_b"]

    def test_explicit_file_needs_no_prefix(self, tmp_path):
        path = write(tmp_path / "checks.py", "def acu_x(acu):\n    pass\n")

        assert [p.name for p in collect(str(path))] == ["acu_x"]

    def test_missing_path_collects_nothing(self, tmp_path):
        assert collect(tmp_path / "missing") == []

    def test_import_error_raises_collection_error(self, tmp_path):
        path = write(tmp_path / "acu_broken.py", "raise RuntimeError('nope')\n")

        with pytest.raises(CollectionError) as exc_info:
            collect(path)

        assert exc_info.value.path == path.resolve()
        assert "nope" in str(exc_info.value)

    def test_collected_procedures_run(self, tmp_path, memory_reporter):
        path = write(tmp_path / "acu_simple.py", SIMPLE)

        result = run(collect(path), reporters=[memory_reporter])

        assert result.summary == (1, 2)
        lines = memory_reporter.lines
        assert lines[0] == "PASSED: acu_zeta"
        assert lines[1].endswith("Assertion failed: [3 == 4] is false")
        assert lines[2:] == [
            "FAILED: acu_alpha",
            "Summary: FAILED: 1 failed out of 2 test(s)",
        ]

    def test_recollecting_reuses_module_name(self, tmp_path):
        path = write(tmp_path / "acu_simple.py", SIMPLE)

        first = collect(path)
        second = collect(path)

        assert first[0].fn.__module__ == second[0].fn.__module__
        loaded = [name for name in sys.modules if name.startswith("_acunit_acu_simple_")]
        assert loaded.count(first[0].fn.__module__) == 1
        same_file = [n for n in loaded if Path(sys.modules[n].__file__).resolve() == path.resolve()]
        assert len(same_file) == 1
