"""CLI module for the acunit test runner."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Sequence

from rich.console import Console
from rich.text import Text

from acunit.config import AcunitConfig, load_config
from acunit.errors import AcunitError
from acunit.reports.base import Reporter
from acunit.reports.console import ConsoleReporter
from acunit.reports.registry import resolve_reporters
from acunit.testing.discovery import collect
from acunit.testing.runner import Runner
from acunit.testing.suite import TestProcedure
from acunit.verbose import setup_logger

USAGE_ERROR = 2


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the acunit CLI."""
    console = Console(stderr=True, highlight=False, soft_wrap=True)
    try:
        config = load_config()
    except AcunitError as exc:
        console.print(Text(str(exc), style="red"))
        raise SystemExit(USAGE_ERROR) from exc

    parser = _build_parser()
    raw_args = list(argv) if argv is not None else sys.argv[1:]
    args = parser.parse_args([*config.addopts, *raw_args])

    raise SystemExit(_run_tests(args, config, console))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="acunit", description="Minimal sequential test runner")
    parser.add_argument("paths", nargs="*", help="Test files or directories")
    parser.add_argument("-k", "--keyword", help="Select tests by keyword expression")
    parser.add_argument(
        "-r",
        "--reporter",
        dest="reporters",
        action="append",
        help="Reporter name or import string (repeatable)",
    )
    parser.add_argument("-q", "--quiet", action="count", default=0, help="Reduce output")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase output")
    parser.add_argument("--log-level", help="Log level for harness diagnostics on stderr")
    return parser


def _resolve_paths(args: argparse.Namespace, config: AcunitConfig) -> list[str]:
    if args.paths:
        return args.paths
    return config.test_paths


def _resolve_keyword(args: argparse.Namespace, config: AcunitConfig) -> str | None:
    return args.keyword or config.keyword


def _resolve_verbosity(args: argparse.Namespace, config: AcunitConfig) -> int:
    return config.verbosity + args.verbose - args.quiet


def _resolve_reporters(
    args: argparse.Namespace,
    config: AcunitConfig,
    verbosity: int,
) -> list[Reporter]:
    """CLI reporters win over configured ones; ConsoleReporter gets the verbosity."""
    names = args.reporters or config.reporters or ["ConsoleReporter"]
    options = {name: dict(opts) for name, opts in config.reporter_options.items()}
    reporters = resolve_reporters(names, options)
    for name, reporter in zip(names, reporters):
        if isinstance(reporter, ConsoleReporter) and "verbosity" not in options.get(name, {}):
            reporter.verbosity = verbosity
    return reporters


def _collect_items(paths: Sequence[str]) -> list[TestProcedure]:
    items: list[TestProcedure] = []
    for path in paths:
        items.extend(collect(path))
    return items


def _filter_items(items: list[TestProcedure], keyword: str | None) -> list[TestProcedure]:
    if not keyword:
        return items
    matcher = KeywordMatcher(keyword)
    return [item for item in items if matcher.match(item.full_name)]


def _run_tests(args: argparse.Namespace, config: AcunitConfig, console: Console) -> int:
    verbosity = _resolve_verbosity(args, config)

    try:
        setup_logger(args.log_level or config.log_level)
        reporters = _resolve_reporters(args, config, verbosity)
        items = _collect_items(_resolve_paths(args, config))
        items = _filter_items(items, _resolve_keyword(args, config))
    except (AcunitError, ValueError, TypeError, ImportError) as exc:
        console.print(Text(str(exc), style="red"))
        return USAGE_ERROR

    if not items:
        for reporter in reporters:
            reporter.on_no_tests_found()
        return 0

    run_result = Runner(reporters=reporters).run(items)
    return run_result.exit_code


_KEYWORD_TOKEN = re.compile(r"\(|\)|[^\s()]+")
_OPERATORS = frozenset({"and", "or", "not"})

Predicate = Callable[[str], bool]


class KeywordMatcher:
    """Match test names against a ``-k`` expression.

    Words are substring tests on the full name. ``and``, ``or``, ``not`` and
    parentheses combine them, with ``not`` binding tightest and ``or`` loosest.
    """

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self._tokens = _KEYWORD_TOKEN.findall(expression)
        self._pos = 0
        self._predicate = self._expression()
        if self._pos < len(self._tokens):
            self._fail(f"unexpected {self._tokens[self._pos]!r}")

    def match(self, name: str) -> bool:
        return self._predicate(name)

    def _fail(self, reason: str) -> None:
        msg = f"Invalid keyword expression {self.expression!r}: {reason}"
        raise ValueError(msg)

    def _next_is(self, word: str) -> bool:
        return self._pos < len(self._tokens) and self._tokens[self._pos].lower() == word

    def _expression(self) -> Predicate:
        terms = [self._conjunction()]
        while self._next_is("or"):
            self._pos += 1
            terms.append(self._conjunction())
        if len(terms) == 1:
            return terms[0]
        return lambda name: any(term(name) for term in terms)

    def _conjunction(self) -> Predicate:
        factors = [self._negation()]
        while self._next_is("and"):
            self._pos += 1
            factors.append(self._negation())
        if len(factors) == 1:
            return factors[0]
        return lambda name: all(factor(name) for factor in factors)

    def _negation(self) -> Predicate:
        if self._next_is("not"):
            self._pos += 1
            inner = self._negation()
            return lambda name: not inner(name)
        return self._atom()

    def _atom(self) -> Predicate:
        if self._pos >= len(self._tokens):
            self._fail("unexpected end of expression")
        token = self._tokens[self._pos]
        self._pos += 1
        if token == "(":
            inner = self._expression()
            if not self._next_is(")"):
                self._fail("missing ')'")
            self._pos += 1
            return inner
        if token == ")" or token.lower() in _OPERATORS:
            self._fail(f"unexpected {token!r}")
        return lambda name: token in name


__all__ = ["KeywordMatcher", "main"]
