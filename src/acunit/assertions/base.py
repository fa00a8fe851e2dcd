"""Assertion outcome and diagnostic types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """File name and line number of an assertion call."""

    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


class AssertionOutcome(Enum):
    """Result of a single check or guarded call.

    Truthy on ``PASS`` so test procedures can write::

        if not acu.check(x == y):
            return
    """

    PASS = "pass"
    FAIL = "fail"

    def __bool__(self) -> bool:
        return self is AssertionOutcome.PASS

    @property
    def passed(self) -> bool:
        return self is AssertionOutcome.PASS


class Diagnostic(BaseModel):
    """Description of a failed assertion, handed to the reporting sink.

    Attributes:
    ----------
    file: str
        Source file of the failing call, as shown to the user
    line: int
        Line number of the failing call
    condition: str
        Literal source text of the asserted condition
    message: str | None
        Optional human-readable message supplied by the test
    """

    file: str
    line: int
    condition: str
    message: str | None = None

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(file=self.file, line=self.line)

    def render(self) -> str:
        """Format as ``<file>:<line>: Assertion failed: [<condition>] is false``.

        The format matches compiler error messages, which editors such as
        vim recognise for jumping to the failing line.
        """
        text = f"{self.file}:{self.line}: Assertion failed: [{self.condition}] is false"
        if self.message is not None:
            text += f": {self.message}"
        return text

    def __str__(self) -> str:
        return self.render()


__all__ = ["AssertionOutcome", "Diagnostic", "SourceLocation"]
