"""Recover the location and literal condition text of an assertion call.

``check(x == y)`` only receives the value of ``x == y``. To print the
condition the way it was written, the calling frame's source is re-read and
the first argument of the call expression is sliced out of it using the
instruction positions recorded by the interpreter.
"""

from __future__ import annotations

import ast
import inspect
import linecache
import logging
from pathlib import Path
from types import FrameType

from acunit.assertions.base import SourceLocation

logger = logging.getLogger(__name__)

UNKNOWN_CONDITION = "<unknown>"


def display_path(filename: str) -> str:
    """Return ``filename`` relative to the working directory when it lives under it."""
    try:
        return str(Path(filename).resolve().relative_to(Path.cwd().resolve()))
    except (OSError, ValueError):
        return filename


def _call_source(frame: FrameType) -> str | None:
    """Source text of the call expression currently executing in ``frame``."""
    positions = inspect.getframeinfo(frame, context=0).positions
    if positions is None:
        return None
    lineno, end_lineno, col, end_col = positions
    if lineno is None or end_lineno is None or col is None or end_col is None:
        return None

    lines = linecache.getlines(frame.f_code.co_filename, frame.f_globals)
    if not lines or end_lineno > len(lines):
        return None

    # Column offsets are UTF-8 byte offsets.
    chunk = [line.encode("utf-8") for line in lines[lineno - 1 : end_lineno]]
    if len(chunk) == 1:
        chunk[0] = chunk[0][col:end_col]
    else:
        chunk[0] = chunk[0][col:]
        chunk[-1] = chunk[-1][:end_col]
    return b"".join(chunk).decode("utf-8", errors="replace")


def condition_from_call(source: str) -> str | None:
    """Extract the first argument's text from a call expression's source.

    >>> condition_from_call("acu.check(x == y, 'msg')")
    'x == y'
    """
    try:
        tree = ast.parse(source.strip(), mode="eval")
    except SyntaxError:
        return None

    call = tree.body
    if not isinstance(call, ast.Call):
        return None

    if call.args:
        node: ast.expr | None = call.args[0]
    else:
        node = next((kw.value for kw in call.keywords if kw.arg == "condition"), None)
    if node is None:
        return None

    text = ast.get_source_segment(source.strip(), node)
    if text is None:
        return None
    return " ".join(text.split())


def capture_call_site(stacklevel: int = 1) -> tuple[SourceLocation, str]:
    """Location and condition text of the assertion call ``stacklevel`` frames up.

    ``stacklevel=1`` is the caller of the function calling this one, which
    is where the user wrote the check.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel + 1):
            if frame is None:
                break
            frame = frame.f_back

        if frame is None:
            logger.warning("No caller frame found for assertion")
            return SourceLocation(file="<unknown>", line=0), UNKNOWN_CONDITION

        location = SourceLocation(
            file=display_path(frame.f_code.co_filename),
            line=frame.f_lineno,
        )
        source = _call_source(frame)
        condition = condition_from_call(source) if source else None
        if condition is None:
            logger.debug("Condition text unavailable for %s", location)
            condition = UNKNOWN_CONDITION
        return location, condition
    finally:
        del frame


__all__ = [
    "UNKNOWN_CONDITION",
    "capture_call_site",
    "condition_from_call",
    "display_path",
]
