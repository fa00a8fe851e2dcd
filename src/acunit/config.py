"""Project configuration from the ``[tool.acunit]`` table of ``pyproject.toml``."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from acunit.errors import ConfigError

logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"


@dataclass
class AcunitConfig:
    """Settings for the ``acunit`` command.

    Attributes
    ----------
    test_paths
        Files or directories searched when no path is given.
    keyword
        Default ``-k`` expression.
    reporters
        Reporter names or import strings.
    reporter_options
        Constructor keyword arguments per reporter name.
    verbosity
        Base verbosity, adjusted by ``-v`` / ``-q``.
    addopts
        Extra arguments prepended to the command line.
    log_level
        Level for the ``acunit`` logger.
    """

    test_paths: list[str] = field(default_factory=lambda: ["."])
    keyword: str | None = None
    reporters: list[str] = field(default_factory=lambda: ["ConsoleReporter"])
    reporter_options: dict[str, dict[str, Any]] = field(default_factory=dict)
    verbosity: int = 0
    addopts: list[str] = field(default_factory=list)
    log_level: str = "WARNING"


DEFAULT_CONFIG = AcunitConfig()


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


_VALIDATORS = {
    "test_paths": (_is_str_list, "a list of strings"),
    "keyword": (lambda v: v is None or isinstance(v, str), "a string"),
    "reporters": (_is_str_list, "a list of strings"),
    "reporter_options": (
        lambda v: isinstance(v, dict) and all(isinstance(o, dict) for o in v.values()),
        "a table of tables",
    ),
    "verbosity": (lambda v: isinstance(v, int) and not isinstance(v, bool), "an integer"),
    "addopts": (lambda v: isinstance(v, str) or _is_str_list(v), "a string or list of strings"),
    "log_level": (lambda v: isinstance(v, str), "a string"),
}


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest ``pyproject.toml`` at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT
        if candidate.is_file():
            return candidate
    return None


def parse_config(table: dict[str, Any]) -> AcunitConfig:
    """Build a config from a ``[tool.acunit]`` table, validating every key."""
    known = {f.name for f in fields(AcunitConfig)}
    unknown = sorted(set(table) - known)
    if unknown:
        msg = f"Unknown [tool.acunit] option(s): {', '.join(unknown)}"
        raise ConfigError(msg)

    values: dict[str, Any] = {}
    for key, value in table.items():
        is_valid, expected = _VALIDATORS[key]
        if not is_valid(value):
            msg = f"[tool.acunit] {key} must be {expected}, got {value!r}"
            raise ConfigError(msg)
        values[key] = value

    if isinstance(values.get("addopts"), str):
        values["addopts"] = values["addopts"].split()

    return AcunitConfig(**values)


def load_config(start: Path | None = None) -> AcunitConfig:
    """Load configuration from the nearest ``pyproject.toml``.

    Missing file or missing ``[tool.acunit]`` table yields the defaults.
    """
    path = find_pyproject(start)
    if path is None:
        return AcunitConfig()

    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Could not read {path}: {exc}"
        raise ConfigError(msg) from exc

    table = data.get("tool", {}).get("acunit")
    if table is None:
        return AcunitConfig()
    if not isinstance(table, dict):
        msg = f"[tool.acunit] in {path} must be a table"
        raise ConfigError(msg)

    logger.debug("Loaded configuration from %s", path)
    return parse_config(table)


__all__ = ["DEFAULT_CONFIG", "AcunitConfig", "find_pyproject", "load_config", "parse_config"]
