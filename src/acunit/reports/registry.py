"""Lookup of reporters by name for the CLI and ``[tool.acunit]`` settings.

A reporter is named either by its registered name (``StreamReporter``) or by
an import string (``package.module:ClassName`` or ``package.module.ClassName``).
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from acunit.reports.base import Reporter


logger = logging.getLogger(__name__)

R = TypeVar("R", bound="type[Reporter]")

_registered: dict[str, type[Reporter]] = {}
_builtins: dict[str, type[Reporter]] = {}


def reporter(cls: R | None = None, *, name: str | None = None) -> R | Any:
    """Class decorator making a reporter selectable with ``-r NAME``.

        @reporter
        class JsonReporter: ...

        @reporter(name="json")
        class JsonReporter: ...
    """

    def register(target: R) -> R:
        _registered[name or target.__name__] = target
        return target

    if cls is None:
        return register
    return register(cls)


def register_builtin(cls: R) -> R:
    """Register a reporter shipped with acunit; it survives :func:`clear_reporter_registry`."""
    _builtins[cls.__name__] = cls
    _registered[cls.__name__] = cls
    return cls


def get_reporter_registry() -> dict[str, type[Reporter]]:
    return _registered


def clear_reporter_registry() -> None:
    """Forget user-registered reporters."""
    _registered.clear()
    _registered.update(_builtins)


def _split_import_string(target: str) -> tuple[str, str]:
    separator = ":" if ":" in target else "."
    module_name, _, attribute = target.rpartition(separator)
    if not module_name or not attribute:
        msg = f"Invalid import path: {target}"
        raise ValueError(msg)
    return module_name, attribute


def _load_reporter_class(target: str) -> type[Reporter]:
    from acunit.reports.base import Reporter

    module_name, attribute = _split_import_string(target)
    module = importlib.import_module(module_name)
    cls = getattr(module, attribute, None)
    if cls is None:
        msg = f"Module {module_name!r} has no attribute {attribute!r}"
        raise ValueError(msg)
    if not isinstance(cls, type) or not issubclass(cls, Reporter):
        msg = f"{target} is not a Reporter subclass"
        raise TypeError(msg)
    logger.debug("Loaded reporter %s from %s", attribute, module_name)
    return cls


def resolve_reporter(name: str, **options: Any) -> Reporter:
    """Instantiate the reporter called ``name`` with ``options`` as keyword arguments.

    Raises:
        ValueError: If ``name`` is neither registered nor an import string.
        TypeError: If the import string names something that is not a reporter.
    """
    cls = _registered.get(name)
    if cls is None:
        if ":" not in name and "." not in name:
            available = ", ".join(sorted(_registered))
            msg = f"Unknown reporter: {name}. Available: {available}"
            raise ValueError(msg)
        cls = _load_reporter_class(name)
    return cls(**options)


def resolve_reporters(
    names: Iterable[str],
    options: Mapping[str, Mapping[str, Any]] | None = None,
) -> list[Reporter]:
    """Instantiate each named reporter in order, with its options from ``options``."""
    options = options or {}
    return [resolve_reporter(name, **options.get(name, {})) for name in names]


__all__ = [
    "clear_reporter_registry",
    "get_reporter_registry",
    "register_builtin",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
