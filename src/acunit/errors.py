"""Error types raised by acunit itself.

Assertion failures are not exceptions; see :mod:`acunit.assertions.engine`.
"""

from pathlib import Path


class AcunitError(Exception):
    """Base class for harness errors."""


class ConfigError(AcunitError):
    """Raised when the ``[tool.acunit]`` configuration is malformed."""


class CollectionError(AcunitError):
    """Raised when a test module cannot be imported."""

    def __init__(self, path: Path, cause: BaseException | None = None) -> None:
        self.path = path
        self.cause = cause

        message = f"Could not import test module: {path}"
        if cause:
            message += f"\nCause: {type(cause).__name__}: {cause}"

        super().__init__(message)


__all__ = ["AcunitError", "CollectionError", "ConfigError"]
