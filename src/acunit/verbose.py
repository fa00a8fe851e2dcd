"""Logging configuration for the acunit logger."""

from __future__ import annotations

import logging
import sys
from typing import TextIO


def setup_logger(
    level: int | str = logging.WARNING,
    stream: TextIO | None = None,
    logger_name: str = "acunit",
) -> logging.Logger:
    """
    Configure and return the harness logger.

    Log records go to ``stream`` (stderr by default), never to the report
    stream. Calling this again replaces the previous handler.

    Args:
        level: Logging level name or number.
        stream: Destination for log records.
        logger_name: Name of the logger to configure.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Clear any existing handlers for this specific logger
    logger.handlers.clear()

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger.disabled = False
    logger.setLevel(level)
    logger.propagate = False

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


__all__ = ["setup_logger"]
