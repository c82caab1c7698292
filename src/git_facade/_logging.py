"""Logging utilities for Git Facade.

Loggers are standalone structlog loggers: creating one never touches the
global structlog configuration of the host application.
"""

import logging
import sys
from typing import TYPE_CHECKING, Optional, TextIO, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def log_level_from_string(level: str) -> int:
    """Convert a level name such as ``debug`` to a logging level integer."""
    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.INFO)


def create_logger(
    level: str = "info", *, file: Optional[TextIO] = None
) -> "FilteringBoundLogger":
    """Create a key/value structlog logger writing to ``file`` (stderr by default).

    Args:
        level: Minimum level name (debug, info, warning, error).
        file: Stream to write rendered events to.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(colors=False),
    ]

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.PrintLogger(file=file or sys.stderr),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                log_level_from_string(level)
            ),
            context_class=dict,
        ),
    )
