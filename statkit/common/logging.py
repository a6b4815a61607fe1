"""Structured logging (structlog over the stdlib ``statkit`` logger)."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Optional

import structlog

from statkit.common.constants import LOGGER_ROOT

if TYPE_CHECKING:
    from statkit.config import StatkitConfig


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger for *name* under the ``statkit`` hierarchy.

    Events are rendered as JSON lines and handed to the stdlib logger, so a
    library import stays silent until the host application (or
    :func:`configure_logging`) enables the ``statkit`` logger.
    """
    if not name.startswith(LOGGER_ROOT):
        name = f"{LOGGER_ROOT}.{name}"
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
    )


def configure_logging(
    level: Optional[int | str] = None,
    config: Optional[StatkitConfig] = None,
) -> logging.Logger:
    """Attach a stderr handler to the ``statkit`` logger.

    The level comes from *level*, else ``config.log_level``, else WARNING.
    Safe to call more than once; only the level is updated on later calls.
    """
    if level is None:
        level = config.log_level if config is not None else logging.WARNING
    root = logging.getLogger(LOGGER_ROOT)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
        root.propagate = False
    root.setLevel(level)
    return root
