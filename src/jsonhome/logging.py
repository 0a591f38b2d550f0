"""Package-local logging utilities.

This package is a library first. By default it emits no logs unless the host
application configures logging. CLI users can opt into logs via
``JSONHOME_LOG_LEVEL``, ``--log-level`` or ``-v``.

Core modules log through the stdlib ``jsonhome`` logger; the generator logs
through loguru. Both are silenced here and switched on together by
``configure_logging``.
"""

from __future__ import annotations

import logging
import os
import sys

from loguru import logger as _loguru_logger

LOGGER_NAME = "jsonhome"
logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())
_loguru_logger.disable(LOGGER_NAME)

# id of the loguru sink added by configure_logging; other sinks are left alone
_loguru_handler_id: int | None = None


def configure_logging(level: str | None = None) -> None:
    """Configure package logging for CLI/runtime diagnostics.

    Opt-in only. If neither ``level`` nor ``JSONHOME_LOG_LEVEL`` is set,
    both loggers are reset to silent. Only the loguru sink added here is
    replaced; sinks installed by the host application are kept.
    """
    global _loguru_handler_id

    env_level = os.getenv("JSONHOME_LOG_LEVEL", "")
    raw_level = level if level is not None else (env_level or "")
    resolved_level = raw_level.strip()
    pkg_logger = logging.getLogger(LOGGER_NAME)
    # Drop handlers from earlier calls; they may hold a closed stderr.
    pkg_logger.handlers = []
    if _loguru_handler_id is not None:
        _loguru_logger.remove(_loguru_handler_id)
        _loguru_handler_id = None

    if not resolved_level:
        pkg_logger.addHandler(logging.NullHandler())
        pkg_logger.setLevel(logging.NOTSET)
        pkg_logger.propagate = False
        _loguru_logger.disable(LOGGER_NAME)
        return

    numeric_level = getattr(logging, resolved_level.upper(), logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(numeric_level)
    pkg_logger.propagate = False

    _loguru_handler_id = _loguru_logger.add(
        sys.stderr,
        level=logging.getLevelName(numeric_level),
        filter=LOGGER_NAME,
        format="{time:YYYY-MM-DD HH:mm:ss,SSS} | {level} | {name} | {message}",
    )
    _loguru_logger.enable(LOGGER_NAME)
