"""Package-local logging utilities.

hypermodel is a library. It emits no logs unless the host application
configures logging; CLI users can opt in via ``HYPERMODEL_LOG_LEVEL`` or the
``--log-level`` / ``-v`` flags.

Two channels exist: builder diagnostics go through the stdlib ``hypermodel``
logger, input normalization warns through ``loguru``. ``configure_logging``
sets both to the same level so the CLI has one switch for everything it prints.
"""

from __future__ import annotations

import logging
import os
import sys

from loguru import logger as loguru_logger

LOGGER_NAME = "hypermodel"
LOG_LEVEL_ENV = "HYPERMODEL_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOGURU_FORMAT = "{time:YYYY-MM-DD HH:mm:ss,SSS} | {level} | {name} | {message}"
# loguru still reports payload warnings when no level is configured
LOGURU_DEFAULT_LEVEL = "WARNING"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def _resolve_level(level: str | None) -> str:
    env_level = os.getenv(LOG_LEVEL_ENV, "")
    raw_level = level if level is not None else (env_level or "")
    return raw_level.strip().upper()


def _configure_loguru(level: str) -> None:
    # Canonical stdlib name (WARN -> WARNING, unknown -> INFO); loguru shares these names.
    loguru_level = logging.getLevelName(getattr(logging, level, logging.INFO))
    loguru_logger.remove()
    # Look up sys.stderr per message; the stream may be swapped after configuration.
    loguru_logger.add(
        lambda message: sys.stderr.write(message),
        level=loguru_level,
        format=LOGURU_FORMAT,
    )


def configure_logging(level: str | None = None) -> None:
    """Configure package logging for CLI/runtime diagnostics.

    Opt-in: if neither ``level`` nor ``HYPERMODEL_LOG_LEVEL`` is set, the
    stdlib package logger is reset to a silent ``NullHandler`` and loguru
    keeps only warnings and above.
    """
    resolved_level = _resolve_level(level)
    pkg_logger = logging.getLogger(LOGGER_NAME)
    # Reset handlers so repeated CLI calls never write to a stale stderr.
    pkg_logger.handlers = []

    if not resolved_level:
        pkg_logger.addHandler(logging.NullHandler())
        pkg_logger.setLevel(logging.NOTSET)
        pkg_logger.propagate = False
        _configure_loguru(LOGURU_DEFAULT_LEVEL)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(getattr(logging, resolved_level, logging.INFO))
    pkg_logger.propagate = False
    _configure_loguru(resolved_level)
