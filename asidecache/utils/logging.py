"""structlog setup for asidecache.

Provider debug events and :class:`StructlogLogger` cache lines share one
processor chain.  It ends in a console renderer during development and a
JSON renderer when ``app_env`` is ``"production"`` or JSON is forced.
Standard-library ``logging`` (aiosqlite logs through it) is routed into the
same chain so driver output matches the cache's own.

Applications that configure from :class:`CacheSettings` should call
:func:`configure_logging_from_settings`; :func:`build_client` does so.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from asidecache.config.settings import CacheSettings

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.dev.set_exc_info,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _level_number(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {log_level!r}")
    return level


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = False,
    app_env: str | None = None,
    stream: TextIO | None = None,
) -> structlog.BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: Always render JSON.  Otherwise JSON is used only in
                     production.
        app_env: Deployment environment.  Defaults to ``APP_ENV`` from the
                 process environment, then ``"development"``.
        stream: Where log lines go.  Defaults to ``sys.stdout`` at call time.

    Returns:
        A structlog logger bound to the new configuration.
    """
    level = _level_number(log_level)
    if app_env is None:
        app_env = os.environ.get("APP_ENV", "development")
    if stream is None:
        stream = sys.stdout

    if json_output or app_env == "production":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_SHARED_PROCESSORS,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    return structlog.get_logger()


def configure_logging_from_settings(
    settings: CacheSettings, stream: TextIO | None = None
) -> structlog.BoundLogger:
    """Apply ``log_level``, ``log_json`` and ``app_env`` from *settings*."""
    return configure_logging(
        log_level=settings.log_level,
        json_output=settings.log_json,
        app_env=settings.app_env,
        stream=stream,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger bound with *name*, configuring defaults first if needed."""
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(logger_name=name)
