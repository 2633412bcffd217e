"""
Structured logging for the either package, built on structlog.

Events raised inside the package go through get_library_logger, which hands
rendered events to the stdlib ``logging`` hierarchy under the ``either``
name. Stdlib logging has no handler for those records until an application
installs one, so importing and using the package never writes output on
its own. Applications opt in by calling configure_logging (or
configure_logging_from_settings) at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from structlog.typing import Processor

    from either.config import Settings


def _build_processors(*, json_format: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_format:
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    return processors


def configure_logging(
    *,
    json_format: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Configure structlog output for an application that uses the package.

    This is an application entry point; nothing in the package calls it.
    Besides configuring structlog, it calls ``logging.basicConfig`` so the
    package's stdlib-backed events (see get_library_logger) get a stderr
    handler and a root level. basicConfig leaves an already configured root
    logger untouched, so applications with their own logging setup keep it.

    Args:
        json_format: Render events as JSON lines instead of console output.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    level = logging.getLevelName(log_level.upper())

    structlog.configure(
        processors=_build_processors(json_format=json_format),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # value.py binds its logger at import time; re-read config on each call.
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)


def configure_logging_from_settings(settings: Settings | None = None) -> None:
    """
    Configure logging from package settings.

    Args:
        settings: Settings to apply. Defaults to the cached environment settings.
    """
    if settings is None:
        from either.config import get_settings

        settings = get_settings()

    configure_logging(json_format=settings.json_logs, log_level=settings.log_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get an application-level structlog logger.

    Output follows configure_logging. Library code should use
    get_library_logger instead.
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger


def get_library_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger that emits through the stdlib logger ``name``.

    Processors still come from the current structlog configuration, but the
    rendered event is passed to ``logging.getLogger(name)``, which is silent
    until a handler is attached somewhere on its hierarchy.

    Args:
        name: Stdlib logger name (typically __name__).

    Returns:
        A bound structlog logger wrapping the stdlib logger.
    """
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    return logger


def bind_context(**kwargs: object) -> None:
    """Bind context variables included in every subsequent event."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()
