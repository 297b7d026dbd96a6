"""Structured logging configuration using structlog.

Call setup_logging() (or setup_logging_from_settings()) once at application
startup before any log calls.
"""

from __future__ import annotations

import logging

import structlog

from toolhooks.config.settings import LoggingSettings


def setup_logging(*, json_output: bool = True, log_level: str = "INFO") -> None:
    """Configure structlog for the application.

    Args:
        json_output: If True, render logs as JSON. If False, use dev-friendly console output.
        log_level: Minimum log level to emit (DEBUG, INFO, WARNING, ERROR).
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_subsystem_logger(subsystem: str) -> structlog.typing.FilteringBoundLogger:
    """Return a logger bound to a subsystem name, e.g. "agents/tools"."""
    return structlog.get_logger(subsystem=subsystem)


def setup_logging_from_settings(settings: LoggingSettings | None = None) -> None:
    """Configure structlog from LOG_* settings (loaded from env when omitted)."""
    settings = settings if settings is not None else LoggingSettings()
    setup_logging(json_output=settings.json_output, log_level=settings.level)
