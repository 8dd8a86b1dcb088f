"""Structlog configuration used by the parsers and the CLI."""

from __future__ import annotations

import logging
import logging.config
import sys
from typing import Any, TextIO

import structlog

LOG_FORMATS = ("console", "json")


def get_logger(name: str) -> Any:
    """Return a structlog logger backed by the stdlib logger ``name``.

    Events go through stdlib logging, so nothing is emitted until an
    application (or ``configure_logging``) installs a handler.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    level: str = "WARNING",
    log_format: str = "console",
    stream: TextIO | None = None,
) -> None:
    """Configure structlog + stdlib logging.

    Args:
        level: Stdlib level name (DEBUG, INFO, ...).
        log_format: ``console`` for a dev-friendly renderer, ``json`` for
            one JSON object per line.
        stream: Destination stream (defaults to stderr so stdout stays free
            for command output).
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"()": lambda: formatter}},
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": stream or sys.stderr,
                }
            },
            "loggers": {
                "gitdiffparse": {
                    "handlers": ["default"],
                    "level": log_level,
                    "propagate": False,
                },
            },
        }
    )
