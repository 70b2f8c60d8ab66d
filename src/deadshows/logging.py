"""Structured logging configuration using structlog."""

import logging
import sys
from typing import Literal

import structlog


LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(
    level: str = "WARNING",
    format: Literal["console", "json"] = "console",
) -> None:
    """Configure structlog for the CLI.

    Log output always goes to stderr so it never mixes with the menus and
    status lines printed on stdout.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: "console" for human-readable output, "json" for one JSON object per line
    """
    log_level = LOG_LEVELS.get(level.upper(), logging.WARNING)

    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if format == "json":
        renderers: list[structlog.typing.Processor] = [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]

    structlog.configure(
        processors=[*shared_processors, *renderers],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # Reconfigured per CLI invocation, so loggers must not be frozen.
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, optionally bound to a logger name.

    The logger stays lazy, so module-level loggers pick up whatever
    configure_logging sets later.
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
