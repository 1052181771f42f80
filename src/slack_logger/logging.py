"""Structured logging configuration for slack-logger diagnostics.

The package logs its own events (queue activity, delivery failures) through
structlog loggers wrapped around stdlib loggers named ``slack_logger.*``.
Without any setup, stdlib's level filtering applies: debug chatter is
dropped and warnings/errors reach stderr through Python's last-resort
handler. Host applications route them like any other stdlib logger;
the CLI calls configure_logging() once at startup.
"""

import logging
import sys
from typing import cast

import structlog


def configure_logging(level: str = "INFO", json: bool | None = None) -> None:
    """Route structlog and stdlib logging through one handler.

    Args:
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        json: Force JSON output (True) or console output (False);
            default picks console on a TTY, JSON otherwise
    """
    log_level = getattr(logging, level.upper())
    use_json = not sys.stderr.isatty() if json is None else json

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer()
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processor=renderer,
    )

    # stdout is reserved for the logged messages themselves
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance backed by the stdlib logger of the same name.

    Processors come from the current structlog configuration, so the
    logger follows configure_logging() (or a host's own setup) once it
    runs, and stdlib level filtering applies before that.

    Args:
        name: Optional logger name (usually __name__ from calling module)
    """
    return cast(
        structlog.stdlib.BoundLogger,
        structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger),
    )
