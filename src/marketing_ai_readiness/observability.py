"""Structured logging setup for the readiness service.

Every module obtains its logger through ``get_logger(__name__)`` and logs a
short event message plus keyword fields, e.g.
``logger.info("Assessment scored", overall_score=62.5)``.
"""

import logging
import sys
from typing import Any

import structlog


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structlog and the stdlib root logger once per process.

    Args:
        level: Minimum log level name (e.g. 'INFO', 'DEBUG').
        json_logs: Render events as JSON lines instead of the console format.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to the given module name.

    Args:
        name: Logger name, normally the calling module's ``__name__``.

    Returns:
        A structlog bound logger accepting keyword event fields.
    """
    return structlog.get_logger(name)
