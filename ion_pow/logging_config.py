"""
Logging for ion_pow.

Module loggers are structlog loggers wrapping stdlib loggers under the
``ion_pow`` namespace. The package only attaches a NullHandler, so nothing
is written anywhere until the host application configures logging, either
through its own stdlib setup or by calling setup_logging() once at startup.
"""

import logging
import sys

import structlog

from ion_pow.config import Settings

LOGGER_NAMESPACE = "ion_pow"


def get_logger(name: str = LOGGER_NAMESPACE):
    """Return a structlog logger that emits through the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def setup_logging(settings: Settings | None = None) -> None:
    """
    Route ion_pow events to stdout, as JSON lines or pretty console output.

    Reads ION_POW_LOG_LEVEL / ION_POW_LOG_FORMAT when no settings are given.
    """
    settings = settings or Settings()
    level = getattr(logging, settings.log_level.upper())

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger(LOGGER_NAMESPACE).setLevel(level)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
