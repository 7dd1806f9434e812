"""
Structured logging setup.

Routes structlog through the stdlib logging module so library log records and
application events share one output stream.
"""

import logging
import os

import structlog

from src.shared.config import VALID_LOG_FORMATS, VALID_LOG_LEVELS, AuthSettings


def configure_logging(settings: AuthSettings | None = None) -> None:
    """
    Configure structlog and the root stdlib logger.

    Args:
        settings: Settings to read level and format from. Defaults to
            AuthSettings.from_env(), in which case invalid LOG_LEVEL and
            LOG_FORMAT values are reported after setup.
    """
    from_env = settings is None
    if from_env:
        settings = AuthSettings.from_env()

    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = logging.getLevelName(settings.log_level)
    logging.basicConfig(level=level, format="%(message)s")
    logging.getLogger().setLevel(level)

    if not from_env:
        return

    logger = structlog.get_logger(__name__)

    raw_level = os.getenv("LOG_LEVEL")
    if raw_level and raw_level.strip().upper() not in VALID_LOG_LEVELS:
        logger.warning("Invalid LOG_LEVEL, using default", value=raw_level)

    raw_format = os.getenv("LOG_FORMAT")
    if raw_format and raw_format.strip().lower() not in VALID_LOG_FORMATS:
        logger.warning("Invalid LOG_FORMAT, using default", value=raw_format)
