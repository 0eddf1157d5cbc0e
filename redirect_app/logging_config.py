"""
Logging setup for the redirect service.

Configures loguru as the single sink and routes standard library logging
(uvicorn, fastapi) through it.
"""

import logging
import sys

from loguru import logger

from redirect_app.config import settings


class InterceptHandler(logging.Handler):
    """Redirect standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging() -> None:
    """
    Configure application logging.
    
    Removes loguru's default sink, adds a stderr sink using the configured
    level/format, and intercepts standard library logging.
    """
    logger.remove()

    if settings.log_json:
        logger.add(
            sys.stderr,
            level=settings.log_level.upper(),
            serialize=True,
        )
    else:
        logger.add(
            sys.stderr,
            level=settings.log_level.upper(),
            format=settings.log_format,
            backtrace=settings.debug,
            diagnose=settings.debug,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    for log_name in ["uvicorn", "uvicorn.access", "uvicorn.error", "fastapi"]:
        logging_logger = logging.getLogger(log_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False

    logger.debug("Logging configured (level={})", settings.log_level.upper())
