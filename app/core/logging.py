import logging
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


class InterceptHandler(logging.Handler):
    """Route records from the standard logging module into loguru."""

    loglevel_mapping = {
        50: "CRITICAL",
        40: "ERROR",
        30: "WARNING",
        20: "INFO",
        10: "DEBUG",
        0: "NOTSET",
    }

    def emit(self, record):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = self.loglevel_mapping.get(record.levelno, record.levelno)

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None):
    logger.remove()

    # Console logger with colors
    logger.add(
        sys.stdout,
        backtrace=True,
        level=level.upper(),
        format=CONSOLE_FORMAT,
        colorize=True,
    )

    # File logger without colors
    if log_file is not None:
        logger.add(
            str(log_file),
            rotation="10 MB",
            retention="14 days",
            enqueue=True,
            backtrace=True,
            level=level.upper(),
            format=FILE_FORMAT,
            colorize=False,
        )

    # Redirect standard logging to loguru
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for log_name in ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi"):
        _logger = logging.getLogger(log_name)
        _logger.handlers = [InterceptHandler()]
        _logger.propagate = False

    return logger


def get_logger(component: Optional[str] = None):
    """Get the shared loguru logger, optionally bound to a component name."""
    if component:
        return logger.bind(component=component)
    return logger
