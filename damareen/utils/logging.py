import inspect
import logging
import sys
from pathlib import Path

from loguru import logger

from damareen.core.config import settings


class InterceptHandler(logging.Handler):
    """Forward records from the standard logging module to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller from where the logged message originated
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(file_name: str | None = None) -> None:
    """Configure loguru sinks and route stdlib logging through them.

    Args:
        file_name: Log file name under ``settings.log_dir``. No file sink is added if None.
    """
    level = "DEBUG" if settings.is_dev else settings.log_level.upper()

    logger.remove()
    logger.add(sys.stderr, level=level)

    if file_name is not None:
        log_path = Path(settings.log_dir) / file_name
        logger.add(
            log_path,
            level=level,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            encoding="utf-8",
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
