"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL, LOG_TO_FILE

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | "
    "<cyan>{name}</cyan> | <level>{message}</level>"
)


def setup_logging(level: str = LOG_LEVEL, to_file: bool = LOG_TO_FILE):
    """Console sink tagged with the emitting module; optional JSON-lines file for the award log."""
    logger.remove()

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        LOG_DIR.mkdir(exist_ok=True)
        # JSON lines: one serialized record per line
        logger.add(
            LOG_DIR / "merit_awards_{time:YYYY-MM-DD}.jsonl",
            serialize=True,
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger
