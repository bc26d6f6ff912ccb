"""Logging configuration.

Records carry the running detector in ``extra["detector"]``; bind it with
``logger.contextualize(detector=...)`` around a run. Outside a run it is "-".
"""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | "
    "<cyan>{extra[detector]: <8}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {extra[detector]} | {name}:{function}:{line} | {message}"


def setup_logging(level: str = LOG_LEVEL, to_file: bool = False, run_name: str = "pvt"):
    """Console sink at ``level``; with ``to_file``, a DEBUG file per run name and day under LOG_DIR."""
    logger.remove()
    logger.configure(extra={"detector": "-"})

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / f"{run_name}_{{time:YYYY-MM-DD}}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention="14 days",
            compression="gz",
        )
        logger.info("Logging {} runs to {}", run_name, LOG_DIR)

    return logger
