"""
Logging for the schedule API (app.py) and the terminal menu (engine.py).

Both call setup_logger() once at startup. Anything not passed in comes
from Config, so LOG_LEVEL / LOG_FILE / LOG_ROTATION / LOG_RETENTION in
the environment are enough to change it.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from config import Config

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{module}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {module}:{function}:{line} - {message}"


def setup_logger(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Replaces loguru's default handler with:
    - stderr at `level` (colors only when stderr is a terminal)
    - a rotating file at `log_file`, if one is set

    Calling it again drops the previous sinks, so it is safe to re-run.
    """
    level = (level or Config.LOG_LEVEL).upper()
    log_file = log_file or Config.LOG_FILE

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=Config.LOG_ROTATION,
            retention=Config.LOG_RETENTION,
        )
        logger.debug(f"Also logging to {log_path}")

    logger.debug(f"Logging at {level}")
