import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from . import settings

LOG_FILENAME = "app.log"
MAX_LOG_BYTES = 5 * 1024 * 1024  # 5 MB
LOG_BACKUPS = 3


def setup_logger(
    name: Optional[str] = None,
    log_level: int | str = settings.LOG_LEVEL,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Configures console output plus a rotating log file for a run.
    Modules only call logging.getLogger(__name__); main.py configures the root once.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Only this logger's own handlers count; pytest and other hosts may own the root's
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    log_dir = log_dir if log_dir is not None else settings.BASE_DIR / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_dir / LOG_FILENAME,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(file_handler)

    logger.debug(f"Logging to {log_dir / LOG_FILENAME} at level {log_level}.")
    return logger
