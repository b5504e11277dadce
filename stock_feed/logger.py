import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from . import settings

LOG_FILENAME = "stock_feed.log"


def setup_logger(
    name: str = None,
    log_level: Optional[str | int] = None,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Sets up the root logger for a feed run: minimal console output for the
    scheduler's captured stdout, and a rotating `stock_feed.log` that keeps
    timestamps and module names across runs.

    Level and directory default to LOG_LEVEL / LOG_DIR from settings.
    """
    logger = logging.getLogger(name)
    level = log_level or settings.LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    # A scheduler may import and run us twice in one process.
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    log_dir = Path(log_dir or settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_dir / LOG_FILENAME, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"  # 5 MB
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(file_handler)

    # Per-request connection chatter from requests would drown the per-SKU lines.
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return logger
