import logging
import sys
from logging.handlers import RotatingFileHandler
from . import settings


def setup_logger(name: str = "gilded_rose", log_level: int = logging.INFO) -> logging.Logger:
    """
    Configures the "gilded_rose" package logger (or any named logger) for a run.
    The console shows bare messages so the daily "name, sellIn, quality" report
    reads like a plain table; the rotating file in settings.LOG_DIR keeps
    timestamps and module names. Module loggers under "gilded_rose." inherit both.
    Calling it again for a configured logger only updates the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Prevent adding handlers multiple times if logger is already set up
    if logger.handlers:
        return logger

    # Formatters
    console_format = logging.Formatter("%(message)s")  # Keep console output clean/minimal
    file_format = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # 1. Console Handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # 2. File Handler
    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = settings.LOG_DIR / "gilded_rose.log"

    file_handler = RotatingFileHandler(
        log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"  # 5 MB
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(file_format)
    logger.addHandler(file_handler)

    return logger
