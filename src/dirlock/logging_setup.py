#
# logging_setup.py
# Directory Lock
#
# Configures a stdout handler and an optional rotating file logger shared by the runner and the command line.
#
# Thales Matheus Mendonça Santos - October 2026
#
"""Logging configuration helpers."""
import logging
import sys
from logging.handlers import RotatingFileHandler

from .config import LockConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(config: LockConfig, logger_name: str = "dirlock") -> logging.Logger:
    """
    Configure a stdout handler, plus a rotating file handler when
    ``paths.log_file`` is set.
    Safe to call multiple times; existing handlers are reused.
    """
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        return logger

    level = logging.getLevelName(config.settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logger.setLevel(level)

    log_file = config.paths.log_file
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            str(log_file),
            maxBytes=config.settings.log_max_bytes,
            backupCount=config.settings.log_backup_count,
        )
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(fh)

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(ch)
    return logger


__all__ = ["LOG_FORMAT", "setup_logging"]
