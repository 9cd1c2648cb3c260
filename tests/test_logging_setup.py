#
# test_logging_setup.py
# Directory Lock
#
# Checks that logging setup is idempotent and honors the configured level and rotating log file.
#
# Thales Matheus Mendonça Santos - October 2026
#
import logging
from logging.handlers import RotatingFileHandler

from dirlock.logging_setup import setup_logging


def test_stdout_only_by_default(temp_config):
    logger = setup_logging(temp_config)
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    # Second call reuses the existing handlers.
    assert setup_logging(temp_config) is logger
    assert len(logger.handlers) == 1


def test_rotating_file(temp_config, tmp_path):
    temp_config.paths.log_file = tmp_path / "logs" / "run.log"
    temp_config.settings.log_level = "debug"
    logger = setup_logging(temp_config)
    assert logger.level == logging.DEBUG
    assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
    logger.debug("hello %s", "there")
    for h in logger.handlers:
        h.flush()
    assert "[DEBUG] hello there" in temp_config.paths.log_file.read_text()


def test_unknown_level_falls_back_to_info(temp_config):
    temp_config.settings.log_level = "chatty"
    assert setup_logging(temp_config).level == logging.INFO
