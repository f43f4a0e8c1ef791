"""Logging setup for the book library.

One "booklib" logger writes detailed records to a dated file under the
configured log directory and short records to the console.
"""

import logging
from datetime import date
from config import Config

LOGGER_NAME = "booklib"

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_CONSOLE_FORMAT = "%(levelname)s - %(message)s"


def get_log_file_path(config: Config, day: date = None):
    """Return the log file for a given day (today by default)."""
    day = day or date.today()
    return config.log_dir / f"{LOGGER_NAME}-{day.isoformat()}.log"


def setup_logging(config: Config) -> logging.Logger:
    """Configure the application logger from config.

    Calling this again replaces the handlers instead of stacking them.

    Args:
        config: Application configuration with log_level and log_dir.

    Returns:
        The configured logger.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)
    logger.handlers.clear()

    file_handler = logging.FileHandler(get_log_file_path(config))
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return logging.getLogger(LOGGER_NAME)
