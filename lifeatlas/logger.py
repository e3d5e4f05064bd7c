import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import log_level_from_env

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str = "lifeatlas", level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """Configure and return a logger with a console handler and an optional rotating file handler.

    Engine modules log through ``logging.getLogger(__name__)``, so configuring
    the ``lifeatlas`` logger here covers every engine.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else log_level_from_env())

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
