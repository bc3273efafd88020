"""Logging helpers for the meal tracker.

`get_logger` hands out loggers that share one stream handler and one
rotating file handler. The log directory and level come from `LOG_DIR`
and `LOG_LEVEL`.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.path.dirname(__file__), "..", "logs"))
os.makedirs(LOG_DIR, exist_ok=True)

LOG_FILE = os.path.join(LOG_DIR, "app.log")
LOG_LEVEL = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())

_formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

_stream_handler = logging.StreamHandler()
_stream_handler.setFormatter(_formatter)

_file_handler = RotatingFileHandler(LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3)
_file_handler.setFormatter(_formatter)


def get_logger(name: str = __name__, level: int = None) -> logging.Logger:
    """Return a logger wired to the shared stream and file handlers.

    Handlers are attached only the first time a name is requested.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level if level is not None else LOG_LEVEL)
        logger.addHandler(_stream_handler)
        logger.addHandler(_file_handler)
    return logger
