# edumate/core/logging_config.py
import logging

from edumate.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)s: %(message)s"

_NOISY_LOGGERS = ("sqlalchemy.engine", "passlib", "multipart")


def configure_logging() -> None:
    """
    Configure the root logger from settings.LOG_LEVEL.

    Safe to call more than once: an existing console handler is reused and
    only its level and format are updated.
    """
    level = getattr(logging, (settings.LOG_LEVEL or "INFO").upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    stream_handler = None
    for h in root_logger.handlers:
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler):
            stream_handler = h
            break
    if stream_handler is None:
        stream_handler = logging.StreamHandler()
        root_logger.addHandler(stream_handler)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
