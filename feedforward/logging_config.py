import logging
import sys

from . import config


def setup_logging(level=None, log_file=None):
    """Send the package's log records to stdout and optionally to `log_file`."""
    logger = logging.getLogger("feedforward")
    logger.setLevel(level if level is not None else config.LOG_LEVEL)
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
