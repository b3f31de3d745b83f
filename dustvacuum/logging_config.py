"""console (and optional file) logging for the dustvacuum namespace."""

import logging
import sys

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level=logging.INFO, log_file=None):
    """point the package logger at stdout, plus log_file when given."""
    logger = logging.getLogger("dustvacuum")
    logger.setLevel(level)

    # restarting a game in the same process must not stack handlers
    logger.handlers.clear()

    formatter = logging.Formatter(FORMAT, datefmt="%H:%M:%S")
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("logging to %s", log_file or "stdout")
