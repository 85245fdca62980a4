import logging
import sys
from typing import IO, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)8s] %(name)s: %(message)s (%(filename)s:%(lineno)s)"


def get_logger(name: str, level: int = logging.INFO, stream: Optional[IO] = None) -> logging.Logger:
    """
    Configures and returns a logger.

    Log records go to stderr by default so they never mix with the
    one-line results the CLI prints on stdout.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Create a handler if one doesn't exist for this logger
    # to avoid duplicate logs if get_logger is called multiple times.
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    # Keep records from reaching the root logger's handlers
    if name != "root":
        logger.propagate = False

    return logger
