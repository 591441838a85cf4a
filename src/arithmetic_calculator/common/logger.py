"""Shared project logger."""
import logging
import sys

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger("arithmetic_calculator")


def configure_logging(level: str = "WARNING") -> None:
    """
    Attach a stderr handler to the project logger and set its level.

    Records go to stderr so they never interleave with calculation results on stdout.
    Calling this more than once only updates the level.

    :param str level: Logging level name (e.g. "DEBUG", "INFO")

    :return: None
    """
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level.upper())
