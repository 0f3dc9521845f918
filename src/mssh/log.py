import sys

from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> {message}"


def setup_logging(verbose: bool = False):
    """Send log records to stderr, at DEBUG when verbose and INFO otherwise."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", format=LOG_FORMAT)
