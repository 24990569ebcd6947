"""
Logging Configuration
Sets up the logger for the checker. The report goes to stdout, so
diagnostics go to stderr and never mix into --format json output.
"""
import logging
import sys


def setup_logging(level=logging.WARNING):
    """
    Configures the 'mean_lint' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING)
    """
    logger = logging.getLogger("mean_lint")
    logger.setLevel(level)

    # main() may run more than once in one process (tests); don't stack handlers.
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(handler)
    logger.debug("Logging initialized.")
