"""Loguru sink configuration for the CLI."""

import os
import sys

from loguru import logger

LOG_LEVEL_ENV = "LMS_DEV_LOG_LEVEL"


def configure_logging(verbose: bool = False) -> None:
    """Route loguru to stderr at WARNING, or DEBUG when verbose.

    ``LMS_DEV_LOG_LEVEL`` overrides the level when ``--verbose`` is not given.
    """
    level = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format="<dim>{time:HH:mm:ss}</dim> {level: <7} {message}")
