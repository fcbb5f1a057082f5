"""Logging configuration for the godeps command line."""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level: Union[str, int] = "WARNING") -> None:
    """Send log records to stderr so stdout stays machine-readable."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger().setLevel(level)
