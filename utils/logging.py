"""Logging setup for caiderun.

Records go to stderr because stdout can carry the submission's output.
"""

import logging
import sys
from typing import Optional

from .constants import DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(verbose: bool, level: Optional[int | str]) -> int:
    """Pick the effective level: explicit level, then --verbose, then the default."""
    if level is None:
        level = "DEBUG" if verbose else DEFAULT_LOG_LEVEL
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        return resolved
    return level


def setup_logging(verbose: bool = False, level: Optional[int | str] = None) -> None:
    """Configure the root logger; safe to call more than once.

    Args:
        verbose: Log at DEBUG instead of DEFAULT_LOG_LEVEL
        level: Explicit level, as a number or a name such as "INFO"
    """
    logging.basicConfig(
        level=_resolve_level(verbose, level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
        force=True,  # replaces handlers from earlier calls
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass ``__name__``)."""
    return logging.getLogger(name)
