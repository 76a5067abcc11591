"""
Logging setup for the jlic command.

Only the ``jlic`` logger tree is configured; third-party and root
loggers are left alone.  Without a flag, ``JLIC_LOG`` (e.g.
``JLIC_LOG=info``) picks the level, falling back to WARNING.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_ENV = "JLIC_LOG"

_FMT = "%(levelname)s: %(message)s"
_FMT_DEBUG = "%(levelname)s %(name)s:%(lineno)d: %(message)s"


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> int:
    """Pick the log level: ``--debug`` > ``--verbose`` > ``--quiet`` > JLIC_LOG > WARNING."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    if quiet:
        return logging.ERROR
    name = os.environ.get(LOG_ENV, "").strip().upper()
    return logging.getLevelNamesMapping().get(name, logging.WARNING)


def init_logs(debug: bool = False, verbose: bool = False, quiet: bool = False) -> int:
    """Attach a stderr handler to the ``jlic`` logger and return its level."""
    level = resolve_level(debug, verbose, quiet)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FMT_DEBUG if level <= logging.DEBUG else _FMT))

    logger = logging.getLogger("jlic")
    for old in logger.handlers[:]:
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)

    logger.debug("Initialized logger")
    return level
