"""
Thin wrapper around Python's ``logging`` module with two extra verbosity
levels below ``DEBUG`` for inner-loop detail.

Usage
-----
>>> from splinesuite.libsplinesuite.logger import get_logger
>>> log = get_logger(__name__)
>>> log.debug("fitted natural spline")      # construction summaries
>>> log.debug2("extrapolating x=%g", 4.2)   # per-query detail
"""

import logging
import os
import sys

# ── Custom levels (below DEBUG=10) ──────────────────────────────────────
DEBUG2 = 9
DEBUG3 = 8

logging.addLevelName(DEBUG2, "DEBUG2")
logging.addLevelName(DEBUG3, "DEBUG3")

ROOT_NAME = "splinesuite"
ENV_LEVEL = "SPLINESUITE_LOGLEVEL"


class _SplineLogger(logging.Logger):
    """Logger subclass that adds ``debug2`` and ``debug3`` convenience methods."""

    def debug2(self, msg, *args, **kwargs):
        if self.isEnabledFor(DEBUG2):
            self._log(DEBUG2, msg, args, **kwargs)

    def debug3(self, msg, *args, **kwargs):
        if self.isEnabledFor(DEBUG3):
            self._log(DEBUG3, msg, args, **kwargs)


logging.setLoggerClass(_SplineLogger)

# ── Mapping from integer verbosity to Python levels ─────────────────────
VERBOSITY_LEVEL_MAP = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
    3: logging.DEBUG,
    4: logging.DEBUG,
    5: DEBUG2,
    6: DEBUG3,
}

logging.getLogger(ROOT_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> _SplineLogger:
    """Return a logger under the ``splinesuite`` hierarchy.

    If *name* is a fully qualified module name (e.g.
    ``splinesuite.libsplinesuite.spliner``), the logger inherits from the
    ``splinesuite`` root logger so a single ``set_level()`` call
    controls everything.
    """
    return logging.getLogger(name or ROOT_NAME)


def _resolve_level(level: int | str) -> int | str:
    if isinstance(level, str) and level.strip().isdigit():
        level = int(level)
    if isinstance(level, int) and level in VERBOSITY_LEVEL_MAP:
        return VERBOSITY_LEVEL_MAP[level]
    if isinstance(level, str):
        return level.strip().upper()
    return level


def set_level(level: int | str = logging.INFO) -> None:
    """Set the log level for *all* splinesuite loggers at once.

    Accepts Python level ints/names **or** integer verbosity levels (0-6).
    """
    logging.getLogger(ROOT_NAME).setLevel(_resolve_level(level))


def setup(level: int | str | None = None, stream=None) -> None:
    """One-time setup: attach a stderr handler with the splinesuite format.

    When *level* is omitted the ``SPLINESUITE_LOGLEVEL`` environment variable
    is used, falling back to ``INFO``. Extra calls are no-ops.
    """
    root = logging.getLogger(ROOT_NAME)
    if any(not isinstance(h, logging.NullHandler) for h in root.handlers):
        return
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)-7s: %(name)s: %(message)s"))
    root.addHandler(handler)
    if level is None:
        level = os.environ.get(ENV_LEVEL, logging.INFO)
    set_level(level)
