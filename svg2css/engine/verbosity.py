"""Verbosity-gated diagnostics.

The pipeline never talks to the console directly. It receives a ``VerbosityLog``
and calls it with a required level; the message is forwarded to a stdlib logger
only when the configured verbosity reaches that level.
"""

from __future__ import annotations

import logging
from enum import IntEnum


class Verbosity(IntEnum):
    NONE = 0
    BASIC = 1
    DETAIL = 2
    DEBUG = 3


class VerbosityLog:
    """Callable ``log(level, msg, *args)`` gated by a verbosity threshold."""

    def __init__(self, verbosity: int = Verbosity.NONE, logger: logging.Logger | None = None) -> None:
        self.verbosity = max(Verbosity.NONE, min(int(verbosity), Verbosity.DEBUG))
        self.logger = logger or logging.getLogger("svg2css")

    def enabled(self, level: int) -> bool:
        return level <= self.verbosity

    def __call__(self, level: int, msg: str, *args: object) -> None:
        if not self.enabled(level):
            return
        self.logger.info(msg, *args)
