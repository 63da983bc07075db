"""Error taxonomy for the conversion run.

Everything except ``NoInputFiles`` is fatal and aborts the run. ``NoInputFiles``
is recorded on the result instead of being raised.
"""

from __future__ import annotations


class Svg2CssError(Exception):
    """Base class for all conversion errors."""


class DirectoryReadError(Svg2CssError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read source directory {path}: {reason}")


class NoInputFiles(Svg2CssError):
    def __init__(self, directory: str = "") -> None:
        self.directory = directory
        super().__init__("No input files found!")


class SourceReadError(Svg2CssError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class ParseError(Svg2CssError):
    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to parse {source}: {reason}")


class WriteError(Svg2CssError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write {path}: {reason}")
