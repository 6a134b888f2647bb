"""Error types raised by linecmp"""

from __future__ import annotations


class LineCompareError(Exception):
    """Base class for linecmp errors"""


class UsageError(LineCompareError):
    """Wrong argument count or malformed flag"""


class ReadError(LineCompareError):
    """A source could not be opened or fully read"""

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading {path}: {cause}")
