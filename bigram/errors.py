"""
Table Loading Errors

Exceptions raised while reading unigram and bigram probability tables.
Scoring itself never raises: only loading can fail.
"""

from typing import Optional


class TableLoadError(Exception):
    """
    Base class for failures while loading a probability table.

    Attributes:
        path: Path of the table file that failed to load
        line_number: 1-based line number of the failure, if known
    """

    def __init__(self, path, message: str, line_number: Optional[int] = None):
        self.path = str(path)
        self.line_number = line_number
        location = self.path if line_number is None else f"{self.path}:{line_number}"
        super().__init__(f"{location}: {message}")


class TableIOError(TableLoadError):
    """The table file could not be opened, read or decoded."""


class NumericParseError(TableLoadError, ValueError):
    """The trailing field of a line is not a floating-point literal."""

    def __init__(self, path, line_number: int, text: str):
        self.text = text
        super().__init__(path, f"invalid probability {text!r}", line_number)
