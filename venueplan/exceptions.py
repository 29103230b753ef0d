"""Exception types raised by venueplan."""

from __future__ import annotations


class InvalidTrafficError(ValueError):
    """Raised when corridor traffic exceeds the capacity of a venue."""


class FormatError(Exception):
    """Raised when a venue file does not follow the expected format.

    Attributes:
        line_number: 1-based line of the input where the problem was detected.
        cause: Human-readable description of the problem.
    """

    def __init__(self, line_number: int, cause: str) -> None:
        # args must match the constructor so instances survive pickling
        super().__init__(line_number, cause)
        self.line_number = line_number
        self.cause = cause

    def __str__(self) -> str:
        return f"Error on line {self.line_number}: {self.cause}"
