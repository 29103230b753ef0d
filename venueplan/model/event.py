"""Events that can be hosted at a venue."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Event:
    """A named activity with an expected attendance.

    Attributes:
        name: Name of the event.
        size: Expected number of attendees (int >= 0).
    """

    name: str
    size: int

    def __post_init__(self) -> None:
        if self.name is None:
            raise TypeError("Event name must not be None.")
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise TypeError(f"Event size must be an int, got {type(self.size).__name__}")
        if self.size < 0:
            raise ValueError(f"Event size must not be negative, got {self.size}")

    def __str__(self) -> str:
        return f"{self.name} ({self.size})"
