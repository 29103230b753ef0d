"""Directed traffic corridors between two locations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from venueplan.model.location import Location


@dataclass(frozen=True)
class Corridor:
    """A directed road corridor from ``start`` to ``end``.

    Identity (equality and hashing) is the ``(start, end)`` pair. The capacity
    is carried along but does not take part in comparisons, so two corridors
    between the same locations with different capacities are the same corridor.
    A corridor whose start equals its end is accepted.

    Attributes:
        start: Location where the corridor begins.
        end: Location where the corridor ends.
        capacity: Maximum traffic the corridor can carry (int >= 0).
    """

    start: Location
    end: Location
    capacity: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if self.start is None or self.end is None:
            raise TypeError("Corridor start and end must not be None.")
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int):
            raise TypeError(
                f"Corridor capacity must be an int, got {type(self.capacity).__name__}"
            )
        if self.capacity < 0:
            raise ValueError(
                f"Corridor capacity must not be negative, got {self.capacity}"
            )

    @property
    def key(self) -> Tuple[str, str]:
        """Return ``(start name, end name)``; used as a stable sort key."""
        return (self.start.name, self.end.name)

    def __str__(self) -> str:
        return f"Corridor {self.start} to {self.end} ({self.capacity})"
