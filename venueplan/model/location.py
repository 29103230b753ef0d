"""Named locations in the municipality."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """An immutable named point; two locations are equal iff their names are.

    Attributes:
        name: Name of the location.
    """

    name: str

    def __post_init__(self) -> None:
        if self.name is None:
            raise TypeError("Location name must not be None.")
        if not isinstance(self.name, str):
            raise TypeError(
                f"Location name must be a string, got {type(self.name).__name__}"
            )

    def __str__(self) -> str:
        return self.name
