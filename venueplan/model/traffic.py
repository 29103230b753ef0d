"""Per-corridor traffic records.

A :class:`Traffic` maps corridors to non-negative integer traffic volumes.
Corridors that were never recorded read as zero, and a corridor recorded with
zero traffic is treated exactly like an absent one by :meth:`Traffic.same_traffic`,
:meth:`Traffic.corridors_with_traffic` and the text rendering.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from venueplan.config import LINE_SEPARATOR
from venueplan.model.corridor import Corridor


class Traffic:
    """Mutable mapping from :class:`Corridor` to a traffic volume (int >= 0).

    Args:
        initial: Optional record to copy. The new record is independent of
            ``initial``; later updates to either one do not affect the other.

    Example:
        >>> a, b = Location("a"), Location("b")
        >>> traffic = Traffic()
        >>> traffic.update_traffic(Corridor(a, b, 10), 4)
        >>> traffic.get_traffic(Corridor(a, b, 10))
        4
    """

    __slots__ = ("_volumes",)

    def __init__(self, initial: Optional[Traffic] = None) -> None:
        self._volumes: Dict[Corridor, int] = {}
        if initial is not None:
            if not isinstance(initial, Traffic):
                raise TypeError(
                    f"Expected Traffic to copy, got {type(initial).__name__}"
                )
            self._volumes.update(initial._volumes)

    def copy(self) -> Traffic:
        """Return an independent copy of this record."""
        return Traffic(self)

    def get_traffic(self, corridor: Corridor) -> int:
        """Return the traffic recorded for ``corridor`` (0 when absent)."""
        if corridor is None:
            raise TypeError("Corridor must not be None.")
        return self._volumes.get(corridor, 0)

    def update_traffic(self, corridor: Corridor, value: int) -> None:
        """Set the traffic on ``corridor`` to ``value``, replacing any previous value.

        Raises:
            TypeError: If ``corridor`` is None or ``value`` is not an int.
            ValueError: If ``value`` is negative.
        """
        if corridor is None:
            raise TypeError("Corridor must not be None.")
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Traffic must be an int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"Traffic must not be negative, got {value}")
        # Drop any stale key so the stored corridor carries the latest capacity
        self._volumes.pop(corridor, None)
        self._volumes[corridor] = value

    def add_traffic(self, corridor: Corridor, change: int) -> None:
        """Add ``change`` (which may be negative) to the traffic on ``corridor``.

        Raises:
            TypeError: If ``corridor`` is None or the result is not an int.
            ValueError: If the resulting traffic would be negative.
        """
        current = self.get_traffic(corridor)
        if current + change < 0:
            raise ValueError(
                f"Traffic on {corridor} cannot drop below zero "
                f"({current} + {change})"
            )
        self.update_traffic(corridor, current + change)

    def add(self, other: Traffic) -> None:
        """Add every corridor volume recorded in ``other`` to this record."""
        if other is None:
            raise TypeError("Traffic must not be None.")
        for corridor in other.corridors_with_traffic():
            self.add_traffic(corridor, other.get_traffic(corridor))

    def corridors_with_traffic(self) -> List[Corridor]:
        """Return corridors with traffic greater than zero.

        Corridors are ordered by start location name, then end location name.
        """
        return sorted(
            (c for c, v in self._volumes.items() if v > 0), key=lambda c: c.key
        )

    def same_traffic(self, other: Traffic) -> bool:
        """Return True if both records agree on every corridor's traffic.

        Absent corridors count as zero, so an explicit zero entry matches a
        missing one.
        """
        if other is None:
            raise TypeError("Traffic must not be None.")
        corridors = set(self._volumes) | set(other._volumes)
        return all(self.get_traffic(c) == other.get_traffic(c) for c in corridors)

    def __len__(self) -> int:
        return len(self.corridors_with_traffic())

    def __iter__(self) -> Iterator[Corridor]:
        return iter(self.corridors_with_traffic())

    def __contains__(self, corridor: object) -> bool:
        return self._volumes.get(corridor, 0) > 0  # type: ignore[call-overload]

    def __str__(self) -> str:
        return "".join(
            f"{corridor}: {self._volumes[corridor]}{LINE_SEPARATOR}"
            for corridor in self.corridors_with_traffic()
        )

    def __repr__(self) -> str:
        items = ", ".join(
            f"{c.start.name}->{c.end.name}: {self._volumes[c]}"
            for c in self.corridors_with_traffic()
        )
        return f"Traffic({{{items}}})"
