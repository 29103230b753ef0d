"""Venues and the traffic generated by the events they host.

A venue has a name and a capacity: the maximum number of people that can
attend an event there at once. Hosting an event generates traffic on some
corridors of the road network. The traffic recorded for an event of size
equal to the capacity is the baseline; an event of size ``K`` at a venue of
capacity ``C`` generates ``(K * X) // C`` on a corridor whose baseline traffic
is ``X``. Apart from the integer truncation, generated traffic is linearly
proportional to the event size.
"""

from __future__ import annotations

from typing import Any

from venueplan.config import LINE_SEPARATOR
from venueplan.exceptions import InvalidTrafficError
from venueplan.model.event import Event
from venueplan.model.traffic import Traffic


class Venue:
    """An immutable venue in the municipality.

    Args:
        name: Name of the venue; must be a non-empty string.
        capacity: Capacity of the venue; must be greater than zero.
        capacity_traffic: Traffic generated by an event of size ``capacity``.
            The venue keeps its own copy; later changes to the caller's
            record have no effect on the venue.

    Raises:
        TypeError: If ``name`` or ``capacity_traffic`` is None, or ``capacity``
            is not an int.
        ValueError: If ``name`` is empty or ``capacity`` is not positive.
        InvalidTrafficError: If the traffic on any corridor exceeds ``capacity``.
    """

    __slots__ = ("_name", "_capacity", "_traffic")

    def __init__(self, name: str, capacity: int, capacity_traffic: Traffic) -> None:
        if name is None:
            raise TypeError("Venue name must not be None.")
        if capacity_traffic is None:
            raise TypeError("Venue capacity traffic must not be None.")
        if name == "":
            raise ValueError("Venue name must not be empty.")
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(
                f"Venue capacity must be an int, got {type(capacity).__name__}"
            )
        if capacity <= 0:
            raise ValueError(f"Venue capacity must be greater than zero, got {capacity}")
        for corridor in capacity_traffic.corridors_with_traffic():
            volume = capacity_traffic.get_traffic(corridor)
            if volume > capacity:
                raise InvalidTrafficError(
                    f"Traffic {volume} on {corridor} exceeds venue capacity {capacity}"
                )

        self._name = name
        self._capacity = capacity
        self._traffic = Traffic(capacity_traffic)

    @property
    def name(self) -> str:
        """Name of the venue."""
        return self._name

    @property
    def capacity(self) -> int:
        """Maximum event size the venue can host."""
        return self._capacity

    def capacity_traffic(self) -> Traffic:
        """Return a copy of the traffic generated by an event at full capacity."""
        return Traffic(self._traffic)

    def can_host(self, event: Event) -> bool:
        """Return True if ``event`` is no larger than the venue's capacity.

        Raises:
            TypeError: If ``event`` is None.
        """
        if event is None:
            raise TypeError("Event must not be None.")
        return event.size <= self._capacity

    def get_traffic(self, event: Event) -> Traffic:
        """Return the traffic generated by hosting ``event`` at this venue.

        For each corridor with baseline traffic ``X`` the generated traffic is
        ``(K * X) // C`` where ``K`` is the event size and ``C`` the venue
        capacity. Corridors without baseline traffic are not included.

        Raises:
            TypeError: If ``event`` is None.
            ValueError: If the event size exceeds the venue capacity.
        """
        if event is None:
            raise TypeError("Event must not be None.")
        if event.size > self._capacity:
            raise ValueError(
                f"Event size {event.size} exceeds capacity {self._capacity} "
                f"of venue '{self._name}'"
            )

        generated = Traffic()
        for corridor in self._traffic.corridors_with_traffic():
            volume = self._traffic.get_traffic(corridor)
            generated.update_traffic(corridor, (event.size * volume) // self._capacity)
        return generated

    def check_invariant(self) -> bool:
        """Return True if the venue satisfies its class invariant.

        Only intended for tests and diagnostics.
        """
        if self._name is None or self._name == "" or self._traffic is None:
            return False
        if isinstance(self._capacity, bool) or not isinstance(self._capacity, int):
            return False
        if self._capacity <= 0:
            return False
        return all(
            self._traffic.get_traffic(c) <= self._capacity
            for c in self._traffic.corridors_with_traffic()
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Venue):
            return NotImplemented
        return (
            self._name == other._name
            and self._capacity == other._capacity
            and self._traffic.same_traffic(other._traffic)
        )

    def __hash__(self) -> int:
        # Zero entries compare equal to absent ones, so only non-zero
        # corridors may contribute.
        loaded = frozenset(
            (c, self._traffic.get_traffic(c))
            for c in self._traffic.corridors_with_traffic()
        )
        return hash((self._name, self._capacity, loaded))

    def __str__(self) -> str:
        return f"{self._name} ({self._capacity}){LINE_SEPARATOR}{self._traffic}"

    def __repr__(self) -> str:
        return (
            f"Venue(name={self._name!r}, capacity={self._capacity}, "
            f"corridors={len(self._traffic)})"
        )
