"""Serialization of venues to the venue file format and to plain dicts."""

from __future__ import annotations

from os import PathLike
from typing import Any, Dict, Iterable, List, Union

from venueplan.config import LINE_SEPARATOR
from venueplan.model.traffic import Traffic
from venueplan.model.venue import Venue


def format_venue(venue: Venue) -> List[str]:
    """Return the lines of ``venue``'s record, terminating empty line included.

    The output follows the grammar accepted by
    :class:`~venueplan.reader.VenueReader`, so it can be read back.
    """
    traffic = venue.capacity_traffic()
    lines = [venue.name, str(venue.capacity)]
    for corridor in traffic.corridors_with_traffic():
        lines.append(
            f"{corridor.start.name}, {corridor.end.name}, {corridor.capacity}: "
            f"{traffic.get_traffic(corridor)}"
        )
    lines.append("")
    return lines


def dump_venues(venues: Iterable[Venue], separator: str = "\n") -> str:
    """Return the venue file text describing ``venues`` in order."""
    return "".join(
        line + separator for venue in venues for line in format_venue(venue)
    )


def write_venues(venues: Iterable[Venue], path: Union[str, PathLike]) -> None:
    """Write ``venues`` to ``path`` in the venue file format (UTF-8)."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(dump_venues(venues, separator=LINE_SEPARATOR))


def traffic_to_list(traffic: Traffic) -> List[Dict[str, Any]]:
    """Return one ``{start, end, capacity, traffic}`` dict per corridor with traffic."""
    return [
        {
            "start": corridor.start.name,
            "end": corridor.end.name,
            "capacity": corridor.capacity,
            "traffic": traffic.get_traffic(corridor),
        }
        for corridor in traffic.corridors_with_traffic()
    ]


def venue_to_dict(venue: Venue) -> Dict[str, Any]:
    """Return a JSON/YAML-safe representation of ``venue``.

    {"name": str, "capacity": int,
     "traffic": [{"start": str, "end": str, "capacity": int, "traffic": int}, ...]}
    """
    return {
        "name": venue.name,
        "capacity": venue.capacity,
        "traffic": traffic_to_list(venue.capacity_traffic()),
    }


def venues_to_dict(venues: Iterable[Venue]) -> Dict[str, Any]:
    """Return ``{"venues": [...]}`` for an ordered collection of venues."""
    return {"venues": [venue_to_dict(venue) for venue in venues]}
