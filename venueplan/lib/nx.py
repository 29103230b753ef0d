"""NetworkX conversion utilities for corridor traffic.

Example:
    >>> from venueplan.lib.nx import venue_to_networkx
    >>> G = venue_to_networkx(venue)
    >>> G.edges["l0", "l1"]
    {'capacity': 100, 'traffic': 50}
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from venueplan.model.corridor import Corridor
from venueplan.model.event import Event
from venueplan.model.location import Location
from venueplan.model.traffic import Traffic
from venueplan.model.venue import Venue

if TYPE_CHECKING:
    import networkx as nx


def traffic_to_networkx(
    traffic: Traffic,
    *,
    capacity_attr: str = "capacity",
    traffic_attr: str = "traffic",
) -> "nx.DiGraph":
    """Convert a traffic record to a NetworkX DiGraph.

    Nodes are location names; there is one edge per corridor with traffic,
    carrying the corridor capacity and the traffic volume.

    Args:
        traffic: Record to convert.
        capacity_attr: Edge attribute name for corridor capacity.
        traffic_attr: Edge attribute name for traffic volume.

    Returns:
        nx.DiGraph with one edge per loaded corridor.
    """
    import networkx as nx

    if traffic is None:
        raise TypeError("Traffic must not be None.")

    G = nx.DiGraph()
    for corridor in traffic.corridors_with_traffic():
        G.add_edge(
            corridor.start.name,
            corridor.end.name,
            **{
                capacity_attr: corridor.capacity,
                traffic_attr: traffic.get_traffic(corridor),
            },
        )
    return G


def venue_to_networkx(
    venue: Venue,
    event: Optional[Event] = None,
    *,
    capacity_attr: str = "capacity",
    traffic_attr: str = "traffic",
) -> "nx.DiGraph":
    """Convert the traffic a venue generates to a NetworkX DiGraph.

    Args:
        venue: Venue whose traffic is exported.
        event: Event to scale the traffic for; full capacity when None.
        capacity_attr: Edge attribute name for corridor capacity.
        traffic_attr: Edge attribute name for traffic volume.

    Returns:
        nx.DiGraph with graph attributes ``venue`` (name) and ``size``.
    """
    if venue is None:
        raise TypeError("Venue must not be None.")
    if event is None:
        traffic = venue.capacity_traffic()
        size = venue.capacity
    else:
        traffic = venue.get_traffic(event)
        size = event.size

    G = traffic_to_networkx(
        traffic, capacity_attr=capacity_attr, traffic_attr=traffic_attr
    )
    G.graph["venue"] = venue.name
    G.graph["size"] = size
    return G


def traffic_from_networkx(
    G: "nx.DiGraph",
    *,
    capacity_attr: str = "capacity",
    traffic_attr: str = "traffic",
    default_capacity: int = 0,
) -> Traffic:
    """Build a traffic record from a NetworkX DiGraph.

    Args:
        G: Directed graph whose edges carry traffic volumes.
        capacity_attr: Edge attribute name for corridor capacity.
        traffic_attr: Edge attribute name for traffic volume.
        default_capacity: Capacity used when an edge has no capacity attribute.

    Returns:
        Traffic with one entry per edge (missing traffic reads as 0).

    Raises:
        TypeError: If G is not a NetworkX DiGraph.
    """
    import networkx as nx

    if not isinstance(G, nx.DiGraph) or G.is_multigraph():
        raise TypeError(f"Expected NetworkX DiGraph, got {type(G).__name__}")

    traffic = Traffic()
    for u, v, data in G.edges(data=True):
        corridor = Corridor(
            Location(str(u)),
            Location(str(v)),
            int(data.get(capacity_attr, default_capacity)),
        )
        traffic.update_traffic(corridor, int(data.get(traffic_attr, 0)))
    return traffic
