"""Domain model: locations, corridors, events, traffic and venues."""

from venueplan.model.corridor import Corridor
from venueplan.model.event import Event
from venueplan.model.location import Location
from venueplan.model.traffic import Traffic
from venueplan.model.venue import Venue

__all__ = ["Corridor", "Event", "Location", "Traffic", "Venue"]
