"""venueplan: venues, the corridor traffic their events generate, and venue files.

Primary API:
    read_venues() - Read an ordered list of venues from a venue file
    VenueReader - The underlying line-by-line record parser
    Venue - Venue with capacity and traffic scaling for smaller events
    Traffic, Corridor, Location, Event - Value types used by venues
    FormatError - Raised with a line number when a venue file is malformed

Example:
    from venueplan import Event, read_venues

    venues = read_venues("venues.txt")
    concert = Event("Concert", 40_000)
    for venue in venues:
        if venue.can_host(concert):
            print(venue.get_traffic(concert))
"""

from __future__ import annotations

from venueplan import cli, logging
from venueplan._version import __version__
from venueplan.exceptions import FormatError, InvalidTrafficError
from venueplan.io import dump_venues, venues_to_dict, write_venues
from venueplan.model import Corridor, Event, Location, Traffic, Venue
from venueplan.reader import ReaderState, VenueReader, read_venues

__all__ = [
    # Version
    "__version__",
    # Model
    "Location",
    "Corridor",
    "Event",
    "Traffic",
    "Venue",
    # Reading and writing
    "read_venues",
    "VenueReader",
    "ReaderState",
    "dump_venues",
    "write_venues",
    "venues_to_dict",
    # Errors
    "FormatError",
    "InvalidTrafficError",
    # Utilities
    "cli",
    "logging",
]
