"""Reader for the line-oriented venue file format.

A venue file holds zero or more venue records, one after the other and with
nothing in between. Each record consists of:

1. one line with the venue name (any characters, but not empty);
2. one line with the venue capacity, a positive integer with no leading or
   trailing whitespace;
3. one line per corridor with traffic at full capacity, of the form
   ``START, END, CAPACITY: TRAFFIC``. START and END may contain any
   characters other than ``,`` and ``:``. CAPACITY and TRAFFIC are integers
   without surrounding whitespace. TRAFFIC must not exceed the venue capacity
   or the corridor capacity, and a corridor may appear only once per record;
4. one empty line.

For example::

    Suncorp Stadium
    100
    l0, l1, 100: 50
    l1, l2, 200: 100

Two equal venues (see :class:`~venueplan.model.venue.Venue`) may not appear
in the same file. Every problem is reported as a
:class:`~venueplan.exceptions.FormatError` carrying the line number where it
was detected; reading stops at the first problem.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from venueplan.config import READER_CONFIG, ReaderConfig
from venueplan.exceptions import FormatError
from venueplan.logging import get_logger
from venueplan.model.corridor import Corridor
from venueplan.model.location import Location
from venueplan.model.traffic import Traffic
from venueplan.model.venue import Venue

LOGGER = get_logger(__name__)

# A field separator is a comma or colon plus at most one whitespace character.
_FIELD_SPLIT = re.compile(r"[,:]\s?")
_SEPARATOR = re.compile(r"[,:]")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_CORRIDOR_SEPARATORS = [",", ",", ":"]


class ReaderState(Enum):
    """States of the record parser."""

    AWAITING_NAME = "awaiting_name"
    AWAITING_CAPACITY = "awaiting_capacity"
    ACCUMULATING_CORRIDORS = "accumulating_corridors"


@dataclass
class _RecordAccumulator:
    """Fields of the venue record currently being read."""

    name: str = ""
    capacity: int = 0
    corridors: List[Corridor] = field(default_factory=list)
    volumes: List[int] = field(default_factory=list)

    def reset(self) -> None:
        self.name = ""
        self.capacity = 0
        self.corridors.clear()
        self.volumes.clear()

    def build_traffic(self) -> Traffic:
        traffic = Traffic()
        for corridor, volume in zip(self.corridors, self.volumes):
            traffic.update_traffic(corridor, volume)
        return traffic


def parse_integer(text: str) -> Optional[int]:
    """Return ``text`` as an int, or None if it is not a bare integer.

    Only an optional sign followed by ASCII digits is accepted; surrounding
    whitespace, underscores and decimal points are rejected.
    """
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)


def split_corridor_line(line: str) -> List[str]:
    """Split a corridor line into its fields, dropping trailing empty fields.

    Example:
        >>> split_corridor_line("St. Lucia, EKKA, 120: 60")
        ['St. Lucia', 'EKKA', '120', '60']
    """
    fields = _FIELD_SPLIT.split(line)
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def parse_corridor_line(
    line: str, venue_capacity: int, line_number: int
) -> Tuple[Corridor, int]:
    """Parse one ``START, END, CAPACITY: TRAFFIC`` line.

    Args:
        line: The line without its terminator.
        venue_capacity: Capacity of the venue the line belongs to.
        line_number: 1-based line number used in error messages.

    Returns:
        The corridor and the traffic it carries at full venue capacity.

    Raises:
        FormatError: If the line is malformed or its values are out of range.
    """
    fields = split_corridor_line(line)
    if len(fields) < 4:
        raise FormatError(line_number, "traffic value is missing.")
    if len(fields) > 4 or _SEPARATOR.findall(line) != _CORRIDOR_SEPARATORS:
        raise FormatError(
            line_number,
            "Corridor line must have the form 'START, END, CAPACITY: TRAFFIC'.",
        )

    start, end, capacity_text, traffic_text = fields
    corridor_capacity = parse_integer(capacity_text)
    volume = parse_integer(traffic_text)
    if corridor_capacity is None or volume is None:
        raise FormatError(
            line_number,
            "Capacity and Traffic values must be integers without "
            "additional leading or trailing whitespace.",
        )

    if start == "":
        raise FormatError(line_number, 'Corridor Start location must not be ""')
    if end == "":
        raise FormatError(line_number, 'Corridor End location must not be ""')

    if corridor_capacity < 0:
        raise FormatError(line_number, "Corridor capacity must be a positive integer.")
    if volume < 0:
        raise FormatError(line_number, "Generated traffic must be a positive integer.")
    if volume > venue_capacity:
        raise FormatError(
            line_number, "Generated traffic must not exceed Venue's capacity."
        )
    if volume > corridor_capacity:
        raise FormatError(
            line_number, "Generated traffic must not exceed Corridor capacity."
        )

    return Corridor(Location(start), Location(end), corridor_capacity), volume


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


class VenueReader:
    """Finite-state parser turning venue file lines into :class:`Venue` objects.

    The reader moves through ``AWAITING_NAME -> AWAITING_CAPACITY ->
    ACCUMULATING_CORRIDORS`` for every record and returns to
    ``AWAITING_NAME`` once the terminating empty line has been consumed.

    Args:
        config: File opening settings; defaults to :data:`READER_CONFIG`.
    """

    def __init__(self, config: Optional[ReaderConfig] = None) -> None:
        self.config = config if config is not None else READER_CONFIG
        self._handlers: Dict[ReaderState, Callable[[str], None]] = {
            ReaderState.AWAITING_NAME: self._read_name,
            ReaderState.AWAITING_CAPACITY: self._read_capacity,
            ReaderState.ACCUMULATING_CORRIDORS: self._read_corridor_or_terminator,
        }
        self._reset()

    @property
    def state(self) -> ReaderState:
        """Current parser state."""
        return self._state

    def read(self, path: Union[str, PathLike]) -> List[Venue]:
        """Read the venue file at ``path``.

        Returns:
            Venues in the order they appear in the file.

        Raises:
            OSError: If the file cannot be opened or read.
            FormatError: If the file does not follow the venue file format.
        """
        with open(path, "r", **self.config.open_kwargs()) as handle:
            venues = self.parse(handle)
        LOGGER.info("Read %d venue(s) from %s", len(venues), path)
        return venues

    def parse(self, lines: Iterable[str]) -> List[Venue]:
        """Parse venue records from an iterable of lines.

        Lines may carry their ``\\n`` or ``\\r\\n`` terminator or not.

        Raises:
            FormatError: On the first line that breaks the format, or at the
                last line if the input ends in the middle of a record.
        """
        self._reset()
        for line_number, raw_line in enumerate(lines, start=1):
            self._line_number = line_number
            self._handlers[self._state](_strip_terminator(raw_line))

        if self._state is not ReaderState.AWAITING_NAME:
            raise FormatError(
                self._line_number, "Empty line expected to complete venue."
            )
        return list(self._venues)

    def _reset(self) -> None:
        self._state = ReaderState.AWAITING_NAME
        self._record = _RecordAccumulator()
        self._venues: List[Venue] = []
        self._line_number = 0

    def _read_name(self, line: str) -> None:
        if line == "":
            raise FormatError(self._line_number, 'Venue name cannot be ""')
        self._record.name = line
        self._state = ReaderState.AWAITING_CAPACITY

    def _read_capacity(self, line: str) -> None:
        capacity = parse_integer(line)
        if capacity is None:
            raise FormatError(
                self._line_number,
                "Venue capacity invalid. Must be an integer with no "
                "leading/trailing whitespace.",
            )
        if capacity <= 0:
            raise FormatError(
                self._line_number, "Venue capacity must be positive integer."
            )
        self._record.capacity = capacity
        self._state = ReaderState.ACCUMULATING_CORRIDORS

    def _read_corridor_or_terminator(self, line: str) -> None:
        if line == "":
            self._complete_record()
            return
        if "," not in line:
            raise FormatError(
                self._line_number,
                "Unexpected information encountered OR venue not "
                "terminating with empty line.",
            )

        corridor, volume = parse_corridor_line(
            line, self._record.capacity, self._line_number
        )
        if corridor in self._record.corridors:
            raise FormatError(
                self._line_number,
                "same corridor appears more than once in traffic.",
            )
        self._record.corridors.append(corridor)
        self._record.volumes.append(volume)

    def _complete_record(self) -> None:
        record = self._record
        try:
            venue = Venue(record.name, record.capacity, record.build_traffic())
        except (TypeError, ValueError) as exc:
            raise FormatError(self._line_number, f"Invalid venue: {exc}") from exc

        if venue in self._venues:
            raise FormatError(self._line_number, "duplicate venue detected")

        self._venues.append(venue)
        LOGGER.debug(
            "Venue '%s' (capacity %d, %d corridor(s)) completed on line %d",
            venue.name,
            venue.capacity,
            len(record.corridors),
            self._line_number,
        )
        record.reset()
        self._state = ReaderState.AWAITING_NAME


def read_venues(
    path: Union[str, PathLike], config: Optional[ReaderConfig] = None
) -> List[Venue]:
    """Read a venue file and return its venues in file order.

    Args:
        path: Path of the venue file.
        config: Optional file opening settings.

    Raises:
        OSError: If the file cannot be opened or read.
        FormatError: If the file does not follow the venue file format.
    """
    return VenueReader(config).read(path)
