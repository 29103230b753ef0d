"""Command-line interface for venueplan."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

import yaml

from venueplan.exceptions import FormatError
from venueplan.io import venues_to_dict
from venueplan.logging import get_logger, set_global_log_level
from venueplan.model.event import Event
from venueplan.model.traffic import Traffic
from venueplan.model.venue import Venue
from venueplan.reader import read_venues

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 8,
    max_col_width: Optional[int] = None,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width
        max_col_width: Cells longer than this are clipped with "..."

    Returns:
        Formatted table string, or "" when there are no rows
    """
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    clipped_headers = [clip(h) for h in headers]
    clipped_rows = [[clip(item) for item in row] for row in rows]

    all_data = [clipped_headers] + clipped_rows
    col_widths = []
    for col_idx in range(len(clipped_headers)):
        max_width = max(len(row[col_idx]) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(clipped_headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in clipped_rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _traffic_rows(traffic: Traffic) -> List[List[Any]]:
    return [
        [c.start.name, c.end.name, c.capacity, traffic.get_traffic(c)]
        for c in traffic.corridors_with_traffic()
    ]


def _print_venues(venues: List[Venue], detail: bool) -> None:
    print("\n" + "=" * 60)
    print("VENUE FILE INSPECTION")
    print("=" * 60)

    total_capacity = sum(v.capacity for v in venues)
    print(f"\n{len(venues)} {_plural(len(venues), 'venue')}, total capacity {total_capacity:,}")
    if not venues:
        return

    rows = [
        [v.name, f"{v.capacity:,}", len(v.capacity_traffic())] for v in venues
    ]
    print()
    print(_format_table(["Venue", "Capacity", "Corridors"], rows, max_col_width=40))

    if not detail:
        return
    for venue in venues:
        print(f"\n{venue.name} ({venue.capacity})")
        table = _format_table(
            ["Start", "End", "Capacity", "Traffic"],
            _traffic_rows(venue.capacity_traffic()),
        )
        print(table if table else "   (no corridor traffic)")


def _inspect_venues(path: Path, detail: bool = False, fmt: str = "text") -> None:
    """Read a venue file, validate it, and print a summary.

    Args:
        path: Venue file.
        detail: Whether to print the corridor traffic of every venue.
        fmt: Output format: "text", "json" or "yaml".
    """
    logger.info(f"Inspecting venues from: {path}")
    _start_time = perf_counter()

    try:
        venues = read_venues(path)
    except FileNotFoundError:
        logger.error(f"Venue file not found: {path}")
        print(f"❌ ERROR: Venue file not found: {path}")
        sys.exit(1)
    except (FormatError, OSError) as e:
        logger.error(f"Failed to read venues: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to read venues: {type(e).__name__}: {e}")
        sys.exit(1)

    if fmt == "json":
        print(json.dumps(venues_to_dict(venues), indent=2))
    elif fmt == "yaml":
        print(yaml.safe_dump(venues_to_dict(venues), sort_keys=False), end="")
    else:
        _print_venues(venues, detail)

    _elapsed = perf_counter() - _start_time
    logger.info(f"Venue inspection completed in {_format_duration(_elapsed)}")


def _venue_traffic(path: Path, venue_name: str, size: int) -> None:
    """Print the traffic generated by an event of ``size`` at ``venue_name``."""
    try:
        venues = read_venues(path)
        matches = [v for v in venues if v.name == venue_name]
        if not matches:
            raise ValueError(f"No venue named '{venue_name}' in {path}")
        event = Event(f"event at {venue_name}", size)
        for venue in matches:
            if not venue.can_host(event):
                print(
                    f"{venue.name} ({venue.capacity}) cannot host an event of size {size}"
                )
                continue
            traffic = venue.get_traffic(event)
            print(f"{venue.name} ({venue.capacity}), event size {size}")
            table = _format_table(
                ["Start", "End", "Capacity", "Traffic"], _traffic_rows(traffic)
            )
            print(table if table else "   (no corridor traffic)")
    except FileNotFoundError:
        logger.error(f"Venue file not found: {path}")
        print(f"❌ ERROR: Venue file not found: {path}")
        sys.exit(1)
    except (FormatError, OSError, ValueError) as e:
        logger.error(f"Failed to compute traffic: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to compute traffic: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``venueplan`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="venueplan",
        description="Inspect venue files and the traffic their events generate.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{inspect,traffic}",
        help="Available commands",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate a venue file and summarize its venues"
    )
    inspect_parser.add_argument("venues", type=Path, help="Path to venue file")
    inspect_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="Show the corridor traffic of every venue",
    )
    inspect_parser.add_argument(
        "--format",
        "-f",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (default: text)",
    )

    traffic_parser = subparsers.add_parser(
        "traffic", help="Show the traffic generated by an event at a venue"
    )
    traffic_parser.add_argument("venues", type=Path, help="Path to venue file")
    traffic_parser.add_argument(
        "--venue", "-n", required=True, help="Name of the venue hosting the event"
    )
    traffic_parser.add_argument(
        "--size", "-s", type=int, required=True, help="Event size (attendance)"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "inspect":
        _inspect_venues(args.venues, args.detail, args.format)
    elif args.command == "traffic":
        _venue_traffic(args.venues, args.venue, args.size)


if __name__ == "__main__":
    main()
