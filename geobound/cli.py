"""Command-line interface for building and querying a bound."""

import argparse
import json
import logging
from typing import Any, List, Optional

from geobound import defaults
from geobound.bound import Bound
from geobound.logging import configure, log_action
from geobound.types import Point

logger = logging.getLogger(__name__)


def parse_point(value: str) -> Point:
    """Parse a "LON,LAT" argument."""
    parts = value.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected LON,LAT but got {value!r}")
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid coordinates in {value!r}")


def parse_bound(value: str) -> Bound:
    """Parse a "MIN_LON,MIN_LAT,MAX_LON,MAX_LAT" argument."""
    parts = value.split(",")
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(
            f"Expected MIN_LON,MIN_LAT,MAX_LON,MAX_LAT but got {value!r}"
        )
    try:
        min_x, min_y, max_x, max_y = (float(part) for part in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid coordinates in {value!r}")
    return Bound.from_points(Point(min_x, min_y), Point(max_x, max_y))


def create_argument_parser(
    min_lat: float,
    max_lat: float,
    min_lon: float,
    max_lon: float,
    pad: float,
    log_file: Optional[str],
) -> argparse.ArgumentParser:
    """
    Create and configure the CLI argument parser.

    Args:
        min_lat: Default minimum latitude for bounding box
        max_lat: Default maximum latitude for bounding box
        min_lon: Default minimum longitude for bounding box
        max_lon: Default maximum longitude for bounding box
        pad: Default padding applied after extending
        log_file: Default log file path, None logs to stderr

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Build a bounding box, grow it and query it."
    )

    parser.add_argument(
        "--min-lat",
        type=float,
        default=min_lat,
        help="Minimum latitude for bounding box",
    )
    parser.add_argument(
        "--max-lat",
        type=float,
        default=max_lat,
        help="Maximum latitude for bounding box",
    )
    parser.add_argument(
        "--min-lon",
        type=float,
        default=min_lon,
        help="Minimum longitude for bounding box",
    )
    parser.add_argument(
        "--max-lon",
        type=float,
        default=max_lon,
        help="Maximum longitude for bounding box",
    )
    parser.add_argument(
        "--extend",
        type=parse_point,
        action="append",
        default=[],
        metavar="LON,LAT",
        help="Grow the bounding box to include a point (repeatable)",
    )
    parser.add_argument(
        "--union",
        type=parse_bound,
        action="append",
        default=[],
        metavar="MIN_LON,MIN_LAT,MAX_LON,MAX_LAT",
        help="Grow the bounding box to cover another box (repeatable)",
    )
    parser.add_argument(
        "--pad",
        type=float,
        default=pad,
        help="Pad every side of the result, negative values shrink it",
    )
    parser.add_argument(
        "--contains",
        type=parse_point,
        action="append",
        default=[],
        metavar="LON,LAT",
        help="Report whether the result contains a point (repeatable)",
    )
    parser.add_argument(
        "--log-file", type=str, default=log_file, help="Path to the log file"
    )

    return parser


def build_bound(
    min_lat: float,
    max_lat: float,
    min_lon: float,
    max_lon: float,
    extend: List[Point],
    union: List[Bound],
    pad: float,
) -> Bound:
    bound = Bound.from_coordinates(min_lat, max_lat, min_lon, max_lon)
    for point in extend:
        bound = bound.extend(point)
    for other in union:
        bound = bound.union(other)
    if pad:
        bound = bound.pad(pad)
    return bound


def summarize(bound: Bound, queries: List[Point]) -> dict[str, Any]:
    return {
        "min": list(bound.min),
        "max": list(bound.max),
        "center": list(bound.center),
        "ring": [list(point) for point in bound.to_ring()],
        "is_empty": bound.is_empty(),
        "is_zero": bound.is_zero(),
        "contains": {f"{p.x},{p.y}": bound.contains(p) for p in queries},
    }


def run(args: argparse.Namespace) -> dict[str, Any]:
    bound = log_action(
        "Building bound",
        lambda: build_bound(
            min_lat=args.min_lat,
            max_lat=args.max_lat,
            min_lon=args.min_lon,
            max_lon=args.max_lon,
            extend=args.extend,
            union=args.union,
            pad=args.pad,
        ),
    )
    if bound.is_empty():
        logger.warning(f"Bound is malformed after padding by {args.pad}: {bound}")
    return summarize(bound, args.contains)


def main(argv: Optional[List[str]] = None) -> None:
    parser = create_argument_parser(
        min_lat=defaults.MIN_LAT,
        max_lat=defaults.MAX_LAT,
        min_lon=defaults.MIN_LON,
        max_lon=defaults.MAX_LON,
        pad=defaults.PAD,
        log_file=defaults.LOG_FILE,
    )
    args = parser.parse_args(argv)

    configure(args.log_file)

    print(json.dumps(run(args), indent=2))


if __name__ == "__main__":
    main()
