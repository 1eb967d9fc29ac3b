"""Conversions between bounds and shapely geometries."""

import shapely

from geobound.bound import Bound
from geobound.types import Point


def to_shapely(bound: Bound) -> shapely.Polygon:
    """Build a shapely polygon whose exterior is the bound's ring, in ring order."""
    return shapely.Polygon(bound.to_ring())


def from_shapely(geometry: shapely.Geometry) -> Bound:
    """
    Compute the bound of a shapely geometry.

    Args:
        geometry: Any non-empty shapely geometry.

    Returns:
        The Bound of the geometry's envelope.

    Raises:
        ValueError: If the geometry is empty.
    """
    if geometry.is_empty:
        raise ValueError(f"Cannot compute the bound of an empty {geometry.geom_type}")

    min_x, min_y, max_x, max_y = geometry.bounds
    return Bound(Point(min_x, min_y), Point(max_x, max_y))
