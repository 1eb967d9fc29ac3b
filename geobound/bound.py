from typing import Iterable, NamedTuple

from geobound.types import Point, Polygon, Ring

ORIGIN = Point(0.0, 0.0)


class Bound(NamedTuple):
    """An axis-aligned box defined by its minimum and maximum corners.

    Nothing here knows about the anti-meridian. A bound whose minimum exceeds
    its maximum on either axis is malformed, see `is_empty`.
    """

    min: Point = ORIGIN
    max: Point = ORIGIN

    @classmethod
    def from_points(cls, corner: Point, opposite_corner: Point) -> "Bound":
        """Create a bound from two opposite corners, either sw/ne or se/nw."""
        return cls(corner, corner).extend(opposite_corner)

    @classmethod
    def from_coordinates(
        cls, min_lat: float, max_lat: float, min_lng: float, max_lng: float
    ) -> "Bound":
        """Create a Bound from individual coordinate values."""
        return cls.from_points(
            Point.from_latlng(min_lat, min_lng),
            Point.from_latlng(max_lat, max_lng),
        )

    def kind(self) -> str:
        return "Polygon"

    def dimensions(self) -> int:
        return 2

    def bound(self) -> "Bound":
        return self

    def to_ring(self) -> Ring:
        """The boundary of the box, counter-clockwise from the bottom left."""
        return [
            self.min,
            Point(self.max.x, self.min.y),
            self.max,
            Point(self.min.x, self.max.y),
            self.min,
        ]

    def to_polygon(self) -> Polygon:
        return [self.to_ring()]

    def extend(self, point: Point) -> "Bound":
        """Grow the bound to include the point."""
        if self.contains(point):
            return self

        return Bound(
            Point(min(self.min.x, point.x), min(self.min.y, point.y)),
            Point(max(self.max.x, point.x), max(self.max.y, point.y)),
        )

    def union(self, other: "Bound") -> "Bound":
        """Grow the bound to cover the other bound.

        All four corners are used, two are not enough when either bound is
        malformed.
        """
        b = self.extend(other.min)
        b = b.extend(other.max)
        b = b.extend(other.left_top)
        b = b.extend(other.right_bottom)
        return b

    def pad(self, d: float) -> "Bound":
        """Expand the bound by d on every side. Negative d shrinks it."""
        return Bound(
            Point(self.min.x - d, self.min.y - d),
            Point(self.max.x + d, self.max.y + d),
        )

    def contains(self, point: Point) -> bool:
        """Points on the boundary are considered within."""
        if point.y < self.min.y or self.max.y < point.y:
            return False

        if point.x < self.min.x or self.max.x < point.x:
            return False

        return True

    def intersects(self, other: "Bound") -> bool:
        """True when the bounds overlap or touch."""
        if (
            self.max.x < other.min.x
            or self.min.x > other.max.x
            or self.max.y < other.min.y
            or self.min.y > other.max.y
        ):
            return False

        return True

    def is_empty(self) -> bool:
        """True if the bound is in a malformed negative state.

        A zero area bound is not empty.
        """
        return self.min.x > self.max.x or self.min.y > self.max.y

    def is_zero(self) -> bool:
        """True if the bound covers just null island."""
        return self == Bound()

    def equal(self, other: "Bound") -> bool:
        return self.min == other.min and self.max == other.max

    @property
    def top(self) -> float:
        return self.max.y

    @property
    def bottom(self) -> float:
        return self.min.y

    @property
    def right(self) -> float:
        return self.max.x

    @property
    def left(self) -> float:
        return self.min.x

    @property
    def left_top(self) -> Point:
        return Point(self.left, self.top)

    @property
    def right_bottom(self) -> Point:
        return Point(self.right, self.bottom)

    @property
    def center(self) -> Point:
        return Point(
            (self.min.x + self.max.x) / 2.0,
            (self.min.y + self.max.y) / 2.0,
        )


def bound_of(points: Iterable[Point]) -> Bound:
    """
    Compute the smallest bound covering every point.

    Args:
        points: Points to cover, in any order.

    Returns:
        The covering Bound.

    Raises:
        ValueError: If no points are given.
    """
    iterator = iter(points)
    first = next(iterator, None)
    if first is None:
        raise ValueError("Cannot compute the bound of zero points")

    b = Bound(first, first)
    for point in iterator:
        b = b.extend(point)
    return b
