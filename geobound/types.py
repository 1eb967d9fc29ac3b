from typing import TYPE_CHECKING, NamedTuple, Protocol, TypeAlias

if TYPE_CHECKING:
    from geobound.bound import Bound


class Point(NamedTuple):
    """A longitude/latitude (or planar x/y) coordinate pair."""

    x: float
    y: float

    @classmethod
    def from_latlng(cls, lat: float, lng: float) -> "Point":
        """Create a Point from a latitude/longitude pair."""
        return cls(lng, lat)


# A closed loop of points, first point equal to the last.
Ring: TypeAlias = list[Point]

Polygon: TypeAlias = list[Ring]


class Shape(Protocol):
    """Operations generic geometry code relies on."""

    def kind(self) -> str: ...

    def dimensions(self) -> int: ...

    def bound(self) -> "Bound": ...
