"""Data models for decoded feature geometry.

``Polygon`` is a single ring in ``(lat, lon)`` order, the representation a
point-in-polygon routine consumes. The geometry variants form a closed set:
a document's geometry decodes to exactly one of ``PolygonGeometry``,
``MultiPolygonGeometry``, or ``OtherGeometry``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from wof_geojson.core.constants import MIN_RING_POINTS_FOR_AREA

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shapely.geometry import Polygon as ShapelyPolygon

# (lat, lon)
LatLon = tuple[float, float]
# A raw GeoJSON ring after decoding, still in (lon, lat) order
LonLatRing = tuple[tuple[float, float], ...]


@dataclass(frozen=True, slots=True)
class Polygon:
    """One closed-or-open ring of ``(lat, lon)`` points.

    Points are kept exactly as decoded: no closing point is appended and
    winding order is untouched.
    """

    points: tuple[LatLon, ...] = ()

    @classmethod
    def from_lonlat(cls, ring: Iterable[tuple[float, float]]) -> Polygon:
        """Build a ring from GeoJSON ``(lon, lat)`` pairs, swapping to ``(lat, lon)``."""
        return cls(points=tuple((lat, lon) for lon, lat in ring))

    @property
    def vertex_count(self) -> int:
        return len(self.points)

    @property
    def is_closed(self) -> bool:
        """Whether the last point repeats the first."""
        return len(self.points) > 1 and self.points[0] == self.points[-1]

    def to_shapely(self) -> ShapelyPolygon:
        """Return the ring as a shapely polygon (lon as x, lat as y).

        Raises:
            ValueError: If the ring has fewer than 3 points.
        """
        if len(self.points) < MIN_RING_POINTS_FOR_AREA:
            msg = (
                f"Ring has only {len(self.points)} point(s), need at least "
                f"{MIN_RING_POINTS_FOR_AREA} to form an area"
            )
            raise ValueError(msg)

        from shapely.geometry import Polygon as ShapelyPolygon

        return ShapelyPolygon([(lon, lat) for lat, lon in self.points])

    def contains(self, lat: float, lon: float) -> bool:
        """Whether the point lies strictly inside the ring.

        Rings too short to bound an area contain nothing.
        """
        if len(self.points) < MIN_RING_POINTS_FOR_AREA:
            return False

        from shapely.geometry import Point

        return bool(self.to_shapely().contains(Point(lon, lat)))


def any_contains(polygons: Iterable[Polygon], lat: float, lon: float) -> bool:
    """Whether any ring in ``polygons`` contains the point."""
    return any(polygon.contains(lat, lon) for polygon in polygons)


# ---------------------------------------------------------------------------
# Decoded geometry variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PolygonGeometry:
    """GeoJSON Polygon: a sequence of rings in ``(lon, lat)`` order."""

    rings: tuple[LonLatRing, ...] = ()

    @property
    def interior_ring_count(self) -> int:
        return max(len(self.rings) - 1, 0)


@dataclass(frozen=True, slots=True)
class MultiPolygonGeometry:
    """GeoJSON MultiPolygon: a sequence of polygons, each a sequence of rings."""

    polygons: tuple[PolygonGeometry, ...] = ()

    @property
    def interior_ring_count(self) -> int:
        return sum(polygon.interior_ring_count for polygon in self.polygons)


@dataclass(frozen=True, slots=True)
class OtherGeometry:
    """Any geometry that is not an area (Point, LineString, ...) or is absent."""

    type: str = ""


Geometry = PolygonGeometry | MultiPolygonGeometry | OtherGeometry
