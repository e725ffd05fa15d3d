"""Data models for the spatial summary handed to an R-tree index.

A ``SpatialSummary`` is the minimal per-feature record (id, name,
placetype, bounding rectangle) needed to insert a WOF feature into a
rectangle-based spatial index. It is the output of ``spatialize``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from wof_geojson.core.constants import DEFAULT_WOF_ID, DEFAULT_WOF_NAME, DEFAULT_WOF_PLACETYPE

if TYPE_CHECKING:
    from shapely.geometry import Polygon as ShapelyPolygon


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle in WGS 84 degrees.

    The origin is the south-west corner ``(min_lon, min_lat)``. Width and
    height are not clamped: a reversed bbox yields negative extents.

    Attributes:
        origin_x: Minimum longitude.
        origin_y: Minimum latitude.
        width: Longitude extent (``max_lon - min_lon``).
        height: Latitude extent (``max_lat - min_lat``).
    """

    origin_x: float
    origin_y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return self.origin_x

    @property
    def min_y(self) -> float:
        return self.origin_y

    @property
    def max_x(self) -> float:
        return self.origin_x + self.width

    @property
    def max_y(self) -> float:
        return self.origin_y + self.height

    @property
    def is_inverted(self) -> bool:
        """Whether either extent is negative."""
        return self.width < 0 or self.height < 0

    def as_bbox(self) -> tuple[float, float, float, float]:
        """Return ``(min_lon, min_lat, max_lon, max_lat)``."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def to_shapely(self) -> ShapelyPolygon:
        """Return the rectangle as a shapely box (lon as x, lat as y)."""
        from shapely.geometry import box

        return box(*self.as_bbox())

    def to_dict(self) -> dict[str, float]:
        return {
            "origin_x": self.origin_x,
            "origin_y": self.origin_y,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Rect:
        """Deserialise from a transport dict.

        Raises:
            KeyError: If a field is missing.
            ValueError: If a field is not numeric.
        """
        return cls(
            origin_x=float(data["origin_x"]),  # type: ignore[arg-type]
            origin_y=float(data["origin_y"]),  # type: ignore[arg-type]
            width=float(data["width"]),  # type: ignore[arg-type]
            height=float(data["height"]),  # type: ignore[arg-type]
        )


@dataclass(frozen=True, slots=True)
class SpatialSummary:
    """A WOF feature reduced to what an R-tree index needs.

    Attributes:
        id: WOF identifier (sentinel ``-1`` by default when absent).
        name: WOF name (sentinel ``""`` by default when absent).
        placetype: WOF placetype (sentinel ``"unknown"`` by default when absent).
        bounds: Bounding rectangle used as the index key.
    """

    id: int
    name: str
    placetype: str
    bounds: Rect

    def to_dict(self) -> dict[str, object]:
        """Serialise to a dict for transport to an index process."""
        return {
            "id": self.id,
            "name": self.name,
            "placetype": self.placetype,
            "bounds": self.bounds.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> SpatialSummary:
        """Deserialise from a transport dict.

        Raises:
            TypeError: If ``bounds`` is not a dict.
        """
        bounds_raw = data.get("bounds")
        if not isinstance(bounds_raw, dict):
            msg = f"bounds must be a dict, got {type(bounds_raw).__name__}"
            raise TypeError(msg)

        return cls(
            id=int(data.get("id", DEFAULT_WOF_ID)),  # type: ignore[arg-type]
            name=str(data.get("name", DEFAULT_WOF_NAME)),
            placetype=str(data.get("placetype", DEFAULT_WOF_PLACETYPE)),
            bounds=Rect.from_dict(bounds_raw),
        )
