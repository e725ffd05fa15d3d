"""Typed decoding of GeoJSON area geometry.

Each supported type has an explicit decoder that either returns a typed
geometry variant or raises ``GeometryDecodeError`` naming the offending
element by index path (``coordinates[1][0][3]``). Types other than
Polygon and MultiPolygon decode to ``OtherGeometry`` without inspecting
their coordinates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from wof_geojson.core.constants import GEOMETRY_KEY, GEOMETRY_MULTIPOLYGON, GEOMETRY_POLYGON
from wof_geojson.core.exceptions import GeometryDecodeError
from wof_geojson.models.geometry import (
    Geometry,
    MultiPolygonGeometry,
    OtherGeometry,
    PolygonGeometry,
)

if TYPE_CHECKING:
    from wof_geojson.document import FeatureDocument
    from wof_geojson.models.geometry import LonLatRing


def decode_geometry(doc: FeatureDocument) -> Geometry:
    """Decode ``geometry`` into one of the closed set of variants.

    A missing geometry, or one without a string ``type``, is ``OtherGeometry``.

    Raises:
        GeometryDecodeError: If a Polygon or MultiPolygon has coordinates
            of the wrong shape.
    """
    geom_type = doc.search(GEOMETRY_KEY, "type")
    if not isinstance(geom_type, str):
        return OtherGeometry()

    if geom_type not in (GEOMETRY_POLYGON, GEOMETRY_MULTIPOLYGON):
        return OtherGeometry(type=geom_type)

    coordinates = doc.search(GEOMETRY_KEY, "coordinates")
    try:
        if geom_type == GEOMETRY_POLYGON:
            return decode_polygon(coordinates)
        return decode_multipolygon(coordinates)
    except GeometryDecodeError as exc:
        exc.source = doc.source
        raise


def decode_polygon(coordinates: Any, *, path: str = "coordinates") -> PolygonGeometry:
    """Decode Polygon coordinates: an array of rings of ``[lon, lat]`` positions.

    Raises:
        GeometryDecodeError: On any shape mismatch.
    """
    rings = _expect_array(coordinates, path, "an array of rings")
    return PolygonGeometry(
        rings=tuple(_decode_ring(ring, f"{path}[{idx}]") for idx, ring in enumerate(rings))
    )


def decode_multipolygon(coordinates: Any, *, path: str = "coordinates") -> MultiPolygonGeometry:
    """Decode MultiPolygon coordinates: an array of Polygon coordinate arrays.

    Raises:
        GeometryDecodeError: On any shape mismatch.
    """
    polygons = _expect_array(coordinates, path, "an array of polygons")
    return MultiPolygonGeometry(
        polygons=tuple(
            decode_polygon(polygon, path=f"{path}[{idx}]") for idx, polygon in enumerate(polygons)
        )
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _decode_ring(ring: Any, path: str) -> LonLatRing:
    positions = _expect_array(ring, path, "an array of positions")
    return tuple(_decode_position(pos, f"{path}[{idx}]") for idx, pos in enumerate(positions))


def _decode_position(position: Any, path: str) -> tuple[float, float]:
    """Return ``(lon, lat)``; altitude and further members are dropped."""
    values = _expect_array(position, path, "a [lon, lat] position")
    if len(values) < 2:
        msg = f"Malformed position at {path}: expected at least 2 elements, got {len(values)}"
        raise GeometryDecodeError(msg)

    lon, lat = values[0], values[1]
    for name, value in (("lon", lon), ("lat", lat)):
        if isinstance(value, bool) or not isinstance(value, int | float):
            msg = f"Malformed position at {path}: {name} is not numeric ({value!r})"
            raise GeometryDecodeError(msg)
    try:
        return (float(lon), float(lat))
    except OverflowError as exc:
        msg = f"Malformed position at {path}: coordinate is out of float range"
        raise GeometryDecodeError(msg) from exc


def _expect_array(value: Any, path: str, expected: str) -> tuple[Any, ...]:
    if not isinstance(value, tuple | list):
        msg = f"Malformed geometry at {path}: expected {expected}, got {type(value).__name__}"
        raise GeometryDecodeError(msg)
    return tuple(value)
