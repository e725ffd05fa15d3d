"""Ring flattening for decoded geometry.

Every ring becomes its own ``Polygon``, holes included, in encounter
order (sub-polygon order, then ring order). Interior rings are not
subtracted from their outer ring here; whoever tests containment gets
each of them as an independent candidate.
"""

from __future__ import annotations

from wof_geojson.models.geometry import (
    Geometry,
    MultiPolygonGeometry,
    Polygon,
    PolygonGeometry,
)


def flatten_rings(geometry: Geometry) -> list[Polygon]:
    """Flatten a decoded geometry into ``(lat, lon)`` rings.

    ``OtherGeometry`` flattens to an empty list.
    """
    if isinstance(geometry, PolygonGeometry):
        return _flatten_polygon(geometry)

    if isinstance(geometry, MultiPolygonGeometry):
        polygons: list[Polygon] = []
        for sub_polygon in geometry.polygons:
            polygons.extend(_flatten_polygon(sub_polygon))
        return polygons

    return []


def _flatten_polygon(geometry: PolygonGeometry) -> list[Polygon]:
    return [Polygon.from_lonlat(ring) for ring in geometry.rings]
