"""Data models and schemas.

Defines the data structures produced by extraction:
- Rect: Axis-aligned bounding rectangle used as the index key
- SpatialSummary: id, name, placetype and bounds for R-tree insertion
- Polygon: One ring of (lat, lon) points for containment testing
- PolygonGeometry / MultiPolygonGeometry / OtherGeometry: decoded geometry variants
"""

from wof_geojson.models.geometry import (
    Geometry,
    MultiPolygonGeometry,
    OtherGeometry,
    Polygon,
    PolygonGeometry,
    any_contains,
)
from wof_geojson.models.spatial import Rect, SpatialSummary

__all__ = [
    "Geometry",
    "MultiPolygonGeometry",
    "OtherGeometry",
    "Polygon",
    "PolygonGeometry",
    "Rect",
    "SpatialSummary",
    "any_contains",
]
