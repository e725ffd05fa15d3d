"""Who's On First GeoJSON feature extraction.

Reads a single WOF GeoJSON feature document and derives the two artifacts
a point-in-polygon service needs: a spatial summary (id, name, placetype,
bounding rectangle) for R-tree insertion, and a flat list of polygon rings
for containment testing.
"""

from wof_geojson.activities.bounds import derive_bounds
from wof_geojson.activities.decompose import decode_geometry, decompose_polygons
from wof_geojson.activities.extract import ExtractedFeature, extract_feature
from wof_geojson.activities.metadata import MetadataDefaults, MetadataExtractor
from wof_geojson.activities.spatialize import spatialize
from wof_geojson.document import FeatureDocument
from wof_geojson.models.geometry import Polygon
from wof_geojson.models.spatial import Rect, SpatialSummary

__version__ = "0.1.0"

__all__ = [
    "ExtractedFeature",
    "FeatureDocument",
    "MetadataDefaults",
    "MetadataExtractor",
    "Polygon",
    "Rect",
    "SpatialSummary",
    "decode_geometry",
    "decompose_polygons",
    "derive_bounds",
    "extract_feature",
    "spatialize",
]
