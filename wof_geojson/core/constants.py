"""Shared extraction constants, single source of truth.

Centralises the document paths and sentinel values that the metadata,
bounds, and geometry stages read, so no stage hard-codes a property name.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Document paths (dotted, ``:`` is part of WOF property names)
# ---------------------------------------------------------------------------

WOF_ID_PATH: str = "properties.wof:id"
"""Numeric Who's On First identifier."""

WOF_NAME_PATH: str = "properties.wof:name"
"""Default display name of the place."""

WOF_PLACETYPE_PATH: str = "properties.wof:placetype"
"""Place category (``country``, ``region``, ``locality``, ...)."""

BBOX_KEY: str = "bbox"
"""Top-level GeoJSON bounding box member."""

GEOMETRY_KEY: str = "geometry"

# ---------------------------------------------------------------------------
# Sentinel defaults applied when metadata is absent or mistyped
# ---------------------------------------------------------------------------

DEFAULT_WOF_ID: int = -1
DEFAULT_WOF_NAME: str = ""
DEFAULT_WOF_PLACETYPE: str = "unknown"

# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

GEOMETRY_POLYGON: str = "Polygon"
GEOMETRY_MULTIPOLYGON: str = "MultiPolygon"

# [minLon, minLat, maxLon, maxLat]
BBOX_ARITY: int = 4

# Smallest ring shapely can build an area from (closure is implicit)
MIN_RING_POINTS_FOR_AREA: int = 3

# Upper bound on document size read from disk (64 MiB)
DEFAULT_MAX_DOCUMENT_BYTES: int = 64 * 1024 * 1024
