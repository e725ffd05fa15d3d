"""Geometry decomposition: composable pipeline.

Turns a feature's geometry into the flat list of ``(lat, lon)`` rings a
point-in-polygon routine consumes.

The pipeline is split into focused stages:
- **_decoding**: ``geometry`` → typed variant (Polygon / MultiPolygon / Other)
- **_flatten**: typed variant → one ``Polygon`` per ring

Supported structures:
- Polygon: one entry per ring, interior rings included
- MultiPolygon: every ring of every sub-polygon, in encounter order
- Anything else (Point, LineString, GeometryCollection, no geometry): no rings

Rings are passed through as given: no closing point is added, winding is
untouched, and no degeneracy checks are made.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wof_geojson.activities.decompose._decoding import (
    decode_geometry,
    decode_multipolygon,
    decode_polygon,
)
from wof_geojson.activities.decompose._flatten import flatten_rings
from wof_geojson.core.config import ExtractionConfig
from wof_geojson.core.exceptions import GeometryDecodeError
from wof_geojson.models.geometry import OtherGeometry

if TYPE_CHECKING:
    from wof_geojson.document import FeatureDocument
    from wof_geojson.models.geometry import Polygon

logger = logging.getLogger("wof_geojson.activities.decompose")

__all__ = [
    "decode_geometry",
    "decode_multipolygon",
    "decode_polygon",
    "decompose_polygons",
    "flatten_rings",
]


def decompose_polygons(
    doc: FeatureDocument,
    *,
    strict: bool | None = None,
    config: ExtractionConfig | None = None,
) -> list[Polygon]:
    """Return every ring of a Polygon/MultiPolygon geometry as a ``Polygon``.

    Args:
        doc: Parsed feature document.
        strict: Raise on malformed coordinates instead of returning ``[]``.
            Defaults to ``config.strict_geometry``.
        config: Extraction settings; defaults to ``ExtractionConfig()``.

    Returns:
        Rings in ``(lat, lon)`` order. Empty for unsupported geometry types.

    Raises:
        GeometryDecodeError: Only when ``strict`` is set and the geometry
            coordinates do not have the Polygon/MultiPolygon shape.
    """
    if strict is None:
        strict = (config or ExtractionConfig()).strict_geometry
    source = doc.source or "<bytes>"

    try:
        geometry = decode_geometry(doc)
    except GeometryDecodeError as exc:
        if strict:
            raise
        logger.warning("Skipping malformed geometry in %s: %s", source, exc)
        return []

    if isinstance(geometry, OtherGeometry):
        logger.debug(
            "No area geometry in %s (type=%s), nothing to decompose",
            source,
            geometry.type or "<none>",
        )
        return []

    # Holes are emitted as standalone rings; a containment test against
    # them will report points inside the hole as contained.
    if geometry.interior_ring_count:
        logger.debug(
            "Geometry in %s has %d interior ring(s), emitted as independent rings",
            source,
            geometry.interior_ring_count,
        )

    polygons = flatten_rings(geometry)
    logger.debug("Decomposed %d ring(s) from %s", len(polygons), source)
    return polygons
