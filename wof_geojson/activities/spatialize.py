"""Spatial summary assembly.

Combines the metadata accessors and bounds derivation into the
``SpatialSummary`` an R-tree index inserts. Independent of geometry
decomposition: a document with unusable geometry still spatializes,
and a document with a malformed bbox can still be decomposed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wof_geojson.activities.bounds import derive_bounds
from wof_geojson.activities.metadata import MetadataExtractor
from wof_geojson.core.config import ExtractionConfig
from wof_geojson.models.spatial import SpatialSummary

if TYPE_CHECKING:
    from wof_geojson.document import FeatureDocument

logger = logging.getLogger("wof_geojson.activities.spatialize")


def spatialize(doc: FeatureDocument, *, config: ExtractionConfig | None = None) -> SpatialSummary:
    """Build the spatial summary for one document.

    Args:
        doc: Parsed feature document.
        config: Extraction settings; defaults to ``ExtractionConfig()``.

    Raises:
        MalformedBoundsError: If the bbox cannot be turned into a rectangle.
    """
    config = config or ExtractionConfig()

    bounds = derive_bounds(doc, reject_inverted=config.reject_inverted_bbox)
    metadata = MetadataExtractor(doc, config.metadata_defaults())

    summary = SpatialSummary(
        id=metadata.id(),
        name=metadata.name(),
        placetype=metadata.placetype(),
        bounds=bounds,
    )

    logger.info(
        "Spatialized feature | id=%d | name=%s | placetype=%s | "
        "bbox=[%.6f, %.6f, %.6f, %.6f] | source=%s",
        summary.id,
        summary.name,
        summary.placetype,
        *bounds.as_bbox(),
        doc.source,
    )
    return summary
