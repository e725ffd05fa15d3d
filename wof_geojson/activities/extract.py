"""Per-document extraction for batch indexing.

Reads one feature file and derives both artifacts. The summary and the
rings are independent: a malformed bbox leaves ``summary`` empty and
records the error, while the rings are still decomposed. Read and parse
failures are fatal for the document and propagate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wof_geojson.activities.decompose import decompose_polygons
from wof_geojson.activities.spatialize import spatialize
from wof_geojson.core.config import ExtractionConfig
from wof_geojson.core.exceptions import MalformedBoundsError
from wof_geojson.document import FeatureDocument

if TYPE_CHECKING:
    from pathlib import Path

    from wof_geojson.models.geometry import Polygon
    from wof_geojson.models.spatial import SpatialSummary

logger = logging.getLogger("wof_geojson.activities.extract")


@dataclass(frozen=True, slots=True)
class ExtractedFeature:
    """Both artifacts for one document.

    Attributes:
        source: File name of the document.
        summary: Spatial summary, or ``None`` if the bbox was malformed.
        polygons: Rings for containment testing (possibly empty).
        bounds_error: The bbox failure when ``summary`` is ``None``.
    """

    source: str
    summary: SpatialSummary | None = None
    polygons: tuple[Polygon, ...] = ()
    bounds_error: MalformedBoundsError | None = None

    @property
    def indexable(self) -> bool:
        """Whether the feature can be inserted into a rectangle index."""
        return self.summary is not None


def extract_feature(
    source: FeatureDocument | Path | str,
    *,
    config: ExtractionConfig | None = None,
) -> ExtractedFeature:
    """Derive the spatial summary and rings for one document.

    Args:
        source: A parsed document, or a path to read.
        config: Extraction settings; defaults to ``ExtractionConfig()``.

    Raises:
        FeatureIOError: If ``source`` is a path that cannot be read.
        FeatureParseError: If the file is not a JSON object.
        GeometryDecodeError: If ``config.strict_geometry`` is set and the
            geometry is malformed.
    """
    config = config or ExtractionConfig()

    if isinstance(source, FeatureDocument):
        doc = source
    else:
        doc = FeatureDocument.from_file(source, max_bytes=config.max_document_bytes)

    summary: SpatialSummary | None = None
    bounds_error: MalformedBoundsError | None = None
    try:
        summary = spatialize(doc, config=config)
    except MalformedBoundsError as exc:
        logger.warning("Cannot index %s: %s", doc.source or "<bytes>", exc)
        bounds_error = exc

    polygons = decompose_polygons(doc, config=config)

    return ExtractedFeature(
        source=doc.source,
        summary=summary,
        polygons=tuple(polygons),
        bounds_error=bounds_error,
    )
