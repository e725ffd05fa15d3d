"""Bounding rectangle derivation from the GeoJSON ``bbox`` member.

The bbox is read positionally as ``[minLon, minLat, maxLon, maxLat]`` and
turned into a south-west origin plus width/height, exactly, with no
rounding. Ordering is not enforced by default: a reversed bbox produces
a rectangle with negative extent and a warning, matching how existing
WOF indexes were built. Pass ``reject_inverted=True`` to refuse it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wof_geojson.core.constants import BBOX_ARITY, BBOX_KEY
from wof_geojson.core.exceptions import MalformedBoundsError
from wof_geojson.models.spatial import Rect

if TYPE_CHECKING:
    from wof_geojson.document import FeatureDocument

logger = logging.getLogger("wof_geojson.activities.bounds")


def derive_bounds(doc: FeatureDocument, *, reject_inverted: bool = False) -> Rect:
    """Derive the index rectangle for a feature.

    Args:
        doc: Parsed feature document.
        reject_inverted: Raise instead of returning a negative-extent rectangle.

    Returns:
        ``Rect`` with origin ``(minLon, minLat)`` and extents
        ``(maxLon - minLon, maxLat - minLat)``.

    Raises:
        MalformedBoundsError: If ``bbox`` is missing, not an array, does not
            have exactly 4 entries, or has a non-numeric entry; or if it is
            reversed and ``reject_inverted`` is set.
    """
    min_lon, min_lat, max_lon, max_lat = _read_bbox(doc)

    rect = Rect(
        origin_x=min_lon,
        origin_y=min_lat,
        width=max_lon - min_lon,
        height=max_lat - min_lat,
    )

    if rect.is_inverted:
        msg = (
            f"Reversed bbox [{min_lon}, {min_lat}, {max_lon}, {max_lat}] "
            f"gives width={rect.width}, height={rect.height}"
        )
        if reject_inverted:
            raise MalformedBoundsError(msg, source=doc.source)
        logger.warning("%s in %s", msg, doc.source or "<bytes>")

    return rect


def _read_bbox(doc: FeatureDocument) -> tuple[float, float, float, float]:
    """Return the four bbox numbers.  Raises ``MalformedBoundsError``."""
    raw = doc.search(BBOX_KEY)
    if raw is None:
        msg = "Document has no bbox"
        raise MalformedBoundsError(msg, source=doc.source)

    if not isinstance(raw, tuple):
        msg = f"bbox must be an array, got {type(raw).__name__}"
        raise MalformedBoundsError(msg, source=doc.source)

    if len(raw) != BBOX_ARITY:
        msg = f"bbox must have exactly {BBOX_ARITY} entries, got {len(raw)}"
        raise MalformedBoundsError(msg, source=doc.source)

    values: list[float] = []
    for idx, value in enumerate(raw):
        if isinstance(value, bool) or not isinstance(value, int | float):
            msg = f"bbox entry {idx} is not numeric: {value!r}"
            raise MalformedBoundsError(msg, source=doc.source)
        try:
            values.append(float(value))
        except OverflowError as exc:
            msg = f"bbox entry {idx} is out of float range"
            raise MalformedBoundsError(msg, source=doc.source) from exc

    return (values[0], values[1], values[2], values[3])
