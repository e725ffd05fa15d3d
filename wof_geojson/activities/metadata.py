"""Identifying metadata for a WOF feature.

The ``read_*`` functions report absence honestly with ``None``. Sentinel
substitution (``-1``, ``""``, ``"unknown"``) is a separate, explicit policy
carried by ``MetadataDefaults`` and applied by ``MetadataExtractor``, so
indexing can proceed on partially attributed documents without the
readers themselves hiding missing values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wof_geojson.core.constants import (
    DEFAULT_WOF_ID,
    DEFAULT_WOF_NAME,
    DEFAULT_WOF_PLACETYPE,
    WOF_ID_PATH,
    WOF_NAME_PATH,
    WOF_PLACETYPE_PATH,
)

if TYPE_CHECKING:
    from wof_geojson.document import FeatureDocument


# ---------------------------------------------------------------------------
# Readers
# ---------------------------------------------------------------------------


def read_id(doc: FeatureDocument) -> int | None:
    """Return ``wof:id`` truncated toward zero, or ``None`` if absent or non-numeric.

    Booleans and non-finite floats are not identifiers.
    """
    value = doc.path(WOF_ID_PATH)
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return int(value)


def read_name(doc: FeatureDocument) -> str | None:
    """Return ``wof:name``, or ``None`` if absent or not a string."""
    return _read_str(doc, WOF_NAME_PATH)


def read_placetype(doc: FeatureDocument) -> str | None:
    """Return ``wof:placetype``, or ``None`` if absent or not a string."""
    return _read_str(doc, WOF_PLACETYPE_PATH)


def _read_str(doc: FeatureDocument, path: str) -> str | None:
    value = doc.path(path)
    return value if isinstance(value, str) else None


# ---------------------------------------------------------------------------
# Sentinel policy
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MetadataDefaults:
    """Values substituted when a metadata field is absent or mistyped."""

    id: int = DEFAULT_WOF_ID
    name: str = DEFAULT_WOF_NAME
    placetype: str = DEFAULT_WOF_PLACETYPE


DEFAULT_METADATA = MetadataDefaults()


class MetadataExtractor:
    """Best-effort accessors over one document. None of them raise."""

    __slots__ = ("_defaults", "_doc")

    def __init__(
        self,
        doc: FeatureDocument,
        defaults: MetadataDefaults = DEFAULT_METADATA,
    ) -> None:
        self._doc = doc
        self._defaults = defaults

    def id(self) -> int:
        value = read_id(self._doc)
        return self._defaults.id if value is None else value

    def name(self) -> str:
        value = read_name(self._doc)
        return self._defaults.name if value is None else value

    def placetype(self) -> str:
        value = read_placetype(self._doc)
        return self._defaults.placetype if value is None else value
