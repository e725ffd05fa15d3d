"""Read-only handle on a parsed WOF GeoJSON feature document.

``FeatureDocument`` owns the generic JSON tree. Mappings are exposed as
``MappingProxyType`` and arrays as tuples, so nothing a caller receives
from ``body()`` or ``path()`` can mutate the document. Path lookup is
dotted (``"properties.wof:id"``) and returns ``None`` rather than raising
when a segment is missing.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any

from wof_geojson.core.constants import DEFAULT_MAX_DOCUMENT_BYTES
from wof_geojson.core.exceptions import FeatureIOError, FeatureParseError

logger = logging.getLogger("wof_geojson.document")


class FeatureDocument:
    """A parsed feature document. Construct with ``parse`` or ``from_file``."""

    __slots__ = ("_body", "_source")

    def __init__(self, tree: dict[str, Any], *, source: str = "") -> None:
        self._body = _freeze(tree)
        self._source = source

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, raw: bytes | str, *, source: str = "") -> FeatureDocument:
        """Parse JSON bytes (or text) into a document.

        Args:
            raw: UTF-8 encoded JSON, or already-decoded text.
            source: Name used in log lines and error context.

        Raises:
            FeatureParseError: If ``raw`` is not UTF-8, not valid JSON,
                uses ``NaN``/``Infinity``, is nested too deeply, or is not a
                JSON object.
        """
        try:
            tree = json.loads(raw, parse_constant=_reject_constant)
        except UnicodeDecodeError as exc:
            msg = f"Document is not valid UTF-8: {exc}"
            raise FeatureParseError(msg, source=source) from exc
        except ValueError as exc:
            msg = f"Document is not valid JSON: {exc}"
            raise FeatureParseError(msg, source=source) from exc
        except RecursionError as exc:
            msg = "Document is nested too deeply to parse"
            raise FeatureParseError(msg, source=source) from exc

        if not isinstance(tree, dict):
            msg = f"Document root must be a JSON object, got {type(tree).__name__}"
            raise FeatureParseError(msg, source=source)

        # Freezing recurses once per nesting level, deeper than the decoder.
        try:
            return cls(tree, source=source)
        except RecursionError as exc:
            msg = "Document is nested too deeply to parse"
            raise FeatureParseError(msg, source=source) from exc

    @classmethod
    def from_file(
        cls,
        path: Path | str,
        *,
        max_bytes: int = DEFAULT_MAX_DOCUMENT_BYTES,
    ) -> FeatureDocument:
        """Read and parse a document from disk.

        Raises:
            FeatureIOError: If the file cannot be read or exceeds ``max_bytes``.
            FeatureParseError: If the contents are not a JSON object.
        """
        path = Path(path)
        source = path.name

        try:
            size = path.stat().st_size
            if size > max_bytes:
                msg = f"Document {source} is {size} bytes, limit is {max_bytes}"
                raise FeatureIOError(msg, source=source)
            raw = path.read_bytes()
        except OSError as exc:
            msg = f"Cannot read document {source}: {exc}"
            raise FeatureIOError(msg, source=source) from exc

        logger.debug("Read %d bytes from %s", len(raw), source)
        return cls.parse(raw, source=source)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    @property
    def source(self) -> str:
        return self._source

    def body(self) -> MappingProxyType[str, Any]:
        """Return the read-only tree root."""
        return self._body

    def search(self, *keys: str) -> Any:
        """Walk ``keys`` from the root; ``None`` if any step is missing."""
        node: Any = self._body
        for key in keys:
            if not isinstance(node, MappingProxyType):
                return None
            node = node.get(key)
            if node is None:
                return None
        return node

    def path(self, dotted: str) -> Any:
        """Dotted-path lookup, e.g. ``doc.path("properties.wof:name")``."""
        return self.search(*dotted.split("."))

    def serialize(self) -> str:
        """Render the tree as compact JSON.

        Reparsing the output yields an equivalent tree; the bytes need not
        match the original input.
        """
        return json.dumps(_thaw(self._body), ensure_ascii=False, separators=(",", ":"))

    def __repr__(self) -> str:
        return f"FeatureDocument(source={self._source!r})"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _reject_constant(name: str) -> Any:
    msg = f"Non-standard JSON constant {name}"
    raise ValueError(msg)


def _freeze(node: Any) -> Any:
    if isinstance(node, dict):
        return MappingProxyType({key: _freeze(value) for key, value in node.items()})
    if isinstance(node, list):
        return tuple(_freeze(item) for item in node)
    return node


def _thaw(node: Any) -> Any:
    if isinstance(node, MappingProxyType):
        return {key: _thaw(value) for key, value in node.items()}
    if isinstance(node, tuple):
        return [_thaw(item) for item in node]
    return node
