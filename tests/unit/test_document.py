"""Tests for FeatureDocument.

Covers:
- Parsing bytes and text, rejection of malformed input
- Reading from disk, unreadable and oversized files
- Read-only body and dotted path lookup
- Serialization round trip
"""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import TYPE_CHECKING

import pytest

from wof_geojson.core.exceptions import FeatureIOError, FeatureParseError
from wof_geojson.document import FeatureDocument

if TYPE_CHECKING:
    from pathlib import Path


class TestParse:
    """FeatureDocument.parse()."""

    def test_parses_bytes(self) -> None:
        doc = FeatureDocument.parse(b'{"type": "Feature", "properties": {"wof:id": 1}}')
        assert doc.path("properties.wof:id") == 1

    def test_parses_text(self) -> None:
        doc = FeatureDocument.parse('{"type": "Feature"}')
        assert doc.path("type") == "Feature"

    def test_source_defaults_to_empty(self) -> None:
        doc = FeatureDocument.parse(b"{}")
        assert doc.source == ""

    def test_rejects_invalid_json(self) -> None:
        with pytest.raises(FeatureParseError) as exc_info:
            FeatureDocument.parse(b'{"type": ')
        assert "not valid JSON" in str(exc_info.value)

    def test_rejects_empty_input(self) -> None:
        with pytest.raises(FeatureParseError):
            FeatureDocument.parse(b"")

    def test_rejects_invalid_utf8(self) -> None:
        with pytest.raises(FeatureParseError):
            FeatureDocument.parse(b'{"name": "\xff\xfe\xfa"}')

    def test_rejects_nan_constant(self) -> None:
        with pytest.raises(FeatureParseError):
            FeatureDocument.parse(b'{"bbox": [NaN, 0, 1, 1]}')

    @pytest.mark.parametrize("raw", [b"[]", b"42", b'"Feature"', b"null"])
    def test_rejects_non_object_root(self, raw: bytes) -> None:
        with pytest.raises(FeatureParseError) as exc_info:
            FeatureDocument.parse(raw)
        assert "JSON object" in str(exc_info.value)

    def test_parse_error_carries_source(self) -> None:
        with pytest.raises(FeatureParseError) as exc_info:
            FeatureDocument.parse(b"nope", source="x.geojson")
        assert exc_info.value.source == "x.geojson"
        assert exc_info.value.stage == "parse"

    def test_rejects_excessive_nesting(self) -> None:
        raw = b'{"a": ' + b"[" * 100_000 + b"]" * 100_000 + b"}"
        with pytest.raises(FeatureParseError) as exc_info:
            FeatureDocument.parse(raw, source="deep.geojson")
        assert "nested too deeply" in str(exc_info.value)
        assert exc_info.value.source == "deep.geojson"

    def test_moderate_nesting_is_accepted(self) -> None:
        doc = FeatureDocument.parse(b'{"a": ' + b"[" * 100 + b"]" * 100 + b"}")
        node = doc.path("a")
        for _ in range(99):
            node = node[0]
        assert node == ()


class TestFromFile:
    """FeatureDocument.from_file()."""

    def test_reads_feature(self, polygon_geojson: Path) -> None:
        doc = FeatureDocument.from_file(polygon_geojson)
        assert doc.source == "101748417_locality_polygon.geojson"
        assert doc.path("properties.wof:name") == "Montreal"

    def test_accepts_str_path(self, polygon_geojson: Path) -> None:
        doc = FeatureDocument.from_file(str(polygon_geojson))
        assert doc.path("geometry.type") == "Polygon"

    def test_missing_file_is_io_error(self, tmp_path: Path) -> None:
        with pytest.raises(FeatureIOError) as exc_info:
            FeatureDocument.from_file(tmp_path / "absent.geojson")
        assert exc_info.value.source == "absent.geojson"
        assert exc_info.value.category == "permanent"

    def test_directory_is_io_error(self, tmp_path: Path) -> None:
        with pytest.raises(FeatureIOError):
            FeatureDocument.from_file(tmp_path)

    def test_oversized_file_is_io_error(self, polygon_geojson: Path) -> None:
        with pytest.raises(FeatureIOError) as exc_info:
            FeatureDocument.from_file(polygon_geojson, max_bytes=10)
        assert "limit is 10" in str(exc_info.value)

    def test_unparseable_file_is_parse_error(self, not_json_geojson: Path) -> None:
        with pytest.raises(FeatureParseError) as exc_info:
            FeatureDocument.from_file(not_json_geojson)
        assert exc_info.value.source == "not_json.geojson"


class TestBodyAndPath:
    """Read-only tree access."""

    def test_body_is_read_only(self) -> None:
        doc = FeatureDocument.parse(b'{"properties": {"wof:name": "A"}}')
        body = doc.body()
        assert isinstance(body, MappingProxyType)
        with pytest.raises(TypeError):
            body["properties"] = {}  # type: ignore[index]
        with pytest.raises(TypeError):
            body["properties"]["wof:name"] = "B"  # type: ignore[index]

    def test_arrays_are_tuples(self) -> None:
        doc = FeatureDocument.parse(b'{"bbox": [1, 2, 3, 4]}')
        assert doc.path("bbox") == (1, 2, 3, 4)

    def test_path_with_colon_keys(self) -> None:
        doc = FeatureDocument.parse(b'{"properties": {"wof:placetype": "county"}}')
        assert doc.path("properties.wof:placetype") == "county"

    def test_missing_segment_is_none(self) -> None:
        doc = FeatureDocument.parse(b'{"properties": {}}')
        assert doc.path("properties.wof:id") is None
        assert doc.path("geometry.type") is None

    def test_traversing_non_object_is_none(self) -> None:
        doc = FeatureDocument.parse(b'{"properties": "flat", "bbox": [1, 2]}')
        assert doc.path("properties.wof:id") is None
        assert doc.path("bbox.0") is None

    def test_search_matches_path(self) -> None:
        doc = FeatureDocument.parse(b'{"geometry": {"type": "Point"}}')
        assert doc.search("geometry", "type") == doc.path("geometry.type") == "Point"

    def test_explicit_null_is_none(self) -> None:
        doc = FeatureDocument.parse(b'{"properties": {"wof:name": null}}')
        assert doc.path("properties.wof:name") is None


class TestSerialize:
    """Semantic round trip."""

    def test_round_trip_is_equivalent(self, multipolygon_geojson: Path) -> None:
        original = json.loads(multipolygon_geojson.read_bytes())
        doc = FeatureDocument.from_file(multipolygon_geojson)
        assert json.loads(doc.serialize()) == original

    def test_reparse_yields_same_tree(self, polygon_geojson: Path) -> None:
        doc = FeatureDocument.from_file(polygon_geojson)
        again = FeatureDocument.parse(doc.serialize())
        assert again.serialize() == doc.serialize()
        assert again.path("geometry.coordinates") == doc.path("geometry.coordinates")

    def test_keeps_non_ascii(self) -> None:
        doc = FeatureDocument.parse('{"properties": {"wof:name": "Montréal"}}'.encode())
        assert "Montréal" in doc.serialize()
