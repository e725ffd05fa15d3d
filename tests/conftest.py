"""Shared pytest fixtures for the WOF GeoJSON test suite."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from wof_geojson.document import FeatureDocument

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample feature file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def polygon_geojson(data_dir: Path) -> Path:
    """Path to a locality with a single-ring Polygon (Montreal)."""
    return data_dir / "101748417_locality_polygon.geojson"


@pytest.fixture()
def multipolygon_geojson(data_dir: Path) -> Path:
    """Path to a region MultiPolygon: two sub-polygons, the first with a hole."""
    return data_dir / "85688637_region_multipolygon.geojson"


@pytest.fixture()
def point_geojson(data_dir: Path) -> Path:
    """Path to a venue with Point geometry."""
    return data_dir / "1108955787_venue_point.geojson"


# ---------------------------------------------------------------------------
# Edge-case file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def missing_metadata_geojson(edge_cases_dir: Path) -> Path:
    """Path to a feature with mistyped wof:id / wof:name and no wof:placetype."""
    return edge_cases_dir / "missing_metadata.geojson"


@pytest.fixture()
def short_bbox_geojson(edge_cases_dir: Path) -> Path:
    """Path to a feature whose bbox has only 3 entries."""
    return edge_cases_dir / "short_bbox.geojson"


@pytest.fixture()
def malformed_geometry_geojson(edge_cases_dir: Path) -> Path:
    """Path to a Polygon with a non-numeric latitude."""
    return edge_cases_dir / "malformed_geometry.geojson"


@pytest.fixture()
def not_json_geojson(edge_cases_dir: Path) -> Path:
    """Path to a truncated, unparseable file."""
    return edge_cases_dir / "not_json.geojson"


# ---------------------------------------------------------------------------
# In-memory documents
# ---------------------------------------------------------------------------


def _make_doc(**members: object) -> FeatureDocument:
    tree: dict[str, object] = {"type": "Feature"}
    tree.update(members)
    return FeatureDocument.parse(json.dumps(tree).encode("utf-8"))


@pytest.fixture()
def make_doc() -> Callable[..., FeatureDocument]:
    """Build a document from top-level members (``properties=``, ``bbox=``, ...)."""
    return _make_doc
