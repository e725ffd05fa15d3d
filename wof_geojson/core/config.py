"""Extraction configuration loaded from environment variables.

All configuration values have defaults matching the behaviour of the
existing Who's On First indexes: sentinel metadata of ``-1`` / ``""`` /
``"unknown"``, lenient geometry decoding, and reversed bounding boxes
passed through unchanged.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out of
    its valid range, so bad configuration surfaces at startup rather than
    halfway through a batch.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wof_geojson.core.constants import (
    DEFAULT_MAX_DOCUMENT_BYTES,
    DEFAULT_WOF_ID,
    DEFAULT_WOF_NAME,
    DEFAULT_WOF_PLACETYPE,
)
from wof_geojson.core.exceptions import FeatureError

if TYPE_CHECKING:
    from wof_geojson.activities.metadata import MetadataDefaults

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


class ConfigValidationError(FeatureError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ExtractionConfig:
    """Immutable extraction configuration.

    Attributes:
        default_id: Identifier used when ``wof:id`` is absent or non-numeric.
        default_name: Name used when ``wof:name`` is absent or not a string.
        default_placetype: Placetype used when ``wof:placetype`` is absent or not a string.
        strict_geometry: Raise on malformed Polygon/MultiPolygon coordinates
            instead of logging and returning no rings.
        reject_inverted_bbox: Raise on a bbox whose max is below its min
            instead of producing a negative-extent rectangle.
        max_document_bytes: Largest document ``FeatureDocument.from_file`` will read.
    """

    default_id: int = DEFAULT_WOF_ID
    default_name: str = DEFAULT_WOF_NAME
    default_placetype: str = DEFAULT_WOF_PLACETYPE
    strict_geometry: bool = False
    reject_inverted_bbox: bool = False
    max_document_bytes: int = DEFAULT_MAX_DOCUMENT_BYTES

    @classmethod
    def from_env(cls) -> ExtractionConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or a boolean
                flag is not recognised.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``WOF_DEFAULT_ID=abc``).
        """
        config = cls(
            default_id=int(os.getenv("WOF_DEFAULT_ID", str(DEFAULT_WOF_ID))),
            default_name=os.getenv("WOF_DEFAULT_NAME", DEFAULT_WOF_NAME),
            default_placetype=os.getenv("WOF_DEFAULT_PLACETYPE", DEFAULT_WOF_PLACETYPE),
            strict_geometry=_env_flag("WOF_STRICT_GEOMETRY"),
            reject_inverted_bbox=_env_flag("WOF_REJECT_INVERTED_BBOX"),
            max_document_bytes=int(
                os.getenv("WOF_MAX_DOCUMENT_BYTES", str(DEFAULT_MAX_DOCUMENT_BYTES))
            ),
        )
        _validate(config)
        return config

    def metadata_defaults(self) -> MetadataDefaults:
        """Return the sentinel policy for metadata extraction."""
        from wof_geojson.activities.metadata import MetadataDefaults

        return MetadataDefaults(
            id=self.default_id,
            name=self.default_name,
            placetype=self.default_placetype,
        )


def _env_flag(key: str) -> bool:
    """Read a boolean flag.  Raises ``ConfigValidationError`` on unknown values."""
    raw = os.getenv(key, "")
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be one of 1/0, true/false, yes/no, on/off")


def _validate(config: ExtractionConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not config.default_placetype:
        raise ConfigValidationError(
            "WOF_DEFAULT_PLACETYPE",
            config.default_placetype,
            "must not be empty",
        )

    if config.max_document_bytes <= 0:
        raise ConfigValidationError(
            "WOF_MAX_DOCUMENT_BYTES",
            config.max_document_bytes,
            "must be > 0 (bytes)",
        )
