"""Unified extraction exception taxonomy.

Provides a shared base exception hierarchy for document loading, bounds
derivation, and geometry decoding. Every domain exception inherits from
``FeatureError`` and carries structured context fields so a batch caller
can decide between skipping a document and aborting the run.

Taxonomy categories
-------------------
- ``ValidationError``: malformed document content, never retryable.
- ``PermanentError``: unrecoverable failures (unreadable file), not retryable.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging and batch reports.
"""

from __future__ import annotations


class FeatureError(Exception):
    """Base exception for all feature-extraction errors.

    Attributes:
        message: Human-readable error description.
        stage: Extraction stage where the error occurred
            (e.g. ``"parse"``, ``"bounds"``, ``"geometry"``).
        code: Machine-readable error code (e.g. ``"BBOX_MALFORMED"``).
        retryable: Whether the caller may sensibly retry the operation.
        source: Name of the document the error relates to (file name or ``""``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        source: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.source = source
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        return "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "source": self.source,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(FeatureError):
    """Document content failed validation. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(FeatureError):
    """Unrecoverable failure. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class FeatureIOError(PermanentError):
    """Raised when document bytes cannot be read from storage."""

    default_stage = "read"
    default_code = "DOCUMENT_UNREADABLE"


class FeatureParseError(ValidationError):
    """Raised when document bytes are not a well-formed JSON object."""

    default_stage = "parse"
    default_code = "DOCUMENT_PARSE_FAILED"


class MalformedBoundsError(ValidationError):
    """Raised when the ``bbox`` member is missing, of wrong arity, or non-numeric."""

    default_stage = "bounds"
    default_code = "BBOX_MALFORMED"


class GeometryDecodeError(ValidationError):
    """Raised when Polygon/MultiPolygon coordinates do not have the expected shape."""

    default_stage = "geometry"
    default_code = "GEOMETRY_DECODE_FAILED"
