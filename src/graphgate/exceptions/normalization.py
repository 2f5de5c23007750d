"""Errors raised while normalizing a backend response."""

from __future__ import annotations

from graphgate.exceptions.base import GraphGateError


class NormalizationError(GraphGateError):
    """Base class for invalid-response failures (never retry-worthy)."""

    kind = "NormalizationError"


class UpstreamApiError(NormalizationError):
    """Raised when the backend API reports an error payload."""

    kind = "UpstreamApiError"


class UpstreamDataShapeError(NormalizationError):
    """Raised when the payload is not the shape the protocol expects."""

    kind = "UpstreamDataShapeError"


class ContentExtractionFailure(NormalizationError):
    """Raised when page or dataset content cannot be located in the payload."""

    kind = "ContentExtractionFailure"
