"""Shared exception hierarchy for Graphgate."""

from __future__ import annotations

from .base import GraphGateError
from .config import ConfigError
from .normalization import (
    ContentExtractionFailure,
    NormalizationError,
    UpstreamApiError,
    UpstreamDataShapeError,
)
from .transport import TransportError
from .translation import (
    HostNotAllowed,
    InvalidParameter,
    MalformedTitle,
    MissingRequiredParameter,
    ProtocolDisabled,
    TranslationError,
    UnknownProtocol,
    UntrustedRawProtocol,
)

__all__ = [
    "ConfigError",
    "ContentExtractionFailure",
    "GraphGateError",
    "HostNotAllowed",
    "InvalidParameter",
    "MalformedTitle",
    "MissingRequiredParameter",
    "NormalizationError",
    "ProtocolDisabled",
    "TransportError",
    "TranslationError",
    "UnknownProtocol",
    "UntrustedRawProtocol",
    "UpstreamApiError",
    "UpstreamDataShapeError",
]
