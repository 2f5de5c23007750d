"""Core data models for Graphgate."""

from .entities import (
    NormalizedJsonData,
    ParsedUrl,
    RequestContext,
    RequestDescriptor,
    SanitizedHost,
)

__all__ = [
    "NormalizedJsonData",
    "ParsedUrl",
    "RequestContext",
    "RequestDescriptor",
    "SanitizedHost",
]
