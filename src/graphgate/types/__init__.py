"""Shared type aliases for Graphgate."""

from .common import HostPredicate, JsonObject, JsonScalar, JsonValue, RequestKind, WebProtocol

__all__ = [
    "HostPredicate",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "RequestKind",
    "WebProtocol",
]
