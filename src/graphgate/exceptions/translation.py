"""Errors raised while translating a pseudo-protocol URL.

All of these are detected before any network call is made.
"""

from __future__ import annotations

from graphgate.exceptions.base import GraphGateError


class TranslationError(GraphGateError, ValueError):
    """Base class for request translation failures."""

    kind = "TranslationError"

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class UnknownProtocol(TranslationError):
    """Raised when the URL scheme is not part of the supported set."""

    kind = "UnknownProtocol"


class HostNotAllowed(TranslationError):
    """Raised when the target host fails the allow-list test."""

    kind = "HostNotAllowed"


class ProtocolDisabled(TranslationError):
    """Raised when a service scheme has no allow-list configured."""

    kind = "ProtocolDisabled"


class MalformedTitle(TranslationError):
    """Raised when a page title is empty or contains a pipe character."""

    kind = "MalformedTitle"


class MissingRequiredParameter(TranslationError):
    """Raised when a scheme-required query parameter is absent."""

    kind = "MissingRequiredParameter"


class InvalidParameter(TranslationError):
    """Raised when a parameter or path fails validation."""

    kind = "InvalidParameter"


class UntrustedRawProtocol(TranslationError):
    """Raised for raw http/https requests from an untrusted chart."""

    kind = "UntrustedRawProtocol"
