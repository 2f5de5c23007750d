"""Transport-level exceptions."""

from __future__ import annotations

from graphgate.exceptions.base import GraphGateError


class TransportError(GraphGateError):
    """Raised when the network fetch itself fails."""

    kind = "TransportError"

    def __init__(self, message: str, *, url: str, status: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status
