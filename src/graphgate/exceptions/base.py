"""Root of the Graphgate exception hierarchy."""

from __future__ import annotations


class GraphGateError(Exception):
    """Base class for all errors raised by Graphgate.

    Every subclass carries a stable ``kind`` string so callers can branch on
    the error category without importing each class.
    """

    kind: str = "GraphGateError"
