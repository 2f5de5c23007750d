"""Configuration-related exceptions."""

from __future__ import annotations

from graphgate.exceptions.base import GraphGateError


class ConfigError(GraphGateError, ValueError):
    """Raised when mediator configuration is invalid."""

    kind = "ConfigError"
