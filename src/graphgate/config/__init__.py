"""Configuration loading, validation, and normalization for the mediator."""

from __future__ import annotations

from graphgate.config.loader import config_from_mapping, load_config
from graphgate.config.model import MediatorConfig, protocol_key
from graphgate.config.validator import validate_config_file

__all__ = [
    "MediatorConfig",
    "config_from_mapping",
    "load_config",
    "protocol_key",
    "validate_config_file",
]
