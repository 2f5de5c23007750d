"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "graphgate.yaml"
DEFAULT_TRANSPORT_TIMEOUT: float = 30.0
