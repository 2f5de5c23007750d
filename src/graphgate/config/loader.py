"""Config loading and normalization for the mediator."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from graphgate.config.model import MediatorConfig, protocol_key
from graphgate.constants.config import CONFIG_FILENAME, DEFAULT_TRANSPORT_TIMEOUT
from graphgate.constants.protocols import SUPPORTED_SCHEMES
from graphgate.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> MediatorConfig:
    """Load and validate mediator config from ``graphgate.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return MediatorConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    return config_from_mapping(raw)


def config_from_mapping(raw: dict[str, Any]) -> MediatorConfig:
    """Build a :class:`MediatorConfig` from an already-parsed mapping."""
    is_trusted = raw.get("is_trusted", False)
    if not isinstance(is_trusted, bool):
        raise ConfigError("is_trusted must be a boolean")

    language_code = raw.get("language_code")
    if language_code is not None and (not isinstance(language_code, str) or not language_code.strip()):
        raise ConfigError("language_code must be a non-empty string")

    timeout = raw.get("transport_timeout", DEFAULT_TRANSPORT_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError("transport_timeout must be a positive number")

    return MediatorConfig(
        domains=_build_domains(raw.get("domains", {})),
        domain_map=_build_domain_map(raw.get("domain_map", {})),
        is_trusted=is_trusted,
        language_code=language_code.strip() if language_code else None,
        transport_timeout=float(timeout),
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _build_domains(raw: Any) -> dict[str, list[str]]:
    """Validate the ``domains`` mapping of protocol key to domain list."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("domains must be a mapping")

    domains: dict[str, list[str]] = {}
    for key, values in raw.items():
        if not isinstance(key, str):
            raise ConfigError("domains keys must be strings")
        normalized = protocol_key(key)
        if normalized not in SUPPORTED_SCHEMES:
            raise ConfigError(f"domains.{key} is not a supported protocol")
        domains[normalized] = _ensure_string_list(values, f"domains.{key}")
    return domains


def _build_domain_map(raw: Any) -> dict[str, str]:
    """Validate the alias -> canonical domain mapping."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("domain_map must be a mapping")
    if not all(isinstance(k, str) and isinstance(v, str) for k, v in raw.items()):
        raise ConfigError("domain_map must map strings to strings")
    return dict(raw)
