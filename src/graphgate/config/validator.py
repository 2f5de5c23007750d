"""Collect-all validation of ``graphgate.yaml``."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from graphgate.config.model import protocol_key
from graphgate.constants.config import CONFIG_FILENAME
from graphgate.constants.protocols import SUPPORTED_SCHEMES
from graphgate.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
)
from graphgate.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a graphgate.yaml file and return all validation errors.

    Unlike :func:`graphgate.config.load_config` this never raises; every
    problem found is returned as a :class:`ValidationError`.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}")
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(k) for k in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    if "is_trusted" in raw and not isinstance(raw["is_trusted"], bool):
        errors.append(_type_error(path_str, "is_trusted", "a boolean", raw["is_trusted"]))

    if "language_code" in raw and raw["language_code"] is not None and not isinstance(raw["language_code"], str):
        errors.append(_type_error(path_str, "language_code", "a string", raw["language_code"]))

    if "transport_timeout" in raw:
        val = raw["transport_timeout"]
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            errors.append(_type_error(path_str, "transport_timeout", "a number", val))
        elif val <= 0:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="transport_timeout",
                    message="`transport_timeout` must be positive",
                    hint=f"got: {val!r}",
                )
            )

    if "domains" in raw:
        errors.extend(_validate_domains(path_str, raw["domains"]))

    if "domain_map" in raw and raw["domain_map"] is not None:
        domain_map = raw["domain_map"]
        if not isinstance(domain_map, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in domain_map.items()
        ):
            errors.append(_type_error(path_str, "domain_map", "a mapping of strings to strings", domain_map))

    return errors


def _validate_domains(path_str: str, value: Any) -> list[ValidationError]:
    """Check the ``domains`` block key by key."""
    if value is None:
        return []
    if not isinstance(value, dict):
        return [_type_error(path_str, "domains", "a mapping", value)]

    errors: list[ValidationError] = []
    for key, domains in value.items():
        field_name = f"domains.{key}"
        if not isinstance(key, str) or protocol_key(key) not in SUPPORTED_SCHEMES:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=field_name,
                    message=f"unknown protocol `{key}`",
                    hint=_suggest_key(str(key), SUPPORTED_SCHEMES),
                )
            )
            continue
        if domains is None:
            continue
        if not isinstance(domains, list) or not all(isinstance(item, str) for item in domains):
            errors.append(_type_error(path_str, field_name, "a list of strings", domains))
    return errors


def _type_error(path_str: str, field_name: str, expected: str, got: Any) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=field_name,
        message=f"`{field_name}` must be {expected}",
        hint=f"got: {type(got).__name__}",
    )


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint for a mistyped key, or an empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
