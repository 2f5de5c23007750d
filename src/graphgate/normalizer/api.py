"""Wiki API envelope parsing."""

from __future__ import annotations

import json
import logging
from typing import Any

from graphgate.exceptions import ContentExtractionFailure, UpstreamApiError, UpstreamDataShapeError
from graphgate.types.common import JsonObject

logger = logging.getLogger(__name__)


def parse_json(raw: str | bytes | None, protocol: str) -> Any:
    """Decode a JSON payload, mapping every failure to UpstreamDataShapeError."""
    if raw is None:
        raise UpstreamDataShapeError(f"{protocol}: empty response")
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise UpstreamDataShapeError(f"{protocol}: response is not valid JSON ({exc})") from exc


def parse_api_payload(raw: str | bytes | None, protocol: str) -> JsonObject:
    """Parse a wiki API response, raising on ``error`` and logging ``warnings``."""
    payload = parse_json(raw, protocol)
    if not isinstance(payload, dict):
        raise UpstreamDataShapeError(f"{protocol}: API response must be a JSON object")
    if "error" in payload:
        raise UpstreamApiError(f"API error: {json.dumps(payload['error'], sort_keys=True)}")
    if "warnings" in payload:
        logger.warning("API warnings: %s", json.dumps(payload["warnings"], sort_keys=True))
    return payload


def extract_page_content(payload: JsonObject) -> Any:
    """Return ``query.pages[0].revisions[0].content`` from a revisions query."""
    try:
        return payload["query"]["pages"][0]["revisions"][0]["content"]  # type: ignore[index]
    except (KeyError, IndexError, TypeError) as exc:
        raise ContentExtractionFailure("Page content not available") from exc
