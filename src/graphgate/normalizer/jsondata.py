"""Reshaping of tabular and map datasets returned by the jsondata module."""

from __future__ import annotations

from typing import Any

from graphgate.exceptions import ContentExtractionFailure
from graphgate.model import NormalizedJsonData
from graphgate.types.common import JsonObject, JsonValue


def _jsondata(payload: JsonObject) -> dict[str, Any]:
    jsondata = payload.get("jsondata")
    if not isinstance(jsondata, dict):
        raise ContentExtractionFailure("Dataset content not available")
    return jsondata


def _metadata(jsondata: dict[str, Any]) -> JsonObject:
    license_info = jsondata.get("license")
    if not isinstance(license_info, dict):
        license_info = {}
    return {
        "description": jsondata.get("description"),
        "license_code": license_info.get("code"),
        "license_text": license_info.get("text"),
        "license_url": license_info.get("url"),
        "sources": jsondata.get("sources"),
    }


def normalize_tabular(payload: JsonObject) -> NormalizedJsonData:
    """Zip the declared field names against every row.

    Rows shorter than the schema are padded with ``None``; values, nulls
    included, keep their position.
    """
    jsondata = _jsondata(payload)
    schema = jsondata.get("schema")
    fields = schema.get("fields") if isinstance(schema, dict) else None
    rows = jsondata.get("data")
    if not isinstance(fields, list) or not isinstance(rows, list):
        raise ContentExtractionFailure("Tabular data must declare schema.fields and data")

    try:
        names = [field["name"] for field in fields]
    except (KeyError, TypeError) as exc:
        raise ContentExtractionFailure("Every tabular field needs a name") from exc

    records: list[JsonValue] = []
    for row in rows:
        if not isinstance(row, list):
            raise ContentExtractionFailure("Tabular rows must be arrays")
        records.append({name: row[index] if index < len(row) else None for index, name in enumerate(names)})

    return NormalizedJsonData(meta=[_metadata(jsondata)], fields=list(fields), data=records)


def normalize_map(payload: JsonObject) -> NormalizedJsonData:
    """Keep the GeoJSON body and lift the map position into the metadata."""
    jsondata = _jsondata(payload)
    meta = _metadata(jsondata)
    meta["zoom"] = jsondata.get("zoom")
    meta["lat"] = jsondata.get("latitude")
    meta["lon"] = jsondata.get("longitude")
    return NormalizedJsonData(meta=[meta], data=jsondata.get("data"))
