"""SPARQL JSON results to flat rows of typed values."""

from __future__ import annotations

from typing import Any

from graphgate.constants.sparql import (
    WIKIDATA_ENTITY_ID_PATTERN,
    WIKIDATA_ENTITY_PREFIX,
    WKT_LITERAL_TYPE,
    WKT_POINT_PATTERN,
    XSD_BOOLEAN_TYPE,
    XSD_FLOAT_TYPES,
    XSD_INTEGER_TYPES,
)
from graphgate.exceptions import UpstreamDataShapeError
from graphgate.types.common import JsonValue


def parse_binding_value(cell: Any) -> JsonValue:
    """Convert one SPARQL result cell into a plain value.

    Numeric XSD literals become numbers, WKT points become ``[x, y]``,
    Wikidata entity URIs become bare ids such as ``Q42``; other URIs under
    the entity namespace (statements, values) are kept whole. Anything
    unrecognized is returned as its string value.
    """
    if not isinstance(cell, dict):
        raise UpstreamDataShapeError("SPARQL binding cells must be objects")
    value = cell.get("value")
    if not isinstance(value, str):
        return value

    if cell.get("type") == "uri":
        if value.startswith(WIKIDATA_ENTITY_PREFIX):
            entity_id = value[len(WIKIDATA_ENTITY_PREFIX) :]
            if WIKIDATA_ENTITY_ID_PATTERN.match(entity_id):
                return entity_id
        return value

    datatype = cell.get("datatype")
    if datatype == XSD_BOOLEAN_TYPE:
        return value == "true"
    try:
        if datatype in XSD_INTEGER_TYPES:
            return int(value)
        if datatype in XSD_FLOAT_TYPES:
            return float(value)
        if datatype == WKT_LITERAL_TYPE:
            match = WKT_POINT_PATTERN.match(value)
            if match:
                return [float(match.group(1)), float(match.group(2))]
    except ValueError:
        return value
    return value


def normalize_bindings(payload: Any) -> list[JsonValue]:
    """Map ``results.bindings`` to one flat dict per row."""
    results = payload.get("results") if isinstance(payload, dict) else None
    bindings = results.get("bindings") if isinstance(results, dict) else None
    if not isinstance(bindings, list):
        raise UpstreamDataShapeError('SPARQL query result does not have "results.bindings"')

    rows: list[JsonValue] = []
    for binding in bindings:
        if not isinstance(binding, dict):
            raise UpstreamDataShapeError("SPARQL bindings must be objects")
        rows.append({key: parse_binding_value(cell) for key, cell in binding.items()})
    return rows
