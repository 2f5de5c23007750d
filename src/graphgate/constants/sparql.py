"""SPARQL result datatypes understood by the typed literal parser."""

from __future__ import annotations

import re
from re import Pattern

XSD_PREFIX: str = "http://www.w3.org/2001/XMLSchema#"

XSD_INTEGER_TYPES: frozenset[str] = frozenset(
    f"{XSD_PREFIX}{name}"
    for name in (
        "int",
        "integer",
        "long",
        "short",
        "byte",
        "nonNegativeInteger",
        "nonPositiveInteger",
        "negativeInteger",
        "positiveInteger",
        "unsignedInt",
        "unsignedLong",
        "unsignedShort",
        "unsignedByte",
    )
)

XSD_FLOAT_TYPES: frozenset[str] = frozenset(f"{XSD_PREFIX}{name}" for name in ("float", "double", "decimal"))

XSD_BOOLEAN_TYPE: str = f"{XSD_PREFIX}boolean"

WKT_LITERAL_TYPE: str = "http://www.opengis.net/ont/geosparql#wktLiteral"

WKT_POINT_PATTERN: Pattern[str] = re.compile(
    r"^\s*Point\(\s*(-?[0-9.eE+-]+)\s+(-?[0-9.eE+-]+)\s*\)\s*$",
    re.IGNORECASE,
)

WIKIDATA_ENTITY_PREFIX: str = "http://www.wikidata.org/entity/"

WIKIDATA_ENTITY_ID_PATTERN: Pattern[str] = re.compile(r"^[QPL][0-9]+$")
