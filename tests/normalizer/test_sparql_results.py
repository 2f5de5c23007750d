"""Tests for SPARQL result flattening and typed literal parsing."""

from __future__ import annotations

import json
from typing import Any

import pytest

from graphgate.exceptions import UpstreamDataShapeError
from graphgate.normalizer import ResponseNormalizer, parse_binding_value

XSD = "http://www.w3.org/2001/XMLSchema#"
WKT = "http://www.opengis.net/ont/geosparql#wktLiteral"


def test_bindings_are_flattened_into_rows() -> None:
    raw = json.dumps(
        {
            "results": {
                "bindings": [
                    {
                        "int": {"type": "literal", "datatype": f"{XSD}int", "value": "42"},
                        "float": {"type": "literal", "datatype": f"{XSD}float", "value": "42.5"},
                        "geo": {"type": "literal", "datatype": WKT, "value": "Point(42 144.5)"},
                    },
                    {"uri": {"type": "uri", "value": "http://www.wikidata.org/entity/Q42"}},
                ]
            }
        }
    )

    result = ResponseNormalizer().normalize(raw, "wikidatasparql")

    assert result == [{"int": 42, "float": 42.5, "geo": [42.0, 144.5]}, {"uri": "Q42"}]


@pytest.mark.parametrize(
    ("cell", "expected"),
    [
        ({"type": "literal", "datatype": f"{XSD}integer", "value": "-7"}, -7),
        ({"type": "literal", "datatype": f"{XSD}decimal", "value": "0.25"}, 0.25),
        ({"type": "literal", "datatype": f"{XSD}double", "value": "1e3"}, 1000.0),
        ({"type": "literal", "datatype": f"{XSD}boolean", "value": "true"}, True),
        ({"type": "literal", "datatype": f"{XSD}boolean", "value": "false"}, False),
        ({"type": "literal", "datatype": f"{XSD}int", "value": "abc"}, "abc"),
        ({"type": "literal", "datatype": WKT, "value": "LINESTRING(1 2, 3 4)"}, "LINESTRING(1 2, 3 4)"),
        ({"type": "literal", "datatype": WKT, "value": "Point(1.2.3 4)"}, "Point(1.2.3 4)"),
        ({"type": "literal", "xml:lang": "en", "value": "Douglas Adams"}, "Douglas Adams"),
        ({"type": "uri", "value": "https://example.org/thing"}, "https://example.org/thing"),
        ({"type": "bnode", "value": "b0"}, "b0"),
        ({"type": "uri", "value": "http://www.wikidata.org/entity/P31"}, "P31"),
        (
            {"type": "uri", "value": "http://www.wikidata.org/entity/statement/Q1-ABC"},
            "http://www.wikidata.org/entity/statement/Q1-ABC",
        ),
        ({"type": "uri", "value": "http://www.wikidata.org/entity/Q42x"}, "http://www.wikidata.org/entity/Q42x"),
    ],
    ids=[
        "integer",
        "decimal",
        "double",
        "bool-true",
        "bool-false",
        "bad-int",
        "non-point-wkt",
        "bad-point",
        "lang-string",
        "foreign-uri",
        "blank-node",
        "property-id",
        "statement-uri",
        "not-an-entity-id",
    ],
)
def test_parse_binding_value(cell: dict[str, Any], expected: Any) -> None:
    assert parse_binding_value(cell) == expected


@pytest.mark.parametrize(
    "payload",
    [{}, {"results": {}}, {"results": {"bindings": {}}}, [], {"results": {"bindings": ["x"]}}],
    ids=["empty", "no-bindings", "bindings-object", "array", "binding-not-object"],
)
def test_missing_bindings_is_a_shape_error(payload: Any) -> None:
    with pytest.raises(UpstreamDataShapeError):
        ResponseNormalizer().normalize(json.dumps(payload), "wikidatasparql")


def test_missing_bindings_message() -> None:
    with pytest.raises(UpstreamDataShapeError, match='does not have "results.bindings"'):
        ResponseNormalizer().normalize("{}", "wikidatasparql")


def test_empty_bindings_give_no_rows() -> None:
    assert ResponseNormalizer().normalize('{"results": {"bindings": []}}', "wikidatasparql") == []
