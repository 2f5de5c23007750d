"""Response normalization switchboard, mirroring the translator's schemes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from graphgate.config.model import protocol_key
from graphgate.normalizer.api import extract_page_content, parse_api_payload, parse_json
from graphgate.normalizer.jsondata import normalize_map, normalize_tabular
from graphgate.normalizer.sparql import normalize_bindings


def _wiki_api(raw: Any) -> Any:
    return parse_api_payload(raw, "wikiapi")


def _wiki_raw(raw: Any) -> Any:
    return extract_page_content(parse_api_payload(raw, "wikiraw"))


def _tabular(raw: Any) -> Any:
    return normalize_tabular(parse_api_payload(raw, "tabular")).to_dict()


def _map(raw: Any) -> Any:
    return normalize_map(parse_api_payload(raw, "map")).to_dict()


def _sparql(raw: Any) -> Any:
    return normalize_bindings(parse_json(raw, "wikidatasparql"))


NORMALIZERS: dict[str, Callable[[Any], Any]] = {
    "wikiapi": _wiki_api,
    "wikiraw": _wiki_raw,
    "tabular": _tabular,
    "map": _map,
    "wikidatasparql": _sparql,
}


class ResponseNormalizer:
    """Validate and reshape a backend response for the chart renderer.

    Protocols without a registered normalizer pass the payload through
    untouched.
    """

    def normalize(self, raw: Any, protocol: str | None) -> Any:
        """Normalize *raw* according to the original pseudo-protocol."""
        normalizer = NORMALIZERS.get(protocol_key(protocol)) if protocol else None
        if normalizer is None:
            return raw
        return normalizer(raw)
