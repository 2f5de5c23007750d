"""Pseudo-protocol names, backend endpoints and parameter limits."""

from __future__ import annotations

import re
from re import Pattern

WEB_PROTOCOLS: tuple[str, ...] = ("https", "http")

WIKI_API_PATH: str = "/w/api.php"
WIKI_PAGE_PREFIX: str = "/wiki/"
WIKI_REST_PREFIX: str = "/api/"
FILE_REDIRECT_PATH: str = "/wiki/Special:Redirect/file"
SPARQL_ENDPOINT_PATH: str = "/bigdata/namespace/wdq/sparql"
GEOSHAPE_PATH: str = "/shape"
GEOLINE_PATH: str = "/line"
SNAPSHOT_PATH_TEMPLATE: str = "/img/{style},{zoom},{lat},{lon},{width}x{height}@2x.png"
SNAPSHOT_DEFAULT_STYLE: str = "osm-intl"

API_FORMAT_PARAMS: dict[str, str] = {"format": "json", "formatversion": "2"}

SPARQL_ACCEPT_HEADER: dict[str, str] = {"Accept": "application/sparql-results+json"}

# Service schemes that borrow another scheme's allow-list.
SERVICE_ALLOWLIST_ALIASES: dict[str, str] = {
    "geoline": "geoshape",
    "mapsnapshot": "geoshape",
}

# Repairs ``wikiraw:https://host/x`` into ``wikiraw://host/x``.
EMBEDDED_WEB_SCHEME_PATTERN: Pattern[str] = re.compile(r"^([a-z]+):https?://", re.IGNORECASE)

INTEGER_PATTERN: Pattern[str] = re.compile(r"^-?[0-9]+$")
DECIMAL_PATTERN: Pattern[str] = re.compile(r"^-?[0-9]+(\.[0-9]+)?$")
SNAPSHOT_STYLE_PATTERN: Pattern[str] = re.compile(r"^[-_0-9a-z]+$")

# name -> (minimum, maximum, allow decimals)
SNAPSHOT_NUMERIC_PARAMS: tuple[tuple[str, float, float, bool], ...] = (
    ("width", 1, 4096, False),
    ("height", 1, 4096, False),
    ("zoom", 0, 22, False),
    ("lat", -90, 90, True),
    ("lon", -180, 180, True),
)

NAVIGATE_SCHEMES: frozenset[str] = frozenset({"http", "https", "wikititle"})

SUPPORTED_SCHEMES: frozenset[str] = frozenset(
    {
        "http",
        "https",
        "wikiapi",
        "wikirest",
        "wikiraw",
        "tabular",
        "map",
        "wikifile",
        "wikirawupload",
        "wikidatasparql",
        "geoshape",
        "geoline",
        "mapsnapshot",
        "wikititle",
    }
)
