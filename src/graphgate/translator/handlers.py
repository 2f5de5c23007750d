"""Fetch-mode handlers, one per supported pseudo-protocol.

Only schemes registered in :data:`FETCH_HANDLERS` can be fetched; anything
else is rejected by the translator before a handler runs.
"""

from __future__ import annotations

from collections.abc import Callable

from graphgate.constants.protocols import (
    API_FORMAT_PARAMS,
    FILE_REDIRECT_PATH,
    GEOLINE_PATH,
    GEOSHAPE_PATH,
    SPARQL_ACCEPT_HEADER,
    SPARQL_ENDPOINT_PATH,
    WIKI_API_PATH,
    WIKI_REST_PREFIX,
)
from graphgate.exceptions import InvalidParameter, UntrustedRawProtocol
from graphgate.model import RequestDescriptor
from graphgate.translator.params import extract_title, require_any, snapshot_path
from graphgate.translator.state import Translation, TranslationState


def _web_passthrough(state: TranslationState) -> Translation:
    """Raw http(s): allowed only for trusted charts, otherwise untouched."""
    if not state.config.is_trusted:
        raise UntrustedRawProtocol(
            "HTTP and HTTPS protocols are not supported for untrusted graphs",
            url=state.url,
        )
    return Translation(
        RequestDescriptor(
            protocol=state.scheme,  # type: ignore[arg-type]
            host=state.sanitized.host,
            pathname=state.parsed.pathname,
            query=dict(state.parsed.query),
        )
    )


def _wiki_api(state: TranslationState) -> Translation:
    """wikiapi:///?action=query&list=allpages -> api.php, path ignored."""
    return Translation(
        RequestDescriptor(
            protocol=state.sanitized.protocol,
            host=state.sanitized.host,
            pathname=WIKI_API_PATH,
            query={**state.parsed.query, **API_FORMAT_PARAMS},
        ),
        cors_needed=True,
    )


def _wiki_rest(state: TranslationState) -> Translation:
    """wikirest:///api/rest_v1/page/... -> RESTBase; only /api/ paths are safe."""
    if not state.parsed.pathname.startswith(WIKI_REST_PREFIX):
        raise InvalidParameter(f"wikirest: path must begin with {WIKI_REST_PREFIX}", url=state.url)
    return Translation(
        RequestDescriptor(
            protocol=state.sanitized.protocol,
            host=state.sanitized.host,
            pathname=state.parsed.pathname,
            query=dict(state.parsed.query),
        )
    )


def _wiki_raw(state: TranslationState) -> Translation:
    """wikiraw:///MyPage/data -> raw content of the page via the API."""
    title = extract_title(state.parsed.pathname, url=state.url)
    query = {
        **API_FORMAT_PARAMS,
        "action": "query",
        "prop": "revisions",
        "rvprop": "content",
        "titles": title,
    }
    return Translation(
        RequestDescriptor(
            protocol=state.sanitized.protocol,
            host=state.sanitized.host,
            pathname=WIKI_API_PATH,
            query=query,
        ),
        cors_needed=True,
    )


def _json_data(state: TranslationState) -> Translation:
    """tabular:///Data.tab and map:///Data.map -> jsondata API module."""
    title = extract_title(state.parsed.pathname, url=state.url)
    query = {**API_FORMAT_PARAMS, "action": "jsondata", "title": title}
    language = state.context.site_language or state.config.language_code
    if language:
        query["uselang"] = language
    return Translation(
        RequestDescriptor(
            protocol=state.sanitized.protocol,
            host=state.sanitized.host,
            pathname=WIKI_API_PATH,
            query=query,
        ),
        cors_needed=True,
    )


def _wiki_file(state: TranslationState) -> Translation:
    """wikifile:///Einstein_1921.jpg?width=10 -> Special:Redirect/file."""
    return Translation(
        RequestDescriptor(
            protocol=state.sanitized.protocol,
            host=state.sanitized.host,
            pathname=f"{FILE_REDIRECT_PATH}{state.parsed.pathname}",
            query=dict(state.parsed.query),
        )
    )


def _wiki_raw_upload(state: TranslationState) -> Translation:
    """wikirawupload://upload.example.org/a/ab/File.jpg -> the upload host, no query."""
    resolved = state.guard.resolve(state.parsed, state.sanitized, state.scheme, url=state.url)
    return Translation(
        RequestDescriptor(
            protocol=resolved.protocol,
            host=resolved.host,
            pathname=state.parsed.pathname,
        )
    )


def _wikidata_sparql(state: TranslationState) -> Translation:
    """wikidatasparql:///?query=... -> the query service, query param only."""
    resolved = state.guard.resolve(state.parsed, state.sanitized, state.scheme, url=state.url)
    require_any(state.parsed.query, ("query",), state.scheme, url=state.url)
    return Translation(
        RequestDescriptor(
            protocol=resolved.protocol,
            host=resolved.host,
            pathname=SPARQL_ENDPOINT_PATH,
            query={"query": state.parsed.query["query"]},
        ),
        headers=dict(SPARQL_ACCEPT_HEADER),
    )


def _geo_service(path: str) -> Callable[[TranslationState], Translation]:
    def handler(state: TranslationState) -> Translation:
        resolved = state.guard.resolve(state.parsed, state.sanitized, state.scheme, url=state.url)
        require_any(state.parsed.query, ("ids", "query"), state.scheme, url=state.url)
        return Translation(
            RequestDescriptor(
                protocol=resolved.protocol,
                host=resolved.host,
                pathname=path,
                query=dict(state.parsed.query),
            )
        )

    handler.__doc__ = f"geoshape family -> {path}, requires 'ids' or 'query'."
    return handler


def _map_snapshot(state: TranslationState) -> Translation:
    """mapsnapshot:///?width=..&height=..&zoom=..&lat=..&lon=.. -> static map image."""
    pathname = snapshot_path(state.parsed.query, url=state.url)
    resolved = state.guard.resolve(state.parsed, state.sanitized, state.scheme, url=state.url)
    return Translation(
        RequestDescriptor(
            protocol=resolved.protocol,
            host=resolved.host,
            pathname=pathname,
        )
    )


FETCH_HANDLERS: dict[str, Callable[[TranslationState], Translation]] = {
    "http": _web_passthrough,
    "https": _web_passthrough,
    "wikiapi": _wiki_api,
    "wikirest": _wiki_rest,
    "wikiraw": _wiki_raw,
    "tabular": _json_data,
    "map": _json_data,
    "wikifile": _wiki_file,
    "wikirawupload": _wiki_raw_upload,
    "wikidatasparql": _wikidata_sparql,
    "geoshape": _geo_service(GEOSHAPE_PATH),
    "geoline": _geo_service(GEOLINE_PATH),
    "mapsnapshot": _map_snapshot,
}
