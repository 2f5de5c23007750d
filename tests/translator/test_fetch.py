"""Tests for fetch-mode translation of every pseudo-protocol."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from graphgate.exceptions import (
    HostNotAllowed,
    InvalidParameter,
    MalformedTitle,
    MissingRequiredParameter,
    TranslationError,
    UnknownProtocol,
    UntrustedRawProtocol,
)
from graphgate.mediator import GraphMediator
from graphgate.model import RequestContext, RequestDescriptor

from tests.support import DEFAULT_DOMAIN, make_config

API = "/w/api.php?format=json&formatversion=2"
RAW = f"{API}&action=query&prop=revisions&rvprop=content&titles="

Translate = Callable[..., tuple[str, RequestContext]]


def _fetch(mediator: GraphMediator, url: str) -> str:
    return mediator.translate_url(RequestContext(raw_url=url, default_domain=DEFAULT_DOMAIN))


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("", "https://domain.sec.org"),
        ("blah", "https://domain.sec.org/blah"),
        ("http://sec.org", "http://sec.org/"),
        ("http://sec.org/blah?test=1", "http://sec.org/blah?test=1"),
        ("http://any.sec.org", "http://any.sec.org/"),
        ("http://any.sec.org/blah?test=1", "http://any.sec.org/blah?test=1"),
        ("http://sec", "http://sec.org/"),
        ("http://sec/blah?test=1", "http://sec.org/blah?test=1"),
    ],
)
def test_trusted_chart_passes_web_urls_through(trusted_mediator: GraphMediator, url: str, expected: str) -> None:
    assert _fetch(trusted_mediator, url) == expected


@pytest.mark.parametrize("url", ["nope://sec.org", "nope://sec"])
def test_trusted_chart_still_rejects_unknown_schemes(trusted_mediator: GraphMediator, url: str) -> None:
    with pytest.raises(UnknownProtocol):
        _fetch(trusted_mediator, url)


@pytest.mark.parametrize("url", ["", "blah", "https://sec.org", "https://sec", "http://nonsec.org/x"])
def test_untrusted_chart_rejects_web_urls(translate: Translate, url: str) -> None:
    with pytest.raises(UntrustedRawProtocol):
        translate(url)


def test_unknown_scheme_is_rejected(translate: Translate) -> None:
    with pytest.raises(UnknownProtocol):
        translate("nope://sec.org")


def test_title_scheme_cannot_be_fetched(translate: Translate) -> None:
    with pytest.raises(UnknownProtocol):
        translate("wikititle:///Page")


def test_disallowed_host_is_rejected_before_dispatch(translate: Translate) -> None:
    with pytest.raises(HostNotAllowed):
        translate("wikiapi://evil.com?a=1")


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("wikiapi://sec.org?a=1", "https://sec.org/w/api.php?a=1&format=json&formatversion=2"),
        ("wikiapi://wikiapi.sec.org?a=1", "https://wikiapi.sec.org/w/api.php?a=1&format=json&formatversion=2"),
        ("wikiapi://sec?a=1", "https://sec.org/w/api.php?a=1&format=json&formatversion=2"),
        ("wikiapi://nonsec.org?a=1", "http://nonsec.org/w/api.php?a=1&format=json&formatversion=2"),
        ("wikiapi://wikiapi.nonsec.org?a=1", "http://wikiapi.nonsec.org/w/api.php?a=1&format=json&formatversion=2"),
        ("wikiapi://nonsec?a=1", "http://nonsec.org/w/api.php?a=1&format=json&formatversion=2"),
        ("wikiapi:///ignored/path?format=xml", "https://domain.sec.org/w/api.php?format=json&formatversion=2"),
    ],
)
def test_wikiapi_forces_json_api_call(translate: Translate, url: str, expected: str) -> None:
    result, context = translate(url)

    assert result == expected
    assert context.cors_needed is True
    assert context.resolved_protocol == "wikiapi"


def test_wikiapi_descriptor_matches_expected_shape(mediator: GraphMediator) -> None:
    context = RequestContext(raw_url="wikiapi://sec.org?a=1", default_domain=DEFAULT_DOMAIN)

    descriptor = mediator.translate(context)

    assert descriptor == RequestDescriptor(
        protocol="https",
        host="sec.org",
        pathname="/w/api.php",
        query={"a": "1", "format": "json", "formatversion": "2"},
    )


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("wikirest:///api/abc", "https://domain.sec.org/api/abc"),
        ("wikirest://sec.org/api/abc", "https://sec.org/api/abc"),
        ("wikirest://sec/api/abc", "https://sec.org/api/abc"),
        ("wikirest://wikirest.sec.org/api/abc", "https://wikirest.sec.org/api/abc"),
        ("wikirest://wikirest.nonsec.org/api/abc", "http://wikirest.nonsec.org/api/abc"),
    ],
)
def test_wikirest_keeps_api_paths(translate: Translate, url: str, expected: str) -> None:
    result, context = translate(url)

    assert result == expected
    assert context.cors_needed is False


@pytest.mark.parametrize("url", ["wikirest://sec.org", "wikirest://sec.org/w/index.php"])
def test_wikirest_requires_api_prefix(translate: Translate, url: str) -> None:
    with pytest.raises(InvalidParameter):
        translate(url)


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("wikiraw:///abc", f"https://domain.sec.org{RAW}abc"),
        ("wikiraw:///abc/xyz", f"https://domain.sec.org{RAW}abc%2Fxyz"),
        ("wikiraw://sec.org/aaa", f"https://sec.org{RAW}aaa"),
        ("wikiraw://sec.org/aaa?a=10", f"https://sec.org{RAW}aaa"),
        ("wikiraw://sec.org/abc/def", f"https://sec.org{RAW}abc%2Fdef"),
        ("wikiraw://sec/aaa", f"https://sec.org{RAW}aaa"),
        ("wikiraw://wikiraw.sec.org/abc", f"https://wikiraw.sec.org{RAW}abc"),
        ("wikiraw:///My%20page", f"https://domain.sec.org{RAW}My%20page"),
        ("wikiraw:https://sec.org/aaa", f"https://sec.org{RAW}aaa"),
    ],
)
def test_wikiraw_builds_content_query(translate: Translate, url: str, expected: str) -> None:
    result, context = translate(url)

    assert result == expected
    assert context.cors_needed is True


@pytest.mark.parametrize(
    ("url", "error"),
    [
        ("wikiraw://sec.org", MalformedTitle),
        ("wikiraw://sec.org/", MalformedTitle),
        ("wikiraw://sec.org/?a=10", MalformedTitle),
        ("wikiraw:///abc|xyz", MalformedTitle),
        ("wikiraw://sec.org/abc|xyz", MalformedTitle),
        ("wikiraw:///abc%7Cxyz", MalformedTitle),
        ("wikiraw://asec.org/aaa", HostNotAllowed),
    ],
)
def test_wikiraw_rejects_bad_titles(translate: Translate, url: str, error: type[TranslationError]) -> None:
    with pytest.raises(error):
        translate(url)


def test_tabular_uses_jsondata_with_site_language(translate: Translate) -> None:
    result, context = translate("tabular:///Data.tab", site_language="fr")

    assert result == (
        "https://domain.sec.org/w/api.php?format=json&formatversion=2&action=jsondata&title=Data.tab&uselang=fr"
    )
    assert context.cors_needed is True
    assert context.resolved_protocol == "tabular"


def test_map_falls_back_to_configured_language() -> None:
    mediator = GraphMediator(make_config(language_code="de"))
    url = "map://sec.org/Parks.map"

    result = mediator.translate_url(RequestContext(raw_url=url, default_domain=DEFAULT_DOMAIN))

    assert result == "https://sec.org/w/api.php?format=json&formatversion=2&action=jsondata&title=Parks.map&uselang=de"


def test_tabular_without_language_has_no_uselang(translate: Translate) -> None:
    result, _ = translate("tabular:///Data.tab")

    assert "uselang" not in result


def test_tabular_rejects_pipe(translate: Translate) -> None:
    with pytest.raises(MalformedTitle):
        translate("tabular:///A.tab|B.tab")


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("wikifile:///Einstein_1921.jpg", "https://domain.sec.org/wiki/Special:Redirect/file/Einstein_1921.jpg"),
        (
            "wikifile:///Einstein_1921.jpg?width=10",
            "https://domain.sec.org/wiki/Special:Redirect/file/Einstein_1921.jpg?width=10",
        ),
        ("wikifile://sec.org/Einstein_1921.jpg", "https://sec.org/wiki/Special:Redirect/file/Einstein_1921.jpg"),
    ],
)
def test_wikifile_redirects_to_file(translate: Translate, url: str, expected: str) -> None:
    result, context = translate(url)

    assert result == expected
    assert context.cors_needed is False


def test_translation_is_deterministic(translate: Translate) -> None:
    first, first_context = translate("wikidatasparql:///?query=1&x=2")
    second, second_context = translate("wikidatasparql:///?query=1&x=2")

    assert first == second
    assert first_context.extra_headers == second_context.extra_headers


def test_context_outputs_are_reset_between_translations(mediator: GraphMediator) -> None:
    context = RequestContext(raw_url="wikiapi:///?a=1", default_domain=DEFAULT_DOMAIN)
    mediator.translate(context)
    assert context.cors_needed is True

    context.raw_url = "wikirest:///api/x"
    mediator.translate(context)

    assert context.cors_needed is False
    assert context.resolved_protocol == "wikirest"
    assert context.extra_headers == {}


def test_unknown_request_kind_is_rejected(mediator: GraphMediator) -> None:
    context = RequestContext(raw_url="wikiapi:///", kind="preview", default_domain=DEFAULT_DOMAIN)  # type: ignore[arg-type]

    with pytest.raises(InvalidParameter):
        mediator.translate(context)


def test_missing_parameter_is_a_translation_error(translate: Translate) -> None:
    with pytest.raises(TranslationError) as excinfo:
        translate("geoshape:///?aquery=1")

    assert isinstance(excinfo.value, MissingRequiredParameter)
    assert excinfo.value.kind == "MissingRequiredParameter"


def test_translation_reads_the_context_url(mediator: GraphMediator) -> None:
    context = RequestContext(raw_url="wikirest://sec/api/page", default_domain=DEFAULT_DOMAIN)

    descriptor = mediator.translate(context)

    assert (descriptor.host, descriptor.pathname) == ("sec.org", "/api/page")
    assert context.resolved_protocol == "wikirest"
