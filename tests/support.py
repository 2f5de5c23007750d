"""Shared configuration used across mediator tests."""

from __future__ import annotations

from graphgate.config import MediatorConfig

DOMAINS: dict[str, list[str]] = {
    "http": ["nonsec.org"],
    "https": ["sec.org"],
    "wikiapi": ["wikiapi.nonsec.org", "wikiapi.sec.org"],
    "wikirest": ["wikirest.nonsec.org", "wikirest.sec.org"],
    "wikiraw": ["wikiraw.nonsec.org", "wikiraw.sec.org"],
    "wikirawupload": ["wikirawupload.nonsec.org", "wikirawupload.sec.org"],
    "wikidatasparql": ["wikidatasparql.nonsec.org", "wikidatasparql.sec.org"],
    "geoshape": ["geoshape.nonsec.org", "geoshape.sec.org"],
}

DOMAIN_MAP: dict[str, str] = {
    "nonsec": "nonsec.org",
    "sec": "sec.org",
}

DEFAULT_DOMAIN: str = "domain.sec.org"


def make_config(*, is_trusted: bool = False, language_code: str | None = None) -> MediatorConfig:
    """Build the standard test configuration."""
    return MediatorConfig(
        domains={key: tuple(values) for key, values in DOMAINS.items()},
        domain_map=DOMAIN_MAP,
        is_trusted=is_trusted,
        language_code=language_code,
    )
