"""Shared pytest fixtures for mediator tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from graphgate.mediator import GraphMediator
from graphgate.model import RequestContext
from graphgate.types.common import RequestKind

from tests.support import DEFAULT_DOMAIN, make_config


@pytest.fixture()
def mediator() -> GraphMediator:
    """Mediator for untrusted charts."""
    return GraphMediator(make_config())


@pytest.fixture()
def trusted_mediator() -> GraphMediator:
    """Mediator for trusted charts (raw http/https allowed)."""
    return GraphMediator(make_config(is_trusted=True))


@pytest.fixture()
def translate(mediator: GraphMediator) -> Callable[..., tuple[str, RequestContext]]:
    """Translate a URL with the untrusted mediator, returning URL and context."""

    def _translate(
        url: str,
        kind: RequestKind = "fetch",
        site_language: str | None = None,
    ) -> tuple[str, RequestContext]:
        context = RequestContext(
            raw_url=url,
            kind=kind,
            default_domain=DEFAULT_DOMAIN,
            site_language=site_language,
        )
        return mediator.translate_url(context), context

    return _translate
