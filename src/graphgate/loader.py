"""Chart data loader: translate, fetch, normalize.

Transport failures surface as :class:`TransportError`; a response that
arrived but is unusable surfaces as a :class:`NormalizationError`. The two
never overlap, so callers can decide which ones are worth retrying.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeAlias

from graphgate.mediator import GraphMediator
from graphgate.model import RequestContext
from graphgate.transport import TransportOptions, UrllibTransport

logger = logging.getLogger(__name__)

Transport: TypeAlias = Callable[[str, TransportOptions], str | bytes]


class DataLoader:
    """Loader hook for a chart renderer."""

    def __init__(self, mediator: GraphMediator, transport: Transport | None = None) -> None:
        self._mediator = mediator
        self._transport = transport or UrllibTransport()

    def load(self, raw_url: str, *, default_domain: str, site_language: str | None = None) -> Any:
        """Fetch the data a chart asks for and return it normalized."""
        context = RequestContext(
            raw_url=raw_url,
            kind="fetch",
            default_domain=default_domain,
            site_language=site_language,
        )
        url = self._mediator.translate_url(context)
        options = TransportOptions(
            headers=dict(context.extra_headers),
            cors=context.cors_needed,
            timeout=self._mediator.config.transport_timeout,
        )
        logger.debug("Fetching %s for %s", url, raw_url)
        payload = self._transport(url, options)
        return self._mediator.normalize(payload, context.resolved_protocol)

    def resolve_link(self, raw_url: str, *, default_domain: str) -> str:
        """Return the wiki page URL a chart link may open."""
        context = RequestContext(raw_url=raw_url, kind="navigate", default_domain=default_domain)
        return self._mediator.translate_url(context)
