"""Facade wiring the allow-list, translator and normalizer together."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from graphgate.allowlist import DomainAllowlist
from graphgate.config.model import MediatorConfig
from graphgate.hosts import HostSanitizer
from graphgate.model import ParsedUrl, RequestContext, RequestDescriptor, SanitizedHost
from graphgate.normalizer import ResponseNormalizer
from graphgate.translator import ProtocolTranslator
from graphgate.urls import format_url as default_format_url
from graphgate.urls import parse_url as default_parse_url


class GraphMediator:
    """One mediator per configuration.

    The instance owns the predicate cache; nothing else is shared between
    requests, so it can be used from several threads at once.
    """

    def __init__(
        self,
        config: MediatorConfig | None = None,
        *,
        parse_url: Callable[[str, str], ParsedUrl] = default_parse_url,
        format_url: Callable[[RequestDescriptor], str] = default_format_url,
    ) -> None:
        self.config = config or MediatorConfig()
        self.allowlist = DomainAllowlist(self.config)
        self.hosts = HostSanitizer(self.allowlist, dict(self.config.domain_map))
        self.translator = ProtocolTranslator(self.config, self.allowlist, self.hosts, parse_url=parse_url)
        self.normalizer = ResponseNormalizer()
        self._format_url = format_url

    def sanitize_host(self, host: str) -> SanitizedHost:
        """Return the canonical host and transport, or raise HostNotAllowed."""
        return self.hosts.sanitize(host)

    def translate(self, context: RequestContext) -> RequestDescriptor:
        """Translate a chart URL into a concrete request descriptor."""
        return self.translator.translate(context)

    def translate_url(self, context: RequestContext) -> str:
        """Translate and format a chart URL in one step."""
        return self._format_url(self.translate(context))

    def normalize(self, raw: Any, protocol: str | None) -> Any:
        """Normalize a backend response for the given original protocol."""
        return self.normalizer.normalize(raw, protocol)
