"""Protocol translation state machine."""

from __future__ import annotations

import logging
from collections.abc import Callable

from graphgate.allowlist import DomainAllowlist
from graphgate.config.model import MediatorConfig
from graphgate.constants.protocols import EMBEDDED_WEB_SCHEME_PATTERN, SUPPORTED_SCHEMES
from graphgate.exceptions import InvalidParameter, UnknownProtocol
from graphgate.hosts import HostSanitizer
from graphgate.model import ParsedUrl, RequestContext, RequestDescriptor
from graphgate.translator.external import ExternalServiceGuard
from graphgate.translator.handlers import FETCH_HANDLERS
from graphgate.translator.navigate import translate_navigation
from graphgate.translator.state import Translation, TranslationState
from graphgate.urls import parse_url as default_parse_url

logger = logging.getLogger(__name__)


def repair_url(raw_url: str) -> str:
    """Collapse ``scheme:http://host/...`` into ``scheme://host/...``."""
    return EMBEDDED_WEB_SCHEME_PATTERN.sub(r"\1://", raw_url.strip(), count=1)


class ProtocolTranslator:
    """Turn an untrusted chart URL into a concrete, allow-listed request.

    Translation is synchronous and deterministic: the same URL, context and
    config always give an equal descriptor. Errors are raised before any
    network access happens.
    """

    def __init__(
        self,
        config: MediatorConfig,
        allowlist: DomainAllowlist,
        sanitizer: HostSanitizer,
        *,
        parse_url: Callable[[str, str], ParsedUrl] = default_parse_url,
    ) -> None:
        self._config = config
        self._sanitizer = sanitizer
        self._guard = ExternalServiceGuard(allowlist, sanitizer)
        self._parse_url = parse_url

    def translate(self, context: RequestContext) -> RequestDescriptor:
        """Translate ``context.raw_url``, filling the output fields of *context*."""
        context.reset_outputs()
        raw_url = context.raw_url
        url = repair_url(raw_url)
        try:
            parsed = self._parse_url(url, context.default_domain)
        except ValueError as exc:
            raise InvalidParameter(f"cannot parse URL: {exc}", url=raw_url) from exc

        sanitized = self._sanitizer.sanitize(parsed.host, url=raw_url)
        scheme = parsed.scheme or sanitized.protocol
        if scheme not in SUPPORTED_SCHEMES:
            raise UnknownProtocol(f"Unknown protocol {scheme!r}", url=raw_url)

        state = TranslationState(
            url=raw_url,
            scheme=scheme,
            parsed=parsed,
            sanitized=sanitized,
            protocol_relative=parsed.scheme is None,
            context=context,
            config=self._config,
            guard=self._guard,
        )
        translation = self._dispatch(state)

        context.cors_needed = translation.cors_needed
        context.resolved_protocol = scheme
        context.extra_headers = dict(translation.headers)
        descriptor = translation.descriptor
        logger.debug(
            "Translated %s (%s) to %s://%s%s",
            raw_url,
            context.kind,
            descriptor.protocol,
            descriptor.host,
            descriptor.pathname,
        )
        return descriptor

    def _dispatch(self, state: TranslationState) -> Translation:
        kind = state.context.kind
        if kind == "navigate":
            return translate_navigation(state)
        if kind != "fetch":
            raise InvalidParameter(f"unknown request kind {kind!r}", url=state.url)

        handler = FETCH_HANDLERS.get(state.scheme)
        if handler is None:
            raise UnknownProtocol(f"{state.scheme}: protocol cannot be fetched", url=state.url)
        return handler(state)
