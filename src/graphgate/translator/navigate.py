"""Navigation ("open link") translation: wiki pages only."""

from __future__ import annotations

from graphgate.constants.protocols import NAVIGATE_SCHEMES, WEB_PROTOCOLS, WIKI_PAGE_PREFIX
from graphgate.exceptions import InvalidParameter, MalformedTitle, UnknownProtocol
from graphgate.model import RequestDescriptor
from graphgate.translator.params import encode_title, extract_title
from graphgate.translator.state import Translation, TranslationState


def translate_navigation(state: TranslationState) -> Translation:
    """Rewrite a link target into a ``/wiki/<title>`` URL on an allowed host.

    Untrusted charts may only send the reader to wiki pages, so raw web URLs
    are reduced to their title and every other scheme is refused.
    """
    if state.scheme not in NAVIGATE_SCHEMES:
        raise UnknownProtocol(
            f"{state.scheme}: only wiki page links may be opened",
            url=state.url,
        )

    pathname = state.parsed.pathname
    if state.scheme in WEB_PROTOCOLS and not state.protocol_relative:
        if not pathname.startswith(WIKI_PAGE_PREFIX):
            raise MalformedTitle(f"link path must begin with {WIKI_PAGE_PREFIX}", url=state.url)
        # keep one separator for extract_title to drop
        pathname = pathname[len(WIKI_PAGE_PREFIX) - 1 :]

    if state.parsed.query:
        raise InvalidParameter("page links may not carry query parameters", url=state.url)

    title = extract_title(pathname, url=state.url)
    return Translation(
        RequestDescriptor(
            protocol=state.sanitized.protocol,
            host=state.sanitized.host,
            pathname=f"{WIKI_PAGE_PREFIX}{encode_title(title)}",
        )
    )
