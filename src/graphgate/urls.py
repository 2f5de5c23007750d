"""Default URL parsing and formatting collaborators.

These mirror what a server-side loader needs: protocol-relative URLs are
accepted, a missing host falls back to the caller's default domain, and paths
stay percent-encoded until a handler decodes them.
"""

from __future__ import annotations

from urllib.parse import parse_qsl, quote, urlencode, urlsplit

from graphgate.constants.protocols import WEB_PROTOCOLS
from graphgate.model import ParsedUrl, RequestDescriptor


def parse_url(raw_url: str, default_domain: str) -> ParsedUrl:
    """Split *raw_url* into a :class:`ParsedUrl`.

    Raises ``ValueError`` for URLs :func:`urllib.parse.urlsplit` cannot handle.
    The full network location is kept as the host, so user info or a port
    never matches an allow-list entry.
    """
    parts = urlsplit(raw_url.strip())
    scheme = parts.scheme.lower() or None
    host = parts.netloc.lower()
    is_relative_host = not host
    if is_relative_host:
        host = default_domain.strip().lower()

    pathname = parts.path
    if not pathname and scheme in WEB_PROTOCOLS and not is_relative_host:
        pathname = "/"

    return ParsedUrl(
        scheme=scheme,
        host=host,
        pathname=pathname,
        query=dict(parse_qsl(parts.query, keep_blank_values=True)),
        is_relative_host=is_relative_host,
    )


def format_url(descriptor: RequestDescriptor) -> str:
    """Serialize a descriptor; the path is emitted as-is, query values are escaped."""
    pathname = descriptor.pathname
    if pathname and not pathname.startswith("/"):
        pathname = f"/{pathname}"
    url = f"{descriptor.protocol}://{descriptor.host}{pathname}"
    if descriptor.query:
        url = f"{url}?{urlencode(descriptor.query, quote_via=quote)}"
    return url
