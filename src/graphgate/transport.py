"""Single-shot HTTP transport used by the data loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from graphgate import __version__
from graphgate.exceptions import TransportError


@dataclass(frozen=True)
class TransportOptions:
    """Per-request options derived from translation output."""

    headers: dict[str, str] = field(default_factory=dict)
    cors: bool = False
    timeout: float | None = None


class UrllibTransport:
    """GET a URL with :mod:`urllib.request`; no retries, no caching.

    The ``cors`` flag only matters to browser transports and is ignored here.
    """

    def __init__(self, user_agent: str | None = None) -> None:
        self._user_agent = user_agent or f"graphgate/{__version__}"

    def __call__(self, url: str, options: TransportOptions) -> bytes:
        request = Request(url, headers={"User-Agent": self._user_agent, **options.headers})
        try:
            with urlopen(request, timeout=options.timeout) as response:  # noqa: S310
                return response.read()
        except HTTPError as exc:
            raise TransportError(f"HTTP {exc.code} fetching {url}", url=url, status=exc.code) from exc
        except (URLError, OSError) as exc:
            raise TransportError(f"Request to {url} failed: {exc}", url=url) from exc
