"""Host remapping and transport selection."""

from __future__ import annotations

from graphgate.allowlist import DomainAllowlist
from graphgate.constants.protocols import WEB_PROTOCOLS
from graphgate.exceptions import HostNotAllowed
from graphgate.model import SanitizedHost


class HostSanitizer:
    """Map a host through the alias table and pick its allowed transport."""

    def __init__(self, allowlist: DomainAllowlist, domain_map: dict[str, str] | None = None) -> None:
        self._allowlist = allowlist
        self._domain_map = dict(domain_map or {})

    def remap(self, host: str) -> str:
        """Return the canonical domain for *host* (identity when not aliased)."""
        host = host.strip().lower()
        return self._domain_map.get(host, host)

    def sanitize(self, host: str, *, url: str | None = None) -> SanitizedHost:
        """Return the remapped host and the first of https/http that allows it."""
        domain = self.remap(host)
        for protocol in WEB_PROTOCOLS:
            if self._allowlist.allows(protocol, domain):
                return SanitizedHost(host=domain, protocol=protocol)
        raise HostNotAllowed(f"URL hostname is not allowed: {host!r}", url=url)
