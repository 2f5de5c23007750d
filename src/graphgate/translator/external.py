"""Host resolution for schemes bound to a single backend service."""

from __future__ import annotations

from graphgate.allowlist import DomainAllowlist
from graphgate.constants.protocols import SERVICE_ALLOWLIST_ALIASES
from graphgate.exceptions import HostNotAllowed, ProtocolDisabled
from graphgate.hosts import HostSanitizer
from graphgate.model import ParsedUrl, SanitizedHost


class ExternalServiceGuard:
    """Pin upload, SPARQL and geoshape requests to their own service hosts.

    A relative reference resolves to the service's first configured domain. An
    explicit host is kept only if the service's own allow-list (exact matches,
    no subdomains) accepts it, even when the generic web allow-list would.
    """

    def __init__(self, allowlist: DomainAllowlist, sanitizer: HostSanitizer) -> None:
        self._allowlist = allowlist
        self._sanitizer = sanitizer

    def resolve(
        self,
        parsed: ParsedUrl,
        sanitized: SanitizedHost,
        scheme: str,
        *,
        url: str | None = None,
    ) -> SanitizedHost:
        """Return the service host and transport, or raise."""
        service = SERVICE_ALLOWLIST_ALIASES.get(scheme, scheme)
        domains = self._allowlist.domains_for(service)
        if not domains:
            raise ProtocolDisabled(f"{scheme}: protocol is disabled", url=url)

        if parsed.is_relative_host:
            resolved = self._sanitizer.sanitize(domains[0], url=url)
        else:
            resolved = sanitized

        if not self._allowlist.allows(service, resolved.host):
            raise HostNotAllowed(f"{scheme}: host {resolved.host!r} is not allowed for this service", url=url)
        return resolved
