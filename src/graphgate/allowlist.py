"""Per-protocol host allow-list predicates."""

from __future__ import annotations

import re

from graphgate.config.model import MediatorConfig, protocol_key
from graphgate.constants.protocols import WEB_PROTOCOLS
from graphgate.types.common import HostPredicate


def _reject_all(host: str) -> bool:
    return False


def build_host_predicate(domains: tuple[str, ...] | None, *, allow_subdomains: bool) -> HostPredicate:
    """Compile a case-insensitive host matcher for a list of domain suffixes.

    Every configured domain is escaped in full, so a dot only ever matches a
    literal dot. With *allow_subdomains* any dot-separated prefix is accepted.
    """
    if not domains:
        return _reject_all
    alternatives = "|".join(re.escape(domain) for domain in domains)
    prefix = r"([^@/:]*\.)?" if allow_subdomains else ""
    pattern = re.compile(rf"^{prefix}({alternatives})$", re.IGNORECASE)
    return lambda host: bool(host) and pattern.match(host) is not None


class DomainAllowlist:
    """Lazily compiled, memoized host predicates keyed by protocol.

    The cache only ever grows. Two threads racing on the first lookup of a key
    build equal predicates, so no lock is needed.
    """

    def __init__(self, config: MediatorConfig) -> None:
        self._config = config
        self._predicates: dict[str, HostPredicate] = {}

    def compile(self, key: str) -> HostPredicate:
        """Return the predicate for *key*, compiling it on first use."""
        key = protocol_key(key)
        predicate = self._predicates.get(key)
        if predicate is None:
            predicate = build_host_predicate(
                self._config.domains_for(key),
                allow_subdomains=key in WEB_PROTOCOLS,
            )
            self._predicates.setdefault(key, predicate)
        return predicate

    def allows(self, key: str, host: str) -> bool:
        """Return True when *host* passes the allow-list of *key*."""
        return self.compile(key)(host)

    def domains_for(self, key: str) -> tuple[str, ...] | None:
        """Return the configured domains for *key*, or ``None`` when unset."""
        return self._config.domains_for(key)
