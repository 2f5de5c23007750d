"""Config data model for the mediator."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from graphgate.constants.config import DEFAULT_TRANSPORT_TIMEOUT


def protocol_key(key: str) -> str:
    """Normalize a protocol key: lowercase, one trailing colon dropped."""
    key = key.strip().lower()
    return key[:-1] if key.endswith(":") else key


def _dedupe_domains(domains: Iterable[str]) -> tuple[str, ...]:
    """Lowercase and de-duplicate domains, keeping the first occurrence order."""
    seen: dict[str, None] = {}
    for domain in domains:
        normalized = domain.strip().lower()
        if normalized:
            seen.setdefault(normalized, None)
    return tuple(seen)


@dataclass(frozen=True)
class MediatorConfig:
    """Resolved, immutable mediator configuration.

    ``domains`` maps protocol keys to allowed domain suffixes. Order matters:
    the first domain of a service scheme is its default host.
    """

    domains: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    domain_map: Mapping[str, str] = field(default_factory=dict)
    is_trusted: bool = False
    language_code: str | None = None
    transport_timeout: float = DEFAULT_TRANSPORT_TIMEOUT

    def __post_init__(self) -> None:
        domains = {protocol_key(key): _dedupe_domains(values) for key, values in self.domains.items()}
        domain_map = {alias.strip().lower(): target.strip().lower() for alias, target in self.domain_map.items()}
        object.__setattr__(self, "domains", MappingProxyType(domains))
        object.__setattr__(self, "domain_map", MappingProxyType(domain_map))

    def domains_for(self, key: str) -> tuple[str, ...] | None:
        """Return the configured domains for *key*, or ``None`` when unset."""
        return self.domains.get(protocol_key(key))
