"""Immutable per-translation state shared by scheme handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from graphgate.config.model import MediatorConfig
from graphgate.model import ParsedUrl, RequestContext, RequestDescriptor, SanitizedHost

if TYPE_CHECKING:
    from graphgate.translator.external import ExternalServiceGuard


@dataclass(frozen=True)
class TranslationState:
    """Everything a handler needs to rewrite one request."""

    url: str
    scheme: str
    parsed: ParsedUrl
    sanitized: SanitizedHost
    protocol_relative: bool
    context: RequestContext
    config: MediatorConfig
    guard: ExternalServiceGuard


@dataclass(frozen=True)
class Translation:
    """Handler output: the concrete request plus the flags it raises."""

    descriptor: RequestDescriptor
    cors_needed: bool = False
    headers: dict[str, str] = field(default_factory=dict)
