"""Request and response entities passed between mediator components."""

from __future__ import annotations

from dataclasses import dataclass, field

from graphgate.types.common import JsonObject, JsonValue, RequestKind, WebProtocol


@dataclass(frozen=True)
class ParsedUrl:
    """Decomposed chart URL.

    ``pathname`` is still percent-encoded. ``is_relative_host`` is set when the
    URL named no host and ``host`` was filled from the caller's default domain.
    """

    scheme: str | None
    host: str
    pathname: str
    query: dict[str, str]
    is_relative_host: bool = False


@dataclass(frozen=True)
class SanitizedHost:
    """Canonical host plus the transport it is allowed to use."""

    host: str
    protocol: WebProtocol


@dataclass(frozen=True)
class RequestDescriptor:
    """Concrete request ready to be formatted into a URL string."""

    protocol: WebProtocol
    host: str
    pathname: str
    query: dict[str, str] = field(default_factory=dict)


@dataclass
class RequestContext:
    """Per-request input and the flags translation reports back.

    ``cors_needed``, ``resolved_protocol`` and ``extra_headers`` are outputs:
    they are reset and then filled in by each translation.
    """

    raw_url: str
    kind: RequestKind = "fetch"
    default_domain: str = ""
    site_language: str | None = None
    cors_needed: bool = field(default=False, init=False)
    resolved_protocol: str | None = field(default=None, init=False)
    extra_headers: dict[str, str] = field(default_factory=dict, init=False)

    def reset_outputs(self) -> None:
        """Clear output flags left over from a previous translation."""
        self.cors_needed = False
        self.resolved_protocol = None
        self.extra_headers = {}


@dataclass(frozen=True)
class NormalizedJsonData:
    """Dataset payload reshaped for the chart renderer."""

    meta: list[JsonObject]
    data: JsonValue
    fields: list[JsonObject] | None = None

    def to_dict(self) -> JsonObject:
        """Serialize to the plain mapping the renderer consumes."""
        payload: JsonObject = {"meta": list(self.meta), "data": self.data}
        if self.fields is not None:
            payload["fields"] = list(self.fields)
        return payload
