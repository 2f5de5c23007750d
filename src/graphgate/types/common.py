"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Literal, TypeAlias

WebProtocol: TypeAlias = Literal["http", "https"]
RequestKind: TypeAlias = Literal["fetch", "navigate"]

HostPredicate: TypeAlias = Callable[[str], bool]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
