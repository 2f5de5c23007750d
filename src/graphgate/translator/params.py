"""Title and query parameter validation for translated requests."""

from __future__ import annotations

from urllib.parse import quote, unquote

from graphgate.constants.protocols import (
    DECIMAL_PATTERN,
    INTEGER_PATTERN,
    SNAPSHOT_DEFAULT_STYLE,
    SNAPSHOT_NUMERIC_PARAMS,
    SNAPSHOT_PATH_TEMPLATE,
    SNAPSHOT_STYLE_PATTERN,
)
from graphgate.exceptions import InvalidParameter, MalformedTitle, MissingRequiredParameter


def extract_title(pathname: str, *, url: str | None = None) -> str:
    """Decode a page title from a path with one leading separator.

    The title must be non-empty after trimming and must not contain ``|``,
    which MediaWiki treats as a multi-title separator.
    """
    raw = pathname[1:] if pathname.startswith("/") else pathname
    title = unquote(raw).strip()
    if not title:
        raise MalformedTitle("page title is empty", url=url)
    if "|" in title:
        raise MalformedTitle(f"page title may not contain '|': {title!r}", url=url)
    return title


def encode_title(title: str) -> str:
    """Encode a title as a wiki page path segment (spaces become underscores)."""
    return quote(title.replace(" ", "_"), safe="!*'()")


def require_any(query: dict[str, str], names: tuple[str, ...], scheme: str, *, url: str | None = None) -> None:
    """Raise unless at least one of *names* is present in *query*."""
    if not any(name in query for name in names):
        expected = " or ".join(f"'{name}'" for name in names)
        raise MissingRequiredParameter(f"{scheme}: query must contain {expected}", url=url)


def snapshot_path(query: dict[str, str], *, url: str | None = None) -> str:
    """Validate map snapshot parameters and build the image path.

    Values are checked against an integer or decimal pattern before their
    range, and rejected rather than clamped.
    """
    values: dict[str, str] = {}
    for name, minimum, maximum, allow_decimal in SNAPSHOT_NUMERIC_PARAMS:
        value = query.get(name)
        if value is None:
            raise MissingRequiredParameter(f"mapsnapshot: missing '{name}' parameter", url=url)
        pattern = DECIMAL_PATTERN if allow_decimal else INTEGER_PATTERN
        if not pattern.match(value):
            raise InvalidParameter(f"mapsnapshot: '{name}' must be a number, got {value!r}", url=url)
        number = float(value)
        if not minimum <= number <= maximum:
            raise InvalidParameter(
                f"mapsnapshot: '{name}' must be between {minimum:g} and {maximum:g}, got {value}",
                url=url,
            )
        values[name] = value

    style = query.get("style")
    if style is None:
        style = SNAPSHOT_DEFAULT_STYLE
    elif not SNAPSHOT_STYLE_PATTERN.match(style):
        raise InvalidParameter(f"mapsnapshot: invalid style {style!r}", url=url)

    return SNAPSHOT_PATH_TEMPLATE.format(style=style, **values)
