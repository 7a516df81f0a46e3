"""Parsing of single RFC 5988 link-values.

A link-value is a bracketed URI-Reference followed by parameters::

    link-value = "<" URI-Reference ">" *( OWS ";" OWS link-param )
    link-param = token BWS [ "=" BWS ( token / quoted-string ) ]
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ldpsuite.exceptions import MalformedLinkError

__all__ = ["LinkValue", "parse_link_value"]

_QUOTED_PAIR = re.compile(r"\\(.)")


@dataclass(frozen=True, slots=True)
class LinkValue:
    """One parsed link-value.

    Attributes:
        uri: Target URI-Reference, possibly relative.
        rel: Raw value of the ``rel`` parameter, or None when absent.
        params: All parameters by lower-cased name, ``rel`` included.
    """

    uri: str
    rel: str | None = None
    params: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )


def _split_params(text: str) -> list[str]:
    parts: list[str] = []
    current: list[str] = []
    in_quotes = False
    escaped = False

    for char in text:
        if escaped:
            escaped = False
        elif in_quotes and char == "\\":
            escaped = True
        elif char == '"':
            in_quotes = not in_quotes
        elif char == ";" and not in_quotes:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)

    parts.append("".join(current))
    return parts


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':  # noqa: PLR2004
        return _QUOTED_PAIR.sub(r"\1", value[1:-1])
    return value


def parse_link_value(value: str) -> LinkValue:
    """Parse a single link-value.

    Parameter names are case-insensitive. When a parameter appears more than
    once, the first occurrence wins.

    Args:
        value: One link-value, as produced by `split_links`.

    Returns:
        The parsed link-value.

    Raises:
        MalformedLinkError: If the value has no bracketed target, or text
            other than parameters follows the target.
    """
    text = value.strip()
    if not text.startswith("<"):
        msg = f"Link value does not start with a bracketed URI: {value!r}"
        raise MalformedLinkError(msg, value=value)

    end = text.find(">")
    if end == -1:
        msg = f"Link value has an unterminated URI reference: {value!r}"
        raise MalformedLinkError(msg, value=value)

    uri = text[1:end].strip()
    params: dict[str, str] = {}

    first, *rest = _split_params(text[end + 1 :])
    if first.strip():
        msg = f"Unexpected text after link target: {first.strip()!r}"
        raise MalformedLinkError(msg, value=value)

    for param in rest:
        name, sep, raw = param.partition("=")
        name = name.strip().lower()
        if not name:
            continue
        if name not in params:
            params[name] = _unquote(raw.strip()) if sep else ""

    return LinkValue(uri=uri, rel=params.get("rel"), params=MappingProxyType(params))
