"""Resolution and lookup of links in HTTP Link headers."""

import re
from collections.abc import Iterator, Sequence

import httpx

from ldpsuite.exceptions import MalformedUriError
from ldpsuite.links._parser import LinkValue, parse_link_value
from ldpsuite.links._tokenizer import split_links

__all__ = [
    "contains_link",
    "first_link_for_relation",
    "iter_links",
    "parse_uri",
    "resolve_if_relative",
]

# Characters allowed in an RFC 3986 URI-reference.
_URI_REFERENCE = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*")
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")

# RFC 3986 appendix B.
_URI_PARTS = re.compile(
    r"(?:(?P<scheme>[^:/?#]+):)?"
    r"(?://(?P<authority>[^/?#]*))?"
    r"(?P<path>[^?#]*)"
    r"(?:\?(?P<query>[^#]*))?"
    r"(?:#(?P<fragment>.*))?",
    re.DOTALL,
)


def _split(uri: str) -> dict[str, str | None]:
    match = _URI_PARTS.fullmatch(uri)
    if match is None:
        msg = f"Invalid URI: {uri!r}"
        raise MalformedUriError(msg, uri=uri)
    return match.groupdict()


def _remove_dot_segments(path: str) -> str:
    output: list[str] = []
    while path:
        if path.startswith("../"):
            path = path[3:]
        elif path.startswith("./"):
            path = path[2:]
        elif path.startswith("/./"):
            path = path[2:]
        elif path == "/.":
            path = "/"
        elif path.startswith("/../"):
            path = path[3:]
            if output:
                _ = output.pop()
        elif path == "/..":
            path = "/"
            if output:
                _ = output.pop()
        elif path in {".", ".."}:
            path = ""
        else:
            start = 1 if path.startswith("/") else 0
            end = path.find("/", start)
            if end == -1:
                end = len(path)
            output.append(path[:end])
            path = path[end:]
    return "".join(output)


def _merge(base: dict[str, str | None], ref_path: str) -> str:
    base_path = base["path"] or ""
    if base["authority"] is not None and not base_path:
        return "/" + ref_path
    return base_path[: base_path.rfind("/") + 1] + ref_path


def _join(base: str, reference: str) -> str:
    # RFC 3986 section 5.2 on the raw text, so the base keeps its spelling.
    b = _split(base)
    r = _split(reference)
    authority = b["authority"]
    query = r["query"]
    ref_path = r["path"] or ""

    if r["authority"] is not None:
        authority = r["authority"]
        path = _remove_dot_segments(ref_path)
    elif not ref_path:
        path = b["path"] or ""
        if query is None:
            query = b["query"]
    elif ref_path.startswith("/"):
        path = _remove_dot_segments(ref_path)
    else:
        path = _remove_dot_segments(_merge(b, ref_path))

    result = f"{b['scheme']}:"
    if authority is not None:
        result += f"//{authority}"
    result += path
    if query is not None:
        result += f"?{query}"
    if r["fragment"] is not None:
        result += f"#{r['fragment']}"
    return result


def parse_uri(uri: str) -> httpx.URL:
    """Parse a URI-reference, rejecting anything that is not one.

    Args:
        uri: An absolute URI or relative reference.

    Returns:
        The parsed URL.

    Raises:
        MalformedUriError: If `uri` is not a syntactically valid
            URI-reference.
    """
    if _URI_REFERENCE.fullmatch(uri) is None or _BAD_PERCENT.search(uri):
        msg = f"Invalid URI: {uri!r}"
        raise MalformedUriError(msg, uri=uri)

    try:
        return httpx.URL(uri)
    except httpx.InvalidURL as e:
        msg = f"Invalid URI: {uri!r}: {e}"
        raise MalformedUriError(msg, uri=uri) from e


def resolve_if_relative(base: str | None, target: str) -> str:
    """Resolve a link target against a base URI if it is relative.

    Args:
        base: The base URI, usually the request URI. When None, relative
            targets are returned as they are.
        target: A link target that might be relative.

    Returns:
        `target` unchanged when it is absolute (or no base is given),
        otherwise the RFC 3986 resolution of `target` against `base`. The
        scheme and authority of `base` are kept exactly as written.

    Raises:
        MalformedUriError: If `target` or `base` is not a valid URI, or
            `base` is not absolute.
    """
    target_url = parse_uri(target)
    if target_url.scheme or base is None:
        return target

    base_url = parse_uri(base)
    if not base_url.scheme:
        msg = f"Base URI is not absolute: {base!r}"
        raise MalformedUriError(msg, uri=base)

    return _join(base, target)


def iter_links(header_values: Sequence[str]) -> Iterator[LinkValue]:
    """Parse every link-value of a set of Link header values, in order.

    Empty list elements are skipped.

    Args:
        header_values: Raw values of the response's Link headers.

    Yields:
        The parsed link-values.

    Raises:
        MalformedLinkError: If a link-value cannot be parsed.
    """
    for header_value in header_values:
        for link in split_links(header_value):
            if link:
                yield parse_link_value(link)


def contains_link(
    expected_uri: str,
    expected_rel: str,
    header_values: Sequence[str],
    base_uri: str | None = None,
) -> bool:
    """Check whether a response links to a URI with a given relation.

    Args:
        expected_uri: The expected absolute target URI.
        expected_rel: The expected link relation.
        header_values: Raw values of the response's Link headers.
        base_uri: The request URI, for resolving relative targets.

    Returns:
        True if a link with relation `expected_rel` resolves to
        `expected_uri`.

    Raises:
        MalformedUriError: If a matching link's target or the base URI is
            not a valid URI.
    """
    for link in iter_links(header_values):
        if link.rel != expected_rel:
            continue
        if resolve_if_relative(base_uri, link.uri) == expected_uri:
            return True
    return False


def first_link_for_relation(
    rel: str,
    header_values: Sequence[str],
    base_uri: str | None = None,
) -> str | None:
    """Get the first link target with a given relation.

    Args:
        rel: The link relation.
        header_values: Raw values of the response's Link headers.
        base_uri: The request URI, for resolving relative targets.

    Returns:
        The resolved target of the first matching link, or None.

    Raises:
        MalformedUriError: If the matching link's target or the base URI is
            not a valid URI.
    """
    for link in iter_links(header_values):
        if link.rel == rel:
            return resolve_if_relative(base_uri, link.uri)
    return None
