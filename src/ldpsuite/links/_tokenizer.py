"""Splitting of multi-value HTTP Link headers."""

__all__ = ["split_links"]


def split_links(value: str) -> list[str]:
    """Split a Link header value into its link-values.

    Commas separate link-values only outside a URI-Reference delimited by
    angle brackets, so ``<http://example.com/b,c>; rel="prev"`` stays in one
    piece. Angle brackets are not legal URI characters and do not nest: ``<``
    opens a reference and ``>`` closes it. An unmatched ``<`` keeps the rest
    of the value inside the reference.

    Args:
        value: A raw Link header value.

    Returns:
        The trimmed link-values (see RFC 5988, section 5). The text after the
        last separator is always included, so the list is never empty and
        may hold empty strings for malformed headers.
    """
    links: list[str] = []
    begin = 0
    inside_uri_reference = False

    for index, char in enumerate(value):
        if char == "," and not inside_uri_reference:
            links.append(value[begin:index].strip())
            begin = index + 1
        elif char == "<":
            inside_uri_reference = True
        elif char == ">":
            inside_uri_reference = False

    links.append(value[begin:].strip())
    return links
