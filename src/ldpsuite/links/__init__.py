"""HTTP Link and Preference-Applied header helpers.

This package splits and parses RFC 5988 Link headers, resolves relative
link targets against the request URI, and checks RFC 7240
Preference-Applied headers.
"""

from ldpsuite.links._parser import LinkValue, parse_link_value
from ldpsuite.links._preference import (
    LINK,
    PREFER,
    PREFER_CONTAINMENT,
    PREFER_EMPTY_CONTAINER,
    PREFER_MEMBERSHIP,
    PREFER_MINIMAL_CONTAINER,
    PREFERENCE_APPLIED,
    PREFERENCE_INCLUDE,
    PREFERENCE_OMIT,
    check_preference_applied,
    has_return_representation,
    include,
    omit,
)
from ldpsuite.links._resolver import (
    contains_link,
    first_link_for_relation,
    iter_links,
    parse_uri,
    resolve_if_relative,
)
from ldpsuite.links._tokenizer import split_links

__all__ = [
    "LINK",
    "PREFER",
    "PREFERENCE_APPLIED",
    "PREFERENCE_INCLUDE",
    "PREFERENCE_OMIT",
    "PREFER_CONTAINMENT",
    "PREFER_EMPTY_CONTAINER",
    "PREFER_MEMBERSHIP",
    "PREFER_MINIMAL_CONTAINER",
    "LinkValue",
    "check_preference_applied",
    "contains_link",
    "first_link_for_relation",
    "has_return_representation",
    "include",
    "iter_links",
    "omit",
    "parse_link_value",
    "parse_uri",
    "resolve_if_relative",
    "split_links",
]
