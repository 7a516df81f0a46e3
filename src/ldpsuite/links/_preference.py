"""Prefer request and Preference-Applied response header helpers (RFC 7240)."""

import re
from collections.abc import Sequence
from typing import Final

from ldpsuite.exceptions import PreferenceNotAppliedError

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
    "check_preference_applied",
    "has_return_representation",
    "include",
    "omit",
]

LINK: Final = "Link"
PREFER: Final = "Prefer"
PREFERENCE_APPLIED: Final = "Preference-Applied"

PREFERENCE_INCLUDE: Final = "include"
PREFERENCE_OMIT: Final = "omit"

_LDP: Final = "http://www.w3.org/ns/ldp#"
PREFER_CONTAINMENT: Final = f"{_LDP}PreferContainment"
PREFER_MEMBERSHIP: Final = f"{_LDP}PreferMembership"
PREFER_MINIMAL_CONTAINER: Final = f"{_LDP}PreferMinimalContainer"
PREFER_EMPTY_CONTAINER: Final = f"{_LDP}PreferEmptyContainer"

# return=representation anywhere in the value; whitespace and quotes optional.
_RETURN_REPRESENTATION = re.compile(
    r'(^|.*[ ;])return *= *"?representation"?($|[ ;].*)'
)


def has_return_representation(header_values: Sequence[str]) -> bool:
    """Check Preference-Applied values for ``return=representation``.

    Args:
        header_values: Raw values of the response's Preference-Applied
            headers.

    Returns:
        True if any value applies ``return=representation``.
    """
    return any(
        _RETURN_REPRESENTATION.fullmatch(value) is not None for value in header_values
    )


def check_preference_applied(header_values: Sequence[str]) -> None:
    """Require ``return=representation`` if Preference-Applied is present.

    The header is optional, so an empty sequence passes.

    Args:
        header_values: Raw values of the response's Preference-Applied
            headers.

    Raises:
        PreferenceNotAppliedError: If the header is present without
            ``return=representation``.
    """
    if not header_values:
        return

    if not has_return_representation(header_values):
        msg = (
            "Server responded with a Preference-Applied header, "
            "but it did not contain return=representation"
        )
        raise PreferenceNotAppliedError(msg, values=tuple(header_values))


def _ldp_preference(name: str, preferences: Sequence[str]) -> str:
    return f'return=representation; {name}="{" ".join(preferences)}"'


def include(*preferences: str) -> str:
    """Build a Prefer header value that includes the given preferences.

    Example:
        >>> include(PREFER_MINIMAL_CONTAINER)
        'return=representation; include="http://www.w3.org/ns/ldp#PreferMinimalContainer"'
    """
    return _ldp_preference(PREFERENCE_INCLUDE, preferences)


def omit(*preferences: str) -> str:
    """Build a Prefer header value that omits the given preferences."""
    return _ldp_preference(PREFERENCE_OMIT, preferences)
