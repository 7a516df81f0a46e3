"""Requirement deduplication for a single aggregation run."""

from typing import Final

__all__ = ["RequirementTracker"]


class RequirementTracker:
    """Set of spec reference URIs already attributed to coverage."""

    __slots__: Final = ("_claimed",)

    _claimed: set[str]

    def __init__(self) -> None:
        self._claimed = set()

    def try_claim(self, uri: str) -> bool:
        """Claim a spec reference URI.

        Args:
            uri: The spec reference URI.

        Returns:
            True the first time the URI is seen, False afterwards.
        """
        if uri in self._claimed:
            return False
        self._claimed.add(uri)
        return True

    def __contains__(self, uri: object) -> bool:
        return uri in self._claimed

    def __len__(self) -> int:
        return len(self._claimed)
