"""Enumeration types for ldpsuite."""

from enum import StrEnum


class RequirementLevel(StrEnum):
    """Normative strength of a specification clause (RFC 2119)."""

    MUST = "MUST"
    SHOULD = "SHOULD"
    MAY = "MAY"


class ImplementationStatus(StrEnum):
    """How a conformance test method is carried out."""

    AUTOMATED = "automated"
    NOT_IMPLEMENTED = "not_implemented"
    CLIENT_ONLY = "client_only"
    MANUAL = "manual"


class ApprovalStatus(StrEnum):
    """Working group approval state of a conformance test method."""

    PENDING = "pending"
    APPROVED = "approved"
