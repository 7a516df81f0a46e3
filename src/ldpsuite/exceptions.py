"""ldpsuite exceptions."""

from pathlib import Path
from typing import Any


class LdpSuiteError(Exception):
    """Base exception for ldpsuite errors."""


# =============================================================================
# Link Exceptions
# =============================================================================


class MalformedUriError(LdpSuiteError, ValueError):
    """Raised when a link target or base URI is not a valid URI reference.

    Attributes:
        uri: The offending URI string.
    """

    def __init__(self, message: str, *, uri: str | None = None) -> None:
        """Initialize with error message and the offending URI.

        Args:
            message: Human-readable error message.
            uri: The URI that failed to parse.
        """
        super().__init__(message)
        self.uri: str | None = uri


class MalformedLinkError(MalformedUriError):
    """Raised when a link-value has no bracketed target URI.

    Attributes:
        value: The offending link-value.
    """

    def __init__(self, message: str, *, value: str) -> None:
        """Initialize with error message and the offending link-value."""
        super().__init__(message)
        self.value: str = value


class PreferenceNotAppliedError(LdpSuiteError, AssertionError):
    """Raised when a Preference-Applied header lacks return=representation.

    Attributes:
        values: The header values that were checked.
    """

    def __init__(self, message: str, *, values: tuple[str, ...]) -> None:
        """Initialize with error message and the checked header values."""
        super().__init__(message)
        self.values: tuple[str, ...] = values


# =============================================================================
# Coverage Exceptions
# =============================================================================


class AggregationError(LdpSuiteError):
    """Raised when an aggregation context is used more than once."""


class CatalogError(LdpSuiteError):
    """Base exception for test catalog errors."""


class CatalogLoadError(CatalogError):
    """Raised when a test catalog cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class CatalogValidationError(CatalogError):
    """Raised when a test catalog entry has an invalid value."""

    def __init__(
        self,
        message: str,
        *,
        module: str | None = None,
        method: str | None = None,
        key: str | None = None,
    ) -> None:
        """Initialize with error message and catalog location."""
        super().__init__(message)
        self.module: str | None = module
        self.method: str | None = method
        self.key: str | None = key


class ReportError(LdpSuiteError):
    """Raised when the report artifact cannot be written.

    Attributes:
        path: The report path that could not be written.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and the report path."""
        super().__init__(message)
        self.path: Path | None = path


# =============================================================================
# Config Exceptions
# =============================================================================


class ConfigError(LdpSuiteError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
