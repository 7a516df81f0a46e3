# pyright: reportExplicitAny=false, reportAny=false
"""Configuration models.

Each configuration section is a frozen Pydantic model that ignores unknown
keys. `Config` combines the sections and provides the factory methods used
to load configuration from dictionaries, files and the environment.
"""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any, ClassVar, Self

import tomli_w
from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError

from ldpsuite.config._defaults import DEFAULT_CONFIG
from ldpsuite.config._loader import deep_merge, read_toml_file
from ldpsuite.coverage import ReportFormat
from ldpsuite.exceptions import ConfigValidationError

__all__ = [
    "CatalogConfig",
    "Config",
    "ConfigSource",
    "ConfigSourceName",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ReportConfig",
]


class LogLevel(StrEnum):
    """Log level threshold values, from most to least verbose."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class ConfigSourceName(StrEnum):
    """Configuration source names, from highest to lowest precedence."""

    CLI = "cli"
    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class ConfigSource:
    """A configuration source.

    Attributes:
        name: The source type identifier.
        path: Path to the config file, or None for non-file sources.
        exists: Whether the source exists (file exists, or values are present).
        values: Configuration values from this source.
    """

    name: ConfigSourceName
    path: Path | None
    exists: bool
    values: dict[str, Any]


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty uses the default log file).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    file: str = ""


class ReportConfig(BaseModel):
    """Report configuration section.

    Attributes:
        output_dir: Directory the report is written to.
        format: Report artifact format.
        filename: Report file name (empty uses the format's default).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    output_dir: str = "report"
    format: ReportFormat = ReportFormat.HTML
    filename: str = ""


class CatalogConfig(BaseModel):
    """Test catalog configuration section.

    Attributes:
        path: Path to the TOML test catalog.
        order_modules: Sort known LDP test modules into reporting order.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    path: str = "ldp-tests.toml"
    order_modules: bool = True


def _validation_error(error: ValidationError) -> ConfigValidationError:
    first = error.errors()[0]
    key = ".".join(str(part) for part in first["loc"])
    msg = f"Invalid configuration value for {key}: {first['msg']}"
    return ConfigValidationError(
        msg,
        key=key,
        value=first.get("input"),
        expected=first["msg"],
    )


class Config(BaseModel):
    """Configuration container with typed access.

    Use the factory methods rather than the constructor.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    report: ReportConfig = ReportConfig()
    catalog: CatalogConfig = CatalogConfig()

    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())

    @property
    def sources(self) -> tuple[ConfigSource, ...]:
        """Sources that contributed to this configuration."""
        return self._sources

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        *,
        sources: tuple[ConfigSource, ...] = (),
    ) -> Self:
        """Create configuration from a dictionary.

        Args:
            data: Configuration values; missing keys take their defaults.
            sources: Sources the values were merged from.

        Returns:
            The validated configuration.

        Raises:
            ConfigValidationError: If a value is invalid.
        """
        merged = deep_merge(DEFAULT_CONFIG, data)
        try:
            config = cls.model_validate(merged)
        except ValidationError as e:
            raise _validation_error(e) from e
        config._sources = sources
        return config

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Create configuration from a single TOML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file is not valid TOML.
            ConfigValidationError: If a value is invalid.
        """
        data = read_toml_file(path)
        source = ConfigSource(
            name=ConfigSourceName.PROJECT, path=path, exists=True, values=data
        )
        return cls.from_dict(data, sources=(source,))

    @classmethod
    def load(
        cls,
        *,
        start: Path | None = None,
        include_env: bool = True,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Load configuration from all discovered sources.

        Sources are merged from lowest to highest precedence: defaults, user
        file, project file, environment, CLI overrides.

        Args:
            start: Directory to start searching for the project file from.
            include_env: Whether to read LDPSUITE_* environment variables.
            cli_overrides: Values from command-line flags.

        Returns:
            The merged configuration.
        """
        from ldpsuite.config._discovery import discover_sources  # noqa: PLC0415

        sources = discover_sources(
            start,
            include_env=include_env,
            cli_overrides=cli_overrides,
        )
        merged: dict[str, Any] = {}
        for source in reversed(sources):
            if source.exists:
                merged = deep_merge(merged, source.values)
        return cls.from_dict(merged, sources=tuple(sources))

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a plain dictionary."""
        return self.model_dump(mode="json")

    def to_toml(self) -> str:
        """Serialize the configuration as TOML."""
        return tomli_w.dumps(self.to_dict())
