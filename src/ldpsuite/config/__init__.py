"""ldpsuite configuration.

This module provides loading, validation, and typed access to configuration
values.

Example:
    >>> from ldpsuite.config import Config
    >>> config = Config.load()
    >>> config.report.format
    <ReportFormat.HTML: 'html'>
"""

from ldpsuite.exceptions import ConfigError, ConfigLoadError, ConfigValidationError

from ._defaults import CONFIG_FILENAME, DEFAULT_CONFIG
from ._discovery import discover_sources, find_project_config, get_user_config_path
from ._load import safe_load_config
from ._loader import (
    ENV_PREFIX,
    deep_merge,
    parse_env_vars,
    parse_string_value,
    read_toml_file,
    set_nested_key,
)
from ._models import (
    CatalogConfig,
    Config,
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LoggingConfig,
    LogLevel,
    ReportConfig,
)

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "ENV_PREFIX",
    "CatalogConfig",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigSourceName",
    "ConfigValidationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ReportConfig",
    "deep_merge",
    "discover_sources",
    "find_project_config",
    "get_user_config_path",
    "parse_env_vars",
    "parse_string_value",
    "read_toml_file",
    "safe_load_config",
    "set_nested_key",
]
