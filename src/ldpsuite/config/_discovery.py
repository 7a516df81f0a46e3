# pyright: reportExplicitAny=false
"""Project and user config file discovery."""

from pathlib import Path
from typing import Any

import platformdirs

from ldpsuite.config._defaults import CONFIG_FILENAME, DEFAULT_CONFIG
from ldpsuite.config._loader import parse_env_vars, read_toml_file
from ldpsuite.config._models import ConfigSource, ConfigSourceName


def find_project_config(start: Path | None = None) -> Path | None:
    """Find the project config file by searching upward for ldpsuite.toml.

    Args:
        start: Directory to start searching from. Defaults to the current
            working directory.

    Returns:
        Path to the nearest ``ldpsuite.toml``, or None if there is none up
        to the filesystem root.
    """
    current = (start or Path.cwd()).resolve()

    while True:
        candidate = current / CONFIG_FILENAME
        if _file_exists(candidate):
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def get_user_config_path() -> Path:
    r"""Get the platform-specific user config file path.

    - Linux: ``~/.config/ldpsuite/config.toml``
    - macOS: ``~/Library/Application Support/ldpsuite/config.toml``
    - Windows: ``%APPDATA%\ldpsuite\config.toml``

    The path is returned whether or not the file exists.
    """
    return platformdirs.user_config_path("ldpsuite") / "config.toml"


def _file_exists(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def _file_source(name: ConfigSourceName, path: Path | None) -> ConfigSource:
    if path is None or not _file_exists(path):
        return ConfigSource(name=name, path=path, exists=False, values={})
    return ConfigSource(name=name, path=path, exists=True, values=read_toml_file(path))


def discover_sources(
    start: Path | None = None,
    *,
    include_env: bool = True,
    cli_overrides: dict[str, Any] | None = None,
) -> list[ConfigSource]:
    """Discover all configuration sources.

    Args:
        start: Directory to start searching for the project file from.
        include_env: Whether to read LDPSUITE_* environment variables.
        cli_overrides: Values from command-line flags.

    Returns:
        Sources ordered from highest (CLI) to lowest (DEFAULT) precedence.

    Raises:
        ConfigLoadError: If a discovered file is not valid TOML.
    """
    sources: list[ConfigSource] = []

    if cli_overrides is not None:
        sources.append(
            ConfigSource(
                name=ConfigSourceName.CLI,
                path=None,
                exists=bool(cli_overrides),
                values=cli_overrides,
            )
        )

    if include_env:
        env_values = parse_env_vars()
        sources.append(
            ConfigSource(
                name=ConfigSourceName.ENV,
                path=None,
                exists=bool(env_values),
                values=env_values,
            )
        )

    sources.append(_file_source(ConfigSourceName.PROJECT, find_project_config(start)))
    sources.append(_file_source(ConfigSourceName.USER, get_user_config_path()))
    sources.append(
        ConfigSource(
            name=ConfigSourceName.DEFAULT,
            path=None,
            exists=True,
            values=DEFAULT_CONFIG,
        )
    )

    return sources
