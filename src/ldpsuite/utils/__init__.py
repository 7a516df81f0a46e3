"""Shared utilities for ldpsuite."""

from ._logging import create_cli_logger, get_cli_log_file, get_log_dir

__all__ = ["create_cli_logger", "get_cli_log_file", "get_log_dir"]
