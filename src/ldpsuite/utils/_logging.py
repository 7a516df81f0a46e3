"""Logging utilities for ldpsuite.

This module provides standalone structlog logger factories that write
JSON-formatted or text-formatted logs to ldpsuite log files. Each logger is
self-contained and does not modify global structlog configuration.
"""

import logging
from os import getenv
from pathlib import Path
from typing import Literal, cast

import platformdirs
import structlog
from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]


def get_log_dir() -> Path:
    """Get the platform-specific ldpsuite log directory."""
    return platformdirs.user_log_path("ldpsuite")


def get_cli_log_file() -> Path:
    """Get the path to the default CLI log file."""
    return get_log_dir() / "cli.log"


def _log_level_from_string(level: str) -> int:
    """Convert a log level string to a logging level integer.

    LDPSUITE_DEBUG, if set, overrides `level` with DEBUG.

    Args:
        level: Log level string (debug, info, warning, error).

    Returns:
        The logging level as an integer.
    """
    if getenv("LDPSUITE_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.INFO)


def _create_logger(
    log_file_path: str,
    *,
    log_level: int,
    log_format: LogFormatType = "json",
) -> FilteringBoundLogger:
    """Create a standalone structlog logger writing to the specified file.

    Args:
        log_file_path: Path to the log file (opened in append mode).
        log_level: Minimum level that is written.
        log_format: Output format, either "json" or "text".

    Returns:
        A configured FilteringBoundLogger instance.
    """
    log_path = Path(log_file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Text format: "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    logger_factory = structlog.WriteLoggerFactory(file=log_path.open("a"))

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            logger_factory(),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            context_class=dict,
        ),
    )


def create_cli_logger(
    *,
    level: str = "info",
    log_format: LogFormatType = "json",
    log_file: str = "",
    command: str = "",
) -> FilteringBoundLogger:
    """Create a logger for CLI commands.

    Creates a standalone structlog logger that writes structured logs to
    either a specified file or the default CLI log file.

    LDPSUITE_DEBUG, if set, enables DEBUG level regardless of `level`.

    Args:
        level: Log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to log file (uses the default CLI log file if empty).
        command: Name of the CLI command, bound to all log entries.

    Returns:
        A FilteringBoundLogger instance configured for CLI logging.
    """
    effective_file = log_file if log_file else str(get_cli_log_file())
    effective_level = _log_level_from_string(level)

    logger = _create_logger(
        effective_file,
        log_level=effective_level,
        log_format=log_format,
    )

    if command:
        return logger.bind(command=command)
    return logger
