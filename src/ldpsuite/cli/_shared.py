# pyright: reportExplicitAny=false
"""Exit codes, output formatters and error reporting shared by the commands."""

from enum import IntEnum
from typing import Any, Never

from rich.console import Console

# Type alias for formattable data - uses Any to match library signatures
FormattableData = dict[str, Any]

__all__ = [
    "ExitCode",
    "FormattableData",
    "exit_code_for_exception",
    "exit_with_error",
    "format_json",
    "format_table",
    "format_yaml",
    "get_error_console",
]


class ExitCode(IntEnum):
    """Standard exit codes for ldpsuite CLI commands."""

    SUCCESS = 0
    LOAD_ERROR = 1
    VALIDATION_ERROR = 2
    NOT_FOUND = 3
    IO_ERROR = 4
    INTERNAL_ERROR = 5


def exit_code_for_exception(exc: BaseException) -> ExitCode:
    """Map an exception to the exit code a command should use."""
    from ldpsuite.exceptions import (  # noqa: PLC0415
        CatalogLoadError,
        CatalogValidationError,
        ConfigLoadError,
        ConfigValidationError,
        MalformedUriError,
        PreferenceNotAppliedError,
        ReportError,
    )

    if isinstance(exc, FileNotFoundError):
        return ExitCode.NOT_FOUND
    if isinstance(exc, (CatalogLoadError, ConfigLoadError)):
        return ExitCode.LOAD_ERROR
    if isinstance(
        exc,
        (
            CatalogValidationError,
            ConfigValidationError,
            MalformedUriError,
            PreferenceNotAppliedError,
            ValueError,
        ),
    ):
        return ExitCode.VALIDATION_ERROR
    if isinstance(exc, (ReportError, OSError)):
        return ExitCode.IO_ERROR
    return ExitCode.INTERNAL_ERROR


def format_json(data: FormattableData, *, indent: bool = True) -> str:
    """Format data as JSON.

    Args:
        data: Dictionary to format as JSON.
        indent: Whether to pretty-print with indentation.

    Returns:
        JSON-formatted string representation.
    """
    import orjson  # noqa: PLC0415

    options = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(data, option=options).decode("utf-8")


def format_yaml(data: FormattableData) -> str:
    """Format data as YAML."""
    import yaml  # noqa: PLC0415

    return yaml.safe_dump(
        data, default_flow_style=False, allow_unicode=True, sort_keys=False
    )


def format_table(headers: list[str], rows: list[list[str]]) -> str:
    """Format rows as a Markdown table."""
    from pytablewriter import MarkdownTableWriter  # noqa: PLC0415

    writer = MarkdownTableWriter(
        headers=headers,
        value_matrix=rows,
        margin=1,
    )
    return writer.dumps()


def get_error_console() -> Console:
    """Get a Rich console for error output to stderr.

    Colors are disabled when the active CLIContext has `no_color` set.
    """
    from ldpsuite.cli._context import CLIContext  # noqa: PLC0415

    no_color = True if CLIContext.get_current().no_color else None
    return Console(stderr=True, no_color=no_color)


def exit_with_error(message: str, code: ExitCode = ExitCode.INTERNAL_ERROR) -> Never:
    """Print `message` to stderr as an error and exit with `code`.

    `message` is Rich markup; escape any text taken from user input.

    Raises:
        SystemExit: Always.
    """
    get_error_console().print(f"[red]Error:[/red] {message}")
    raise SystemExit(code)
