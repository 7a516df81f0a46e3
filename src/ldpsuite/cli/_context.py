# ruff: noqa: TC003  # Path needed at runtime for dataclass field
"""CLI context for global state management.

The CLIContext is set once per CLI invocation and made available to all
commands via contextvars.
"""

import contextvars
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Optional

from structlog.typing import FilteringBoundLogger

from ldpsuite.config import Config


class OutputFormat(StrEnum):
    """Supported output formats for commands."""

    JSON = "json"
    YAML = "yaml"
    TABLE = "table"
    TEXT = "text"


_current_cli_context: contextvars.ContextVar[Optional["CLIContext"]] = (
    contextvars.ContextVar("cli_context", default=None)
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI context with configuration and options.

    Attributes:
        config: Loaded configuration object.
        verbose: Enable verbose output with additional details.
        quiet: Suppress non-essential output.
        no_color: Disable colored output.
        project_root: Directory config discovery started from. Relative
            paths from the configuration are resolved against it.
        config_error: Error message if config loading failed.
        logger: Structured logger for CLI commands (writes to file only).
    """

    config: Config = field(repr=False)
    verbose: bool = False
    quiet: bool = False
    no_color: bool = False
    project_root: Path | None = None
    config_error: str | None = None
    logger: FilteringBoundLogger | None = field(default=None, repr=False)

    def resolve_path(self, value: str) -> Path:
        """Resolve a path taken from the configuration."""
        path = Path(value)
        if self.project_root is None or path.is_absolute():
            return path
        return self.project_root / path

    @classmethod
    def get_current(cls) -> "CLIContext":
        """Get the active CLIContext, or a default one if none is set."""
        ctx = _current_cli_context.get()
        if ctx is not None:
            return ctx
        return cls(config=Config.from_dict({}))

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> None:
        """Set the active CLIContext."""
        _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Reset to the default context."""
        _current_cli_context.set(None)
