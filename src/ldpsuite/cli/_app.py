"""The command-line interface for ldpsuite."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from ldpsuite.config import safe_load_config
from ldpsuite.utils import create_cli_logger

from ._commands import register_commands
from ._context import CLIContext

_HELP = "LDP conformance coverage reports and HTTP header checks."


def _launch(
    app: App,
    tokens: tuple[str, ...],
    *,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    config: Path | None,
    project_root: Path | None,
) -> None:
    cli_overrides: dict[str, object] | None = None
    if verbose:
        cli_overrides = {"logging": {"level": "debug"}}

    loaded_config, config_error = safe_load_config(
        config_path=config,
        start=project_root,
        cli_overrides=cli_overrides,
    )

    cli_logger = create_cli_logger(
        level=loaded_config.logging.level.value,
        log_format=loaded_config.logging.format.value,  # type: ignore[arg-type]
        log_file=loaded_config.logging.file,
        command=tokens[0] if tokens else "",
    )

    ctx = CLIContext(
        config=loaded_config,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        project_root=project_root,
        config_error=config_error,
        logger=cli_logger,
    )
    if config_error is not None:
        cli_logger.warning("config_load_failed", error=config_error)
    CLIContext.set_current(ctx)

    try:
        app(tokens)
    finally:
        CLIContext.reset()


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="ldpsuite",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[bool, Parameter(help="Enable verbose output")] = False,
        quiet: Annotated[bool, Parameter(help="Suppress non-essential output")] = False,
        no_color: Annotated[
            bool, Parameter(name="--no-color", help="Disable colored output")
        ] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
        project_root: Annotated[
            Path | None,
            Parameter(name="--project-root", help="Directory to discover config from"),
        ] = None,
    ) -> None:
        """Launch ldpsuite with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            verbose: Enable verbose output and debug logging.
            quiet: Suppress non-essential output.
            no_color: Disable colored output.
            config: Explicit path to config file.
            project_root: Directory to start config discovery from.
        """
        _launch(
            app,
            tokens,
            verbose=verbose,
            quiet=quiet,
            no_color=no_color,
            config=config,
            project_root=project_root,
        )

    register_commands(app)
    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `ldpsuite` CLI."""
    create_app().meta()


if __name__ == "__main__":
    main()
