# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
"""Config commands for viewing the effective ldpsuite configuration."""

from typing import Annotated, Literal

from cyclopts import App, Parameter
from rich.markup import escape

from ldpsuite.cli._context import CLIContext
from ldpsuite.cli._shared import (
    ExitCode,
    exit_with_error,
    format_json,
    format_yaml,
    get_error_console,
)

app = App(
    name="config",
    help="Show the effective configuration",
    help_on_error=True,
)

ConfigFormat = Literal["toml", "json", "yaml"]


@app.command(name="show")
def show(
    *,
    format_: Annotated[
        ConfigFormat,
        Parameter(name=["--format", "-f"], help="Output format (toml, json, yaml)"),
    ] = "toml",
    section: Annotated[
        str | None,
        Parameter(name="--section", help="Show one section only (e.g. report)"),
    ] = None,
) -> None:
    """Show the merged configuration

    When the configuration could not be loaded, the defaults are shown and
    the load error is printed to stderr.

    Args:
        format_: Output format.
        section: Top-level section to show.
    """
    ctx = CLIContext.get_current()
    if ctx.config_error is not None and not ctx.quiet:
        get_error_console().print(
            f"[yellow]Warning:[/yellow] using defaults: {escape(ctx.config_error)}"
        )

    data = ctx.config.to_dict()
    if section is not None:
        if section not in data:
            valid = ", ".join(data)
            exit_with_error(
                f"Unknown section '{escape(section)}'. Valid sections: {valid}",
                ExitCode.NOT_FOUND,
            )
        data = {section: data[section]}

    match format_:
        case "toml":
            if section is None:
                print(ctx.config.to_toml(), end="")
            else:
                import tomli_w  # noqa: PLC0415

                print(tomli_w.dumps(data), end="")
        case "json":
            print(format_json(data))
        case "yaml":
            print(format_yaml(data), end="")
