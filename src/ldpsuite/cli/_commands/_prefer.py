# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
"""Prefer and Preference-Applied header commands."""

from typing import Annotated

from cyclopts import App, Parameter
from rich.markup import escape

from ldpsuite.cli._context import CLIContext
from ldpsuite.cli._shared import exit_code_for_exception, exit_with_error
from ldpsuite.exceptions import PreferenceNotAppliedError
from ldpsuite.links import check_preference_applied, include, omit

app = App(
    name="prefer",
    help="Build Prefer headers and check Preference-Applied",
    help_on_error=True,
)


@app.command(name="check")
def check(values: list[str] | None = None, /) -> None:
    """Check that Preference-Applied acknowledges return=representation

    Passes when no header values are given, since servers may ignore
    preferences.

    Args:
        values: Preference-Applied header values.
    """
    try:
        check_preference_applied(values or [])
    except PreferenceNotAppliedError as e:
        logger = CLIContext.get_current().logger
        if logger is not None:
            logger.warning("preference_not_applied", values=list(e.values))
        exit_with_error(escape(str(e)), exit_code_for_exception(e))

    if not CLIContext.get_current().quiet:
        print("Preference applied" if values else "No Preference-Applied header")


@app.command(name="build")
def build(
    *,
    include_: Annotated[
        list[str] | None,
        Parameter(name=["--include", "-i"], help="Preference URIs to include"),
    ] = None,
    omit_: Annotated[
        list[str] | None,
        Parameter(name=["--omit", "-o"], help="Preference URIs to omit"),
    ] = None,
) -> None:
    """Print Prefer header values requesting a representation

    Args:
        include_: Preference URIs to include.
        omit_: Preference URIs to omit.
    """
    if include_:
        print(include(*include_))
    if omit_:
        print(omit(*omit_))
    if not include_ and not omit_:
        print("return=representation")
