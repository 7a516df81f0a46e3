# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
"""Link header commands."""

from typing import Annotated, Never

from cyclopts import App, Parameter
from rich.markup import escape

from ldpsuite.cli._context import CLIContext, OutputFormat
from ldpsuite.cli._shared import (
    ExitCode,
    exit_code_for_exception,
    exit_with_error,
    format_json,
    format_table,
    format_yaml,
)
from ldpsuite.exceptions import MalformedUriError
from ldpsuite.links import (
    LinkValue,
    contains_link,
    first_link_for_relation,
    iter_links,
    resolve_if_relative,
    split_links,
)

app = App(name="links", help="Inspect HTTP Link headers", help_on_error=True)

_BaseOption = Annotated[
    str | None,
    Parameter(name=["--base", "-b"], help="Request URI to resolve relative targets"),
]


def _link_to_dict(link: LinkValue, base: str | None) -> dict[str, object]:
    return {
        "uri": resolve_if_relative(base, link.uri),
        "rel": link.rel,
        "params": dict(link.params),
    }


def _fail(exc: Exception) -> Never:
    logger = CLIContext.get_current().logger
    if logger is not None:
        logger.warning("malformed_link", error=str(exc))
    exit_with_error(escape(str(exc)), exit_code_for_exception(exc))


@app.command(name="split")
def split(
    headers: list[str],
    /,
    *,
    base: _BaseOption = None,
    format_: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format"),
    ] = OutputFormat.TEXT,
) -> None:
    """Split Link header values into link-values

    With --format text each raw link-value is printed on its own line.
    Other formats parse each link-value and resolve its target.

    Args:
        headers: Link header values.
        base: Request URI to resolve relative targets against.
        format_: Output format.
    """
    if format_ is OutputFormat.TEXT:
        for header in headers:
            for value in split_links(header):
                print(value)
        return

    try:
        links = [_link_to_dict(link, base) for link in iter_links(headers)]
    except MalformedUriError as e:
        _fail(e)

    match format_:
        case OutputFormat.JSON:
            print(format_json({"links": links}))
        case OutputFormat.YAML:
            print(format_yaml({"links": links}), end="")
        case _:
            rows = [[str(link["uri"]), str(link["rel"] or "")] for link in links]
            print(format_table(["URI", "rel"], rows))


@app.command(name="first")
def first(
    rel: str,
    headers: list[str],
    /,
    *,
    base: _BaseOption = None,
) -> None:
    """Print the target of the first link with a relation

    Exits with NOT_FOUND when no link has the relation.

    Args:
        rel: Link relation type.
        headers: Link header values.
        base: Request URI to resolve relative targets against.
    """
    try:
        target = first_link_for_relation(rel, headers, base)
    except MalformedUriError as e:
        _fail(e)

    if target is None:
        exit_with_error(f"No link with rel={rel!r}", ExitCode.NOT_FOUND)
    print(target)


@app.command(name="contains")
def contains(
    uri: str,
    rel: str,
    headers: list[str],
    /,
    *,
    base: _BaseOption = None,
) -> None:
    """Check that a link with a target and relation is present

    Args:
        uri: Expected absolute link target.
        rel: Expected link relation type.
        headers: Link header values.
        base: Request URI to resolve relative targets against.
    """
    try:
        found = contains_link(uri, rel, headers, base)
    except MalformedUriError as e:
        _fail(e)

    if not found:
        exit_with_error(f"No link to {uri} with rel={rel!r}", ExitCode.NOT_FOUND)
    if not CLIContext.get_current().quiet:
        print(f"Found <{uri}>; rel={rel}")
