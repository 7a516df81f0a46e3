# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing
"""Coverage commands for the LDP test catalog."""

from pathlib import Path
from typing import Annotated, Never

from cyclopts import App, Parameter
from rich.markup import escape

from ldpsuite.cli._context import CLIContext, OutputFormat
from ldpsuite.cli._shared import (
    exit_code_for_exception,
    exit_with_error,
    format_json,
    format_table,
    format_yaml,
)
from ldpsuite.coverage import (
    CoverageSummary,
    ReportFormat,
    TestMethodRecord,
    build_report_model,
    compute_summary,
    extract_records,
    load_catalog,
    order_modules,
    summary_to_dict,
    write_report,
)
from ldpsuite.exceptions import AggregationError, CatalogError, ReportError

app = App(
    name="coverage",
    help="Summarize requirement coverage of the LDP test catalog",
    help_on_error=True,
)

_CatalogOption = Annotated[
    Path | None,
    Parameter(name=["--catalog", "-c"], help="Path to the TOML test catalog"),
]


def _load_records(catalog: Path | None) -> tuple[TestMethodRecord, ...]:
    ctx = CLIContext.get_current()
    path = catalog
    if path is None:
        path = ctx.resolve_path(ctx.config.catalog.path)
    if ctx.logger is not None:
        ctx.logger.info("loading_catalog", path=str(path))

    modules = load_catalog(path)
    if ctx.config.catalog.order_modules:
        modules = order_modules(modules)
    records = extract_records(modules)

    if ctx.logger is not None:
        ctx.logger.debug(
            "records_extracted", modules=len(modules), records=len(records)
        )
    return records


def _fail(exc: Exception) -> Never:
    logger = CLIContext.get_current().logger
    if logger is not None:
        logger.error(
            "coverage_failed", error=str(exc), error_type=type(exc).__name__
        )
    exit_with_error(escape(str(exc)), exit_code_for_exception(exc))


def _summary_rows(summary: CoverageSummary) -> list[list[str]]:
    return [
        ["Total tests", str(summary.total_tests)],
        ["Automated", str(summary.total_implemented)],
        ["Not implemented", str(summary.unimplemented)],
        ["Disabled", str(summary.disabled)],
        ["Client only", str(summary.client_only)],
        ["Manual", str(summary.manual)],
        ["Requirements covered", str(summary.requirements_covered)],
        ["Requirements automated", str(summary.requirements_implemented)],
        ["Requirements not implemented", str(summary.requirements_not_implemented)],
        [
            "MUST",
            f"{summary.must.implemented}/{summary.must.total}",
        ],
        [
            "SHOULD",
            f"{summary.should.implemented}/{summary.should.total}",
        ],
        [
            "MAY",
            f"{summary.may.implemented}/{summary.may.total}",
        ],
        ["Pending approval", str(summary.pending)],
        ["Approved", str(summary.approved)],
    ]


@app.command(name="summary")
def summary(
    *,
    catalog: _CatalogOption = None,
    format_: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format"),
    ] = OutputFormat.TABLE,
) -> None:
    """Print coverage statistics for the test catalog

    Args:
        catalog: Path to the test catalog (defaults to catalog.path).
        format_: Output format.
    """
    try:
        records = _load_records(catalog)
        result = compute_summary(records)
    except (OSError, CatalogError, AggregationError) as e:
        _fail(e)

    match format_:
        case OutputFormat.JSON:
            print(format_json(summary_to_dict(result)))
        case OutputFormat.YAML:
            print(format_yaml(summary_to_dict(result)), end="")
        case OutputFormat.TABLE:
            print(format_table(["Metric", "Value"], _summary_rows(result)))
        case OutputFormat.TEXT:
            for label, value in _summary_rows(result):
                print(f"{label}: {value}")


@app.command(name="report")
def report(
    *,
    catalog: _CatalogOption = None,
    output_dir: Annotated[
        Path | None,
        Parameter(name=["--output-dir", "-o"], help="Directory to write the report to"),
    ] = None,
    format_: Annotated[
        ReportFormat | None,
        Parameter(name=["--format", "-f"], help="Report format"),
    ] = None,
    filename: Annotated[
        str | None,
        Parameter(name="--filename", help="Report file name"),
    ] = None,
) -> None:
    """Write the test cases report

    Options default to the [report] section of the configuration.

    Args:
        catalog: Path to the test catalog (defaults to catalog.path).
        output_dir: Directory to write the report to.
        format_: Report format.
        filename: Report file name (defaults to the format's file name).
    """
    ctx = CLIContext.get_current()
    settings = ctx.config.report

    try:
        records = _load_records(catalog)
        result = compute_summary(records)
        model = build_report_model(records, result)
        path = write_report(
            model,
            (
                output_dir
                if output_dir is not None
                else ctx.resolve_path(settings.output_dir)
            ),
            report_format=format_ if format_ is not None else settings.format,
            filename=filename or settings.filename or None,
        )
    except (OSError, CatalogError, AggregationError, ReportError) as e:
        _fail(e)

    if ctx.logger is not None:
        ctx.logger.info(
            "report_written",
            path=str(path),
            tests=result.total_tests,
            requirements=result.requirements_covered,
        )
    if not ctx.quiet:
        print(f"Report written to {path}")
