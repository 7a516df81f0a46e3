"""Report rendering and writing.

Turns a `ReportModel` into a human-readable artifact. Three formats are
supported: a standalone HTML page, Markdown, and JSON.
"""

from enum import StrEnum
from pathlib import Path
from typing import cast

import orjson
from jinja2 import Environment
from pytablewriter import MarkdownTableWriter

from ldpsuite.coverage._models import LevelCounts, ReportModel
from ldpsuite.coverage._report import report_model_to_dict
from ldpsuite.enums import RequirementLevel
from ldpsuite.exceptions import ReportError

__all__ = [
    "ReportFormat",
    "default_report_filename",
    "render_html",
    "render_json",
    "render_markdown",
    "render_report",
    "write_report",
]

REPORT_TITLE = "LDP Test Suite: Test Cases Report"


class ReportFormat(StrEnum):
    """Supported report artifact formats."""

    HTML = "html"
    MARKDOWN = "markdown"
    JSON = "json"


_DEFAULT_FILENAMES: dict[ReportFormat, str] = {
    ReportFormat.HTML: "LdpTestCasesHtmlReport.html",
    ReportFormat.MARKDOWN: "LdpTestCasesReport.md",
    ReportFormat.JSON: "LdpTestCasesReport.json",
}


def default_report_filename(report_format: ReportFormat) -> str:
    """Return the default file name for a report format."""
    return _DEFAULT_FILENAMES[report_format]


# =============================================================================
# Markdown
# =============================================================================


def _table(headers: list[str], rows: list[list[str]]) -> str:
    writer = MarkdownTableWriter(headers=headers, value_matrix=rows, margin=1)
    return cast("str", writer.dumps())


def _level_row(label: str, counts: LevelCounts) -> list[str]:
    return [
        label,
        str(counts.total),
        f"{counts.implemented}/{counts.total}",
        str(counts.not_implemented),
    ]


def _summary_tables(model: ReportModel) -> list[str]:
    summary = model.summary
    overview = _table(
        ["Measure", "Count"],
        [
            ["Total tests", str(summary.total_tests)],
            [
                "Implemented tests",
                f"{summary.total_implemented}/{summary.total_tests}",
            ],
            ["Unimplemented tests", str(summary.unimplemented)],
            ["Not enabled", str(summary.disabled)],
            ["Client-based tests", str(summary.client_only)],
            ["Manual tests", str(summary.manual)],
            ["Tests pending", str(summary.pending)],
            ["Tests approved", str(summary.approved)],
        ],
    )
    requirements = _table(
        ["Level", "Covered", "Implemented", "Not implemented"],
        [
            [
                "All",
                str(summary.requirements_covered),
                str(summary.requirements_implemented),
                str(summary.requirements_not_implemented),
            ],
            *(
                _level_row(level.value, summary.for_level(level))
                for level in RequirementLevel
            ),
        ],
    )
    return [
        "## Summary of Test Methods",
        "",
        overview,
        "### Requirements",
        "",
        requirements,
    ]


def _name_list(title: str, names: tuple[str, ...]) -> list[str]:
    lines = [f"## {title}", ""]
    lines.extend(f"- {name}" for name in names)
    if not names:
        lines.append("_None._")
    lines.append("")
    return lines


def render_markdown(model: ReportModel) -> str:
    """Render a report model as Markdown.

    Args:
        model: The report model.

    Returns:
        The Markdown document.
    """
    lines = [f"# {REPORT_TITLE}", ""]
    lines.extend(_summary_tables(model))

    lines.extend(["## Implemented Test Classes", ""])
    lines.extend(f"- {module}" for module in model.modules)
    lines.append("")

    lines.extend(
        _name_list("Tests that Must be Tested Manually", model.manual_tests)
    )
    lines.extend(_name_list("Client-Based Test Cases", model.client_tests))

    for module in model.modules:
        lines.extend([f"## Test Class: {module}", ""])
        rows = [
            [
                detail.name,
                detail.description,
                ", ".join(detail.groups),
                "yes" if detail.enabled else "no",
                detail.spec_ref_uri,
                detail.approval_status.value,
                detail.implementation_status.value,
            ]
            for detail in model.details
            if detail.module == module
        ]
        lines.append(
            _table(
                [
                    "Method",
                    "Description",
                    "Groups",
                    "Enabled",
                    "Reference URI",
                    "Status",
                    "Implementation",
                ],
                rows,
            )
        )

    return "\n".join(lines).rstrip() + "\n"


# =============================================================================
# HTML
# =============================================================================

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Test Cases Report</title>
</head>
<body>
<h1 id="top">{{ title }}</h1>
<h2>Summary of Test Methods</h2>
<table class="summary">
<tr><th>Total Tests</th><th>Overall Coverage</th><th>Unimplemented Methods</th></tr>
<tr>
<td>
<b>{{ s.total_tests }}</b> Total Tests Running Against Specifications<br>
<b>{{ s.pending }} </b>Tests pending, <b>{{ s.approved }} </b>Tests approved
<ul>
<li><b>{{ s.requirements_covered }}</b> Requirements Covered</li>
<ul>
{%- for level in levels %}
<li><b>{{ s.for_level(level).total }}</b> {{ level.value }}</li>
{%- endfor %}
</ul>
</ul>
</td>
<td>
<b>{{ s.total_implemented }}/{{ s.total_tests }}</b> of Total Tests Implemented
<ul>
<li><b>{{ s.requirements_implemented }} </b>Requirements Implemented</li>
<ul>
{%- for level in levels %}
<li><b>{{ s.for_level(level).implemented }}/{{ s.for_level(level).total }}</b> of {{ level.value }} Tests Implemented</li>
{%- endfor %}
</ul>
</ul>
</td>
<td>
<b>{{ s.unimplemented }} </b>of the Total Tests
<ul>
<li><b>{{ s.disabled }} </b>of the Total Tests not enabled</li>
<li><b>{{ s.client_only }} </b>of the Total are <a href="#clientTests">Client-Based Tests</a></li>
<li><b>{{ s.manual }} </b>of the Total must be Tested <a href="#manualTests">Manually</a></li>
</ul>
From the Total,
<ul>
<li><b>{{ s.requirements_not_implemented }} </b>Requirements not Implemented</li>
<ul>
{%- for level in levels %}
<li><b>{{ s.for_level(level).not_implemented }} </b>{{ level.value }}</li>
{%- endfor %}
</ul>
</ul>
</td>
</tr>
</table>
<p class="totop"><a href="#top">Back to Top</a></p>
<h2>Implemented Test Classes</h2>
<ul>
{%- for module in modules %}
<li><a href="#{{ module }}">{{ module }}</a></li>
{%- endfor %}
</ul>
<h2><a name="manualTests">Tests that Must be Tested Manually</a></h2>
<ul>
{%- for name in manual_tests %}
<li><a href="#{{ name }}">{{ name }}</a></li>
{%- endfor %}
</ul>
<h2><a name="clientTests">Client-Based Test Cases</a></h2>
<ul>
{%- for name in client_tests %}
<li><a href="#{{ name }}">{{ name }}</a></li>
{%- endfor %}
</ul>
{%- for module in modules %}
<h2><a name="{{ module }}">Test Class: {{ module }}</a></h2>
<ul>
{%- for d in details if d.module == module %}
<li><b><a name="{{ d.name }}">{{ d.name }}: </a></b>
<table class="annotation">
<tr><th>Annotation Type</th><th>Information</th></tr>
<tr><td>Test</td><td><b>Description: </b>{{ d.description }}<br><b>Groups: </b>[{{ d.groups | join(", ") }}]<br><b>Enabled: </b>{{ "true" if d.enabled else "false" }}</td></tr>
<tr><td>SpecTest</td><td><b>Reference URI: </b><a href="{{ d.spec_ref_uri }}">{{ d.spec_ref_uri }}</a><br><b>Status: </b>{{ d.approval_status.value }}<br><b>Test Case Implementation: </b>{{ d.implementation_status.value }}</td></tr>
</table>
<p class="totest"><a href="#{{ module }}">Back to Main Test Class</a></p>
</li>
{%- endfor %}
</ul>
<p class="totop"><a href="#top">Back to Top</a></p>
{%- endfor %}
</body>
</html>
"""


def render_html(model: ReportModel) -> str:
    """Render a report model as a standalone HTML page.

    Args:
        model: The report model.

    Returns:
        The HTML document.
    """
    env = Environment(autoescape=True)
    template = env.from_string(_HTML_TEMPLATE)
    return template.render(
        title=REPORT_TITLE,
        s=model.summary,
        levels=list(RequirementLevel),
        modules=model.modules,
        details=model.details,
        manual_tests=model.manual_tests,
        client_tests=model.client_tests,
    )


# =============================================================================
# JSON
# =============================================================================


def render_json(model: ReportModel) -> str:
    """Render a report model as indented JSON."""
    data = report_model_to_dict(model)
    return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8")


# =============================================================================
# Writing
# =============================================================================


def render_report(model: ReportModel, report_format: ReportFormat) -> str:
    """Render a report model in the requested format."""
    match report_format:
        case ReportFormat.HTML:
            return render_html(model)
        case ReportFormat.MARKDOWN:
            return render_markdown(model)
        case ReportFormat.JSON:
            return render_json(model)


def write_report(
    model: ReportModel,
    output_dir: Path,
    *,
    report_format: ReportFormat = ReportFormat.HTML,
    filename: str | None = None,
) -> Path:
    """Render a report model and write it to `output_dir`.

    Args:
        model: The report model.
        output_dir: Directory for the report; created if missing.
        report_format: Artifact format.
        filename: File name override. Defaults to the format's file name.

    Returns:
        Path to the written report.

    Raises:
        ReportError: If the directory or file cannot be written.
    """
    content = render_report(model, report_format)
    path = output_dir / (filename or default_report_filename(report_format))

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            _ = f.write(content)
    except OSError as e:
        msg = f"Failed to write report to {path}: {e}"
        raise ReportError(msg, path=path) from e

    return path
