"""Conformance coverage reporting.

This package turns requirement-tagged test modules into deduplicated
coverage statistics and a report model for the renderers.

Example:
    >>> from pathlib import Path
    >>> from ldpsuite.coverage import compute_summary, extract_records, load_catalog
    >>> records = extract_records(load_catalog(Path("ldp-tests.toml")))
    >>> compute_summary(records).requirements_covered
    42
"""

from ldpsuite.coverage._aggregator import (
    AggregationContext,
    build_details,
    compute_summary,
)
from ldpsuite.coverage._catalog import (
    DEFAULT_MODULE_ORDER,
    load_catalog,
    order_modules,
    parse_catalog,
)
from ldpsuite.coverage._extractor import (
    RequirementTaggedModule,
    extract_records,
    parse_levels,
)
from ldpsuite.coverage._models import (
    CoverageSummary,
    LevelCounts,
    MethodDescriptor,
    ModuleDescriptor,
    ReportModel,
    RequirementDetail,
    TestMethodRecord,
)
from ldpsuite.coverage._render import (
    ReportFormat,
    default_report_filename,
    render_html,
    render_json,
    render_markdown,
    render_report,
    write_report,
)
from ldpsuite.coverage._report import (
    build_report_model,
    report_model_to_dict,
    summary_to_dict,
)
from ldpsuite.coverage._tracker import RequirementTracker

__all__ = [
    "DEFAULT_MODULE_ORDER",
    "AggregationContext",
    "CoverageSummary",
    "LevelCounts",
    "MethodDescriptor",
    "ModuleDescriptor",
    "ReportFormat",
    "ReportModel",
    "RequirementDetail",
    "RequirementTaggedModule",
    "RequirementTracker",
    "TestMethodRecord",
    "build_details",
    "build_report_model",
    "compute_summary",
    "default_report_filename",
    "extract_records",
    "load_catalog",
    "order_modules",
    "parse_catalog",
    "parse_levels",
    "render_html",
    "render_json",
    "render_markdown",
    "render_report",
    "report_model_to_dict",
    "summary_to_dict",
    "write_report",
]
