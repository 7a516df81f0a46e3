"""Report model assembly."""

from collections.abc import Sequence
from typing import Any

from ldpsuite.coverage._aggregator import build_details
from ldpsuite.coverage._models import (
    CoverageSummary,
    LevelCounts,
    ReportModel,
    RequirementDetail,
    TestMethodRecord,
)

__all__ = ["build_report_model", "report_model_to_dict", "summary_to_dict"]


def build_report_model(
    records: Sequence[TestMethodRecord],
    summary: CoverageSummary,
) -> ReportModel:
    """Bundle a finished summary with the per-method details.

    Args:
        records: The records the summary was computed from.
        summary: The finished coverage summary.

    Returns:
        The report model for the renderers.
    """
    modules = tuple(dict.fromkeys(record.module for record in records))
    return ReportModel(
        summary=summary,
        details=build_details(records, summary),
        manual_tests=summary.manual_tests,
        client_tests=summary.client_tests,
        modules=modules,
    )


def _level_to_dict(counts: LevelCounts) -> dict[str, int]:
    return {
        "total": counts.total,
        "implemented": counts.implemented,
        "not_implemented": counts.not_implemented,
    }


def summary_to_dict(summary: CoverageSummary) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Convert a coverage summary to a JSON-ready dictionary."""
    return {
        "total_tests": summary.total_tests,
        "total_implemented": summary.total_implemented,
        "unimplemented": summary.unimplemented,
        "disabled": summary.disabled,
        "client_only": summary.client_only,
        "manual": summary.manual,
        "requirements_covered": summary.requirements_covered,
        "requirements_implemented": summary.requirements_implemented,
        "requirements_not_implemented": summary.requirements_not_implemented,
        "must": _level_to_dict(summary.must),
        "should": _level_to_dict(summary.should),
        "may": _level_to_dict(summary.may),
        "pending": summary.pending,
        "approved": summary.approved,
    }


def _detail_to_dict(detail: RequirementDetail) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    return {
        "module": detail.module,
        "name": detail.name,
        "description": detail.description,
        "groups": list(detail.groups),
        "enabled": detail.enabled,
        "spec_ref_uri": detail.spec_ref_uri,
        "implementation_status": detail.implementation_status.value,
        "approval_status": detail.approval_status.value,
    }


def report_model_to_dict(model: ReportModel) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Convert a report model to a JSON-ready dictionary.

    Args:
        model: The report model.

    Returns:
        Dictionary with ``summary``, ``details``, ``manual_tests``,
        ``client_tests`` and ``modules`` keys.
    """
    return {
        "summary": summary_to_dict(model.summary),
        "details": [_detail_to_dict(detail) for detail in model.details],
        "manual_tests": list(model.manual_tests),
        "client_tests": list(model.client_tests),
        "modules": list(model.modules),
    }
