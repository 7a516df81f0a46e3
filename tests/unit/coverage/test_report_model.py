from collections.abc import Callable

import orjson

from ldpsuite.coverage import (
    TestMethodRecord,
    build_report_model,
    compute_summary,
    report_model_to_dict,
    summary_to_dict,
)
from ldpsuite.enums import ImplementationStatus

MakeRecord = Callable[..., TestMethodRecord]


class TestBuildReportModel:
    def test_bundles_summary_and_details(self, make_record: MakeRecord) -> None:
        records = [make_record("a"), make_record("b", spec_ref_uri="other")]
        summary = compute_summary(records)

        model = build_report_model(records, summary)

        assert model.summary is summary
        assert [d.name for d in model.details] == ["a", "b"]

    def test_lists_modules_once_in_first_seen_order(
        self, make_record: MakeRecord
    ) -> None:
        records = [
            make_record("a", module="B"),
            make_record("b", module="A"),
            make_record("c", module="B"),
        ]

        model = build_report_model(records, compute_summary(records))

        assert model.modules == ("B", "A")

    def test_carries_manual_and_client_lists(self, make_record: MakeRecord) -> None:
        records = [
            make_record("m", spec_ref_uri="1", status=ImplementationStatus.MANUAL),
            make_record("c", spec_ref_uri="2", status=ImplementationStatus.CLIENT_ONLY),
        ]

        model = build_report_model(records, compute_summary(records))

        assert model.manual_tests == ("m",)
        assert model.client_tests == ("c",)


class TestSummaryToDict:
    def test_contains_level_breakdown(self, make_record: MakeRecord) -> None:
        data = summary_to_dict(compute_summary([make_record()]))

        assert data["total_tests"] == 1
        assert data["must"] == {"total": 1, "implemented": 1, "not_implemented": 0}
        assert data["may"] == {"total": 0, "implemented": 0, "not_implemented": 0}


class TestReportModelToDict:
    def test_is_json_serializable(self, make_record: MakeRecord) -> None:
        records = [make_record()]
        model = build_report_model(records, compute_summary(records))

        data = report_model_to_dict(model)

        assert orjson.loads(orjson.dumps(data)) == data

    def test_details_use_enum_values(self, make_record: MakeRecord) -> None:
        records = [make_record(status=ImplementationStatus.NOT_IMPLEMENTED)]
        model = build_report_model(records, compute_summary(records))

        (detail,) = report_model_to_dict(model)["details"]

        assert detail["implementation_status"] == "not_implemented"
        assert detail["approval_status"] == "approved"
        assert detail["groups"] == ["MUST"]
