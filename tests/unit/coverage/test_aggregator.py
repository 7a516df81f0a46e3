from collections.abc import Callable

import pytest

from ldpsuite.coverage import (
    AggregationContext,
    LevelCounts,
    TestMethodRecord,
    build_details,
    compute_summary,
)
from ldpsuite.enums import ApprovalStatus, ImplementationStatus, RequirementLevel
from ldpsuite.exceptions import AggregationError

MakeRecord = Callable[..., TestMethodRecord]

MUST = frozenset({RequirementLevel.MUST})
SHOULD = frozenset({RequirementLevel.SHOULD})
MAY = frozenset({RequirementLevel.MAY})


class TestComputeSummary:
    def test_single_automated_requirement(self, make_record: MakeRecord) -> None:
        records = [make_record(spec_ref_uri="spec#5.2.3.1")]

        summary = compute_summary(records)

        assert summary.total_tests == 1
        assert summary.total_implemented == 1
        assert summary.unimplemented == 0
        assert summary.requirements_covered == 1
        assert summary.must == LevelCounts(total=1, implemented=1, not_implemented=0)
        assert summary.approved == 1
        assert summary.pending == 0

    def test_requirement_is_claimed_by_first_record(
        self, make_record: MakeRecord
    ) -> None:
        records = [
            make_record("first", spec_ref_uri="spec#4.1.1"),
            make_record(
                "second",
                spec_ref_uri="spec#4.1.1",
                status=ImplementationStatus.NOT_IMPLEMENTED,
            ),
        ]

        summary = compute_summary(records)

        assert summary.total_tests == 2
        assert summary.total_implemented == 1
        assert summary.unimplemented == 1
        assert summary.requirements_covered == 1
        assert summary.must.implemented == 1
        assert summary.must.not_implemented == 0
        assert summary.requirements_not_implemented == 0

    def test_first_unimplemented_claim_is_not_upgraded(
        self, make_record: MakeRecord
    ) -> None:
        records = [
            make_record(
                "first",
                spec_ref_uri="spec#1",
                status=ImplementationStatus.NOT_IMPLEMENTED,
            ),
            make_record("second", spec_ref_uri="spec#1"),
        ]

        summary = compute_summary(records)

        assert summary.requirements_implemented == 0
        assert summary.requirements_not_implemented == 1
        assert summary.must == LevelCounts(total=1, implemented=0, not_implemented=1)

    def test_disabled_test_counts_as_unimplemented(
        self, make_record: MakeRecord
    ) -> None:
        summary = compute_summary([make_record(enabled=False)])

        assert summary.disabled == 1
        assert summary.unimplemented == 1
        assert summary.total_implemented == 0

    def test_disabled_test_still_claims_requirement(
        self, make_record: MakeRecord
    ) -> None:
        summary = compute_summary([make_record(enabled=False)])

        assert summary.requirements_covered == 1
        assert summary.requirements_implemented == 1

    def test_client_only_and_manual_names_are_listed(
        self, make_record: MakeRecord
    ) -> None:
        records = [
            make_record(
                "client", spec_ref_uri="a", status=ImplementationStatus.CLIENT_ONLY
            ),
            make_record("manual", spec_ref_uri="b", status=ImplementationStatus.MANUAL),
            make_record(
                "disabledClient",
                spec_ref_uri="c",
                enabled=False,
                status=ImplementationStatus.CLIENT_ONLY,
            ),
        ]

        summary = compute_summary(records)

        assert summary.client_tests == ("client", "disabledClient")
        assert summary.manual_tests == ("manual",)
        assert summary.client_only == 2
        assert summary.manual == 1
        assert summary.unimplemented == 3

    def test_client_only_requirement_is_neither_implemented_nor_not(
        self, make_record: MakeRecord
    ) -> None:
        records = [make_record(status=ImplementationStatus.CLIENT_ONLY)]

        summary = compute_summary(records)

        assert summary.requirements_covered == 1
        assert summary.requirements_implemented == 0
        assert summary.requirements_not_implemented == 0
        assert summary.must == LevelCounts(total=1, implemented=0, not_implemented=0)

    def test_counts_each_level_separately(self, make_record: MakeRecord) -> None:
        records = [
            make_record("a", spec_ref_uri="a", levels=MUST),
            make_record("b", spec_ref_uri="b", levels=SHOULD),
            make_record(
                "c",
                spec_ref_uri="c",
                levels=MAY,
                status=ImplementationStatus.NOT_IMPLEMENTED,
            ),
        ]

        summary = compute_summary(records)

        assert summary.must == LevelCounts(total=1, implemented=1, not_implemented=0)
        assert summary.should == LevelCounts(total=1, implemented=1, not_implemented=0)
        assert summary.may == LevelCounts(total=1, implemented=0, not_implemented=1)

    def test_record_with_several_levels_counts_in_each(
        self, make_record: MakeRecord
    ) -> None:
        records = [make_record(levels=MUST | SHOULD)]

        summary = compute_summary(records)

        assert summary.must.total == 1
        assert summary.should.total == 1
        assert summary.may.total == 0
        assert summary.requirements_covered == 1

    def test_record_without_level_still_covers_requirement(
        self, make_record: MakeRecord
    ) -> None:
        summary = compute_summary([make_record(levels=frozenset())])

        assert summary.requirements_covered == 1
        assert summary.must.total == 0

    def test_approval_counted_once_per_requirement(
        self, make_record: MakeRecord
    ) -> None:
        records = [
            make_record("a", spec_ref_uri="x", approval=ApprovalStatus.PENDING),
            make_record("b", spec_ref_uri="x", approval=ApprovalStatus.APPROVED),
            make_record("c", spec_ref_uri="y", approval=ApprovalStatus.APPROVED),
        ]

        summary = compute_summary(records)

        assert summary.pending == 1
        assert summary.approved == 1

    def test_empty_input_gives_zero_summary(self) -> None:
        summary = compute_summary([])

        assert summary.total_tests == 0
        assert summary.requirements_covered == 0
        assert summary.client_tests == ()

    def test_runs_are_independent(self, make_record: MakeRecord) -> None:
        records = [make_record()]

        first = compute_summary(records)
        second = compute_summary(records)

        assert first == second
        assert second.requirements_covered == 1

    def test_for_level_returns_matching_counts(self, make_record: MakeRecord) -> None:
        summary = compute_summary([make_record(levels=SHOULD)])

        assert summary.for_level(RequirementLevel.SHOULD) is summary.should
        assert summary.for_level(RequirementLevel.MUST) is summary.must
        assert summary.for_level(RequirementLevel.MAY) is summary.may


class TestAggregationContext:
    def test_context_can_only_tally_once(self, make_record: MakeRecord) -> None:
        context = AggregationContext()
        _ = context.tally([make_record()])

        with pytest.raises(AggregationError, match="already been used"):
            _ = context.tally([make_record()])

    def test_tracker_records_claimed_uris(self, make_record: MakeRecord) -> None:
        context = AggregationContext()

        _ = context.tally(
            [make_record(spec_ref_uri="a"), make_record(spec_ref_uri="b")]
        )

        assert "a" in context.tracker
        assert len(context.tracker) == 2


class TestBuildDetails:
    def test_one_detail_per_record_in_order(self, make_record: MakeRecord) -> None:
        records = [
            make_record("a", spec_ref_uri="x"),
            make_record("b", spec_ref_uri="x", enabled=False),
        ]
        summary = compute_summary(records)

        details = build_details(records, summary)

        assert [d.name for d in details] == ["a", "b"]
        assert details[1].enabled is False
        assert details[1].spec_ref_uri == "x"

    def test_does_not_change_summary(self, make_record: MakeRecord) -> None:
        records = [make_record()]
        summary = compute_summary(records)
        before = summary.requirements_covered

        _ = build_details(records, summary)

        assert summary.requirements_covered == before

    def test_rejects_summary_from_other_records(
        self, make_record: MakeRecord
    ) -> None:
        summary = compute_summary([make_record()])

        with pytest.raises(AggregationError, match="Summary covers 1 tests"):
            _ = build_details([make_record(), make_record("b")], summary)
