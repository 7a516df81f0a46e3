from hypothesis import given, strategies as st

from ldpsuite.coverage import (
    TestMethodRecord,
    build_report_model,
    compute_summary,
)
from ldpsuite.enums import ApprovalStatus, ImplementationStatus, RequirementLevel

records_strategy = st.lists(
    st.builds(
        TestMethodRecord,
        name=st.from_regex(r"test[A-Z][a-z]{0,8}", fullmatch=True),
        enabled=st.booleans(),
        requirement_levels=st.frozensets(st.sampled_from(list(RequirementLevel))),
        spec_ref_uri=st.sampled_from([f"spec#{n}" for n in range(8)]),
        implementation_status=st.sampled_from(list(ImplementationStatus)),
        approval_status=st.sampled_from(list(ApprovalStatus)),
        module=st.sampled_from(["A", "B", "C"]),
    ),
    max_size=40,
)


@given(records=records_strategy)
def test_total_tests_counts_every_record(records: list[TestMethodRecord]) -> None:
    assert compute_summary(records).total_tests == len(records)


@given(records=records_strategy)
def test_each_requirement_is_covered_once(records: list[TestMethodRecord]) -> None:
    summary = compute_summary(records)

    distinct = {record.spec_ref_uri for record in records}
    assert summary.requirements_covered == len(distinct)
    assert summary.pending + summary.approved == len(distinct)


@given(records=records_strategy)
def test_duplicated_records_do_not_add_coverage(
    records: list[TestMethodRecord],
) -> None:
    once = compute_summary(records)
    twice = compute_summary(records + records)

    assert twice.requirements_covered == once.requirements_covered
    assert twice.must == once.must
    assert twice.total_tests == 2 * once.total_tests


@given(records=records_strategy)
def test_counter_invariants(records: list[TestMethodRecord]) -> None:
    summary = compute_summary(records)

    assert summary.total_implemented + summary.unimplemented <= summary.total_tests
    assert summary.disabled <= summary.unimplemented
    assert (
        summary.requirements_implemented + summary.requirements_not_implemented
        <= summary.requirements_covered
    )
    for counts in (summary.must, summary.should, summary.may):
        assert counts.implemented + counts.not_implemented <= counts.total
        assert counts.total <= summary.requirements_covered


@given(records=records_strategy)
def test_report_has_one_detail_per_record(records: list[TestMethodRecord]) -> None:
    model = build_report_model(records, compute_summary(records))

    assert len(model.details) == len(records)
    assert set(model.modules) == {record.module for record in records}
