"""Coverage aggregation over extracted test method records.

Aggregation runs as two passes over the same record sequence:

- the tally pass (`compute_summary`) counts tests and attributes each spec
  reference to coverage once, using the first record that references it;
- the detail pass (`build_details`) produces the per-method report entries
  without touching any counter.

All mutable state of a tally pass lives in an `AggregationContext` created
for that pass alone.
"""

from collections.abc import Sequence
from typing import Final

from ldpsuite.coverage._models import (
    CoverageSummary,
    LevelCounts,
    RequirementDetail,
    TestMethodRecord,
)
from ldpsuite.coverage._tracker import RequirementTracker
from ldpsuite.enums import ApprovalStatus, ImplementationStatus, RequirementLevel
from ldpsuite.exceptions import AggregationError

__all__ = ["AggregationContext", "build_details", "compute_summary"]

_NOT_AUTOMATED: frozenset[ImplementationStatus] = frozenset(
    {
        ImplementationStatus.NOT_IMPLEMENTED,
        ImplementationStatus.CLIENT_ONLY,
        ImplementationStatus.MANUAL,
    }
)


class _LevelTally:
    __slots__: Final = ("implemented", "not_implemented", "total")

    def __init__(self) -> None:
        self.total = 0
        self.implemented = 0
        self.not_implemented = 0

    def freeze(self) -> LevelCounts:
        return LevelCounts(
            total=self.total,
            implemented=self.implemented,
            not_implemented=self.not_implemented,
        )


class AggregationContext:
    """Counters and dedup state for exactly one tally pass.

    A context can tally once. Create a new one for every run; a second call
    to `tally` raises `AggregationError`.
    """

    __slots__: Final = (
        "_approved",
        "_client_tests",
        "_disabled",
        "_levels",
        "_manual_tests",
        "_pending",
        "_requirements_covered",
        "_requirements_implemented",
        "_requirements_not_implemented",
        "_spent",
        "_total_implemented",
        "_total_tests",
        "_tracker",
        "_unimplemented",
    )

    def __init__(self) -> None:
        self._tracker = RequirementTracker()
        self._spent = False
        self._total_tests = 0
        self._total_implemented = 0
        self._unimplemented = 0
        self._disabled = 0
        self._requirements_covered = 0
        self._requirements_implemented = 0
        self._requirements_not_implemented = 0
        self._pending = 0
        self._approved = 0
        self._client_tests: list[str] = []
        self._manual_tests: list[str] = []
        self._levels: dict[RequirementLevel, _LevelTally] = {
            level: _LevelTally() for level in RequirementLevel
        }

    @property
    def tracker(self) -> RequirementTracker:
        """The requirement tracker owned by this context."""
        return self._tracker

    def tally(self, records: Sequence[TestMethodRecord]) -> CoverageSummary:
        """Run the tally pass over records.

        Args:
            records: Records in module-then-declaration order.

        Returns:
            The finished coverage summary.

        Raises:
            AggregationError: If this context has already been used.
        """
        if self._spent:
            msg = "Aggregation context has already been used; create a new one"
            raise AggregationError(msg)
        self._spent = True

        for record in records:
            self._count_test(record)
            if self._tracker.try_claim(record.spec_ref_uri):
                self._count_requirement(record)

        return self._summary()

    def _count_test(self, record: TestMethodRecord) -> None:
        self._total_tests += 1
        status = record.implementation_status

        if not record.enabled:
            self._disabled += 1
            self._unimplemented += 1
        elif status is ImplementationStatus.AUTOMATED:
            self._total_implemented += 1
        elif status in _NOT_AUTOMATED:
            self._unimplemented += 1

        if status is ImplementationStatus.CLIENT_ONLY:
            self._client_tests.append(record.name)
        elif status is ImplementationStatus.MANUAL:
            self._manual_tests.append(record.name)

    def _count_requirement(self, record: TestMethodRecord) -> None:
        self._requirements_covered += 1
        levels = [self._levels[level] for level in record.requirement_levels]

        for level in levels:
            level.total += 1

        status = record.implementation_status
        if status is ImplementationStatus.AUTOMATED:
            self._requirements_implemented += 1
            for level in levels:
                level.implemented += 1
        elif status is ImplementationStatus.NOT_IMPLEMENTED:
            self._requirements_not_implemented += 1
            for level in levels:
                level.not_implemented += 1

        if record.approval_status is ApprovalStatus.PENDING:
            self._pending += 1
        elif record.approval_status is ApprovalStatus.APPROVED:
            self._approved += 1

    def _summary(self) -> CoverageSummary:
        return CoverageSummary(
            total_tests=self._total_tests,
            total_implemented=self._total_implemented,
            unimplemented=self._unimplemented,
            disabled=self._disabled,
            client_only=len(self._client_tests),
            manual=len(self._manual_tests),
            requirements_covered=self._requirements_covered,
            requirements_implemented=self._requirements_implemented,
            requirements_not_implemented=self._requirements_not_implemented,
            must=self._levels[RequirementLevel.MUST].freeze(),
            should=self._levels[RequirementLevel.SHOULD].freeze(),
            may=self._levels[RequirementLevel.MAY].freeze(),
            pending=self._pending,
            approved=self._approved,
            client_tests=tuple(self._client_tests),
            manual_tests=tuple(self._manual_tests),
        )


def compute_summary(records: Sequence[TestMethodRecord]) -> CoverageSummary:
    """Tally records into a coverage summary using a fresh context.

    Args:
        records: Records in module-then-declaration order.

    Returns:
        The coverage summary for this run.
    """
    return AggregationContext().tally(records)


def build_details(
    records: Sequence[TestMethodRecord],
    summary: CoverageSummary,
) -> tuple[RequirementDetail, ...]:
    """Build the per-method report entries.

    The summary must come from `compute_summary` over the same records; it
    is only checked against the record count.

    Args:
        records: The records that produced `summary`.
        summary: The finished coverage summary.

    Returns:
        One detail entry per record, in record order.

    Raises:
        AggregationError: If the summary was computed from a different
            number of records.
    """
    if summary.total_tests != len(records):
        msg = (
            f"Summary covers {summary.total_tests} tests but "
            f"{len(records)} records were given"
        )
        raise AggregationError(msg)

    return tuple(
        RequirementDetail(
            module=record.module,
            name=record.name,
            description=record.description,
            groups=record.groups,
            enabled=record.enabled,
            spec_ref_uri=record.spec_ref_uri,
            implementation_status=record.implementation_status,
            approval_status=record.approval_status,
        )
        for record in records
    )
