"""Metadata extraction from requirement-tagged test modules."""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from ldpsuite.coverage._models import MethodDescriptor, TestMethodRecord
from ldpsuite.enums import RequirementLevel

__all__ = ["RequirementTaggedModule", "extract_records", "parse_levels"]

_LEVELS_BY_NAME: dict[str, RequirementLevel] = {
    level.value: level for level in RequirementLevel
}


@runtime_checkable
class RequirementTaggedModule(Protocol):
    """A test module that can list its requirement-tagged methods."""

    @property
    def name(self) -> str:
        """Fully qualified module name."""
        ...

    def requirement_methods(self) -> Iterable[MethodDescriptor]:
        """Return the module's test methods in declaration order."""
        ...


def parse_levels(groups: Iterable[str]) -> frozenset[RequirementLevel]:
    """Pick the requirement levels out of a collection of test groups.

    Only groups that are exactly a level name count, so ``"MUSTARD"`` or
    ``"SHOULD-NOT"`` are ignored rather than matched as substrings.

    Args:
        groups: Raw test group names.

    Returns:
        The requirement levels found.
    """
    return frozenset(
        _LEVELS_BY_NAME[group] for group in groups if group in _LEVELS_BY_NAME
    )


def _to_record(module: str, method: MethodDescriptor) -> TestMethodRecord | None:
    if (
        method.enabled is None
        or method.spec_ref_uri is None
        or method.implementation_status is None
        or method.approval_status is None
    ):
        return None

    return TestMethodRecord(
        name=method.name,
        enabled=method.enabled,
        requirement_levels=parse_levels(method.groups),
        spec_ref_uri=method.spec_ref_uri,
        implementation_status=method.implementation_status,
        approval_status=method.approval_status,
        module=module,
        description=method.description,
        groups=method.groups,
    )


def extract_records(
    modules: Iterable[RequirementTaggedModule],
) -> tuple[TestMethodRecord, ...]:
    """Normalize the annotated methods of test modules into records.

    Modules are processed in the given order and methods in declaration
    order; that order decides which record first claims a requirement.
    Methods missing the enablement flag or any requirement metadata are
    left out.

    Args:
        modules: Test modules in reporting order.

    Returns:
        Records in module-then-declaration order.
    """
    records: list[TestMethodRecord] = []
    for module in modules:
        for method in module.requirement_methods():
            record = _to_record(module.name, method)
            if record is not None:
                records.append(record)
    return tuple(records)
