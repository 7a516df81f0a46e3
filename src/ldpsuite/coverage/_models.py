"""Data models for conformance coverage reporting.

This module defines the records produced by metadata extraction, the
counters produced by aggregation, and the report model handed to the
renderers. All models are frozen dataclasses with slots.
"""

from dataclasses import dataclass, field

from ldpsuite.enums import ApprovalStatus, ImplementationStatus, RequirementLevel

# =============================================================================
# Extraction Inputs
# =============================================================================


@dataclass(frozen=True, slots=True)
class MethodDescriptor:
    """A test method as declared by a test module.

    Requirement metadata fields are optional here; methods missing any of
    them are not eligible for coverage and are dropped during extraction.

    Attributes:
        name: Test method name.
        enabled: Whether the test runs, or None when not declared.
        groups: Raw test groups, e.g. ``("MUST", "MANUAL")``.
        description: Human-readable test description.
        spec_ref_uri: Identifier of the normative clause under test.
        implementation_status: How the test is carried out.
        approval_status: Working group approval state.
    """

    name: str
    enabled: bool | None = None
    groups: tuple[str, ...] = ()
    description: str = ""
    spec_ref_uri: str | None = None
    implementation_status: ImplementationStatus | None = None
    approval_status: ApprovalStatus | None = None


@dataclass(frozen=True, slots=True)
class ModuleDescriptor:
    """A statically declared test module.

    Attributes:
        name: Fully qualified test module name.
        methods: Test methods in declaration order.
    """

    name: str
    methods: tuple[MethodDescriptor, ...] = ()

    def requirement_methods(self) -> tuple[MethodDescriptor, ...]:
        """Return the declared test methods in declaration order."""
        return self.methods


# =============================================================================
# Records
# =============================================================================


@dataclass(frozen=True, slots=True)
class TestMethodRecord:
    """A fully annotated test method, normalized for aggregation.

    Attributes:
        name: Test method name.
        enabled: Whether the test runs.
        requirement_levels: Requirement levels the method is tagged with.
        spec_ref_uri: Identifier of the normative clause under test.
        implementation_status: How the test is carried out.
        approval_status: Working group approval state.
        module: Name of the module that declares the method.
        description: Human-readable test description.
        groups: Raw test groups as declared.
    """

    __test__ = False

    name: str
    enabled: bool
    requirement_levels: frozenset[RequirementLevel]
    spec_ref_uri: str
    implementation_status: ImplementationStatus
    approval_status: ApprovalStatus
    module: str = ""
    description: str = ""
    groups: tuple[str, ...] = ()


# =============================================================================
# Summary
# =============================================================================


@dataclass(frozen=True, slots=True)
class LevelCounts:
    """Requirement counters for one requirement level.

    Attributes:
        total: Distinct requirements tagged with the level.
        implemented: Of those, requirements first claimed by an automated test.
        not_implemented: Of those, requirements first claimed by a test that
            is not implemented.
    """

    total: int = 0
    implemented: int = 0
    not_implemented: int = 0


@dataclass(frozen=True, slots=True)
class CoverageSummary:
    """Aggregate counters from one tally pass.

    Attributes:
        total_tests: Number of extracted test methods.
        total_implemented: Enabled, automated test methods.
        unimplemented: Disabled test methods plus those that are not automated.
        disabled: Disabled test methods.
        client_only: Test methods that only apply to clients.
        manual: Test methods that must be carried out by hand.
        requirements_covered: Distinct spec references.
        requirements_implemented: Distinct spec references first claimed by an
            automated test.
        requirements_not_implemented: Distinct spec references first claimed by
            a test that is not implemented.
        must: MUST requirement counters.
        should: SHOULD requirement counters.
        may: MAY requirement counters.
        pending: Distinct spec references pending working group approval.
        approved: Distinct spec references approved by the working group.
        client_tests: Client-only test method names in order.
        manual_tests: Manual test method names in order.
    """

    total_tests: int = 0
    total_implemented: int = 0
    unimplemented: int = 0
    disabled: int = 0
    client_only: int = 0
    manual: int = 0
    requirements_covered: int = 0
    requirements_implemented: int = 0
    requirements_not_implemented: int = 0
    must: LevelCounts = field(default_factory=LevelCounts)
    should: LevelCounts = field(default_factory=LevelCounts)
    may: LevelCounts = field(default_factory=LevelCounts)
    pending: int = 0
    approved: int = 0
    client_tests: tuple[str, ...] = ()
    manual_tests: tuple[str, ...] = ()

    def for_level(self, level: RequirementLevel) -> LevelCounts:
        """Return the counters for a requirement level."""
        match level:
            case RequirementLevel.MUST:
                return self.must
            case RequirementLevel.SHOULD:
                return self.should
            case RequirementLevel.MAY:
                return self.may


# =============================================================================
# Report Model
# =============================================================================


@dataclass(frozen=True, slots=True)
class RequirementDetail:
    """Per-method entry of the report.

    Attributes:
        module: Name of the module that declares the method.
        name: Test method name.
        description: Human-readable test description.
        groups: Raw test groups as declared.
        enabled: Whether the test runs.
        spec_ref_uri: Reference link to the normative clause.
        implementation_status: How the test is carried out.
        approval_status: Working group approval state.
    """

    module: str
    name: str
    description: str
    groups: tuple[str, ...]
    enabled: bool
    spec_ref_uri: str
    implementation_status: ImplementationStatus
    approval_status: ApprovalStatus


@dataclass(frozen=True, slots=True)
class ReportModel:
    """Everything an external renderer needs to produce the report.

    Attributes:
        summary: Coverage counters.
        details: Per-method entries in module-then-declaration order.
        manual_tests: Names of tests that must be carried out by hand.
        client_tests: Names of tests that only apply to clients.
        modules: Module names in report order.
    """

    summary: CoverageSummary
    details: tuple[RequirementDetail, ...] = ()
    manual_tests: tuple[str, ...] = ()
    client_tests: tuple[str, ...] = ()
    modules: tuple[str, ...] = ()
