"""Shared test fixtures for ldpsuite tests."""

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from rich.console import Console

from ldpsuite.coverage import TestMethodRecord
from ldpsuite.enums import ApprovalStatus, ImplementationStatus, RequirementLevel

SAMPLE_CATALOG = """\
[[module]]
name = "org.w3.ldp.testsuite.test.BasicContainerTest"

[[module.method]]
name = "testPostCreatesMember"
description = "POST to a container creates a member."
groups = ["MUST"]
enabled = true
spec_ref_uri = "https://www.w3.org/TR/ldp#ldpc-post-createdmbr"
implementation = "automated"
approval = "approved"

[[module.method]]
name = "testPreferMinimalContainer"
groups = ["SHOULD", "MANUAL"]
enabled = true
spec_ref_uri = "https://www.w3.org/TR/ldp#ldpc-prefer"
implementation = "manual"
approval = "pending"

[[module]]
name = "org.w3.ldp.testsuite.test.RdfSourceTest"

[[module.method]]
name = "testGetResource"
groups = ["MUST"]
enabled = true
spec_ref_uri = "https://www.w3.org/TR/ldp#ldpr-get-must"
implementation = "AUTOMATED"
approval = "WG_APPROVED"

[[module.method]]
name = "testClientAcceptsTurtle"
groups = ["MAY"]
enabled = false
spec_ref_uri = "https://www.w3.org/TR/ldp#ldpr-client-turtle"
implementation = "client-only"
approval = "approved"

[[module.method]]
name = "testUntagged"
groups = ["MUST"]
enabled = true
"""


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear LDPSUITE_* variables and reset the CLI context around each test."""
    from ldpsuite.cli import CLIContext

    for key in list(os.environ):
        if key.startswith("LDPSUITE_"):
            monkeypatch.delenv(key)
    CLIContext.reset()
    yield
    CLIContext.reset()


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


MakeRecord = Callable[..., TestMethodRecord]


@pytest.fixture
def make_record() -> MakeRecord:
    """Return a factory for records with sensible defaults."""

    def _make(
        name: str = "testMethod",
        *,
        enabled: bool = True,
        levels: frozenset[RequirementLevel] = frozenset({RequirementLevel.MUST}),
        spec_ref_uri: str = "spec#1",
        status: ImplementationStatus = ImplementationStatus.AUTOMATED,
        approval: ApprovalStatus = ApprovalStatus.APPROVED,
        module: str = "org.w3.ldp.testsuite.test.RdfSourceTest",
    ) -> TestMethodRecord:
        return TestMethodRecord(
            name=name,
            enabled=enabled,
            requirement_levels=levels,
            spec_ref_uri=spec_ref_uri,
            implementation_status=status,
            approval_status=approval,
            module=module,
            groups=tuple(level.value for level in levels),
        )

    return _make


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "ldp-tests.toml"
    _ = path.write_text(SAMPLE_CATALOG)
    return path


@pytest.fixture
def sample_catalog() -> str:
    return SAMPLE_CATALOG
