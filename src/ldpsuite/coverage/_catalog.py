# pyright: reportAny=false, reportExplicitAny=false
"""Test catalog loading.

A test catalog is a TOML file that statically declares the conformance test
modules and their annotated methods, in reporting order:

    [[module]]
    name = "org.w3.ldp.testsuite.test.RdfSourceTest"

    [[module.method]]
    name = "testGetResource"
    groups = ["MUST"]
    enabled = true
    spec_ref_uri = "https://www.w3.org/TR/ldp#ldpr-get-must"
    implementation = "automated"
    approval = "approved"
"""

import tomllib
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ldpsuite.coverage._models import MethodDescriptor, ModuleDescriptor
from ldpsuite.enums import ApprovalStatus, ImplementationStatus
from ldpsuite.exceptions import CatalogLoadError, CatalogValidationError

__all__ = [
    "DEFAULT_MODULE_ORDER",
    "load_catalog",
    "order_modules",
    "parse_catalog",
]

_TEST_PACKAGE = "org.w3.ldp.testsuite.test"

# Reporting order of the LDP test classes.
DEFAULT_MODULE_ORDER: tuple[str, ...] = (
    f"{_TEST_PACKAGE}.RdfSourceTest",
    f"{_TEST_PACKAGE}.BasicContainerTest",
    f"{_TEST_PACKAGE}.CommonContainerTest",
    f"{_TEST_PACKAGE}.CommonResourceTest",
    f"{_TEST_PACKAGE}.NonRDFSourceTest",
    f"{_TEST_PACKAGE}.IndirectContainerTest",
    f"{_TEST_PACKAGE}.DirectContainerTest",
)


def _normalize_status(value: Any) -> Any:
    # Accept "AUTOMATED", "automated" and "WG_APPROVED" alike.
    if isinstance(value, str):
        normalized = value.strip().lower().replace("-", "_")
        return normalized.removeprefix("wg_")
    return value


class _CatalogMethod(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    name: str
    description: str = ""
    groups: tuple[str, ...] = ()
    enabled: bool | None = None
    spec_ref_uri: str | None = None
    implementation: ImplementationStatus | None = None
    approval: ApprovalStatus | None = None

    @field_validator("implementation", "approval", mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> Any:
        return _normalize_status(value)


class _CatalogModule(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    name: str
    method: tuple[_CatalogMethod, ...] = ()


class _Catalog(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    module: tuple[_CatalogModule, ...] = ()


def _lookup_name(data: dict[str, Any], loc: tuple[int | str, ...]) -> str | None:
    node: Any = data
    for part in loc:
        try:
            node = node[part]
        except (KeyError, IndexError, TypeError):
            return None
    if isinstance(node, dict):
        name = node.get("name")
        return name if isinstance(name, str) else None
    return None


def _validation_error(
    data: dict[str, Any], error: ValidationError
) -> CatalogValidationError:
    first = error.errors()[0]
    loc = tuple(first["loc"])
    module = _lookup_name(data, loc[:2]) if len(loc) >= 2 else None  # noqa: PLR2004
    method = _lookup_name(data, loc[:4]) if len(loc) >= 4 else None  # noqa: PLR2004
    key = str(loc[-1]) if loc else None

    where = ".".join(str(part) for part in loc)
    msg = f"Invalid test catalog entry at {where}: {first['msg']}"
    return CatalogValidationError(msg, module=module, method=method, key=key)


def parse_catalog(data: dict[str, Any]) -> tuple[ModuleDescriptor, ...]:
    """Build module descriptors from a parsed catalog document.

    Args:
        data: The parsed TOML document.

    Returns:
        Module descriptors in document order.

    Raises:
        CatalogValidationError: If an entry has a wrong type or an unknown
            status value.
    """
    try:
        catalog = _Catalog.model_validate(data)
    except ValidationError as e:
        raise _validation_error(data, e) from e

    return tuple(
        ModuleDescriptor(
            name=module.name,
            methods=tuple(
                MethodDescriptor(
                    name=method.name,
                    enabled=method.enabled,
                    groups=method.groups,
                    description=method.description,
                    spec_ref_uri=method.spec_ref_uri,
                    implementation_status=method.implementation,
                    approval_status=method.approval,
                )
                for method in module.method
            ),
        )
        for module in catalog.module
    )


def load_catalog(path: Path) -> tuple[ModuleDescriptor, ...]:
    """Read a TOML test catalog.

    Args:
        path: Path to the catalog file.

    Returns:
        Module descriptors in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        CatalogLoadError: If the file is not valid TOML.
        CatalogValidationError: If an entry is invalid.
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse test catalog: {e}"
        raise CatalogLoadError(
            msg,
            path=path,
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e

    return parse_catalog(data)


def order_modules(
    modules: Iterable[ModuleDescriptor],
    order: Sequence[str] = DEFAULT_MODULE_ORDER,
) -> tuple[ModuleDescriptor, ...]:
    """Sort module descriptors into reporting order.

    Modules named in `order` come first, in that order. Any other modules
    follow in their original relative order.

    Args:
        modules: Module descriptors.
        order: Module names in reporting order.

    Returns:
        The sorted module descriptors.
    """
    rank = {name: index for index, name in enumerate(order)}
    indexed = list(enumerate(modules))
    indexed.sort(key=lambda item: (rank.get(item[1].name, len(rank)), item[0]))
    return tuple(module for _, module in indexed)
