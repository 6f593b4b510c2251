"""Verify that every ``assert_that`` entry point has a matching factory.

Two passes run independently:

- non-generic: entry points without type parameters against the catalog's
  ``InstanceOfAssertFactory`` attributes;
- generic: entry points with type parameters against the catalog's
  factory methods.

Fields and methods bind types differently, so a generic entry point is
never matched against a field factory or the other way around.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection
from typing import Any, Literal

from pydantic import BaseModel, Field, PrivateAttr

from neo4j_assertions.config import ConsistencySettings
from neo4j_assertions.consistency.errors import ConsistencyError, ConsistencyMismatch
from neo4j_assertions.consistency.extractors import (
    MappingTable,
    extract_entry_points,
    extract_field_factories,
    extract_method_factories,
)
from neo4j_assertions.consistency.introspection import (
    DEFAULT_ENTRY_POINT_NAME,
    IntrospectionProvider,
    ReflectionProvider,
)
from neo4j_assertions.consistency.types import type_name, type_names
from neo4j_assertions.factories import InstanceOfAssertFactory

logger = logging.getLogger(__name__)

PassName = Literal["non-generic", "generic"]


class MappingEntry(BaseModel):
    """One ``input_type -> output_type`` row of a diagnostic, by type name."""

    input_type: str
    output_type: str

    @classmethod
    def from_types(
        cls, input_type: Any, output_type: Any, names: dict[Any, str] | None = None
    ) -> MappingEntry:
        names = names or {}
        return cls(
            input_type=names.get(input_type) or type_name(input_type),
            output_type=names.get(output_type) or type_name(output_type),
        )

    def __str__(self) -> str:
        return f"{self.input_type} -> {self.output_type}"


class PassResult(BaseModel):
    """Outcome of one pass.

    Attributes
    ----------
    name
        Which pass produced this result.
    expected
        Entry point table, the mappings the catalog must provide.
    actual
        Factory table extracted from the catalog.
    missing
        Entry point mappings the catalog does not provide.
    extra
        Catalog mappings no entry point accounts for.
    error_type, error_message
        Set when extraction itself failed; the tables are then empty.
    """

    name: PassName
    expected: list[MappingEntry] = Field(default_factory=list)
    actual: list[MappingEntry] = Field(default_factory=list)
    missing: list[MappingEntry] = Field(default_factory=list)
    extra: list[MappingEntry] = Field(default_factory=list)
    error_type: str | None = None
    error_message: str | None = None

    _error: ConsistencyError | None = PrivateAttr(default=None)

    @classmethod
    def compare(cls, name: PassName, expected: MappingTable, actual: MappingTable) -> PassResult:
        """Compare an entry point table with a factory table."""
        names = type_names([*expected, *expected.values(), *actual, *actual.values()])
        missing = [
            MappingEntry.from_types(key, value, names)
            for key, value in expected.items()
            if key not in actual or actual[key] != value
        ]
        extra = [
            MappingEntry.from_types(key, value, names)
            for key, value in actual.items()
            if key not in expected or expected[key] != value
        ]
        return cls(
            name=name,
            expected=[MappingEntry.from_types(key, value, names) for key, value in expected.items()],
            actual=[MappingEntry.from_types(key, value, names) for key, value in actual.items()],
            missing=missing,
            extra=extra,
        )

    @classmethod
    def from_error(cls, name: PassName, error: ConsistencyError) -> PassResult:
        result = cls(name=name, error_type=type(error).__name__, error_message=str(error))
        result._error = error
        return result

    @property
    def expected_size(self) -> int:
        return len(self.expected)

    @property
    def actual_size(self) -> int:
        return len(self.actual)

    @property
    def passed(self) -> bool:
        return (
            self.error_type is None
            and not self.missing
            and not self.extra
            and self.expected_size == self.actual_size
        )

    def diff(self) -> str:
        """Human-readable diagnostic. Empty when the pass succeeded."""
        if self.passed:
            return ""
        header = f"{self.name} consistency check failed"
        if self.error_type is not None:
            return f"{header}: {self.error_type}: {self.error_message}"
        lines = [f"{header}: expected {self.expected_size} factories, found {self.actual_size}"]
        lines.extend(f"  missing: {entry}" for entry in self.missing)
        lines.extend(f"  extra:   {entry}" for entry in self.extra)
        return "\n".join(lines)

    def raise_for_failure(self) -> None:
        """Raise the extraction error or a :class:`ConsistencyMismatch` if the pass failed."""
        if self._error is not None:
            raise self._error
        if not self.passed:
            raise ConsistencyMismatch(self)


class ConsistencyReport(BaseModel):
    """Both pass results of one checker run."""

    results: list[PassResult]

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    def raise_for_failures(self) -> None:
        failures = [result.diff() for result in self.results if not result.passed]
        if failures:
            raise ConsistencyError("\n\n".join(failures))


class ConsistencyChecker:
    """Compare the façade's entry points with the factory catalog.

    Every call re-reads the provider, so results always reflect the current
    declarations.

    Parameters
    ----------
    provider
        Source of entry point and factory descriptors.
    field_ignored_types
        Assertion types left out of the non-generic pass on both sides.
    method_ignored_types
        Assertion types left out of the generic pass on both sides.
    entry_point_name
        Name of the entry point callables.
    factory_kind
        Generic class every factory must be exposed as.
    """

    def __init__(
        self,
        provider: IntrospectionProvider,
        *,
        field_ignored_types: Collection[Any] = (),
        method_ignored_types: Collection[Any] = (),
        entry_point_name: str = DEFAULT_ENTRY_POINT_NAME,
        factory_kind: Any = InstanceOfAssertFactory,
    ) -> None:
        self.provider = provider
        self.field_ignored_types = tuple(field_ignored_types)
        self.method_ignored_types = tuple(method_ignored_types)
        self.entry_point_name = entry_point_name
        self.factory_kind = factory_kind

    @classmethod
    def from_settings(
        cls, provider: IntrospectionProvider, settings: ConsistencySettings | None = None
    ) -> ConsistencyChecker:
        settings = settings or ConsistencySettings()
        return cls(
            provider,
            field_ignored_types=settings.field_ignored_types,
            method_ignored_types=settings.method_ignored_types,
            entry_point_name=settings.entry_point_name,
        )

    def check_non_generic(self) -> PassResult:
        return self._run_pass(
            "non-generic",
            lambda: extract_entry_points(
                self.provider.entry_points(),
                generic=False,
                ignored_types=self.field_ignored_types,
                entry_point_name=self.entry_point_name,
            ),
            lambda: extract_field_factories(
                self.provider.factory_fields(), self.field_ignored_types, self.factory_kind
            ),
        )

    def check_generic(self) -> PassResult:
        return self._run_pass(
            "generic",
            lambda: extract_entry_points(
                self.provider.entry_points(),
                generic=True,
                ignored_types=self.method_ignored_types,
                entry_point_name=self.entry_point_name,
            ),
            lambda: extract_method_factories(
                self.provider.factory_methods(), self.method_ignored_types, self.factory_kind
            ),
        )

    def run(self) -> ConsistencyReport:
        return ConsistencyReport(results=[self.check_non_generic(), self.check_generic()])

    def _run_pass(
        self,
        name: PassName,
        entry_points: Callable[[], MappingTable],
        factories: Callable[[], MappingTable],
    ) -> PassResult:
        try:
            expected = entry_points()
            actual = factories()
        except ConsistencyError as error:
            logger.info("%s pass aborted: %s", name, error)
            return PassResult.from_error(name, error)

        result = PassResult.compare(name, expected, actual)
        if result.passed:
            logger.info("%s pass succeeded with %d mappings", name, result.expected_size)
        else:
            logger.info(
                "%s pass failed: %d missing, %d extra",
                name,
                len(result.missing),
                len(result.extra),
            )
        return result


def default_checker(settings: ConsistencySettings | None = None) -> ConsistencyChecker:
    """Checker over this package's own ``assert_that`` and ``InstanceOfAssertFactories``."""
    from neo4j_assertions import api
    from neo4j_assertions.factories import InstanceOfAssertFactories

    settings = settings or ConsistencySettings()
    provider = ReflectionProvider(api, InstanceOfAssertFactories, settings.entry_point_name)
    return ConsistencyChecker.from_settings(provider, settings)
