"""Tests for reading descriptors off live modules and classes."""

from types import SimpleNamespace
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, overload

import pytest

from neo4j_assertions.consistency import (
    ConsistencyChecker,
    MalformedEntryPointError,
    MalformedFactoryError,
    ReflectionProvider,
)
from neo4j_assertions.consistency.introspection import describe_callable
from neo4j_assertions.factories import InstanceOfAssertFactory

if TYPE_CHECKING:
    from neo4j_assertions.assertions import PathAssert as CheckOnlyPathAssert


class Node:
    pass


class Path:
    pass


NodeT = TypeVar("NodeT", bound=Node)


class NodeAssert(Generic[NodeT]):
    def __init__(self, actual):
        self.actual = actual


class PathAssert:
    def __init__(self, actual):
        self.actual = actual


@overload
def sample_assert_that(actual: Node) -> NodeAssert[Node]: ...


@overload
def sample_assert_that(actual: Path) -> PathAssert: ...


@overload
def sample_assert_that(actual: int) -> PathAssert: ...


@overload
def sample_assert_that(actual: NodeT) -> NodeAssert[NodeT]: ...


def sample_assert_that(actual: Any) -> Any:
    return actual


def reexported_helper(type_: type) -> InstanceOfAssertFactory[Node, NodeAssert]:
    return InstanceOfAssertFactory(type_, NodeAssert)


class SampleFactories:
    """Catalog with one member of every shape the provider has to handle."""

    NODE: InstanceOfAssertFactory[Node, NodeAssert[Node]] = InstanceOfAssertFactory(Node, NodeAssert)
    PATH: ClassVar[InstanceOfAssertFactory[Path, PathAssert]] = InstanceOfAssertFactory(
        Path, PathAssert
    )
    _private_cache: dict = {}
    __coverage_data__ = {}

    helper = staticmethod(reexported_helper)

    @staticmethod
    def node(type_: type[NodeT]) -> InstanceOfAssertFactory[NodeT, NodeAssert[NodeT]]:
        return InstanceOfAssertFactory(type_, NodeAssert)


class CheckOnlyFieldFactories:
    NODE: InstanceOfAssertFactory[Node, NodeAssert[Node]] = InstanceOfAssertFactory(Node, NodeAssert)
    PATH: "InstanceOfAssertFactory[Path, CheckOnlyPathAssert]" = InstanceOfAssertFactory(
        Path, PathAssert
    )

    @staticmethod
    def node(type_: type[NodeT]) -> InstanceOfAssertFactory[NodeT, NodeAssert[NodeT]]:
        return InstanceOfAssertFactory(type_, NodeAssert)


class CheckOnlyMethodFactories:
    NODE: InstanceOfAssertFactory[Node, NodeAssert[Node]] = InstanceOfAssertFactory(Node, NodeAssert)
    PATH: InstanceOfAssertFactory[Path, PathAssert] = InstanceOfAssertFactory(Path, PathAssert)

    @staticmethod
    def node(type_: type[NodeT]) -> "InstanceOfAssertFactory[NodeT, CheckOnlyPathAssert]":
        return InstanceOfAssertFactory(type_, NodeAssert)


FACADE = SimpleNamespace(assert_that=sample_assert_that)


class TestEntryPoints:
    def test_reads_every_overload(self):
        descriptors = ReflectionProvider(FACADE, SampleFactories).entry_points()

        assert [d.parameter_types for d in descriptors] == [(Node,), (Path,), (int,), (NodeT,)]
        assert all(d.name == "assert_that" for d in descriptors)

    def test_generic_overloads_declare_their_type_variables(self):
        descriptors = ReflectionProvider(FACADE, SampleFactories).entry_points()

        assert [d.type_parameters for d in descriptors] == [(), (), (), (NodeT,)]
        assert descriptors[0].return_type == NodeAssert[Node]

    def test_missing_entry_point_yields_nothing(self):
        provider = ReflectionProvider(SimpleNamespace(), SampleFactories)

        assert provider.entry_points() == ()

    def test_function_without_overloads_is_its_own_entry_point(self):
        def assert_that(actual: Path) -> PathAssert:
            return PathAssert(actual)

        provider = ReflectionProvider(SimpleNamespace(assert_that=assert_that), SampleFactories)

        (descriptor,) = provider.entry_points()
        assert descriptor.parameter_types == (Path,)
        assert descriptor.return_type is PathAssert


class TestFactoryMembers:
    def test_fields_unwrap_classvar_and_flag_dunders(self):
        fields = {f.name: f for f in ReflectionProvider(FACADE, SampleFactories).factory_fields()}

        assert fields["NODE"].declared_type == InstanceOfAssertFactory[Node, NodeAssert[Node]]
        assert fields["PATH"].declared_type == InstanceOfAssertFactory[Path, PathAssert]
        assert not fields["NODE"].synthetic
        assert fields["__coverage_data__"].synthetic
        assert "_private_cache" not in fields
        assert "node" not in fields
        assert "helper" not in fields

    def test_methods_flag_reexported_functions_as_synthetic(self):
        methods = {m.name: m for m in ReflectionProvider(FACADE, SampleFactories).factory_methods()}

        assert not methods["node"].synthetic
        assert methods["node"].type_parameters == (NodeT,)
        assert methods["helper"].synthetic

    def test_describe_callable_skips_self(self):
        class Facade:
            def assert_that(self, actual: Node) -> NodeAssert[Node]:
                return NodeAssert(actual)

        descriptor = describe_callable(Facade.assert_that)

        assert descriptor.parameter_types == (Node,)


def test_checker_over_reflected_registries():
    checker = ConsistencyChecker(ReflectionProvider(FACADE, SampleFactories))

    non_generic = checker.check_non_generic()
    generic = checker.check_generic()

    assert non_generic.passed, non_generic.diff()
    assert [str(entry) for entry in non_generic.expected] == [
        "Node -> NodeAssert",
        "Path -> PathAssert",
    ]
    assert generic.passed, generic.diff()


class TestUnresolvableAnnotations:
    def test_field_annotation_fails_the_field_pass_only(self):
        report = ConsistencyChecker(ReflectionProvider(FACADE, CheckOnlyFieldFactories)).run()
        non_generic, generic = report.results

        assert non_generic.error_type == "MalformedFactoryError"
        assert "CheckOnlyPathAssert" in non_generic.error_message
        assert generic.error_type is None
        assert generic.passed, generic.diff()

    def test_method_annotation_fails_the_method_pass_only(self):
        report = ConsistencyChecker(ReflectionProvider(FACADE, CheckOnlyMethodFactories)).run()
        non_generic, generic = report.results

        assert non_generic.passed, non_generic.diff()
        assert generic.error_type == "MalformedFactoryError"
        with pytest.raises(MalformedFactoryError) as exc_info:
            generic.raise_for_failure()
        assert exc_info.value.member == "node"

    def test_entry_point_annotation_is_reported_by_both_passes(self):
        def assert_that(actual: "CheckOnlyPathAssert") -> PathAssert:
            return PathAssert(actual)

        provider = ReflectionProvider(SimpleNamespace(assert_that=assert_that), SampleFactories)

        with pytest.raises(MalformedEntryPointError):
            provider.entry_points()
        report = ConsistencyChecker(provider).run()
        assert [result.error_type for result in report.results] == [
            "MalformedEntryPointError",
            "MalformedEntryPointError",
        ]
