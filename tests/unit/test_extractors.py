"""Tests for entry point and factory extraction."""

from typing import Any, Generic, TypeVar

import pytest

from neo4j_assertions.consistency.errors import (
    DuplicateKeyError,
    MalformedEntryPointError,
    MalformedFactoryError,
    MalformedTypeError,
)
from neo4j_assertions.consistency.extractors import (
    TypeMapping,
    extract_entry_points,
    extract_field_factories,
    extract_method_factories,
    to_mapping_table,
)
from neo4j_assertions.consistency.introspection import FieldDescriptor, OperationDescriptor
from neo4j_assertions.factories import InstanceOfAssertFactory


class Foo:
    pass


class Bar:
    pass


class FooAssert:
    pass


class OtherFooAssert:
    pass


EntityT = TypeVar("EntityT", bound=Foo)
TwoBoundsT = TypeVar("TwoBoundsT", Foo, Bar)


class ContainerAssert(Generic[EntityT]):
    pass


def entry_point(param: Any, result: Any, *type_parameters: Any, **kwargs: Any) -> OperationDescriptor:
    return OperationDescriptor(
        name=kwargs.get("name", "assert_that"),
        parameter_types=(param,),
        return_type=result,
        type_parameters=type_parameters,
        synthetic=kwargs.get("synthetic", False),
    )


class TestToMappingTable:
    def test_collects_in_declaration_order(self):
        table = to_mapping_table([TypeMapping(Foo, FooAssert), TypeMapping(Bar, ContainerAssert)])

        assert list(table.items()) == [(Foo, FooAssert), (Bar, ContainerAssert)]

    def test_same_key_different_value_raises(self):
        with pytest.raises(DuplicateKeyError) as exc_info:
            to_mapping_table([TypeMapping(Foo, FooAssert), TypeMapping(Foo, OtherFooAssert)])

        assert exc_info.value.key is Foo
        assert exc_info.value.existing is FooAssert
        assert exc_info.value.conflicting is OtherFooAssert

    def test_repeated_identical_pair_raises(self):
        with pytest.raises(DuplicateKeyError) as exc_info:
            to_mapping_table([TypeMapping(Foo, FooAssert), TypeMapping(Foo, FooAssert, source="FOO_ALIAS")])

        assert exc_info.value.key is Foo


class TestExtractEntryPoints:
    def test_non_generic_pass_skips_generic_operations(self):
        operations = [
            entry_point(Foo, FooAssert),
            entry_point(EntityT, ContainerAssert[EntityT], EntityT),
        ]

        assert extract_entry_points(operations, generic=False) == {Foo: FooAssert}

    def test_generic_pass_keeps_only_generic_operations_normalized(self):
        operations = [
            entry_point(Foo, FooAssert),
            entry_point(EntityT, ContainerAssert[EntityT], EntityT),
        ]

        assert extract_entry_points(operations, generic=True) == {Foo: ContainerAssert}

    def test_primitive_arguments_are_excluded(self):
        operations = [entry_point(int, FooAssert), entry_point(Foo, FooAssert)]

        assert extract_entry_points(operations, generic=False) == {Foo: FooAssert}

    def test_ignored_result_types_are_excluded(self):
        operations = [entry_point(Foo, FooAssert), entry_point(Bar, ContainerAssert[Bar])]

        table = extract_entry_points(operations, generic=False, ignored_types=(ContainerAssert,))

        assert table == {Foo: FooAssert}

    def test_only_operations_with_the_entry_point_name(self):
        operations = [entry_point(Foo, FooAssert), entry_point(Bar, FooAssert, name="then")]

        assert extract_entry_points(operations, generic=False) == {Foo: FooAssert}
        assert extract_entry_points(operations, generic=False, entry_point_name="then") == {
            Bar: FooAssert
        }

    def test_synthetic_operations_are_skipped(self):
        operations = [entry_point(Foo, FooAssert), entry_point(Bar, FooAssert, synthetic=True)]

        assert extract_entry_points(operations, generic=False) == {Foo: FooAssert}

    def test_ambiguous_entry_points_raise(self):
        operations = [entry_point(Foo, FooAssert), entry_point(Foo, OtherFooAssert)]

        with pytest.raises(DuplicateKeyError):
            extract_entry_points(operations, generic=False)

    def test_entry_point_with_two_arguments_raises(self):
        operation = OperationDescriptor(
            name="assert_that", parameter_types=(Foo, Bar), return_type=FooAssert
        )

        with pytest.raises(MalformedEntryPointError):
            extract_entry_points([operation], generic=False)

    def test_multi_bound_type_variable_raises(self):
        operations = [entry_point(TwoBoundsT, FooAssert, TwoBoundsT)]

        with pytest.raises(MalformedTypeError):
            extract_entry_points(operations, generic=True)


class TestExtractFactories:
    def test_field_factories(self):
        fields = [
            FieldDescriptor("FOO", InstanceOfAssertFactory[Foo, FooAssert]),
            FieldDescriptor("BAR", InstanceOfAssertFactory[Bar, ContainerAssert[Bar]]),
        ]

        assert extract_field_factories(fields) == {Foo: FooAssert, Bar: ContainerAssert}

    def test_synthetic_fields_are_skipped(self):
        fields = [
            FieldDescriptor("FOO", InstanceOfAssertFactory[Foo, FooAssert]),
            FieldDescriptor("__coverage_data__", dict, synthetic=True),
        ]

        assert extract_field_factories(fields) == {Foo: FooAssert}

    def test_ignored_factories_are_excluded(self):
        fields = [
            FieldDescriptor("FOO", InstanceOfAssertFactory[Foo, FooAssert]),
            FieldDescriptor("BAR", InstanceOfAssertFactory[Bar, ContainerAssert[Bar]]),
        ]

        assert extract_field_factories(fields, ignored_types=(ContainerAssert,)) == {Foo: FooAssert}

    def test_method_factories_use_return_types(self):
        methods = [
            OperationDescriptor(
                name="container",
                parameter_types=(type[EntityT],),
                return_type=InstanceOfAssertFactory[EntityT, ContainerAssert[EntityT]],
                type_parameters=(EntityT,),
            ),
        ]

        assert extract_method_factories(methods) == {Foo: ContainerAssert}

    @pytest.mark.parametrize(
        "exposed_type",
        [InstanceOfAssertFactory, list[Foo], dict[Foo, FooAssert], FooAssert],
    )
    def test_non_factory_shapes_raise(self, exposed_type):
        with pytest.raises(MalformedFactoryError) as exc_info:
            extract_field_factories([FieldDescriptor("BROKEN", exposed_type)])

        assert exc_info.value.member == "BROKEN"

    def test_duplicate_factories_raise(self):
        fields = [
            FieldDescriptor("FOO", InstanceOfAssertFactory[Foo, FooAssert]),
            FieldDescriptor("OTHER_FOO", InstanceOfAssertFactory[Foo, OtherFooAssert]),
        ]

        with pytest.raises(DuplicateKeyError):
            extract_field_factories(fields)

    def test_alias_field_for_the_same_factory_raises(self):
        fields = [
            FieldDescriptor("FOO", InstanceOfAssertFactory[Foo, FooAssert]),
            FieldDescriptor("FOO_ALIAS", InstanceOfAssertFactory[Foo, FooAssert]),
        ]

        with pytest.raises(DuplicateKeyError):
            extract_field_factories(fields)
