"""Extract comparable mapping tables from entry points and factories."""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, get_args, get_origin

from neo4j_assertions.consistency.errors import (
    DuplicateKeyError,
    MalformedEntryPointError,
    MalformedFactoryError,
)
from neo4j_assertions.consistency.introspection import (
    DEFAULT_ENTRY_POINT_NAME,
    FieldDescriptor,
    OperationDescriptor,
)
from neo4j_assertions.consistency.types import is_primitive, normalize, type_name
from neo4j_assertions.factories import InstanceOfAssertFactory

logger = logging.getLogger(__name__)

MappingTable = dict[Any, Any]


@dataclass(frozen=True)
class TypeMapping:
    """Normalized ``input_type -> output_type`` pair of one declaration."""

    input_type: Any
    output_type: Any
    source: str = ""

    def __str__(self) -> str:
        return f"{type_name(self.input_type)} -> {type_name(self.output_type)}"


def to_mapping_table(mappings: Iterable[TypeMapping]) -> MappingTable:
    """Collect mappings into a table keyed by input type.

    Every input type may be declared once, even when a repeated
    declaration binds the same output.

    Raises
    ------
    DuplicateKeyError
        If an input type is declared more than once.
    """
    table: MappingTable = {}
    for mapping in mappings:
        key = mapping.input_type
        if key in table:
            raise DuplicateKeyError(key, table[key], mapping.output_type)
        table[key] = mapping.output_type
    return table


def extract_entry_points(
    operations: Sequence[OperationDescriptor],
    *,
    generic: bool,
    ignored_types: Collection[Any] = (),
    entry_point_name: str = DEFAULT_ENTRY_POINT_NAME,
) -> MappingTable:
    """Build the entry point table for one pass.

    Parameters
    ----------
    operations
        Descriptors of the façade's callables.
    generic
        Select operations declaring type parameters when True, operations
        without any when False.
    ignored_types
        Normalized result types whose entry points are left out.
    entry_point_name
        Only operations with this exact name are entry points.

    Returns
    -------
    MappingTable
        Normalized argument type to normalized result type.

    Raises
    ------
    MalformedEntryPointError
        If a selected operation does not accept exactly one argument.
    MalformedTypeError
        If a type variable in a signature does not have exactly one bound.
    DuplicateKeyError
        If two entry points accept the same type.
    """
    mappings = []
    for operation in operations:
        if operation.synthetic or operation.name != entry_point_name:
            continue
        if operation.is_generic != generic:
            continue
        if len(operation.parameter_types) != 1:
            raise MalformedEntryPointError(operation.name, operation.parameter_types)

        mapping = TypeMapping(
            input_type=normalize(operation.parameter_types[0]),
            output_type=normalize(operation.return_type),
            source=operation.name,
        )
        if mapping.output_type in ignored_types:
            logger.debug("Ignoring entry point %s", mapping)
            continue
        if not generic and is_primitive(mapping.input_type):
            logger.debug("Skipping primitive entry point %s", mapping)
            continue
        mappings.append(mapping)
    return to_mapping_table(mappings)


def extract_field_factories(
    fields: Sequence[FieldDescriptor],
    ignored_types: Collection[Any] = (),
    factory_kind: Any = InstanceOfAssertFactory,
) -> MappingTable:
    """Build the factory table from the catalog's data attributes."""
    return _collect_factories(
        ((field.name, field.declared_type) for field in fields if not field.synthetic),
        ignored_types,
        factory_kind,
    )


def extract_method_factories(
    methods: Sequence[OperationDescriptor],
    ignored_types: Collection[Any] = (),
    factory_kind: Any = InstanceOfAssertFactory,
) -> MappingTable:
    """Build the factory table from the catalog's callables."""
    return _collect_factories(
        ((method.name, method.return_type) for method in methods if not method.synthetic),
        ignored_types,
        factory_kind,
    )


def factory_type_arguments(
    member: str, exposed_type: Any, factory_kind: Any = InstanceOfAssertFactory
) -> tuple[Any, Any]:
    """Split ``InstanceOfAssertFactory[InputT, AssertT]`` into its two arguments.

    Raises
    ------
    MalformedFactoryError
        If ``exposed_type`` is not a parameterized ``factory_kind`` with
        exactly two type arguments.
    """
    origin = get_origin(exposed_type)
    if origin is None:
        raise MalformedFactoryError(member, exposed_type, "expected a parameterized type")
    if origin is not factory_kind:
        raise MalformedFactoryError(
            member, exposed_type, f"expected {type_name(factory_kind)}, got {origin!r}"
        )
    arguments = get_args(exposed_type)
    if len(arguments) != 2:
        raise MalformedFactoryError(
            member, exposed_type, f"expected 2 type arguments, got {len(arguments)}"
        )
    return arguments[0], arguments[1]


def _collect_factories(
    members: Iterable[tuple[str, Any]], ignored_types: Collection[Any], factory_kind: Any
) -> MappingTable:
    mappings = []
    for member, exposed_type in members:
        input_type, output_type = factory_type_arguments(member, exposed_type, factory_kind)
        mapping = TypeMapping(normalize(input_type), normalize(output_type), source=member)
        if mapping.output_type in ignored_types:
            logger.debug("Ignoring factory %s (%s)", member, mapping)
            continue
        mappings.append(mapping)
    return to_mapping_table(mappings)
