"""Member descriptors and the providers that produce them.

The checker never walks modules or classes itself. It consumes ordered
snapshots of :class:`OperationDescriptor` and :class:`FieldDescriptor`
produced by an :class:`IntrospectionProvider`, so synthetic registries can
be checked exactly like the real façade and catalog.
"""

from __future__ import annotations

import inspect
import logging
import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar, Protocol, get_args, get_origin, get_type_hints

from neo4j_assertions.consistency.errors import MalformedEntryPointError, MalformedFactoryError
from neo4j_assertions.consistency.types import collect_type_variables

logger = logging.getLogger(__name__)

DEFAULT_ENTRY_POINT_NAME = "assert_that"


@dataclass(frozen=True)
class OperationDescriptor:
    """An introspected callable: a façade entry point or a catalog method.

    Attributes
    ----------
    name
        Declared name of the callable.
    parameter_types
        Annotated types of the accepted arguments, in declaration order.
    return_type
        Annotated result type.
    type_parameters
        Type variables the callable declares. Empty for non-generic callables.
    synthetic
        True for members that are not genuine declarations of the
        introspected namespace (dunder attributes, re-exported helpers,
        tooling-injected members).
    """

    name: str
    parameter_types: tuple[Any, ...]
    return_type: Any
    type_parameters: tuple[Any, ...] = ()
    synthetic: bool = False

    @property
    def is_generic(self) -> bool:
        return bool(self.type_parameters)


@dataclass(frozen=True)
class FieldDescriptor:
    """An introspected data attribute of the factory catalog."""

    name: str
    declared_type: Any
    synthetic: bool = False


class IntrospectionProvider(Protocol):
    """Source of member descriptors for one consistency check run."""

    def entry_points(self) -> Sequence[OperationDescriptor]: ...

    def factory_fields(self) -> Sequence[FieldDescriptor]: ...

    def factory_methods(self) -> Sequence[OperationDescriptor]: ...


@dataclass(frozen=True)
class SnapshotProvider:
    """Provider over descriptor sequences built ahead of time."""

    entry_point_descriptors: tuple[OperationDescriptor, ...] = ()
    field_descriptors: tuple[FieldDescriptor, ...] = ()
    method_descriptors: tuple[OperationDescriptor, ...] = ()

    def entry_points(self) -> Sequence[OperationDescriptor]:
        return self.entry_point_descriptors

    def factory_fields(self) -> Sequence[FieldDescriptor]:
        return self.field_descriptors

    def factory_methods(self) -> Sequence[OperationDescriptor]:
        return self.method_descriptors


@dataclass(frozen=True)
class ReflectionProvider:
    """Provider that reads descriptors off live Python objects.

    Parameters
    ----------
    facade
        Module or class exposing the entry point.
    catalog
        Module or class declaring the factories.
    entry_point_name
        Name of the entry point callable on ``facade``.
    """

    facade: Any
    catalog: Any
    entry_point_name: str = DEFAULT_ENTRY_POINT_NAME
    _namespace_name: str = field(init=False, repr=False, default="")

    def __post_init__(self) -> None:
        object.__setattr__(self, "_namespace_name", _qualified_name(self.catalog))

    def entry_points(self) -> Sequence[OperationDescriptor]:
        implementation = getattr(self.facade, self.entry_point_name, None)
        if implementation is None:
            logger.warning("%r declares no %r", self.facade, self.entry_point_name)
            return ()
        declarations = typing.get_overloads(implementation) or [implementation]
        descriptors = []
        for declaration in declarations:
            try:
                descriptors.append(describe_callable(declaration, name=self.entry_point_name))
            except (NameError, TypeError) as error:
                raise MalformedEntryPointError(
                    self.entry_point_name, reason=f"has unresolvable annotations: {error}"
                ) from error
        return tuple(descriptors)

    def factory_fields(self) -> Sequence[FieldDescriptor]:
        try:
            annotations = inspect.get_annotations(self.catalog, eval_str=True)
        except (NameError, TypeError) as error:
            raise MalformedFactoryError(
                self._namespace_name,
                self.catalog,
                f"unresolvable annotations: {error}",
            ) from error
        descriptors = []
        for name, declared_type in annotations.items():
            if _is_private(name):
                continue
            if get_origin(declared_type) is ClassVar:
                declared_type = get_args(declared_type)[0]
            descriptors.append(
                FieldDescriptor(name=name, declared_type=declared_type, synthetic=_is_dunder(name))
            )

        # Module namespaces also hold their imports, so only classes contribute
        # unannotated attributes.
        if inspect.ismodule(self.catalog):
            return tuple(descriptors)
        for name, value in vars(self.catalog).items():
            if name in annotations or _is_private(name) and not _is_dunder(name):
                continue
            if _unwrap_callable(value) is not None or isinstance(value, (type, property)):
                continue
            descriptors.append(
                FieldDescriptor(name=name, declared_type=type(value), synthetic=_is_dunder(name))
            )
        return tuple(descriptors)

    def factory_methods(self) -> Sequence[OperationDescriptor]:
        descriptors = []
        for name, value in vars(self.catalog).items():
            function = _unwrap_callable(value)
            if function is None or _is_private(name) and not _is_dunder(name):
                continue
            if inspect.ismodule(self.catalog):
                declared_here = function.__module__ == self.catalog.__name__
            else:
                declared_here = function.__qualname__.startswith(self._namespace_name + ".")
            if _is_dunder(name) or not declared_here:
                logger.debug("Marking %s.%s as synthetic", self._namespace_name, name)
                descriptors.append(
                    OperationDescriptor(name=name, parameter_types=(), return_type=Any, synthetic=True)
                )
                continue
            try:
                descriptors.append(describe_callable(function, name=name))
            except (NameError, TypeError) as error:
                raise MalformedFactoryError(
                    name, function, f"unresolvable annotations: {error}"
                ) from error
        return tuple(descriptors)


def describe_callable(
    function: Callable[..., Any], *, name: str | None = None, synthetic: bool = False
) -> OperationDescriptor:
    """Build an :class:`OperationDescriptor` from a function's annotations.

    Type parameters are the function's ``__type_params__`` followed by any
    other type variable used in its annotations.
    """
    hints = get_type_hints(function)
    signature = inspect.signature(function)
    parameter_types = tuple(
        hints.get(parameter.name, Any)
        for parameter in signature.parameters.values()
        if parameter.name not in ("self", "cls")
    )
    return_type = hints.get("return", Any)

    type_parameters = list(getattr(function, "__type_params__", ()))
    for annotation in (*parameter_types, return_type):
        for type_variable in collect_type_variables(annotation):
            if type_variable not in type_parameters:
                type_parameters.append(type_variable)

    return OperationDescriptor(
        name=name or function.__name__,
        parameter_types=parameter_types,
        return_type=return_type,
        type_parameters=tuple(type_parameters),
        synthetic=synthetic,
    )


def _unwrap_callable(value: Any) -> Callable[..., Any] | None:
    if isinstance(value, (staticmethod, classmethod)):
        return value.__func__
    if inspect.isfunction(value):
        return value
    return None


def _qualified_name(namespace: Any) -> str:
    if inspect.ismodule(namespace):
        return namespace.__name__
    return namespace.__qualname__


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _is_private(name: str) -> bool:
    return name.startswith("_")
