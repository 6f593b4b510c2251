"""Type normalization shared by both registry extractors."""

from collections import Counter
from collections.abc import Iterable
from typing import Annotated, Any, ClassVar, TypeVar, get_args, get_origin

from neo4j_assertions.consistency.errors import MalformedTypeError

PRIMITIVE_TYPES: frozenset[type] = frozenset({bool, int, float, complex})

_WRAPPER_ORIGINS = (Annotated, ClassVar)


def normalize(tp: Any) -> Any:
    """Collapse a type to the canonical form both registries are compared in.

    Parameterized types collapse to their origin (``list[Node]`` becomes
    ``list``), type variables resolve to their single bound, and every other
    type is returned unchanged.

    Parameters
    ----------
    tp
        Type as reported by ``typing`` introspection.

    Returns
    -------
    Any
        The normalized type. Normalizing it again returns it unchanged.

    Raises
    ------
    MalformedTypeError
        If ``tp`` is a type variable with zero or several bounds.
    """
    if isinstance(tp, TypeVar):
        bounds = type_variable_bounds(tp)
        if len(bounds) != 1:
            raise MalformedTypeError(tp, bounds)
        return normalize(bounds[0])

    origin = get_origin(tp)
    if origin is None:
        return tp
    if origin in _WRAPPER_ORIGINS:
        return normalize(get_args(tp)[0])
    return origin


def type_variable_bounds(type_variable: TypeVar) -> tuple[Any, ...]:
    """Bounds of a type variable: its constraints, else its bound if it has one."""
    if type_variable.__constraints__:
        return tuple(type_variable.__constraints__)
    if type_variable.__bound__ is not None:
        return (type_variable.__bound__,)
    return ()


def collect_type_variables(tp: Any) -> tuple[TypeVar, ...]:
    """Type variables appearing anywhere in ``tp``, in first-seen order."""
    found: list[TypeVar] = []

    def visit(node: Any) -> None:
        if isinstance(node, TypeVar):
            if node not in found:
                found.append(node)
            return
        # Callable argument lists come back as plain lists.
        args = node if isinstance(node, (list, tuple)) else get_args(node)
        for arg in args:
            visit(arg)

    visit(tp)
    return tuple(found)


def is_primitive(tp: Any) -> bool:
    return tp in PRIMITIVE_TYPES


def type_name(tp: Any) -> str:
    """Readable name used to key diagnostics."""
    if isinstance(tp, type):
        return tp.__qualname__
    return repr(tp)


def type_names(types: Iterable[Any]) -> dict[Any, str]:
    """Names for ``types``, qualified by module where a bare name is shared."""
    unique = list(dict.fromkeys(types))
    counts = Counter(type_name(tp) for tp in unique)
    names = {}
    for tp in unique:
        name = type_name(tp)
        if counts[name] > 1 and isinstance(tp, type):
            name = f"{tp.__module__}.{name}"
        names[tp] = name
    return names
