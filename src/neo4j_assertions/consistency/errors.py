"""Errors raised while verifying the façade against the factory catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from neo4j_assertions.consistency.checker import PassResult


class ConsistencyError(AssertionError):
    """Base class for every consistency check failure.

    Subclasses ``AssertionError`` so pytest reports them as failed
    assertions rather than errors.
    """


class MalformedTypeError(ConsistencyError):
    """A type variable does not declare exactly one bound."""

    def __init__(self, type_variable: Any, bounds: tuple[Any, ...]) -> None:
        self.type_variable = type_variable
        self.bounds = bounds
        super().__init__(
            f"Type variable {type_variable!r} must declare exactly one bound, "
            f"found {len(bounds)}: {list(bounds)!r}"
        )


class DuplicateKeyError(ConsistencyError):
    """Two declarations normalize to the same input type.

    Attributes
    ----------
    key
        The normalized input type both declarations share.
    existing
        Output type collected first.
    conflicting
        Output type of the declaration that collided with it.
    """

    def __init__(self, key: Any, existing: Any, conflicting: Any) -> None:
        self.key = key
        self.existing = existing
        self.conflicting = conflicting
        super().__init__(
            f"Duplicate key {key!r} (attempted merging values {existing!r} and {conflicting!r})"
        )


class MalformedFactoryError(ConsistencyError):
    """A catalog member is not exposed as ``InstanceOfAssertFactory[InputT, AssertT]``."""

    def __init__(self, member: str, exposed_type: Any, reason: str) -> None:
        self.member = member
        self.exposed_type = exposed_type
        super().__init__(f"Factory {member!r} exposes {exposed_type!r}: {reason}")


class MalformedEntryPointError(ConsistencyError):
    """An entry point does not accept exactly one argument or cannot be introspected."""

    def __init__(
        self, operation: str, parameter_types: tuple[Any, ...] = (), reason: str | None = None
    ) -> None:
        self.operation = operation
        self.parameter_types = parameter_types
        if reason is None:
            reason = f"must accept exactly one argument, found {len(parameter_types)}"
        super().__init__(f"Entry point {operation!r} {reason}")


class ConsistencyMismatch(ConsistencyError):
    """Terminal failure of one pass: the two mapping tables differ."""

    def __init__(self, result: PassResult) -> None:
        self.result = result
        super().__init__(result.diff())
