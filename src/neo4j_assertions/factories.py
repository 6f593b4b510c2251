"""Factories that narrow an untyped assertion to a type-specific one.

``InstanceOfAssertFactories`` must stay in sync with the overloads of
:func:`neo4j_assertions.api.assert_that`; see
:mod:`neo4j_assertions.consistency`.
"""

from collections.abc import Callable
from typing import Generic, TypeVar

from neo4j.graph import Entity, Node, Path, Relationship

from neo4j_assertions.assertions import EntityAssert, NodeAssert, PathAssert, RelationshipAssert

T = TypeVar("T")
AssertT = TypeVar("AssertT")
EntityT = TypeVar("EntityT", bound=Entity)


class InstanceOfAssertFactory(Generic[T, AssertT]):
    """Build an ``AssertT`` for values that are instances of ``T``.

    Parameters
    ----------
    type_
        Runtime type the value must be an instance of.
    assert_factory
        Callable creating the assertion from the value.

    Examples
    --------
    >>> assert_that(value).as_instance_of(InstanceOfAssertFactories.NODE).has_label("Person")
    """

    def __init__(self, type_: type[T], assert_factory: Callable[[T], AssertT]) -> None:
        self.type = type_
        self.assert_factory = assert_factory

    def create_assert(self, actual: object) -> AssertT:
        if not isinstance(actual, self.type):
            raise AssertionError(
                f"Expecting {actual!r} to be an instance of {self.type.__qualname__}, "
                f"got {type(actual).__qualname__}"
            )
        return self.assert_factory(actual)

    def __repr__(self) -> str:
        return f"InstanceOfAssertFactory({self.type.__qualname__})"


class InstanceOfAssertFactories:
    """Catalog of :class:`InstanceOfAssertFactory` for graph objects."""

    NODE: InstanceOfAssertFactory[Node, NodeAssert] = InstanceOfAssertFactory(Node, NodeAssert)
    RELATIONSHIP: InstanceOfAssertFactory[Relationship, RelationshipAssert] = InstanceOfAssertFactory(
        Relationship, RelationshipAssert
    )
    PATH: InstanceOfAssertFactory[Path, PathAssert] = InstanceOfAssertFactory(Path, PathAssert)
    ENTITY: InstanceOfAssertFactory[Entity, EntityAssert] = InstanceOfAssertFactory(
        Entity, EntityAssert
    )

    @staticmethod
    def entity(type_: type[EntityT]) -> InstanceOfAssertFactory[EntityT, EntityAssert[EntityT]]:
        """Factory for ``EntityAssert`` narrowed to a specific entity type."""
        return InstanceOfAssertFactory(type_, EntityAssert)
