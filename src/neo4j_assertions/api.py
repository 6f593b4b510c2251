"""Entry point for fluent graph assertions.

Each overload of :func:`assert_that` has a counterpart in
:class:`~neo4j_assertions.factories.InstanceOfAssertFactories`.
"""

from typing import Any, TypeVar, overload

from neo4j.graph import Entity, Node, Path, Relationship

from neo4j_assertions.assertions import EntityAssert, NodeAssert, PathAssert, RelationshipAssert

EntityT = TypeVar("EntityT", bound=Entity)


@overload
def assert_that(actual: Node) -> NodeAssert: ...


@overload
def assert_that(actual: Relationship) -> RelationshipAssert: ...


@overload
def assert_that(actual: Path) -> PathAssert: ...


@overload
def assert_that(actual: EntityT) -> EntityAssert[EntityT]: ...


def assert_that(actual: Any) -> Any:
    """Create the assertion matching the runtime type of ``actual``.

    Raises
    ------
    TypeError
        If ``actual`` is not a graph object.
    """
    if isinstance(actual, Node):
        return NodeAssert(actual)
    if isinstance(actual, Relationship):
        return RelationshipAssert(actual)
    if isinstance(actual, Path):
        return PathAssert(actual)
    if isinstance(actual, Entity):
        return EntityAssert(actual)
    raise TypeError(f"No graph assertion for {type(actual).__qualname__}")
