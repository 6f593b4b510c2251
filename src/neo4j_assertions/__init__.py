"""neo4j-assertions - fluent assertions for the Neo4j graph object model."""

from .api import assert_that
from .assertions import (
    AssertionFailedError,
    EntityAssert,
    NodeAssert,
    PathAssert,
    RelationshipAssert,
)
from .factories import InstanceOfAssertFactories, InstanceOfAssertFactory
from .version import __version__


__all__ = [
    # Entry point
    "assert_that",
    # Assertions
    "AssertionFailedError",
    "EntityAssert",
    "NodeAssert",
    "PathAssert",
    "RelationshipAssert",
    # Factories
    "InstanceOfAssertFactories",
    "InstanceOfAssertFactory",
]
