"""Fluent assertions for the Neo4j graph object model."""

from neo4j_assertions.assertions._base import (
    AbstractGraphAssert,
    AssertionFailedError,
    AssertionMetadata,
    AssertionResult,
)
from neo4j_assertions.assertions.entity import EntityAssert
from neo4j_assertions.assertions.node import NodeAssert
from neo4j_assertions.assertions.path import PathAssert
from neo4j_assertions.assertions.relationship import RelationshipAssert

__all__ = [
    "AbstractGraphAssert",
    "AssertionFailedError",
    "AssertionMetadata",
    "AssertionResult",
    "EntityAssert",
    "NodeAssert",
    "PathAssert",
    "RelationshipAssert",
]
