"""Assertions for paths."""

from neo4j.graph import Node, Path

from neo4j_assertions.assertions._base import AbstractGraphAssert


class PathAssert(AbstractGraphAssert[Path]):
    """Assertions for :class:`neo4j.graph.Path`.

    The length of a path is its number of relationships.
    """

    def has_length(self, length: int) -> "PathAssert":
        actual_length = len(self._actual.relationships)
        return self._check(
            "has_length",
            passed=actual_length == length,
            reference=length,
            message=f"Expecting path of length {length}, got {actual_length}",
        )

    def starts_with_node(self, node: Node) -> "PathAssert":
        return self._check(
            "starts_with_node",
            passed=self._actual.start_node.element_id == node.element_id,
            reference=node.element_id,
            message=f"Expecting path to start with node {node.element_id!r}",
        )

    def ends_with_node(self, node: Node) -> "PathAssert":
        return self._check(
            "ends_with_node",
            passed=self._actual.end_node.element_id == node.element_id,
            reference=node.element_id,
            message=f"Expecting path to end with node {node.element_id!r}",
        )

    def contains_node(self, node: Node) -> "PathAssert":
        element_ids = [path_node.element_id for path_node in self._actual.nodes]
        return self._check(
            "contains_node",
            passed=node.element_id in element_ids,
            reference=node.element_id,
            message=f"Expecting path to contain node {node.element_id!r}",
        )
