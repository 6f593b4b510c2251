"""Assertions for relationships."""

from neo4j.graph import Node, Relationship

from neo4j_assertions.assertions.entity import EntityAssert


class RelationshipAssert(EntityAssert[Relationship]):
    """Assertions for :class:`neo4j.graph.Relationship`."""

    def has_type(self, relationship_type: str) -> "RelationshipAssert":
        return self._check(
            "has_type",
            passed=self._actual.type == relationship_type,
            reference=relationship_type,
            message=f"Expecting type {relationship_type!r}, got {self._actual.type!r}",
        )

    def starts_with_node(self, node: Node) -> "RelationshipAssert":
        start_node = self._actual.start_node
        return self._check(
            "starts_with_node",
            passed=start_node is not None and start_node.element_id == node.element_id,
            reference=node.element_id,
            message=f"Expecting relationship to start with node {node.element_id!r}",
        )

    def ends_with_node(self, node: Node) -> "RelationshipAssert":
        end_node = self._actual.end_node
        return self._check(
            "ends_with_node",
            passed=end_node is not None and end_node.element_id == node.element_id,
            reference=node.element_id,
            message=f"Expecting relationship to end with node {node.element_id!r}",
        )
