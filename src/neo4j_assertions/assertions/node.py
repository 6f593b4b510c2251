"""Assertions for nodes."""

from collections.abc import Iterable

from neo4j.graph import Node

from neo4j_assertions.assertions.entity import EntityAssert


class NodeAssert(EntityAssert[Node]):
    """Assertions for :class:`neo4j.graph.Node`."""

    def has_label(self, label: str) -> "NodeAssert":
        return self._check(
            "has_label",
            passed=label in self._actual.labels,
            reference=label,
            message=f"Expecting label {label!r} in {sorted(self._actual.labels)!r}",
        )

    def does_not_have_label(self, label: str) -> "NodeAssert":
        return self._check(
            "does_not_have_label",
            passed=label not in self._actual.labels,
            reference=label,
            message=f"Expecting no label {label!r}",
        )

    def has_labels(self, labels: Iterable[str]) -> "NodeAssert":
        """Check the node carries exactly ``labels``, in any order."""
        expected = frozenset(labels)
        return self._check(
            "has_labels",
            passed=frozenset(self._actual.labels) == expected,
            reference=sorted(expected),
            message=f"Expecting labels {sorted(expected)!r}, got {sorted(self._actual.labels)!r}",
        )
