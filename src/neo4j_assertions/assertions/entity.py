"""Assertions shared by every property container (nodes and relationships)."""

from typing import Any, TypeVar

from neo4j.graph import Entity

from neo4j_assertions.assertions._base import AbstractGraphAssert

EntityT = TypeVar("EntityT", bound=Entity)


class EntityAssert(AbstractGraphAssert[EntityT]):
    """Assertions for any :class:`neo4j.graph.Entity`.

    Examples
    --------
    >>> EntityAssert(node).has_property("name").has_property_value("age", 42)
    """

    def has_property(self, key: str) -> "EntityAssert[EntityT]":
        return self._check(
            "has_property",
            passed=key in self._actual.keys(),
            reference=key,
            message=f"Expecting property {key!r} in {sorted(self._actual.keys())!r}",
        )

    def does_not_have_property(self, key: str) -> "EntityAssert[EntityT]":
        return self._check(
            "does_not_have_property",
            passed=key not in self._actual.keys(),
            reference=key,
            message=f"Expecting no property {key!r}",
        )

    def has_property_value(self, key: str, value: Any) -> "EntityAssert[EntityT]":
        self.has_property(key)
        actual_value = self._actual.get(key)
        return self._check(
            "has_property_value",
            passed=actual_value == value,
            reference={key: value},
            message=f"Expecting property {key!r} to be {value!r}, got {actual_value!r}",
        )

    def has_element_id(self, element_id: str) -> "EntityAssert[EntityT]":
        return self._check(
            "has_element_id",
            passed=self._actual.element_id == element_id,
            reference=element_id,
            message=f"Expecting element id {element_id!r}, got {self._actual.element_id!r}",
        )
