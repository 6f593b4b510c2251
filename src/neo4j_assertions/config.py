"""Consistency check configuration."""

from pydantic import Field, ImportString
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConsistencySettings(BaseSettings):
    """Configuration for :class:`~neo4j_assertions.consistency.ConsistencyChecker`.

    Loads from environment variables prefixed with ``NEO4J_ASSERTIONS_``.
    Ignored types are dotted import paths, e.g.
    ``NEO4J_ASSERTIONS_FIELD_IGNORED_TYPES='["neo4j_assertions.assertions.EntityAssert"]'``.

    Attributes
    ----------
    entry_point_name
        Name of the façade's entry point callable.
    field_ignored_types
        Assertion types whose non-generic entry points and field factories
        are left out of the comparison.
    method_ignored_types
        Assertion types whose generic entry points and method factories are
        left out of the comparison.
    """

    entry_point_name: str = "assert_that"
    field_ignored_types: list[ImportString] = Field(
        default_factory=lambda: ["neo4j_assertions.assertions.entity.EntityAssert"],
        validate_default=True,
    )
    method_ignored_types: list[ImportString] = Field(default_factory=list)

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="NEO4J_ASSERTIONS_",
    )
