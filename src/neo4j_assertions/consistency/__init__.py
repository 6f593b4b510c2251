"""Keep ``assert_that`` and ``InstanceOfAssertFactories`` in sync.

Typical use inside a test suite::

    from neo4j_assertions.consistency import default_checker

    def test_each_assertion_has_a_field_factory():
        default_checker().check_non_generic().raise_for_failure()
"""

from neo4j_assertions.consistency.checker import (
    ConsistencyChecker,
    ConsistencyReport,
    MappingEntry,
    PassResult,
    default_checker,
)
from neo4j_assertions.consistency.errors import (
    ConsistencyError,
    ConsistencyMismatch,
    DuplicateKeyError,
    MalformedEntryPointError,
    MalformedFactoryError,
    MalformedTypeError,
)
from neo4j_assertions.consistency.extractors import (
    TypeMapping,
    extract_entry_points,
    extract_field_factories,
    extract_method_factories,
)
from neo4j_assertions.consistency.introspection import (
    FieldDescriptor,
    IntrospectionProvider,
    OperationDescriptor,
    ReflectionProvider,
    SnapshotProvider,
)
from neo4j_assertions.consistency.types import normalize

__all__ = [
    "ConsistencyChecker",
    "ConsistencyReport",
    "MappingEntry",
    "PassResult",
    "default_checker",
    "ConsistencyError",
    "ConsistencyMismatch",
    "DuplicateKeyError",
    "MalformedEntryPointError",
    "MalformedFactoryError",
    "MalformedTypeError",
    "TypeMapping",
    "extract_entry_points",
    "extract_field_factories",
    "extract_method_factories",
    "FieldDescriptor",
    "IntrospectionProvider",
    "OperationDescriptor",
    "ReflectionProvider",
    "SnapshotProvider",
    "normalize",
]
