"""Base assertion classes and result types."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Generic, TypeVar
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from neo4j_assertions.factories import InstanceOfAssertFactory

ActualT = TypeVar("ActualT")
AssertT = TypeVar("AssertT")
SelfT = TypeVar("SelfT", bound="AbstractGraphAssert[Any]")


class AssertionMetadata(BaseModel):
    """Metadata for an assertion.

    Attributes
    ----------
    name : str
        Name of the check, e.g. ``"has_label"``.
    uuid : UUID
        Unique identifier for this evaluation instance.
    timestamp : datetime
        UTC timestamp when the check was evaluated.
    reference : Any
        Value the check compares against.
    actual : Any
        Representation of the graph object under test.
    """

    name: str
    uuid: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    reference: Any = None
    actual: Any = None


class AssertionResult(BaseModel):
    """Result of evaluating one check on a graph object.

    Attributes
    ----------
    metadata : AssertionMetadata
        Contextual details about the evaluated check.
    passed : bool
        Whether the check passed.
    message : str | None
        Explanation of the failure, if any.
    """

    metadata: AssertionMetadata
    passed: bool
    message: str | None = None


class AssertionFailedError(AssertionError):
    """AssertionError with attached AssertionResult."""

    def __init__(self, result: AssertionResult):
        self.assertion_result = result
        message = f"{result.metadata.name} failed"
        if result.message:
            message += f": {result.message}"
        super().__init__(message)


class AbstractGraphAssert(Generic[ActualT]):
    """Base class for fluent assertions over graph objects.

    Every check records an :class:`AssertionResult` in :attr:`results`,
    raises :class:`AssertionFailedError` on failure and returns the
    assertion itself so checks can be chained.

    Examples
    --------
    >>> assert_that(node).has_label("Person").has_property("name")
    """

    def __init__(self, actual: ActualT) -> None:
        self._actual = actual
        self.results: list[AssertionResult] = []

    @property
    def actual(self) -> ActualT:
        return self._actual

    def is_not_none(self: SelfT) -> SelfT:
        return self._check(
            "is_not_none",
            passed=self._actual is not None,
            message="Expecting actual not to be None",
        )

    def is_instance_of(self: SelfT, expected_type: type) -> SelfT:
        return self._check(
            "is_instance_of",
            passed=isinstance(self._actual, expected_type),
            reference=expected_type.__qualname__,
            message=f"Expecting actual to be an instance of {expected_type.__qualname__}, "
            f"got {type(self._actual).__qualname__}",
        )

    def as_instance_of(self, factory: InstanceOfAssertFactory[Any, AssertT]) -> AssertT:
        """Narrow this assertion to the type-specific assertion ``factory`` builds."""
        return factory.create_assert(self._actual)

    def _check(
        self: SelfT,
        name: str,
        *,
        passed: bool,
        message: str,
        reference: Any = None,
    ) -> SelfT:
        """Record a check result and raise on failure.

        Parameters
        ----------
        name : str
            Name of the check.
        passed : bool
            Whether the check passed.
        message : str
            Failure explanation; dropped when the check passes.
        reference : Any
            Value the check compared against.

        Returns
        -------
        SelfT
            This assertion, for chaining.

        Raises
        ------
        AssertionFailedError
            If the check fails (``passed=False``).
        """
        result = AssertionResult(
            metadata=AssertionMetadata(name=name, reference=reference, actual=repr(self._actual)),
            passed=passed,
            message=None if passed else message,
        )
        self.results.append(result)
        if not passed:
            raise AssertionFailedError(result)
        return self
