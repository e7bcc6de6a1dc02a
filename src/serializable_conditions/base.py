from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from .composite import All
    from .composite import Any as AnyCondition

T = TypeVar("T", contravariant=True)


@runtime_checkable
class Normalizable(Protocol):
    """
    Capability contract for nodes that round-trip through a normalizer.

    ``kind`` is the registry key of the node (its class, or the variant
    descriptor for leaf conditions) and must expose ``reconstruct(data)``.
    ``shape()`` returns the plain-data payload; nested conditions and
    extractors are left in place for the normalizer to recurse into.
    """

    @property
    def kind(self) -> Any: ...

    def shape(self) -> Any: ...


class Condition(ABC, Generic[T]):
    """
    Immutable predicate over a value with a human-readable description.

    Conditions can be composed using operators:
        &  = all of (short-circuits on the first ``False``)
        |  = any of (short-circuits on the first ``True``)
    """

    @abstractmethod
    async def is_satisfied_by(self, value: T) -> bool:
        """Evaluate the condition, awaiting any deferred input."""
        ...

    @abstractmethod
    def describe(self) -> str: ...

    @property
    def kind(self) -> Any:
        return type(self)

    def __str__(self) -> str:
        return self.describe()

    def __and__(self, other: Condition[Any]) -> All[Any]:
        from .composite import All

        return All(self, other)

    def __or__(self, other: Condition[Any]) -> AnyCondition[Any]:
        from .composite import Any as AnyCondition

        return AnyCondition(self, other)
