"""
Composite conditions: aggregations and extractor-bound conditions.

Children are always awaited one after another, in declaration order, so
short-circuiting and descriptions are deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from typing_extensions import Self

from .base import Condition

if TYPE_CHECKING:
    import typing
    from collections.abc import Sequence

    from .extractors import ValueExtractor

T = TypeVar("T", contravariant=True)


@dataclass(frozen=True, init=False)
class Aggregation(Condition[T]):
    """Ordered sequence of child conditions."""

    conditions: tuple[Condition[typing.Any], ...]

    def __init__(self, *conditions: Condition[typing.Any]) -> None:
        object.__setattr__(self, "conditions", conditions)

    def shape(self) -> list[Condition[typing.Any]]:
        return list(self.conditions)

    @classmethod
    def reconstruct(cls, data: Sequence[Condition[typing.Any]]) -> Self:
        return cls(*data)

    def _describe_conditions(self) -> str:
        return ", ".join(c.describe() for c in self.conditions)

    def __repr__(self) -> str:
        children = ", ".join(repr(c) for c in self.conditions)
        return f"{type(self).__name__}({children})"


@dataclass(frozen=True, init=False, repr=False)
class All(Aggregation[T]):
    """Satisfied unless a child evaluates to exactly ``False``."""

    async def is_satisfied_by(self, value: T) -> bool:
        for condition in self.conditions:
            result = await condition.is_satisfied_by(value)
            if result is False:
                return False
        return True

    def describe(self) -> str:
        return f"All conditions meet: {self._describe_conditions()}"


@dataclass(frozen=True, init=False, repr=False)
class Any(Aggregation[T]):
    """Satisfied as soon as a child evaluates to exactly ``True``."""

    async def is_satisfied_by(self, value: T) -> bool:
        for condition in self.conditions:
            result = await condition.is_satisfied_by(value)
            if result is True:
                return True
        return False

    def describe(self) -> str:
        return f"Any condition meet: {self._describe_conditions()}"


@dataclass(frozen=True)
class OnValueExtractor(Condition[T]):
    """Applies ``condition`` to the sub-value produced by ``value_extractor``."""

    value_extractor: ValueExtractor[T]
    condition: Condition[typing.Any]

    async def is_satisfied_by(self, value: T) -> bool:
        extracted = await self.value_extractor.extract(value)
        return await self.condition.is_satisfied_by(extracted)

    def describe(self) -> str:
        return f"{self.value_extractor.describe()} {self.condition.describe()}"

    def shape(self) -> list[typing.Any]:
        return [self.value_extractor, self.condition]

    @classmethod
    def reconstruct(cls, data: Sequence[typing.Any]) -> Self:
        return cls(data[0], data[1])
