"""
Condition variant factory.

Leaf conditions are not hand-written classes.  Each one is a
:class:`ConditionVariant` descriptor built by :func:`condition_variant` from
up to four callables, and every instance is the single generic
:class:`LeafCondition` parameterized by that descriptor.  Evaluation,
immutability and normalization live here once for all variants.

Usage::

    Positive = condition_variant(
        "Positive",
        lambda: predicates.greater_than(0),
        describe=lambda: "a positive number",
    )

    cond = Positive()
    await cond.is_satisfied_by(3)   # True
    cond.describe()                 # "a positive number"
    cond.shape()                    # []
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

from .base import Condition
from .exceptions import InvalidArgumentError
from .predicates import describe_predicate

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

T = TypeVar("T", contravariant=True)


@dataclass(frozen=True, eq=False)
class ConditionVariant:
    """
    Descriptor of one leaf condition type.

    Attributes:
        name: Exported name of the variant, e.g. ``"Equal"``.
        predicate_factory: Builds the test callable from constructor args.
        describe: Builds the description from constructor args.  When
            omitted the built predicate describes itself
            (:func:`~serializable_conditions.predicates.describe_predicate`).
        normalize_args: Turns constructor args into a plain-data payload.
            Defaults to the argument list unchanged.
        denormalize_args: Inverse of ``normalize_args``; receives the payload
            items as positional arguments and returns the constructor args.
    """

    name: str
    predicate_factory: Callable[..., Callable[[Any], Any]]
    describe: Callable[..., str] | None = None
    normalize_args: Callable[..., Any] | None = None
    denormalize_args: Callable[..., Sequence[Any]] | None = None

    def __call__(self, *args: Any) -> LeafCondition[Any]:
        return LeafCondition(self, args)

    def __instancecheck__(self, instance: Any) -> bool:
        return isinstance(instance, LeafCondition) and instance.variant is self

    def reconstruct(self, data: Sequence[Any]) -> LeafCondition[Any]:
        """Build an instance from the payload produced by ``shape()``."""
        if self.denormalize_args is not None:
            return self(*self.denormalize_args(*data))
        return self(*data)

    def __repr__(self) -> str:
        return f"ConditionVariant({self.name!r})"


def condition_variant(
    name: str,
    predicate_factory: Callable[..., Callable[[Any], Any]],
    describe: Callable[..., str] | None = None,
    normalize_args: Callable[..., Any] | None = None,
    denormalize_args: Callable[..., Sequence[Any]] | None = None,
) -> ConditionVariant:
    """Define a new leaf condition type."""
    if not callable(predicate_factory):
        raise InvalidArgumentError(
            f"predicate_factory of variant '{name}' must be callable",
            argument="predicate_factory",
        )
    return ConditionVariant(
        name=name,
        predicate_factory=predicate_factory,
        describe=describe,
        normalize_args=normalize_args,
        denormalize_args=denormalize_args,
    )


@dataclass(frozen=True)
class LeafCondition(Condition[T]):
    """
    Condition backed by a single predicate.

    ``args`` holds the constructor arguments verbatim; they are the source of
    both the predicate and the normalized payload.
    """

    variant: ConditionVariant
    args: tuple[Any, ...] = ()
    _predicate: Callable[[Any], Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(
            self, "_predicate", self.variant.predicate_factory(*self.args)
        )

    async def is_satisfied_by(self, value: T) -> bool:
        result = self._predicate(value)
        if inspect.isawaitable(result):
            result = await result
        return result

    def describe(self) -> str:
        if self.variant.describe is not None:
            return self.variant.describe(*self.args)
        return describe_predicate(self._predicate)

    @property
    def kind(self) -> ConditionVariant:
        return self.variant

    def shape(self) -> Any:
        if self.variant.normalize_args is not None:
            return self.variant.normalize_args(*self.args)
        return list(self.args)

    def __repr__(self) -> str:
        args = ", ".join(repr(a) for a in self.args)
        return f"{self.variant.name}({args})"
