"""
Single-value predicate primitives.

A :class:`Predicate` is a plain callable ``value -> bool`` that also carries
a human-readable description.  Leaf conditions wrap exactly one predicate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


class Predicate:
    """Immutable callable with a description."""

    __slots__ = ("_test", "description")

    _test: Callable[[Any], Any]
    description: str

    def __init__(self, test: Callable[[Any], Any], description: str) -> None:
        object.__setattr__(self, "_test", test)
        object.__setattr__(self, "description", description)

    def __call__(self, value: Any) -> Any:
        return self._test(value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __invert__(self) -> Predicate:
        return negate(self)

    def __repr__(self) -> str:
        return f"Predicate({self.description!r})"


def negate(predicate: Callable[[Any], Any]) -> Predicate:
    """Invert *predicate*; the description gains a ``not`` prefix."""
    return Predicate(
        lambda value: not predicate(value),
        f"not {describe_predicate(predicate)}",
    )


def describe_predicate(predicate: Callable[[Any], Any]) -> str:
    """
    Describe an arbitrary predicate callable.

    Uses the ``description`` attribute when present, then the callable's
    ``__name__`` (underscores read as spaces), then its ``repr``.
    """
    description = getattr(predicate, "description", None)
    if isinstance(description, str):
        return description
    name = getattr(predicate, "__name__", None)
    if isinstance(name, str) and name != "<lambda>":
        return name.replace("_", " ")
    return repr(predicate)
