"""Membership predicates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..utils import format_values
from .base import Predicate

if TYPE_CHECKING:
    from collections.abc import Iterable


def one_of(values: Iterable[Any]) -> Predicate:
    candidates = tuple(values)
    return Predicate(
        lambda value: value in candidates,
        f"one of values: {format_values(candidates)}",
    )
