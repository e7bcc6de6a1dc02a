"""Standard comparison predicates: ==, <, <=, >, >=."""

from __future__ import annotations

from typing import Any

from ..utils import format_value
from .base import Predicate


def equal_to(expected: Any) -> Predicate:
    return Predicate(
        lambda value: bool(value == expected),
        f"equal to {format_value(expected)}",
    )


def less_than(expected: Any) -> Predicate:
    return Predicate(
        lambda value: bool(value < expected),
        f"less than {format_value(expected)}",
    )


def less_than_or_equal(expected: Any) -> Predicate:
    return Predicate(
        lambda value: bool(value <= expected),
        f"less than or equal {format_value(expected)}",
    )


def greater_than(expected: Any) -> Predicate:
    return Predicate(
        lambda value: bool(value > expected),
        f"greater than {format_value(expected)}",
    )


def greater_than_or_equal(expected: Any) -> Predicate:
    return Predicate(
        lambda value: bool(value >= expected),
        f"greater than or equal {format_value(expected)}",
    )
