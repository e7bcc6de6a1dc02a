"""String predicates: starts_with, ends_with, contains, matches."""

from __future__ import annotations

import re
from typing import Any

from ..utils import compile_pattern, format_pattern, format_value
from .base import Predicate


def starts_with(needle: str) -> Predicate:
    return Predicate(
        lambda value: isinstance(value, str) and value.startswith(needle),
        f"a string that starts with {format_value(needle)}",
    )


def ends_with(needle: str) -> Predicate:
    return Predicate(
        lambda value: isinstance(value, str) and value.endswith(needle),
        f"a string that ends with {format_value(needle)}",
    )


def contains(needle: str) -> Predicate:
    return Predicate(
        lambda value: isinstance(value, str) and needle in value,
        f"contains {format_value(needle)}",
    )


def matches(pattern: str | re.Pattern[str]) -> Predicate:
    """True for strings in which *pattern* is found anywhere (``re.search``)."""
    compiled = compile_pattern(pattern)

    def _test(value: Any) -> bool:
        return isinstance(value, str) and compiled.search(value) is not None

    return Predicate(
        _test,
        f"a string that matches regexp {format_pattern(compiled)}",
    )
