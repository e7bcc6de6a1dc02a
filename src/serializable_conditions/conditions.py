"""
Built-in conditions.

Every public name of this module is a condition type and is registered by
:func:`~serializable_conditions.serialization.setup_serializer` under
``Condition/<name>``.

Usage::

    from serializable_conditions import conditions as c
    from serializable_conditions.extractors import Property

    rule = c.All(
        c.OnValueExtractor(Property("user", "email"), c.EndsWith("@example.com")),
        c.OnValueExtractor(Property("user", "age"), c.GreaterThanOrEqual(18)),
    )
    await rule.is_satisfied_by(payload)
"""

from __future__ import annotations

import re
from collections.abc import Collection
from typing import TYPE_CHECKING

from . import predicates as p
from .composite import All, Any, OnValueExtractor
from .exceptions import InvalidArgumentError
from .utils import (
    case_sensitivity,
    compile_pattern,
    format_value,
    pattern_flags_from_str,
    pattern_flags_to_str,
)
from .variants import condition_variant

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    # Composite
    "All",
    "Any",
    "OnValueExtractor",
    # Standard comparison
    "Equal",
    "NotEqual",
    "LessThanOrEqual",
    "LessThan",
    "GreaterThanOrEqual",
    "GreaterThan",
    # String
    "StartsWith",
    "EndsWith",
    "Matches",
    "DoesNotMatch",
    "Contains",
    "DoesNotContain",
    # Set
    "In",
    "NotIn",
    # Null
    "IsNull",
    "NotNull",
]

# ---------------------------------------------------------------------------
# Standard comparison
# ---------------------------------------------------------------------------

Equal = condition_variant("Equal", p.equal_to)
NotEqual = condition_variant("NotEqual", lambda value: p.negate(p.equal_to(value)))
LessThanOrEqual = condition_variant("LessThanOrEqual", p.less_than_or_equal)
LessThan = condition_variant("LessThan", p.less_than)
GreaterThanOrEqual = condition_variant("GreaterThanOrEqual", p.greater_than_or_equal)
GreaterThan = condition_variant("GreaterThan", p.greater_than)

# ---------------------------------------------------------------------------
# String
# ---------------------------------------------------------------------------


def _string_relation(
    relation: Callable[[str], p.Predicate],
    *,
    non_string: bool = False,
    negated: bool = False,
) -> Callable[..., Callable[[object], bool]]:
    """
    Build a predicate factory for ``(needle, is_case_sensitive=False)``.

    Non-string values short-circuit to *non_string*.  Without case
    sensitivity both sides are lower-cased before comparing.
    """

    def factory(
        needle: str, is_case_sensitive: bool = False
    ) -> Callable[[object], bool]:
        check = relation(needle if is_case_sensitive else needle.lower())

        def test(value: object) -> bool:
            if not isinstance(value, str):
                return non_string
            result = check(value if is_case_sensitive else value.lower())
            return not result if negated else bool(result)

        return test

    return factory


def _describe_string_relation(verb: str) -> Callable[..., str]:
    def describe(needle: str, is_case_sensitive: bool = False) -> str:
        return f"{verb} {format_value(needle)} {case_sensitivity(is_case_sensitive)}"

    return describe


StartsWith = condition_variant(
    "StartsWith",
    _string_relation(p.starts_with),
    _describe_string_relation("a string that starts with"),
)
EndsWith = condition_variant(
    "EndsWith",
    _string_relation(p.ends_with),
    _describe_string_relation("a string that ends with"),
)
Contains = condition_variant(
    "Contains",
    _string_relation(p.contains),
    _describe_string_relation("contains"),
)
DoesNotContain = condition_variant(
    "DoesNotContain",
    _string_relation(p.contains, non_string=True, negated=True),
    _describe_string_relation("does not contain"),
)


def _normalize_pattern(pattern: str | re.Pattern[str]) -> list[str]:
    compiled = compile_pattern(pattern)
    return [compiled.pattern, pattern_flags_to_str(compiled.flags)]


def _denormalize_pattern(source: str, flags: str) -> list[re.Pattern[str]]:
    return [re.compile(source, pattern_flags_from_str(flags))]


Matches = condition_variant(
    "Matches",
    p.matches,
    None,
    _normalize_pattern,
    _denormalize_pattern,
)
DoesNotMatch = condition_variant(
    "DoesNotMatch",
    lambda pattern: p.negate(p.matches(pattern)),
    None,
    _normalize_pattern,
    _denormalize_pattern,
)

# ---------------------------------------------------------------------------
# Set
# ---------------------------------------------------------------------------


def _one_of(values: Collection[object]) -> p.Predicate:
    # shape() reads the args again; a one-shot iterator would be empty.
    if not isinstance(values, Collection):
        raise InvalidArgumentError(
            "Candidate values must be a collection, "
            f"got {type(values).__name__}",
            argument="values",
        )
    return p.one_of(values)


def _normalize_values(values: Collection[object]) -> list[list[object]]:
    return [list(values)]


In = condition_variant("In", _one_of, None, _normalize_values)
NotIn = condition_variant(
    "NotIn", lambda values: p.negate(_one_of(values)), None, _normalize_values
)

# ---------------------------------------------------------------------------
# Null
# ---------------------------------------------------------------------------

IsNull = condition_variant("IsNull", lambda: p.is_null, lambda: "is null")
NotNull = condition_variant("NotNull", lambda: p.negate(p.is_null))
