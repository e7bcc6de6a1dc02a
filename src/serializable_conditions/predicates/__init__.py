"""
Single-value predicate primitives.

Every primitive is a :class:`Predicate`: a callable returning a boolean that
also knows how to describe itself.  Leaf conditions are thin wrappers around
these.

Usage::

    from serializable_conditions import predicates

    check = predicates.negate(predicates.one_of([1, 2]))
    check(3)            # True
    check.description   # "not one of values: 1, 2"
"""

from __future__ import annotations

from .base import Predicate, describe_predicate, negate
from .null import is_null
from .set import one_of
from .standard import (
    equal_to,
    greater_than,
    greater_than_or_equal,
    less_than,
    less_than_or_equal,
)
from .string import contains, ends_with, matches, starts_with

__all__ = [
    "Predicate",
    "describe_predicate",
    "negate",
    # Standard comparison
    "equal_to",
    "less_than",
    "less_than_or_equal",
    "greater_than",
    "greater_than_or_equal",
    # String
    "starts_with",
    "ends_with",
    "contains",
    "matches",
    # Set
    "one_of",
    # Null
    "is_null",
]
