"""Null check predicate."""

from __future__ import annotations

from .base import Predicate

is_null = Predicate(lambda value: value is None, "null")
