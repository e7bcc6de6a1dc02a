"""Tests for single-value predicate primitives."""

from __future__ import annotations

import re

import pytest

from serializable_conditions import predicates as p

# -- standard ----------------------------------------------------------------


def test_relational_predicates():
    assert p.equal_to(10)(10) is True
    assert p.equal_to(10)(11) is False
    assert p.less_than(10)(9) is True
    assert p.less_than_or_equal(10)(10) is True
    assert p.greater_than(10)(10) is False
    assert p.greater_than_or_equal(10)(10) is True


def test_relational_descriptions():
    assert p.equal_to("x").description == 'equal to "x"'
    assert p.less_than(1.5).description == "less than 1.5"
    assert p.greater_than_or_equal(0).description == "greater than or equal 0"


def test_relational_has_no_type_guard():
    with pytest.raises(TypeError):
        p.greater_than(1)(None)


# -- string ------------------------------------------------------------------


def test_string_predicates_require_strings():
    assert p.starts_with("ab")("abc") is True
    assert p.ends_with("bc")("abc") is True
    assert p.contains("b")("abc") is True
    assert p.contains("b")(["b"]) is False
    assert p.starts_with("ab")(None) is False


def test_matches_searches_anywhere():
    check = p.matches(re.compile(r"\d+"))
    assert check("abc123") is True
    assert check("abc") is False
    assert check(123) is False
    assert check.description == r"a string that matches regexp /\d+/"


# -- set / null --------------------------------------------------------------


def test_one_of():
    check = p.one_of([1, "a"])
    assert check(1) is True
    assert check("b") is False
    assert check.description == 'one of values: 1, "a"'


def test_is_null():
    assert p.is_null(None) is True
    assert p.is_null(0) is False


# -- negation / description --------------------------------------------------


def test_negate():
    check = p.negate(p.one_of([1, 2]))
    assert check(3) is True
    assert check(1) is False
    assert check.description == "not one of values: 1, 2"
    assert (~p.is_null).description == "not null"


def test_predicates_are_immutable():
    with pytest.raises(AttributeError):
        p.is_null.description = "changed"  # type: ignore[misc]


def test_describe_predicate_fallbacks():
    def is_positive(value):
        return value > 0

    assert p.describe_predicate(p.equal_to(1)) == "equal to 1"
    assert p.describe_predicate(is_positive) == "is positive"
    assert p.describe_predicate(lambda value: True).startswith("<function")
