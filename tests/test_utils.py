"""Tests for utils module."""

from __future__ import annotations

import re

import pytest

from serializable_conditions.utils import (
    case_sensitivity,
    compile_pattern,
    format_pattern,
    format_value,
    format_values,
    pattern_flags_from_str,
    pattern_flags_to_str,
)

# -- value rendering ---------------------------------------------------------


def test_format_value():
    assert format_value(10) == "10"
    assert format_value("foo") == '"foo"'
    assert format_value(None) == "None"


def test_format_values():
    assert format_values([1, "a", 2.5]) == '1, "a", 2.5'
    assert format_values([]) == ""


def test_case_sensitivity():
    assert case_sensitivity(True) == "(case sensitive)"
    assert case_sensitivity(False) == "(case insensitive)"


# -- regular expressions -----------------------------------------------------


def test_flags_to_str_ignores_implicit_unicode():
    assert pattern_flags_to_str(re.compile("a").flags) == ""
    assert pattern_flags_to_str(re.IGNORECASE | re.MULTILINE | re.VERBOSE) == "imx"


def test_flags_from_str():
    assert pattern_flags_from_str("") == 0
    assert pattern_flags_from_str("is") == re.IGNORECASE | re.DOTALL


def test_flags_from_str_unknown_letter():
    with pytest.raises(ValueError, match="Unknown regular expression flag"):
        pattern_flags_from_str("g")


def test_compile_pattern_pass_through():
    pattern = re.compile("x")
    assert compile_pattern(pattern) is pattern
    assert compile_pattern("x").pattern == "x"


def test_format_pattern():
    assert format_pattern(re.compile("a{1,2}", re.IGNORECASE)) == "/a{1,2}/i"
