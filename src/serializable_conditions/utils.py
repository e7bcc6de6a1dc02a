"""
Formatting helpers shared by predicates and conditions.

These are pure-Python helpers with no serializer dependencies.
"""

from __future__ import annotations

import re
from typing import Any

# ---------------------------------------------------------------------------
# Value rendering
# ---------------------------------------------------------------------------


def format_value(value: Any) -> str:
    """Render a value for a description; strings are double-quoted."""
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def format_values(values: Any) -> str:
    """Comma-join rendered values in iteration order."""
    return ", ".join(format_value(v) for v in values)


def case_sensitivity(is_case_sensitive: bool) -> str:
    return f"(case {'' if is_case_sensitive else 'in'}sensitive)"


# ---------------------------------------------------------------------------
# Regular expressions
# ---------------------------------------------------------------------------

# Inline-flag letters accepted by ``re`` (``(?aiLmsux)``). ``re.UNICODE`` is
# implied for str patterns, so it never appears on the wire.
_FLAG_LETTERS: tuple[tuple[str, re.RegexFlag], ...] = (
    ("a", re.ASCII),
    ("i", re.IGNORECASE),
    ("L", re.LOCALE),
    ("m", re.MULTILINE),
    ("s", re.DOTALL),
    ("x", re.VERBOSE),
)


def compile_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Return *pattern* compiled (pass-through if already a pattern)."""
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def pattern_flags_to_str(flags: int) -> str:
    """Encode ``re`` flags as inline-flag letters, e.g. ``re.I | re.M`` → ``"im"``."""
    return "".join(letter for letter, flag in _FLAG_LETTERS if flags & flag)


def pattern_flags_from_str(letters: str) -> int:
    """
    Decode inline-flag letters back into ``re`` flags.

    Raises:
        ValueError: If a letter is not a known inline flag.
    """
    lookup = dict(_FLAG_LETTERS)
    flags = 0
    for letter in letters:
        if letter not in lookup:
            raise ValueError(f"Unknown regular expression flag: {letter!r}")
        flags |= lookup[letter]
    return flags


def format_pattern(pattern: re.Pattern[str]) -> str:
    """Render a pattern in slash notation: ``/source/flags``."""
    return f"/{pattern.pattern}/{pattern_flags_to_str(pattern.flags)}"
