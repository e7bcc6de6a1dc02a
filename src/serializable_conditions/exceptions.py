"""
Exception hierarchy for serializable conditions.

All exceptions inherit from ``ConditionsError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class ConditionsError(Exception):
    """Base exception for all condition errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidArgumentError(ConditionsError, ValueError):
    """A condition or extractor was constructed with invalid arguments."""

    def __init__(self, message: str, argument: str | None = None) -> None:
        self.message = message
        self.argument = argument
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_ARGUMENT",
            "message": self.message,
            "argument": self.argument,
        }


class SerializationError(ConditionsError):
    """Raised when normalization, encoding or decoding fails."""


class UnknownTypeError(SerializationError):
    """
    Wire name with no reconstruct hook.

    Provides fuzzy-matched suggestions for likely intended names.
    """

    def __init__(self, type_name: str, known_types: list[str]) -> None:
        self.type_name = type_name
        self.known_types = known_types
        self.suggestions = get_close_matches(type_name, known_types, n=3, cutoff=0.6)

        message = f"Unknown type: '{type_name}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_TYPE",
            "type": self.type_name,
            "suggestions": self.suggestions,
            "known_types": sorted(self.known_types),
        }
