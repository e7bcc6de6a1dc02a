"""Shared fixtures for condition tests."""

from __future__ import annotations

import pytest

from serializable_conditions.serialization import Serializer, setup_serializer
from serializable_conditions.variants import condition_variant


@pytest.fixture
def serializer() -> Serializer:
    """Fresh serializer with all condition kinds registered."""
    return setup_serializer(Serializer())


@pytest.fixture
def recorder():
    """
    A ``Returns(label, result)`` variant that records evaluated labels.

    Returns ``(Returns, calls)``.
    """
    calls: list[str] = []

    def factory(label, result):
        def test(value):
            calls.append(label)
            return result

        return test

    returns = condition_variant(
        "Returns", factory, lambda label, result: f"returns {result!r} ({label})"
    )
    return returns, calls
