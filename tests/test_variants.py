"""Tests for the condition variant factory."""

from __future__ import annotations

import pytest

from serializable_conditions import conditions as c
from serializable_conditions import predicates
from serializable_conditions.exceptions import InvalidArgumentError
from serializable_conditions.variants import (
    ConditionVariant,
    LeafCondition,
    condition_variant,
)


async def _resolved(value):
    return value


def test_instances_keep_args_verbatim():
    cond = c.StartsWith("foo", True)
    assert isinstance(cond, LeafCondition)
    assert cond.args == ("foo", True)
    assert cond.variant is c.StartsWith
    assert cond.kind is c.StartsWith


def test_isinstance_against_variant():
    assert isinstance(c.Equal(1), c.Equal)
    assert not isinstance(c.Equal(1), c.NotEqual)
    assert not isinstance(c.All(), c.Equal)


@pytest.mark.asyncio
async def test_custom_variant():
    positive = condition_variant(
        "Positive",
        lambda: predicates.greater_than(0),
        describe=lambda: "a positive number",
    )
    cond = positive()
    assert await cond.is_satisfied_by(3) is True
    assert await cond.is_satisfied_by(-3) is False
    assert cond.describe() == "a positive number"
    assert cond.shape() == []


def test_description_falls_back_to_predicate():
    between = condition_variant(
        "Between",
        lambda low, high: predicates.Predicate(
            lambda value: low <= value <= high, f"between {low} and {high}"
        ),
    )
    assert between(1, 5).describe() == "between 1 and 5"


def test_description_falls_back_to_function_name():
    def is_even_number(value):
        return value % 2 == 0

    even = condition_variant("Even", lambda: is_even_number)
    assert even().describe() == "is even number"


@pytest.mark.asyncio
async def test_async_predicate_is_awaited():
    later = condition_variant(
        "Later", lambda expected: lambda value: _resolved(value == expected)
    )
    assert await later(3).is_satisfied_by(3) is True
    assert await later(3).is_satisfied_by(4) is False


def test_normalize_hooks_default_to_args():
    assert c.Equal(10).shape() == [10]
    assert c.In([1, 2]).shape() == [[1, 2]]
    assert c.IsNull().shape() == []


def test_normalize_and_denormalize_hooks():
    money = condition_variant(
        "AtLeast",
        lambda amount, currency: lambda value: value >= amount,
        lambda amount, currency: f"at least {amount} {currency}",
        lambda amount, currency: [f"{amount} {currency}"],
        lambda text: text.split(" "),
    )
    cond = money("10", "EUR")
    assert cond.shape() == ["10 EUR"]

    rebuilt = money.reconstruct(cond.shape())
    assert rebuilt == cond
    assert rebuilt.describe() == "at least 10 EUR"


def test_reconstruct_without_hooks():
    assert c.Equal.reconstruct([10]) == c.Equal(10)


def test_predicate_factory_must_be_callable():
    with pytest.raises(InvalidArgumentError, match="must be callable"):
        condition_variant("Broken", "not callable")  # type: ignore[arg-type]


def test_variant_repr():
    assert repr(c.Equal) == "ConditionVariant('Equal')"
    assert repr(c.Equal(10)) == "Equal(10)"
    assert isinstance(c.Equal, ConditionVariant)


@pytest.mark.parametrize("variant", [c.In, c.NotIn], ids=["In", "NotIn"])
def test_membership_rejects_one_shot_iterators(variant):
    with pytest.raises(InvalidArgumentError, match="must be a collection"):
        variant(v for v in [1, 2])
    with pytest.raises(InvalidArgumentError):
        variant(map(str, [1, 2]))
