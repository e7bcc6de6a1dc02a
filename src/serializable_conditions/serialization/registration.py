"""Registry bootstrap for conditions and value extractors."""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

from .. import conditions
from ..base import Condition, Normalizable
from ..extractors import Property
from ..variants import ConditionVariant
from .normalizer import simple_normalizer

if TYPE_CHECKING:
    from .serializer import Serializer

logger = logging.getLogger(__name__)

PROPERTY_TYPE_NAME = "ValueExtractor/Property"
TUPLE_TYPE_NAME = "Tuple"
CONDITION_TYPE_PREFIX = "Condition/"


def _normalize(value: Any) -> Any:
    if isinstance(value, Normalizable):
        return value.shape()
    return simple_normalizer(value)


def _is_condition_kind(candidate: Any) -> bool:
    if isinstance(candidate, ConditionVariant):
        return True
    return (
        inspect.isclass(candidate)
        and issubclass(candidate, Condition)
        and not inspect.isabstract(candidate)
    )


def condition_kinds() -> dict[str, Any]:
    """Exported condition kinds keyed by their exported name."""
    return {
        name: getattr(conditions, name)
        for name in conditions.__all__
        if _is_condition_kind(getattr(conditions, name))
    }


def setup_serializer(serializer: Serializer) -> Serializer:
    """
    Register every condition and extractor kind on *serializer*.

    Must run before any (de)serialization involving these types.  Tuples are
    registered too, so tuple arguments and path segments come back as tuples
    rather than lists.
    """
    normalizer = serializer.normalizer

    def setup(name: str, kind: Any) -> None:
        normalizer.register_normalization(
            name,
            kind,
            _normalize,
            getattr(kind, "reconstruct", None),
        )

    normalizer.register_normalization(TUPLE_TYPE_NAME, tuple, list, tuple)
    setup(PROPERTY_TYPE_NAME, Property)

    kinds = condition_kinds()
    for name, kind in kinds.items():
        setup(f"{CONDITION_TYPE_PREFIX}{name}", kind)

    logger.debug("Registered %d condition kinds", len(kinds))
    return serializer
