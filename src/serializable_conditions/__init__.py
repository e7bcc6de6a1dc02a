from . import conditions, predicates
from .base import Condition, Normalizable
from .composite import Aggregation, All, Any, OnValueExtractor
from .exceptions import (
    ConditionsError,
    InvalidArgumentError,
    SerializationError,
    UnknownTypeError,
)
from .extractors import Property, ValueExtractor
from .serialization import (
    JSONAdapter,
    Normalizer,
    Serializer,
    TypedEnvelope,
    setup_serializer,
)
from .variants import ConditionVariant, LeafCondition, condition_variant

__all__ = [
    # Namespaces
    "conditions",
    "predicates",
    # Core types
    "Condition",
    "Normalizable",
    "ValueExtractor",
    "Property",
    # Variant factory
    "ConditionVariant",
    "LeafCondition",
    "condition_variant",
    # Composite
    "Aggregation",
    "All",
    "Any",
    "OnValueExtractor",
    # Serialization
    "JSONAdapter",
    "Normalizer",
    "Serializer",
    "TypedEnvelope",
    "setup_serializer",
    # Exceptions
    "ConditionsError",
    "InvalidArgumentError",
    "SerializationError",
    "UnknownTypeError",
]
