from .envelope import TypedEnvelope
from .normalizer import NormalizationDefinition, Normalizer, kind_of, simple_normalizer
from .registration import (
    CONDITION_TYPE_PREFIX,
    PROPERTY_TYPE_NAME,
    TUPLE_TYPE_NAME,
    condition_kinds,
    setup_serializer,
)
from .serializer import JSONAdapter, SerializationAdapter, Serializer

__all__ = [
    "TypedEnvelope",
    "NormalizationDefinition",
    "Normalizer",
    "kind_of",
    "simple_normalizer",
    "JSONAdapter",
    "SerializationAdapter",
    "Serializer",
    "CONDITION_TYPE_PREFIX",
    "PROPERTY_TYPE_NAME",
    "TUPLE_TYPE_NAME",
    "condition_kinds",
    "setup_serializer",
]
