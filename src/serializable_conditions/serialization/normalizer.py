"""
Normalizer — converts object graphs to and from plain data.

Registered kinds become :class:`TypedEnvelope` dicts tagged with their wire
name.  Everything else is normalized structurally and carries no tag, so it
cannot be reconstructed as its original type.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..base import Normalizable
from ..exceptions import SerializationError, UnknownTypeError
from .envelope import TYPE_KEY, TypedEnvelope

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

_PRIMITIVES: tuple[type, ...] = (str, int, float, bool, type(None))


@dataclass(frozen=True)
class NormalizationDefinition:
    """One registry entry: wire name, kind and the hook pair."""

    name: str
    kind: Any
    normalizer: Callable[[Any], Any]
    denormalizer: Callable[[Any], Any] | None = None


def kind_of(value: Any) -> Any:
    """Registry key of *value*: its declared ``kind`` or its class."""
    if isinstance(value, Normalizable):
        return value.kind
    return type(value)


def simple_normalizer(value: Any) -> Any:
    """
    Structural fallback for objects without a shape hook.

    Dataclasses contribute their fields, other objects their public
    ``__dict__`` entries; anything else is returned unchanged.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: getattr(value, f.name)
            for f in dataclasses.fields(value)
            if not f.name.startswith("_")
        }
    if hasattr(value, "__dict__"):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    return value


class Normalizer:
    """
    Registry of normalizations keyed by wire name and by kind.

    Usage::

        normalizer = Normalizer()
        normalizer.register_normalization(
            "Money", Money, lambda m: [m.amount, m.currency], lambda d: Money(*d)
        )
        data = normalizer.normalize(Money(10, "EUR"))
        # {"@type": "Money", "value": [10, "EUR"]}
        normalizer.denormalize(data) == Money(10, "EUR")

    The ``"@type"`` key is reserved: any dict carrying it is read back as an
    envelope, so plain dicts with that key are rejected by :meth:`normalize`.
    """

    def __init__(self) -> None:
        self._by_name: dict[str, NormalizationDefinition] = {}
        self._by_kind: dict[Any, NormalizationDefinition] = {}

    # -- registration --------------------------------------------------------

    def register_normalization(
        self,
        name: str,
        kind: Any,
        normalizer: Callable[[Any], Any],
        denormalizer: Callable[[Any], Any] | None = None,
    ) -> None:
        """Bind *name* to *kind*. A later registration replaces an earlier one."""
        definition = NormalizationDefinition(
            name=name, kind=kind, normalizer=normalizer, denormalizer=denormalizer
        )
        self._by_name[name] = definition
        self._by_kind[kind] = definition
        logger.debug("Registered normalization %s", name)

    # -- look-up -------------------------------------------------------------

    def get(self, name: str) -> NormalizationDefinition | None:
        return self._by_name.get(name)

    def find(self, value: Any) -> NormalizationDefinition | None:
        """Return the definition registered for the kind of *value*."""
        try:
            return self._by_kind.get(kind_of(value))
        except TypeError:  # unhashable kind
            return None

    def has(self, name: str) -> bool:
        return name in self._by_name

    @property
    def registered_names(self) -> list[str]:
        return list(self._by_name.keys())

    # -- normalization -------------------------------------------------------

    def normalize(self, value: Any) -> Any:
        """Convert *value* into plain data (dicts, lists and primitives)."""
        if isinstance(value, _PRIMITIVES):
            return value
        definition = self.find(value)
        if definition is not None:
            payload = self.normalize(definition.normalizer(value))
            return TypedEnvelope(type=definition.name, value=payload).to_plain()
        if isinstance(value, dict):
            if TYPE_KEY in value:
                raise SerializationError(
                    f"Key '{TYPE_KEY}' is reserved for typed envelopes"
                )
            return {k: self.normalize(v) for k, v in value.items()}
        if isinstance(value, list | tuple):
            return [self.normalize(v) for v in value]
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json")
        normalized = simple_normalizer(value)
        if normalized is value:
            return value
        return self.normalize(normalized)

    def denormalize(self, data: Any) -> Any:
        """
        Rebuild live objects from plain data.

        Raises:
            UnknownTypeError: If an envelope names a type without a
                denormalizer.
            SerializationError: If an envelope is malformed.
        """
        if TypedEnvelope.is_envelope(data):
            return self._denormalize_envelope(data)
        if isinstance(data, dict):
            return {k: self.denormalize(v) for k, v in data.items()}
        if isinstance(data, list):
            return [self.denormalize(v) for v in data]
        return data

    def _denormalize_envelope(self, data: dict[str, Any]) -> Any:
        try:
            envelope = TypedEnvelope.model_validate(data)
        except PydanticValidationError as e:
            raise SerializationError(f"Malformed envelope: {e}") from e

        definition = self.get(envelope.type)
        if definition is None or definition.denormalizer is None:
            logger.warning("No denormalizer registered for type %s", envelope.type)
            raise UnknownTypeError(envelope.type, self.registered_names)

        return definition.denormalizer(self.denormalize(envelope.value))
