"""Serializer — text round-trip on top of a :class:`Normalizer`."""

from __future__ import annotations

import json
from typing import Any, Protocol, runtime_checkable

from ..exceptions import SerializationError
from .normalizer import Normalizer


@runtime_checkable
class SerializationAdapter(Protocol):
    """Codec between plain data and text."""

    def encode(self, data: Any) -> str: ...

    def decode(self, text: str) -> Any: ...


class JSONAdapter:
    """JSON codec with configurable output formatting."""

    def __init__(
        self,
        *,
        indent: int | None = None,
        sort_keys: bool = False,
        ensure_ascii: bool = False,
    ) -> None:
        """Configure JSON output.

        Args:
            indent: Pretty-print indentation; ``None`` for compact output.
            sort_keys: Emit object keys in sorted order.
            ensure_ascii: Escape all non-ASCII characters.
        """
        if indent is not None and indent < 0:
            raise ValueError("indent must be >= 0")
        self.indent = indent
        self.sort_keys = sort_keys
        self.ensure_ascii = ensure_ascii

    def encode(self, data: Any) -> str:
        return json.dumps(
            data,
            indent=self.indent,
            sort_keys=self.sort_keys,
            ensure_ascii=self.ensure_ascii,
        )

    def decode(self, text: str) -> Any:
        return json.loads(text)


class Serializer:
    """
    Serialize/deserialize object graphs to/from text.

    Usage::

        serializer = setup_serializer(Serializer())
        text = serializer.serialize(conditions.Equal(10))
        # '{"@type": "Condition/Equal", "value": [10]}'
        condition = serializer.deserialize(text)
    """

    def __init__(
        self,
        adapter: SerializationAdapter | None = None,
        normalizer: Normalizer | None = None,
    ) -> None:
        self.adapter = adapter if adapter is not None else JSONAdapter()
        self.normalizer = normalizer if normalizer is not None else Normalizer()

    def normalize(self, value: Any) -> Any:
        return self.normalizer.normalize(value)

    def denormalize(self, data: Any) -> Any:
        return self.normalizer.denormalize(data)

    def serialize(self, value: Any) -> str:
        """Normalize and encode *value*."""
        data = self.normalize(value)
        try:
            return self.adapter.encode(data)
        except (TypeError, ValueError) as e:
            raise SerializationError(str(e)) from e

    def deserialize(self, text: str) -> Any:
        """Decode *text* and rebuild live objects."""
        try:
            data = self.adapter.decode(text)
        except (TypeError, ValueError) as e:
            raise SerializationError(str(e)) from e
        return self.denormalize(data)
