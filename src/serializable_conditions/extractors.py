"""
Value extractors.

A :class:`ValueExtractor` obtains a sub-value from a container.  Every step
may yield an awaitable, which is awaited before the next step begins.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from typing_extensions import Self, TypeGuard

from .exceptions import InvalidArgumentError

T = TypeVar("T", contravariant=True)

PathPart = Hashable

# Values that are never walked into.
_SCALAR_TYPES: tuple[type, ...] = (str, bytes, bytearray, int, float, complex, bool)


class ValueExtractor(ABC, Generic[T]):
    """Immutable function from a container value to a sub-value."""

    @abstractmethod
    async def extract(self, value: T) -> Any: ...

    @abstractmethod
    def describe(self) -> str: ...

    @property
    def kind(self) -> Any:
        return type(self)

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True, init=False)
class Property(ValueExtractor[T]):
    """
    Walks a key path, one segment at a time.

    Mappings are read with ``.get``, sequences with a non-negative integer
    index (a ``bool`` is not an index) and any other object with ``getattr``
    for string segments.  Missing members read as ``None``.  Meeting ``None``
    or a scalar before the path is exhausted makes the whole extraction
    ``None``.  Tuple segments are opaque mapping keys.
    """

    path: tuple[PathPart, ...]

    def __init__(self, *path: PathPart) -> None:
        if len(path) <= 0:
            raise InvalidArgumentError(
                "Property path must be longer than 0", argument="path"
            )
        object.__setattr__(self, "path", path)

    @classmethod
    def create(cls, *path: PathPart) -> Self:
        return cls(*path)

    async def extract(self, value: T) -> Any:
        current: Any = value
        for part in self.path:
            if not _is_object_like(current):
                return None
            current = _read_member(current, part)
            if inspect.isawaitable(current):
                current = await current
        return current

    def describe(self) -> str:
        return f'property "{".".join(str(p) for p in self.path)}"'

    def shape(self) -> list[PathPart]:
        return list(self.path)

    @classmethod
    def reconstruct(cls, data: Sequence[PathPart]) -> Self:
        return cls(*data)

    def __repr__(self) -> str:
        return f"Property({', '.join(repr(p) for p in self.path)})"


def _is_object_like(value: Any) -> bool:
    return value is not None and not isinstance(value, _SCALAR_TYPES)


def _is_index(part: PathPart) -> TypeGuard[int]:
    return isinstance(part, int) and not isinstance(part, bool) and part >= 0


def _read_member(obj: Any, part: PathPart) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(part)
    if isinstance(obj, Sequence):
        if _is_index(part) and part < len(obj):
            return obj[part]
        return None
    if isinstance(part, str):
        return getattr(obj, part, None)
    return None
