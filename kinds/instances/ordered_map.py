"""Key-sorted map and its kind.

Iteration, folds and traversal visit keys in ascending order regardless of
insertion order. Keys must be mutually comparable.
"""

from __future__ import annotations

import bisect
import typing
from collections.abc import Iterable, Iterator, Mapping

from ..hkt import register
from ..typeclass.semigroup import monoid_from_plus
from .hash_map import MapKind


class OrderedMap[K, V](Mapping[K, V]):
    """Read-only mapping kept sorted by key; `insert` returns a new map."""

    __slots__ = ("_keys", "_values")

    def __init__(self, items: Mapping[K, V] | Iterable[tuple[K, V]] = ()) -> None:
        self._keys: list[K] = []
        self._values: list[V] = []
        pairs = items.items() if isinstance(items, Mapping) else items
        for k, v in pairs:
            self._set(k, v)

    def _find(self, k: K) -> int:
        return bisect.bisect_left(self._keys, k)  # type: ignore[type-var]

    def _set(self, k: K, v: V) -> None:
        i = self._find(k)
        if i < len(self._keys) and self._keys[i] == k:
            self._values[i] = v
        else:
            self._keys.insert(i, k)
            self._values.insert(i, v)

    def insert(self, k: K, v: V) -> OrderedMap[K, V]:
        out: OrderedMap[K, V] = OrderedMap()
        out._keys = list(self._keys)
        out._values = list(self._values)
        out._set(k, v)
        return out

    def __getitem__(self, k: K) -> V:
        i = self._find(k)
        if i < len(self._keys) and self._keys[i] == k:
            return self._values[i]
        raise KeyError(k)

    def __iter__(self) -> Iterator[K]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in zip(self._keys, self._values))
        return f"OrderedMap({{{body}}})"


class OrderedMapKind(MapKind):
    @classmethod
    def _of(cls, a: typing.Any) -> typing.Any:
        return OrderedMap[cls.param if cls.param is not None else typing.Any, a]

    @classmethod
    def build[K, V](cls, items: Iterable[tuple[K, V]]) -> OrderedMap[K, V]:
        return OrderedMap(items)


register(OrderedMapKind, OrderedMap)
OrderedMapMonoid = monoid_from_plus(OrderedMapKind, OrderedMap)


__all__ = ("OrderedMap", "OrderedMapKind", "OrderedMapMonoid")
