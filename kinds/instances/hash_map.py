"""
Map kinds
=========

Mappings as one-slot kinds over their values; the key type is the marker
parameter (`HashMapKind[str]`).

- fmap: values mapped, keys kept
- apply: key intersection, each function applied to the value under its key
- alt: left-biased union, on a key collision the left value wins
- no Applicative: there is no sensible key for `pure`

    alt({"a": 1, "b": 2}, {"b": 3, "c": 4})   # {"a": 1, "b": 2, "c": 4}

MapKind holds the shared behaviour; HashMapKind is it over plain dicts
(insertion order), OrderedMapKind over key-sorted OrderedMap.
"""

from __future__ import annotations

import copy
import typing
from collections.abc import Callable, Iterable, Mapping

from .._helpers import invoker
from .._types import Cloner
from ..fun.callable import call, require_repeatable
from ..hkt import register
from ..typeclass.alt import Plus
from ..typeclass.apply import Apply
from ..typeclass.semigroup import monoid_from_plus
from ..typeclass.traverse import Traversable


class MapKind(Apply, Plus, Traversable):
    """Shared map behaviour; subclasses pick the concrete mapping via `build`."""

    @classmethod
    def build[K, V](cls, items: Iterable[tuple[K, V]]) -> Mapping[K, V]:
        raise NotImplementedError

    @classmethod
    def fmap[K, A, B](cls, fa: Mapping[K, A], f: Callable[[A], B]) -> Mapping[K, B]:
        g = invoker(cls, f, f"{cls.__name__}.fmap()")
        return cls.build((k, g(a)) for k, a in fa.items())

    @classmethod
    def apply(cls, fab: Mapping[typing.Any, typing.Any], fa: Mapping[typing.Any, typing.Any], *, clone: Cloner[typing.Any] = copy.copy) -> Mapping[typing.Any, typing.Any]:
        def pairs() -> Iterable[tuple[typing.Any, typing.Any]]:
            for k, f in fab.items():
                if k in fa:
                    require_repeatable(f, f"{cls.__name__}.apply()")
                    yield k, call(f, fa[k])

        return cls.build(pairs())

    @classmethod
    def alt[K, A](cls, a: Mapping[K, A], b: Mapping[K, A]) -> Mapping[K, A]:
        return cls.build([*a.items(), *((k, v) for k, v in b.items() if k not in a)])

    @classmethod
    def empty(cls) -> Mapping[typing.Any, typing.Any]:
        return cls.build(())

    @classmethod
    def foldl[A, B](cls, fa: Mapping[typing.Any, A], f: Callable[[B, A], B], b: B) -> B:
        for a in fa.values():
            b = f(b, a)
        return b

    @classmethod
    def foldr[A, B](cls, fa: Mapping[typing.Any, A], f: Callable[[A, B], B], b: B) -> B:
        for a in reversed(list(fa.values())):
            b = f(a, b)
        return b

    @classmethod
    def foldl_idx[K, A, B](cls, fa: Mapping[K, A], f: Callable[[B, K, A], B], b: B) -> B:
        for k, a in fa.items():
            b = f(b, k, a)
        return b

    @classmethod
    def foldr_idx[K, A, B](cls, fa: Mapping[K, A], f: Callable[[K, A, B], B], b: B) -> B:
        for k, a in reversed(list(fa.items())):
            b = f(k, a, b)
        return b

    @classmethod
    def length(cls, fa: Mapping[typing.Any, typing.Any]) -> int:
        return len(fa)

    @classmethod
    def seed(cls, fa: Mapping[typing.Any, typing.Any]) -> Mapping[typing.Any, typing.Any]:
        return cls.empty()

    @classmethod
    def grow[K, B](cls, acc: Mapping[K, B], k: K, b: B) -> Mapping[K, B]:
        return insert(k, b, acc)


class HashMapKind(MapKind):
    @classmethod
    def _of(cls, a: typing.Any) -> typing.Any:
        return dict[cls.param if cls.param is not None else typing.Any, a]

    @classmethod
    def build[K, V](cls, items: Iterable[tuple[K, V]]) -> dict[K, V]:
        return dict(items)


def insert[K, A](k: K, a: A, m: Mapping[K, A]) -> Mapping[K, A]:
    """New mapping of the same kind as `m` with `k` bound to `a`."""
    if isinstance(m, dict):
        return {**m, k: a}
    return m.insert(k, a)  # type: ignore[attr-defined]


register(HashMapKind, dict)
HashMapMonoid = monoid_from_plus(HashMapKind, dict)


__all__ = ("HashMapKind", "HashMapMonoid", "MapKind", "insert")
