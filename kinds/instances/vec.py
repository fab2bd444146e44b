"""
Vec kind
========

Python `list` as a one-slot kind with many elements.

- apply: every function paired with every value (cross product, functions
  outer, values inner); values are cloned for each reuse
- alt: concatenation, [] is the identity
- as a traversal target it is multi-outcome: one list per combination

    apply([lambda n: n + 1, lambda n: n * 10], [1, 2])   # [2, 3, 10, 20]
    traverse([1, 2], lambda n: [n, -n], ap=VecKind)      # [[1, 2], [1, -2], [-1, 2], [-1, -2]]
"""

from __future__ import annotations

import copy
import typing
from collections.abc import Callable

from .._helpers import invoker, push
from .._types import Cloner
from ..fun.callable import call, require_repeatable
from ..hkt import register
from ..typeclass.alt import Plus
from ..typeclass.monad import Monad
from ..typeclass.semigroup import monoid_from_plus
from ..typeclass.traverse import Traversable


class VecKind(Monad, Plus, Traversable):
    @classmethod
    def _of(cls, a: typing.Any) -> typing.Any:
        return list[a]

    @classmethod
    def fmap[A, B](cls, fa: list[A], f: Callable[[A], B]) -> list[B]:
        g = invoker(cls, f, "VecKind.fmap()")
        return [g(a) for a in fa]

    @classmethod
    def apply(cls, fab: list[typing.Any], fa: list[typing.Any], *, clone: Cloner[typing.Any] = copy.copy) -> list[typing.Any]:
        out: list[typing.Any] = []
        for f in fab:
            require_repeatable(f, "VecKind.apply()")
            out.extend(call(f, clone(a)) for a in fa)
        return out

    @classmethod
    def pure[A](cls, a: A) -> list[A]:
        return [a]

    @classmethod
    def halted(cls, fa: list[typing.Any]) -> bool:
        # No outcomes left to combine with
        return not fa

    @classmethod
    def alt[A](cls, a: list[A], b: list[A]) -> list[A]:
        return [*a, *b]

    @classmethod
    def empty(cls) -> list[typing.Any]:
        return []

    @classmethod
    def foldl[A, B](cls, fa: list[A], f: Callable[[B, A], B], b: B) -> B:
        for a in fa:
            b = f(b, a)
        return b

    @classmethod
    def foldr[A, B](cls, fa: list[A], f: Callable[[A, B], B], b: B) -> B:
        for a in reversed(fa):
            b = f(a, b)
        return b

    @classmethod
    def foldl_idx[A, B](cls, fa: list[A], f: Callable[[B, int, A], B], b: B) -> B:
        for i, a in enumerate(fa):
            b = f(b, i, a)
        return b

    @classmethod
    def foldr_idx[A, B](cls, fa: list[A], f: Callable[[int, A, B], B], b: B) -> B:
        for i in range(len(fa) - 1, -1, -1):
            b = f(i, fa[i], b)
        return b

    @classmethod
    def length(cls, fa: list[typing.Any]) -> int:
        return len(fa)

    @classmethod
    def seed(cls, fa: list[typing.Any]) -> list[typing.Any]:
        return []

    @classmethod
    def grow[B](cls, acc: list[B], i: int, b: B) -> list[B]:
        return push(acc, b)

    @classmethod
    def bind[A, B](cls, ma: list[A], f: Callable[[A], list[B]]) -> list[B]:
        g = invoker(cls, f, "VecKind.bind()")
        out: list[B] = []
        for a in ma:
            out.extend(g(a))
        return out


register(VecKind, list)
VecMonoid = monoid_from_plus(VecKind, list)


__all__ = ("VecKind", "VecMonoid")
