"""
ArrayVec kind
=============

A fixed-capacity sequence. `ArrayVecKind[N]` is the kind of ArrayVecs of
capacity N; every operation that would grow past N raises CapacityError
instead of silently truncating.

    xs = ArrayVec.of(1, 2, capacity=4)
    fmap(xs, lambda n: n * 2)            # ArrayVec([2, 4], capacity=4)
    xs.push(3).push(4).push(5)           # CapacityError
"""

from __future__ import annotations

import copy
import typing
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass

from .._errors import CapacityError
from .._helpers import invoker
from .._types import Cloner
from ..fun.callable import call, require_repeatable
from ..hkt import register
from ..typeclass.alt import Plus
from ..typeclass.monad import Monad
from ..typeclass.semigroup import Semigroup, register_semigroup
from ..typeclass.traverse import Traversable


@dataclass(frozen=True, slots=True)
class ArrayVec[T](Sequence[T]):
    """Immutable sequence of at most `capacity` items."""

    items: tuple[T, ...]
    capacity: int

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError("ArrayVec.capacity must be >= 0")
        if len(self.items) > self.capacity:
            raise CapacityError(self.capacity)

    @classmethod
    def of(cls, *items: T, capacity: int) -> ArrayVec[T]:
        return cls(tuple(items), capacity)

    @classmethod
    def collect(cls, items: Iterable[T], capacity: int) -> ArrayVec[T]:
        out: list[T] = []
        for item in items:
            if len(out) == capacity:
                raise CapacityError(capacity)
            out.append(item)
        return cls(tuple(out), capacity)

    @property
    def is_full(self) -> bool:
        return len(self.items) == self.capacity

    def push(self, item: T) -> ArrayVec[T]:
        """New ArrayVec with `item` appended."""
        if self.is_full:
            raise CapacityError(self.capacity)
        return ArrayVec((*self.items, item), self.capacity)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    @typing.overload
    def __getitem__(self, index: int) -> T: ...
    @typing.overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...
    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return self.items[index]

    def __repr__(self) -> str:
        return f"ArrayVec({list(self.items)!r}, capacity={self.capacity})"


class ArrayVecKind(Monad, Plus, Traversable):
    """`ArrayVecKind[8]` pins the capacity; values resolve to the pin matching their own."""

    @classmethod
    def _of(cls, a: typing.Any) -> typing.Any:
        return ArrayVec[a]

    @classmethod
    def capacity(cls) -> int:
        if cls.param is None:
            raise TypeError("ArrayVecKind needs a capacity: use ArrayVecKind[N]")
        return cls.param

    @classmethod
    def fmap[A, B](cls, fa: ArrayVec[A], f: Callable[[A], B]) -> ArrayVec[B]:
        g = invoker(cls, f, "ArrayVecKind.fmap()")
        return ArrayVec(tuple(g(a) for a in fa), fa.capacity)

    @classmethod
    def apply(cls, fab: ArrayVec[typing.Any], fa: ArrayVec[typing.Any], *, clone: Cloner[typing.Any] = copy.copy) -> ArrayVec[typing.Any]:
        def pairs() -> Iterator[typing.Any]:
            for f in fab:
                require_repeatable(f, "ArrayVecKind.apply()")
                for a in fa:
                    yield call(f, clone(a))

        return ArrayVec.collect(pairs(), fab.capacity)

    @classmethod
    def pure[A](cls, a: A) -> ArrayVec[A]:
        return ArrayVec((a,), cls.capacity())

    @classmethod
    def halted(cls, fa: ArrayVec[typing.Any]) -> bool:
        return not fa

    @classmethod
    def alt[A](cls, a: ArrayVec[A], b: ArrayVec[A]) -> ArrayVec[A]:
        return ArrayVec.collect((*a, *b), a.capacity)

    @classmethod
    def empty(cls) -> ArrayVec[typing.Any]:
        return ArrayVec((), cls.capacity())

    @classmethod
    def foldl[A, B](cls, fa: ArrayVec[A], f: Callable[[B, A], B], b: B) -> B:
        for a in fa:
            b = f(b, a)
        return b

    @classmethod
    def foldr[A, B](cls, fa: ArrayVec[A], f: Callable[[A, B], B], b: B) -> B:
        for a in reversed(fa.items):
            b = f(a, b)
        return b

    @classmethod
    def foldl_idx[A, B](cls, fa: ArrayVec[A], f: Callable[[B, int, A], B], b: B) -> B:
        for i, a in enumerate(fa):
            b = f(b, i, a)
        return b

    @classmethod
    def foldr_idx[A, B](cls, fa: ArrayVec[A], f: Callable[[int, A, B], B], b: B) -> B:
        for i in range(len(fa) - 1, -1, -1):
            b = f(i, fa[i], b)
        return b

    @classmethod
    def length(cls, fa: ArrayVec[typing.Any]) -> int:
        return len(fa)

    @classmethod
    def seed(cls, fa: ArrayVec[typing.Any]) -> ArrayVec[typing.Any]:
        return ArrayVec((), fa.capacity)

    @classmethod
    def grow[B](cls, acc: ArrayVec[B], i: int, b: B) -> ArrayVec[B]:
        return acc.push(b)

    @classmethod
    def bind[A, B](cls, ma: ArrayVec[A], f: Callable[[A], ArrayVec[B]]) -> ArrayVec[B]:
        g = invoker(cls, f, "ArrayVecKind.bind()")
        return ArrayVec.collect((b for a in ma for b in g(a)), ma.capacity)


class ArrayVecSemigroup(Semigroup):
    """Concatenation; the result keeps the left operand's capacity."""

    @classmethod
    def append[A](cls, a: ArrayVec[A], b: ArrayVec[A]) -> ArrayVec[A]:
        return ArrayVecKind.alt(a, b)


def _pinned_capacity(value: ArrayVec[typing.Any]) -> type[ArrayVecKind]:
    return ArrayVecKind[value.capacity]


register(ArrayVecKind, ArrayVec, resolver=_pinned_capacity)
register_semigroup(ArrayVecSemigroup, ArrayVec)


__all__ = ("ArrayVec", "ArrayVecKind", "ArrayVecSemigroup")
