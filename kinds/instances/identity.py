"""
Identity kind
=============

`Id` wraps exactly one value. Useful as a trivial Applicative (traversing into
Id is just mapping) and as the base case of generic code.

Arithmetic on Id forwards to the wrapped values: Id(2) + Id(3) == Id(5).
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from ..fun.callable import call_once
from ..hkt import register
from ..typeclass.alt import Alt
from ..typeclass.monad import Monad
from ..typeclass.semigroup import Semigroup, append, identity, register_semigroup
from ..typeclass.traverse import TraversableOnce


@dataclass(frozen=True, slots=True)
class Id[T]:
    value: T

    def get(self) -> T:
        return self.value

    def __invert__(self) -> Id[typing.Any]:
        return Id(~self.value)  # type: ignore[operator]

    def __neg__(self) -> Id[typing.Any]:
        return Id(-self.value)  # type: ignore[operator]

    def __add__(self, other: Id[typing.Any]) -> Id[typing.Any]:
        return Id(self.value + other.value)  # type: ignore[operator]

    def __mul__(self, other: Id[typing.Any]) -> Id[typing.Any]:
        return Id(self.value * other.value)  # type: ignore[operator]

    def __truediv__(self, other: Id[typing.Any]) -> Id[typing.Any]:
        return Id(self.value / other.value)  # type: ignore[operator]


class IdKind(Monad, Alt, TraversableOnce):
    single = True

    @classmethod
    def _of(cls, a: typing.Any) -> typing.Any:
        return Id[a]

    @classmethod
    def fmap[A, B](cls, fa: Id[A], f: Callable[[A], B]) -> Id[B]:
        return Id(call_once(f, fa.value))

    @classmethod
    def apply(cls, fab: Id[typing.Any], fa: Id[typing.Any], *, clone: typing.Any = None) -> Id[typing.Any]:
        return Id(call_once(fab.value, fa.value))

    @classmethod
    def pure[A](cls, a: A) -> Id[A]:
        return Id(a)

    @classmethod
    def alt[A](cls, a: Id[A], b: Id[A]) -> Id[A]:
        # Both sides always hold a value; the left one is kept
        return a

    @classmethod
    def foldl[A, B](cls, fa: Id[A], f: Callable[[B, A], B], b: B) -> B:
        return f(b, fa.value)

    @classmethod
    def foldr[A, B](cls, fa: Id[A], f: Callable[[A, B], B], b: B) -> B:
        return f(fa.value, b)

    @classmethod
    def rewrap[B](cls, fa: Id[typing.Any], b: B) -> Id[B]:
        return Id(b)

    @classmethod
    def bind[A](cls, ma: Id[A], f: Callable[[A], Id[typing.Any]]) -> Id[typing.Any]:
        return call_once(f, ma.value)


class IdSemigroup(Semigroup):
    """Appends the wrapped values. The identity depends on the wrapped type, hence `identity_of`."""

    @classmethod
    def append[A](cls, a: Id[A], b: Id[A]) -> Id[A]:
        return Id(append(a.value, b.value))

    @classmethod
    def identity_of(cls, tp: type) -> Id[typing.Any]:
        return Id(identity(tp))


register(IdKind, Id)
register_semigroup(IdSemigroup, Id)


__all__ = ("Id", "IdKind", "IdSemigroup")
