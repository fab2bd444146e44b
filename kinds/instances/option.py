"""
Option kind
===========

kungfu `Some` / `Nothing` as a one-slot kind.

- alt: the first Some wins
- Semigroup: Some(a) + Some(b) == Some(append(a, b)), Nothing is the identity
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Nothing, Option, Some

from ..fun.callable import call_once
from ..hkt import register
from ..typeclass.alt import Plus
from ..typeclass.monad import Monad
from ..typeclass.semigroup import Monoid, append, register_semigroup
from ..typeclass.traverse import TraversableOnce


class OptionKind(Monad, Plus, TraversableOnce):
    single = True

    @classmethod
    def _of(cls, a: typing.Any) -> typing.Any:
        return Option[a]

    # Functor
    @classmethod
    def fmap[A, B](cls, fa: Option[A], f: Callable[[A], B]) -> Option[B]:
        if isinstance(fa, Some):
            return Some(call_once(f, fa.unwrap()))
        return fa

    # Apply / Applicative
    @classmethod
    def apply(cls, fab: Option[typing.Any], fa: Option[typing.Any], *, clone: typing.Any = None) -> Option[typing.Any]:
        if isinstance(fab, Some) and isinstance(fa, Some):
            return Some(call_once(fab.unwrap(), fa.unwrap()))
        return Nothing()

    @classmethod
    def pure[A](cls, a: A) -> Option[A]:
        return Some(a)

    @classmethod
    def halted(cls, fa: Option[typing.Any]) -> bool:
        return not isinstance(fa, Some)

    # Alt / Plus
    @classmethod
    def alt[A](cls, a: Option[A], b: Option[A]) -> Option[A]:
        return a if isinstance(a, Some) else b

    @classmethod
    def empty(cls) -> Option[typing.Any]:
        return Nothing()

    # Foldable
    @classmethod
    def foldl[A, B](cls, fa: Option[A], f: Callable[[B, A], B], b: B) -> B:
        if isinstance(fa, Some):
            return f(b, fa.unwrap())
        return b

    @classmethod
    def foldr[A, B](cls, fa: Option[A], f: Callable[[A, B], B], b: B) -> B:
        if isinstance(fa, Some):
            return f(fa.unwrap(), b)
        return b

    # Traversable
    @classmethod
    def rewrap[B](cls, fa: Option[typing.Any], b: B) -> Option[B]:
        return Some(b)

    # Monad
    @classmethod
    def bind[A](cls, ma: Option[A], f: Callable[[A], Option[typing.Any]]) -> Option[typing.Any]:
        if isinstance(ma, Some):
            return call_once(f, ma.unwrap())
        return ma


class OptionMonoid(Monoid):
    @classmethod
    def append[A](cls, a: Option[A], b: Option[A]) -> Option[A]:
        if isinstance(a, Some) and isinstance(b, Some):
            return Some(append(a.unwrap(), b.unwrap()))
        return a if isinstance(a, Some) else b

    @classmethod
    def identity(cls) -> Option[typing.Any]:
        return Nothing()


register(OptionKind, Some, Nothing)
register_semigroup(OptionMonoid, Some, Nothing)


__all__ = ("OptionKind", "OptionMonoid")
