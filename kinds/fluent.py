"""
Fluent chaining over any registered kind.

    from kinds import kinded

    kinded([1, 2, 3]).fmap(lambda n: n * 2).bind(lambda n: [n, n]).lower()
    # [2, 2, 4, 4, 6, 6]

    kinded(["1", "2"]).traverse(parse, ap=ResultOkKind).lower()
    # Ok([1, 2])

The kind is looked up once, in `kinded()`, and carried along. traverse and
sequence change the kind, so their result is looked up again.
"""

from __future__ import annotations

import copy
import typing
from collections.abc import Callable
from dataclasses import dataclass

from ._types import Cloner, Kind
from .hkt import resolve
from .typeclass import alt as _alt
from .typeclass import apply as _apply
from .typeclass import fold as _fold
from .typeclass import functor as _functor
from .typeclass import monad as _monad
from .typeclass import traverse as _traverse


@dataclass(frozen=True, slots=True)
class Kinded[T]:
    """
    Fluent wrapper around a value of a registered kind.
    """

    value: typing.Any
    kind: Kind

    def fmap[B](self, f: Callable[[T], B]) -> Kinded[B]:
        return Kinded(_functor.fmap(self.value, f, kind=self.kind), self.kind)

    def apply[B](self, fa: typing.Any, *, clone: Cloner[typing.Any] = copy.copy) -> Kinded[B]:
        """`self` holds functions; `fa` is a bare value of the same kind."""
        return Kinded(_apply.apply(self.value, fa, kind=self.kind, clone=clone), self.kind)

    def bind[B](self, f: Callable[[T], typing.Any]) -> Kinded[B]:
        return Kinded(_monad.bind(self.value, f, kind=self.kind), self.kind)

    def flatten(self) -> Kinded[typing.Any]:
        return Kinded(_monad.flatten(self.value, kind=self.kind), self.kind)

    def alt(self, other: typing.Any, /, *more: typing.Any) -> Kinded[T]:
        return Kinded(_alt.alt(self.value, other, *more, kind=self.kind), self.kind)

    def foldl[B](self, f: Callable[[B, T], B], b: B) -> B:
        return _fold.foldl(self.value, f, b, kind=self.kind)

    def foldr[B](self, f: Callable[[T, B], B], b: B) -> B:
        return _fold.foldr(self.value, f, b, kind=self.kind)

    def traverse(
        self,
        f: Callable[[T], typing.Any],
        *,
        ap: Kind,
        policy: _traverse.TraversePolicy = _traverse.DEFAULT_POLICY,
    ) -> Kinded[typing.Any]:
        return kinded(_traverse.traverse(self.value, f, ap=ap, kind=self.kind, policy=policy))

    def sequence(self, *, ap: Kind | None = None) -> Kinded[typing.Any]:
        return kinded(_traverse.sequence(self.value, ap=ap, kind=self.kind))

    def lower(self) -> typing.Any:
        return self.value


def kinded(value: typing.Any, kind: Kind | None = None) -> Kinded[typing.Any]:
    """Start a fluent chain; the kind is resolved from `value` unless given."""
    return Kinded(value, resolve(value, kind))


__all__ = ("Kinded", "kinded")
