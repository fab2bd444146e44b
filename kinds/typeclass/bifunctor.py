"""
Bifunctor
=========

Two-slot kinds (Result as success/error) mapped on both sides at once.

Laws:
- Identity: bimap(x, identity, identity) == x
- Composition: bimap(bimap(x, f1, g1), f2, g2) == bimap(x, compose(f1, f2), compose(g1, g2))

`Join` views a two-slot value whose slots hold the same type as a one-slot
Functor: fmap maps both sides with the same function.

    join(Ok(2)).fmap(lambda n: n * 10).lower()      # Ok(20)
    join(Error(3)).fmap(lambda n: n * 10).lower()   # Error(30)
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._errors import MissingInstanceError
from .._helpers import identity
from .._types import Kind
from ..hkt import HKT2, kind_of, register
from .functor import Functor


class Bifunctor(HKT2):
    @classmethod
    def bimap[A, B, C, D](cls, fab: typing.Any, fa: Callable[[A], C], fb: Callable[[B], D]) -> typing.Any:
        raise NotImplementedError

    @classmethod
    def lmap[A, C](cls, fab: typing.Any, f: Callable[[A], C]) -> typing.Any:
        """Map the first slot."""
        return cls.bimap(fab, f, identity)

    @classmethod
    def rmap[B, D](cls, fab: typing.Any, f: Callable[[B], D]) -> typing.Any:
        """Map the second slot."""
        return cls.bimap(fab, identity, f)


def bifunctor_of(value: object, kind: Kind | None = None) -> type[Bifunctor]:
    """
    Two-slot kind for `value`.

    Values resolve to their one-slot marker first (Ok -> ResultOkKind); that
    marker names its two-slot companion in `two_slot`.
    """
    k = kind if kind is not None else kind_of(value)
    k = getattr(k, "two_slot", None) or k
    if not (isinstance(k, type) and issubclass(k, Bifunctor)):
        raise MissingInstanceError(k, "Bifunctor")
    if not k.owns(value):
        raise TypeError(f"{type(value).__name__} is not an instantiation of {k.__name__}")
    return k


def bimap[A, B, C, D](
    fab: typing.Any,
    fa: Callable[[A], C],
    fb: Callable[[B], D],
    /,
    *,
    kind: Kind | None = None,
) -> typing.Any:
    return bifunctor_of(fab, kind).bimap(fab, fa, fb)


def lmap[A, C](fab: typing.Any, f: Callable[[A], C], /, *, kind: Kind | None = None) -> typing.Any:
    return bifunctor_of(fab, kind).lmap(fab, f)


def rmap[B, D](fab: typing.Any, f: Callable[[B], D], /, *, kind: Kind | None = None) -> typing.Any:
    return bifunctor_of(fab, kind).rmap(fab, f)


# ============================================================================
# Join
# ============================================================================


@dataclass(frozen=True, slots=True)
class Join[T]:
    """Two-slot value with both slots fixed to one type, seen as a one-slot container."""

    value: typing.Any
    kind: type[Bifunctor]

    def fmap[B](self, f: Callable[[T], B]) -> Join[B]:
        return JoinKind.fmap(self, f)

    def lower(self) -> typing.Any:
        """Back to the underlying two-slot value."""
        return self.value


class JoinKind(Functor):
    """One-slot marker over Join; `JoinKind[ResultKind]` pins the two-slot kind."""

    @classmethod
    def _of(cls, a: typing.Any) -> typing.Any:
        return Join[a]

    @classmethod
    def fmap[A, B](cls, fa: Join[A], f: Callable[[A], B]) -> Join[B]:
        return Join(fa.kind.bimap(fa.value, f, f), fa.kind)


def _join_kind(j: Join[typing.Any]) -> Kind:
    return JoinKind[j.kind]


register(JoinKind, Join, resolver=_join_kind)


def join(value: typing.Any, kind: Kind | None = None) -> Join[typing.Any]:
    return Join(value, bifunctor_of(value, kind))


__all__ = (
    "Bifunctor",
    "Join",
    "JoinKind",
    "bifunctor_of",
    "bimap",
    "join",
    "lmap",
    "rmap",
)
