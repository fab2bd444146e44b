"""
Surrogate typeclasses
=====================

Relaxed Functor / Apply / Applicative / Monad: the result of an operation
only has to be *equivalent to* the kind's canonical type (see hkt.Equiv),
not an instance of it. That lets a kind answer `map_` by storing the
function in a new value instead of running it, which is how the lazy IO
engine stays a plain data structure.

Generic functions (`fmap`, `apply`, `pure`, `bind`) fall back to these
methods when the resolved kind is a surrogate.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ..hkt import HKT1, Equiv


class FunctorSurrogate(HKT1):
    """map_ returns any value Equiv to this kind."""

    # Methods a surrogate class must provide (checked by register_equiv)
    equiv_requires: typing.ClassVar[tuple[str, ...]] = ()

    @classmethod
    def map_[A, B](cls, fa: typing.Any, f: Callable[[A], B]) -> Equiv:
        raise NotImplementedError


class ApplySurrogate(FunctorSurrogate):
    @classmethod
    def apply_(cls, fab: typing.Any, fa: typing.Any) -> Equiv:
        raise NotImplementedError


class ApplicativeSurrogate(ApplySurrogate):
    @classmethod
    def pure[A](cls, a: A) -> Equiv:
        raise NotImplementedError


class MonadSurrogate(ApplicativeSurrogate):
    @classmethod
    def bind_[A](cls, ma: typing.Any, f: Callable[[A], typing.Any]) -> Equiv:
        raise NotImplementedError


__all__ = (
    "ApplicativeSurrogate",
    "ApplySurrogate",
    "FunctorSurrogate",
    "MonadSurrogate",
)
