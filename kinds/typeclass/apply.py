"""
Apply / Applicative
===================

Apply: combine a kind of functions with a kind of values.
Applicative: Apply plus `pure`, lifting a bare value into the kind.

Laws:
- Identity: apply(pure(K, identity), v) == v
- Homomorphism: apply(pure(K, f), pure(K, x)) == pure(K, f(x))
- Composition:
  apply(apply(apply(pure(K, curry(compose)), u), v), w) == apply(u, apply(v, w))

Multi-outcome kinds (list, ArrayVec) pair every function with every value,
so each value may be used more than once; `clone` produces the copies.
"""

from __future__ import annotations

import copy
import typing
from collections.abc import Callable

from .._errors import MissingInstanceError
from .._types import Cloner, Kind
from ..fun.curry import curry
from ..hkt import resolve
from . import semigroup
from .functor import Functor
from .surrogate import ApplicativeSurrogate, ApplySurrogate


class Apply(Functor):
    @classmethod
    def apply(cls, fab: typing.Any, fa: typing.Any, *, clone: Cloner[typing.Any] = copy.copy) -> typing.Any:
        raise NotImplementedError

    @classmethod
    def lift_a2[A, B, C](cls, f: Callable[[A, B], C], fa: typing.Any, fb: typing.Any) -> typing.Any:
        """Lift a binary function: apply(fmap(fa, curry(f)), fb)."""
        return cls.apply(cls.fmap(fa, curry(f, 2)), fb)


class Applicative(Apply):
    @classmethod
    def pure[A](cls, a: A) -> typing.Any:
        raise NotImplementedError

    @classmethod
    def halted(cls, fa: typing.Any) -> bool:
        """
        Whether `fa` is in a failure-like state that no later apply can leave.

        Traversal stops invoking the user function once the accumulator is
        halted (Nothing, Error, an empty list).
        """
        return False

    @classmethod
    def append_one[A](cls, fa: typing.Any, a: A) -> typing.Any:
        """append(fa, pure(a)) through the value-level semigroup of `fa`."""
        return semigroup.append(fa, cls.pure(a))


# ============================================================================
# Generic functions
# ============================================================================


def apply(
    fab: typing.Any,
    fa: typing.Any,
    /,
    *,
    kind: Kind | None = None,
    clone: Cloner[typing.Any] = copy.copy,
) -> typing.Any:
    k = resolve(fab, kind)
    if issubclass(k, Apply):
        return k.apply(fab, fa, clone=clone)
    if issubclass(k, ApplySurrogate):
        return k.apply_(fab, fa)
    raise MissingInstanceError(k, "Apply")


def pure[A](kind: Kind, a: A) -> typing.Any:
    """Lift `a` into `kind`. There is no value to look the kind up from, so it is required."""
    if isinstance(kind, type) and issubclass(kind, (Applicative, ApplicativeSurrogate)):
        return kind.pure(a)
    raise MissingInstanceError(kind, "Applicative")


def lift_a2[A, B, C](f: Callable[[A, B], C], fa: typing.Any, fb: typing.Any, /, *, kind: Kind | None = None) -> typing.Any:
    k = resolve(fa, kind)
    if issubclass(k, Apply):
        return k.lift_a2(f, fa, fb)
    if issubclass(k, ApplySurrogate):
        return k.apply_(k.map_(fa, curry(f, 2)), fb)
    raise MissingInstanceError(k, "Apply")


def append_one[A](fa: typing.Any, a: A, /, *, kind: Kind | None = None) -> typing.Any:
    k = resolve(fa, kind)
    if not issubclass(k, Applicative):
        raise MissingInstanceError(k, "Applicative")
    return k.append_one(fa, a)


__all__ = (
    "Applicative",
    "Apply",
    "append_one",
    "apply",
    "lift_a2",
    "pure",
)
