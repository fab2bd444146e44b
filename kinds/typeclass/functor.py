"""Functor: element-wise transform that keeps the container's shape.

Laws:
- Identity: fmap(c, identity) == c
- Composition: fmap(fmap(c, f), g) == fmap(c, compose(f, g))
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._errors import MissingInstanceError
from .._types import Kind
from ..hkt import HKT1, resolve
from .surrogate import FunctorSurrogate


class Functor(HKT1):
    """Kinds whose elements can be transformed in place."""

    @classmethod
    def fmap[A, B](cls, fa: typing.Any, f: Callable[[A], B]) -> typing.Any:
        raise NotImplementedError

    @classmethod
    def void(cls, fa: typing.Any) -> typing.Any:
        """Replace every element with None."""
        return cls.fmap(fa, _to_none)


def _to_none(_: typing.Any) -> None:
    return None


def fmap[A, B](fa: typing.Any, f: Callable[[A], B], /, *, kind: Kind | None = None) -> typing.Any:
    """Map `f` over `fa`, whatever its kind (surrogate kinds defer the call)."""
    k = resolve(fa, kind)
    if issubclass(k, Functor):
        return k.fmap(fa, f)
    if issubclass(k, FunctorSurrogate):
        return k.map_(fa, f)
    raise MissingInstanceError(k, "Functor")


__all__ = ("Functor", "fmap")
