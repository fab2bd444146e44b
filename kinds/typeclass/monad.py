"""Monad: sequence computations where the next one depends on the previous result.

Laws:
- Left identity: bind(pure(K, a), f) == f(a)
- Right identity: bind(m, lambda a: pure(K, a)) == m
- Associativity: bind(bind(m, f), g) == bind(m, lambda a: bind(f(a), g))

Failure-like values (Nothing, Error) short-circuit: `f` is never invoked.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._errors import MissingInstanceError
from .._helpers import identity
from .._types import Kind
from ..hkt import resolve
from .apply import Applicative
from .surrogate import MonadSurrogate


class Monad(Applicative):
    @classmethod
    def bind[A](cls, ma: typing.Any, f: Callable[[A], typing.Any]) -> typing.Any:
        raise NotImplementedError

    @classmethod
    def flatten(cls, mma: typing.Any) -> typing.Any:
        """Remove one layer of nesting."""
        return cls.bind(mma, identity)


def bind[A](ma: typing.Any, f: Callable[[A], typing.Any], /, *, kind: Kind | None = None) -> typing.Any:
    k = resolve(ma, kind)
    if issubclass(k, Monad):
        return k.bind(ma, f)
    if issubclass(k, MonadSurrogate):
        return k.bind_(ma, f)
    raise MissingInstanceError(k, "Monad")


def flatten(mma: typing.Any, /, *, kind: Kind | None = None) -> typing.Any:
    k = resolve(mma, kind)
    if issubclass(k, Monad):
        return k.flatten(mma)
    if issubclass(k, MonadSurrogate):
        return k.bind_(mma, identity)
    raise MissingInstanceError(k, "Monad")


__all__ = ("Monad", "bind", "flatten")
