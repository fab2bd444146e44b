"""Alt / Plus: the Semigroup / Monoid pair lifted to kinds.

`alt` picks or merges two containers of the same kind; `empty` is its identity.

Laws:
- Associativity: alt(alt(a, b), c) == alt(a, alt(b, c))
- Distributivity: fmap(alt(a, b), f) == alt(fmap(a, f), fmap(b, f))
- Identity: alt(empty(K), x) == x == alt(x, empty(K))
"""

from __future__ import annotations

import functools
import typing

from .._errors import MissingInstanceError
from .._types import Kind
from ..hkt import require, resolve
from .functor import Functor


class Alt(Functor):
    @classmethod
    def alt(cls, a: typing.Any, b: typing.Any) -> typing.Any:
        raise NotImplementedError


class Plus(Alt):
    @classmethod
    def empty(cls) -> typing.Any:
        raise NotImplementedError


def alt(a: typing.Any, b: typing.Any, /, *more: typing.Any, kind: Kind | None = None) -> typing.Any:
    """alt(a, b, c) == alt(alt(a, b), c)"""
    k = resolve(a, kind)
    require(k, Alt)
    return functools.reduce(k.alt, (b, *more), a)


def empty(kind: Kind) -> typing.Any:
    if not (isinstance(kind, type) and issubclass(kind, Plus)):
        raise MissingInstanceError(kind, "Plus")
    return kind.empty()


__all__ = ("Alt", "Plus", "alt", "empty")
