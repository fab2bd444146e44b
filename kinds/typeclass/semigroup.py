"""
Semigroup / Monoid
==================

Combine two values of one *concrete* type (as opposed to Alt/Plus, which are
the same idea for kinds with open element slots).

Laws:
- Associativity: append(append(x, y), z) == append(x, append(y, z))
- Identity: append(x, identity(T)) == x == append(identity(T), x)

Instances are classes keyed by the concrete types they cover; lookup walks
the value's MRO like the kind registry does.
"""

from __future__ import annotations

import functools
import typing

from .._errors import MissingInstanceError
from .._logging import logger as _package_logger
from .._types import Kind

logger = _package_logger.getChild("semigroup")


class Semigroup:
    """Associative append for one concrete type."""

    @classmethod
    def append[T](cls, a: T, b: T) -> T:
        raise NotImplementedError


class Monoid(Semigroup):
    """Semigroup with a two-sided identity."""

    @classmethod
    def identity(cls) -> typing.Any:
        raise NotImplementedError


_SEMIGROUPS: dict[type, type[Semigroup]] = {}


def register_semigroup[S: Semigroup](instance: type[S], *types: type) -> type[S]:
    for tp in types:
        _SEMIGROUPS[tp] = instance
        logger.debug("registered %s for %s", instance.__name__, tp.__name__)
    return instance


def semigroup_of(subject: object) -> type[Semigroup]:
    """Instance for a value or a type."""
    tp = subject if isinstance(subject, type) else type(subject)
    for base in tp.__mro__:
        found = _SEMIGROUPS.get(base)
        if found is not None:
            return found
    raise MissingInstanceError(tp, "Semigroup")


def monoid_of(subject: object) -> type[Monoid]:
    found = semigroup_of(subject)
    if not issubclass(found, Monoid):
        raise MissingInstanceError(subject, "Monoid")
    return found


def append[T](a: T, b: T, /, *more: T) -> T:
    """append(a, b, c) == append(append(a, b), c)"""
    instance = semigroup_of(a)
    result = instance.append(a, b)
    for item in more:
        result = instance.append(result, item)
    return result


def identity(tp: type) -> typing.Any:
    """Monoid identity for the concrete type `tp`."""
    return monoid_of(tp).identity()


def concat[T](items: typing.Iterable[T], tp: type[T]) -> T:
    """Fold an iterable with append, starting from identity(tp)."""
    instance = monoid_of(tp)
    return functools.reduce(instance.append, items, instance.identity())


def monoid_from_plus(kind: Kind, *types: type) -> type[Monoid]:
    """
    Derive a Monoid from a kind's Alt/Plus (append = alt, identity = empty).

    Used by the sequence and map instances, where combining values and
    combining containers are the same operation.
    """

    class Derived(Monoid):
        @classmethod
        def append[T](cls, a: T, b: T) -> T:
            return kind.alt(a, b)

        @classmethod
        def identity(cls) -> typing.Any:
            return kind.empty()

    Derived.__name__ = Derived.__qualname__ = f"{kind.__name__}Monoid"
    return register_semigroup(Derived, *types)


# ============================================================================
# Builtin instances
# ============================================================================


class StrMonoid(Monoid):
    @classmethod
    def append(cls, a: str, b: str) -> str:
        return a + b

    @classmethod
    def identity(cls) -> str:
        return ""


class BytesMonoid(Monoid):
    @classmethod
    def append(cls, a: bytes, b: bytes) -> bytes:
        return a + b

    @classmethod
    def identity(cls) -> bytes:
        return b""


class TupleMonoid(Monoid):
    @classmethod
    def append(cls, a: tuple[typing.Any, ...], b: tuple[typing.Any, ...]) -> tuple[typing.Any, ...]:
        return a + b

    @classmethod
    def identity(cls) -> tuple[typing.Any, ...]:
        return ()


register_semigroup(StrMonoid, str)
register_semigroup(BytesMonoid, bytes)
register_semigroup(TupleMonoid, tuple)


__all__ = (
    "BytesMonoid",
    "Monoid",
    "Semigroup",
    "StrMonoid",
    "TupleMonoid",
    "append",
    "concat",
    "identity",
    "monoid_from_plus",
    "monoid_of",
    "register_semigroup",
    "semigroup_of",
)
