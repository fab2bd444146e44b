"""
Foldable
========

Collapse a container to a single value. Two primitives, everything else
derived:

- foldl(fa, f, b): f(f(f(b, a0), a1), a2)
- foldr(fa, f, b): f(a0, f(a1, f(a2, b)))

Single-element kinds (FoldableOnce) additionally offer `get_or`; sequences
and maps (FoldableIndexed) expose the index or key to the folding function.

    foldl([1, 2, 3], lambda acc, a: acc + a, 0)          # 6
    foldr(["a", "b"], lambda a, acc: acc + a, "")        # "ba"
    intercalate(["a", "b", "c"], ", ")                   # "a, b, c"

Свёртки: всё остальное выражается через foldl / foldr.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Nothing, Option, Some

from .._errors import MissingInstanceError
from .._helpers import identity, invoker
from .._types import Kind, Predicate
from ..hkt import HKT1, resolve
from .semigroup import Monoid, monoid_of

# ============================================================================
# Typeclasses
# ============================================================================


class Foldable(HKT1):
    @classmethod
    def foldl[A, B](cls, fa: typing.Any, f: Callable[[B, A], B], b: B) -> B:
        raise NotImplementedError

    @classmethod
    def foldr[A, B](cls, fa: typing.Any, f: Callable[[A, B], B], b: B) -> B:
        raise NotImplementedError

    @classmethod
    def length(cls, fa: typing.Any) -> int:
        return cls.foldl(fa, _count, 0)

    @classmethod
    def is_empty(cls, fa: typing.Any) -> bool:
        return cls.length(fa) == 0

    @classmethod
    def any[A](cls, fa: typing.Any, p: Predicate[A]) -> bool:
        test = invoker(cls, p, f"{cls.__name__}.any()")
        return cls.foldl(fa, lambda found, a: found or bool(test(a)), False)

    @classmethod
    def all[A](cls, fa: typing.Any, p: Predicate[A]) -> bool:
        test = invoker(cls, p, f"{cls.__name__}.all()")
        return cls.foldl(fa, lambda ok, a: ok and bool(test(a)), True)

    @classmethod
    def contains(cls, fa: typing.Any, x: object) -> bool:
        return cls.any(fa, lambda a: a == x)

    @classmethod
    def not_contains(cls, fa: typing.Any, x: object) -> bool:
        return not cls.contains(fa, x)

    @classmethod
    def find_map[A, B](cls, fa: typing.Any, f: Callable[[A], Option[B]]) -> Option[B]:
        """First Some produced by `f`; `f` is not invoked after it."""
        g = invoker(cls, f, f"{cls.__name__}.find_map()")

        def step(found: Option[B], a: A) -> Option[B]:
            match found:
                case Some():
                    return found
                case _:
                    return g(a)

        return cls.foldl(fa, step, Nothing())

    @classmethod
    def find[A](cls, fa: typing.Any, p: Predicate[A]) -> Option[A]:
        test = invoker(cls, p, f"{cls.__name__}.find()")
        return cls.find_map(fa, lambda a: Some(a) if test(a) else Nothing())

    @classmethod
    def fold_map[A, M](cls, fa: typing.Any, f: Callable[[A], M], monoid: type) -> M:
        """
        Map every element into a monoid and combine the results left to right.

        `monoid` is either a Monoid instance class or a concrete type with a
        registered one (str, list, tuple, ...). An empty container folds to
        the monoid's identity.
        """
        instance = monoid if issubclass(monoid, Monoid) else monoid_of(monoid)
        g = invoker(cls, f, f"{cls.__name__}.fold_map()")
        return cls.foldl(fa, lambda acc, a: instance.append(acc, g(a)), instance.identity())

    @classmethod
    def fold[M](cls, fa: typing.Any, monoid: type) -> M:
        return cls.fold_map(fa, identity, monoid)

    @classmethod
    def intercalate[M](cls, fa: typing.Any, sep: M) -> M:
        """Combine elements with `sep` between each pair."""
        instance = monoid_of(sep)

        def step(acc: Option[M], a: M) -> Option[M]:
            if isinstance(acc, Some):
                return Some(instance.append(instance.append(acc.unwrap(), sep), a))
            return Some(a)

        joined = cls.foldl(fa, step, Nothing())
        return joined.unwrap() if isinstance(joined, Some) else instance.identity()

    @classmethod
    def to_list(cls, fa: typing.Any) -> list[typing.Any]:
        return cls.foldl(fa, _collect, [])


class FoldableOnce(Foldable):
    """Foldable over at most one element."""

    single = True

    @classmethod
    def get_or[A](cls, fa: typing.Any, default: A) -> A:
        """The element if present, else `default`."""
        return cls.foldl(fa, _second, default)


class FoldableIndexed(Foldable):
    """Foldable whose folding function also sees the index (or key)."""

    @classmethod
    def foldl_idx[I, A, B](cls, fa: typing.Any, f: Callable[[B, I, A], B], b: B) -> B:
        raise NotImplementedError

    @classmethod
    def foldr_idx[I, A, B](cls, fa: typing.Any, f: Callable[[I, A, B], B], b: B) -> B:
        raise NotImplementedError


def _count(n: int, _: typing.Any) -> int:
    return n + 1


def _second[A](_: typing.Any, a: A) -> A:
    return a


def _collect[A](items: list[A], a: A) -> list[A]:
    items.append(a)
    return items


# ============================================================================
# Generic functions
# ============================================================================


def _foldable(fa: typing.Any, kind: Kind | None, capability: type[Foldable] = Foldable) -> type[typing.Any]:
    k = resolve(fa, kind)
    if not issubclass(k, capability):
        raise MissingInstanceError(k, capability.__name__)
    return k


def foldl[A, B](fa: typing.Any, f: Callable[[B, A], B], b: B, /, *, kind: Kind | None = None) -> B:
    k = _foldable(fa, kind)
    return k.foldl(fa, invoker(k, f, f"{k.__name__}.foldl()"), b)


def foldr[A, B](fa: typing.Any, f: Callable[[A, B], B], b: B, /, *, kind: Kind | None = None) -> B:
    k = _foldable(fa, kind)
    return k.foldr(fa, invoker(k, f, f"{k.__name__}.foldr()"), b)


def foldl_idx(fa: typing.Any, f: Callable[..., typing.Any], b: typing.Any, /, *, kind: Kind | None = None) -> typing.Any:
    k = _foldable(fa, kind, FoldableIndexed)
    return k.foldl_idx(fa, invoker(k, f, f"{k.__name__}.foldl_idx()"), b)


def foldr_idx(fa: typing.Any, f: Callable[..., typing.Any], b: typing.Any, /, *, kind: Kind | None = None) -> typing.Any:
    k = _foldable(fa, kind, FoldableIndexed)
    return k.foldr_idx(fa, invoker(k, f, f"{k.__name__}.foldr_idx()"), b)


def length(fa: typing.Any, /, *, kind: Kind | None = None) -> int:
    return _foldable(fa, kind).length(fa)


def is_empty(fa: typing.Any, /, *, kind: Kind | None = None) -> bool:
    return _foldable(fa, kind).is_empty(fa)


def any_of[A](fa: typing.Any, p: Predicate[A], /, *, kind: Kind | None = None) -> bool:
    """Foldable.any as a function (named to leave the builtin alone)."""
    return _foldable(fa, kind).any(fa, p)


def all_of[A](fa: typing.Any, p: Predicate[A], /, *, kind: Kind | None = None) -> bool:
    return _foldable(fa, kind).all(fa, p)


def contains(fa: typing.Any, x: object, /, *, kind: Kind | None = None) -> bool:
    return _foldable(fa, kind).contains(fa, x)


def not_contains(fa: typing.Any, x: object, /, *, kind: Kind | None = None) -> bool:
    return _foldable(fa, kind).not_contains(fa, x)


def find[A](fa: typing.Any, p: Predicate[A], /, *, kind: Kind | None = None) -> Option[A]:
    return _foldable(fa, kind).find(fa, p)


def find_map[A, B](fa: typing.Any, f: Callable[[A], Option[B]], /, *, kind: Kind | None = None) -> Option[B]:
    return _foldable(fa, kind).find_map(fa, f)


def fold_map[A, M](fa: typing.Any, f: Callable[[A], M], monoid: type, /, *, kind: Kind | None = None) -> M:
    return _foldable(fa, kind).fold_map(fa, f, monoid)


def fold[M](fa: typing.Any, monoid: type, /, *, kind: Kind | None = None) -> M:
    return _foldable(fa, kind).fold(fa, monoid)


def intercalate[M](fa: typing.Any, sep: M, /, *, kind: Kind | None = None) -> M:
    return _foldable(fa, kind).intercalate(fa, sep)


def to_list(fa: typing.Any, /, *, kind: Kind | None = None) -> list[typing.Any]:
    return _foldable(fa, kind).to_list(fa)


def get_or[A](fa: typing.Any, default: A, /, *, kind: Kind | None = None) -> A:
    return _foldable(fa, kind, FoldableOnce).get_or(fa, default)


__all__ = (
    "Foldable",
    "FoldableIndexed",
    "FoldableOnce",
    "all_of",
    "any_of",
    "contains",
    "find",
    "find_map",
    "fold",
    "fold_map",
    "foldl",
    "foldl_idx",
    "foldr",
    "foldr_idx",
    "get_or",
    "intercalate",
    "is_empty",
    "length",
    "not_contains",
    "to_list",
)
