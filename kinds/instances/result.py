"""
Result kinds
============

kungfu `Ok` / `Error` seen two ways:

- ResultOkKind[E]: one slot, the error type pinned to E. Functor, Monad,
  Alt (first Ok wins) and traversal over the Ok value.
- ResultKind: two slots (Ok value, Error value). Bifunctor.

Value lookup resolves Ok/Error to ResultOkKind; bimap/lmap/rmap step over
to ResultKind on their own.

    parse = lambda s: Ok(int(s)) if s.isdigit() else Error(f"bad: {s}")
    traverse(["1", "x", "y"], parse, ap=ResultOkKind)   # Error("bad: x")
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Error, Ok, Result

from ..fun.callable import call_once
from ..hkt import register
from ..typeclass.alt import Alt
from ..typeclass.bifunctor import Bifunctor
from ..typeclass.monad import Monad
from ..typeclass.traverse import TraversableOnce


class ResultKind(Bifunctor):
    single = True

    @classmethod
    def _of(cls, a: typing.Any, b: typing.Any) -> typing.Any:
        return Result[a, b]

    @classmethod
    def bimap[A, B, C, D](cls, fab: Result[A, B], fa: Callable[[A], C], fb: Callable[[B], D]) -> Result[C, D]:
        match fab:
            case Ok(value):
                return Ok(call_once(fa, value))
            case Error(error):
                return Error(call_once(fb, error))


class ResultOkKind(Monad, Alt, TraversableOnce):
    """Result with the error slot pinned: ResultOkKind[OSError].of(bytes) == Result[bytes, OSError]."""

    single = True
    two_slot = ResultKind

    @classmethod
    def _of(cls, a: typing.Any) -> typing.Any:
        return Result[a, cls.param if cls.param is not None else typing.Any]

    @classmethod
    def fmap[A, B, E](cls, fa: Result[A, E], f: Callable[[A], B]) -> Result[B, E]:
        match fa:
            case Ok(value):
                return Ok(call_once(f, value))
            case _:
                return fa

    @classmethod
    def apply(cls, fab: Result[typing.Any, typing.Any], fa: Result[typing.Any, typing.Any], *, clone: typing.Any = None) -> Result[typing.Any, typing.Any]:
        # The function side is inspected first, so its error wins
        match fab, fa:
            case Ok(f), Ok(value):
                return Ok(call_once(f, value))
            case Error(), _:
                return fab
            case _:
                return fa

    @classmethod
    def pure[A](cls, a: A) -> Result[A, typing.Any]:
        return Ok(a)

    @classmethod
    def halted(cls, fa: Result[typing.Any, typing.Any]) -> bool:
        return isinstance(fa, Error)

    @classmethod
    def alt[A, E](cls, a: Result[A, E], b: Result[A, E]) -> Result[A, E]:
        return a if isinstance(a, Ok) else b

    @classmethod
    def foldl[A, B](cls, fa: Result[A, typing.Any], f: Callable[[B, A], B], b: B) -> B:
        match fa:
            case Ok(value):
                return f(b, value)
            case _:
                return b

    @classmethod
    def foldr[A, B](cls, fa: Result[A, typing.Any], f: Callable[[A, B], B], b: B) -> B:
        match fa:
            case Ok(value):
                return f(value, b)
            case _:
                return b

    @classmethod
    def rewrap[B](cls, fa: Result[typing.Any, typing.Any], b: B) -> Result[B, typing.Any]:
        return Ok(b)

    @classmethod
    def bind[A, E](cls, ma: Result[A, E], f: Callable[[A], Result[typing.Any, E]]) -> Result[typing.Any, E]:
        match ma:
            case Ok(value):
                return call_once(f, value)
            case _:
                return ma


register(ResultOkKind, Ok, Error)
register(ResultKind, Ok, Error, resolvable=False)


# ============================================================================
# Result helpers
# ============================================================================


def swap[T, E](r: Result[T, E]) -> Result[E, T]:
    """Exchange the Ok and Error sides."""
    match r:
        case Ok(value):
            return Error(value)
        case Error(error):
            return Ok(error)


def recover[T, E, R](r: Result[T, E], f: Callable[[E], Result[T, R]]) -> Result[T, R]:
    """Bind on the Error side: `f` may turn the error back into Ok."""
    match r:
        case Error(error):
            return call_once(f, error)
        case _:
            return r


def discard_err[T, E](r: Result[T, E], f: Callable[[E], typing.Any]) -> Result[T, E]:
    """Run `f` for its effect when `r` is an Error; `r` is returned unchanged."""
    match r:
        case Error(error):
            call_once(f, error)
    return r


def filter_ok[T, E](r: Result[T, E], pred: Callable[[T], bool], on_fail: Callable[[T], E]) -> Result[T, E]:
    """Turn an Ok failing `pred` into Error(on_fail(value))."""
    match r:
        case Ok(value) if call_once(pred, value):
            return r
        case Ok(value):
            return Error(call_once(on_fail, value))
        case _:
            return r


def zip_ok[T, R, E](r: Result[T, E], f: Callable[[T], Result[R, E]]) -> Result[tuple[T, R], E]:
    """Pair the Ok value with the Ok value of `f(value)`; the first Error wins."""
    return ResultOkKind.bind(r, lambda value: ResultOkKind.fmap(call_once(f, value), lambda other: (value, other)))


__all__ = (
    "ResultKind",
    "ResultOkKind",
    "discard_err",
    "filter_ok",
    "recover",
    "swap",
    "zip_ok",
)
