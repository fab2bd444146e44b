"""
Callable abstraction
====================

Two capability levels for "a function of arity 1/2/3":

- FnOnce: `call_once(*args)`: may be invoked a single time, consumes itself
- Fn: `call(*args)`: invoked by reference, any number of times

Every Fn is also a FnOnce. Plain Python functions, lambdas and builtins are
repeatable, so they satisfy both without wrapping. `Once` narrows any callable
down to the once-only capability.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._errors import ConsumedError


@typing.runtime_checkable
class FnOnce(typing.Protocol):
    """Invocable once. Invoking consumes the value."""

    def call_once(self, *args: typing.Any) -> typing.Any: ...


@typing.runtime_checkable
class Fn(FnOnce, typing.Protocol):
    """Invocable repeatedly without being consumed."""

    def call(self, *args: typing.Any) -> typing.Any: ...


class Once[**P, R]:
    """
    Once-only callable.

    Wraps any callable; the first invocation releases the wrapped function,
    the second raises ConsumedError.

    Example:
        token = Once(lambda: issue_token())
        token()   # issues
        token()   # ConsumedError
    """

    __slots__ = ("_f",)

    repeatable: typing.ClassVar[bool] = False

    def __init__(self, f: Callable[P, R], /) -> None:
        self._f: Callable[P, R] | None = f

    @property
    def spent(self) -> bool:
        return self._f is None

    def call_once(self, *args: P.args, **kwargs: P.kwargs) -> R:
        f = self._f
        if f is None:
            raise ConsumedError(repr(self))
        self._f = None
        return f(*args, **kwargs)

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> R:
        return self.call_once(*args, **kwargs)

    def __repr__(self) -> str:
        return "Once(<spent>)" if self._f is None else f"Once({self._f!r})"


@dataclass(frozen=True, slots=True)
class Function[**P, R]:
    """Explicit repeatable callable (Fn)."""

    f: Callable[P, R]

    repeatable: typing.ClassVar[bool] = True

    def call(self, *args: P.args, **kwargs: P.kwargs) -> R:
        return self.f(*args, **kwargs)

    def call_once(self, *args: P.args, **kwargs: P.kwargs) -> R:
        return self.f(*args, **kwargs)

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> R:
        return self.f(*args, **kwargs)


def is_repeatable(f: object) -> bool:
    """
    Whether `f` may be invoked more than once.

    Values that know their own capability expose a `repeatable` attribute
    (Once, Curried, Compose). Otherwise any plain callable is repeatable.
    """
    flag = getattr(f, "repeatable", None)
    if isinstance(flag, bool):
        return flag
    if isinstance(f, Fn):
        return True
    if isinstance(f, FnOnce):
        return False
    return callable(f)


def require_repeatable(f: object, what: str) -> None:
    """Reject once-only callables where the caller will invoke `f` many times."""
    if not is_repeatable(f):
        raise TypeError(f"{what} requires a repeatable callable, got {f!r}")


def call(f: typing.Any, *args: typing.Any) -> typing.Any:
    """Invoke `f` through the repeatable capability."""
    require_repeatable(f, "call()")
    if isinstance(f, Fn):
        return f.call(*args)
    return f(*args)


def call_once(f: typing.Any, *args: typing.Any) -> typing.Any:
    """Invoke `f` through the once-only capability (works for every callable)."""
    if isinstance(f, FnOnce):
        return f.call_once(*args)
    return f(*args)


__all__ = (
    "Fn",
    "FnOnce",
    "Function",
    "Once",
    "call",
    "call_once",
    "is_repeatable",
    "require_repeatable",
)
