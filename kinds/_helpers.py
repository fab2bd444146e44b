"""Internal helpers for kinds.

Common functions used across typeclass and instance modules.
These are not part of the public API but can be used for writing custom instances."""

from __future__ import annotations

import functools
import typing
from collections.abc import Callable

from ._types import Kind
from .fun.callable import call, call_once, require_repeatable


def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def push[T](items: list[T], item: T) -> list[T]:
    """Append without mutating: returns a new list ending with `item`."""
    return [*items, item]


def invoker(kind: Kind, f: typing.Any, what: str) -> Callable[..., typing.Any]:
    """
    Call path for `f` under `kind`.

    Single-element kinds invoke `f` at most once, so once-only callables are
    accepted. Every other kind may invoke it per element and requires a
    repeatable callable up front.
    """
    if kind.single:
        return functools.partial(call_once, f)
    require_repeatable(f, what)
    return functools.partial(call, f)


__all__ = (
    "identity",
    "invoker",
    "push",
)
