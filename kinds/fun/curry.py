"""
Currying
========

`curry(f)` turns an N-ary callable into a chain of unary steps. Each step is
an immutable `Curried` snapshot remembering the arguments supplied so far;
supplying the last one invokes `f` and returns its result directly.

    add3 = curry(lambda a, b, c: a + b + c)
    add3(1)(2)(3)          # 6
    step = add3(1)         # Curried(<lambda>, [1, _, _])
    step.pending           # 2
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from .callable import call_once, is_repeatable, require_repeatable

type SlotState = Literal["supplied", "pending"]


@dataclass(frozen=True, slots=True)
class Curried[R]:
    """
    Curried chain node.

    Holds the original callable, its arity and the arguments supplied so far.
    Nodes are never mutated: supplying an argument produces a new node, so a
    node over a repeatable callable can be reused (the "clone" path), while a
    node over a Once callable is spent by its final invocation.
    """

    f: Callable[..., R]
    arity: int
    args: tuple[typing.Any, ...] = ()

    def __post_init__(self) -> None:
        if self.arity < 1:
            raise ValueError("Curried.arity must be >= 1")
        if len(self.args) >= self.arity:
            raise ValueError("Curried cannot hold every argument; it would have been invoked")

    @property
    def repeatable(self) -> bool:
        return is_repeatable(self.f)

    @property
    def supplied(self) -> int:
        return len(self.args)

    @property
    def pending(self) -> int:
        return self.arity - len(self.args)

    @property
    def slots(self) -> tuple[SlotState, ...]:
        """Per-position state: which arguments are filled."""
        return tuple("supplied" if i < len(self.args) else "pending" for i in range(self.arity))

    def call(self, arg: typing.Any, /) -> Curried[R] | R:
        """Supply the next argument without giving up this node."""
        require_repeatable(self.f, "Curried.call()")
        return self._step(arg)

    def call_once(self, arg: typing.Any, /) -> Curried[R] | R:
        """Supply the next argument; the node is not expected to be used again."""
        return self._step(arg)

    def __call__(self, arg: typing.Any, /) -> Curried[R] | R:
        return self._step(arg)

    def uncurry(self) -> Callable[..., R]:
        """Recover the original callable. Only a node with no supplied arguments can."""
        if self.args:
            raise TypeError(f"uncurry() requires a chain with no supplied arguments, got {self.supplied}")
        return self.f

    def _step(self, arg: typing.Any) -> Curried[R] | R:
        args = (*self.args, arg)
        if len(args) == self.arity:
            return call_once(self.f, *args)
        return Curried(self.f, self.arity, args)

    def __repr__(self) -> str:
        name = getattr(self.f, "__name__", repr(self.f))
        shown = [repr(a) for a in self.args] + ["_"] * self.pending
        return f"Curried({name}, [{', '.join(shown)}])"


def _positional_arity(f: Callable[..., typing.Any]) -> int:
    signature = inspect.signature(f)
    return sum(
        1
        for p in signature.parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
    )


def curry[R](f: Callable[..., R], arity: int | None = None) -> Curried[R]:
    """
    Curry `f`.

    Arity defaults to the number of required positional parameters; pass it
    explicitly for builtins, Once wrappers or callables taking *args.
    """
    if arity is None:
        try:
            arity = _positional_arity(f)
        except (TypeError, ValueError) as exc:
            raise TypeError(f"cannot infer arity of {f!r}; pass arity=") from exc
    if arity < 1:
        raise ValueError(f"curry() requires arity >= 1, got {arity}")
    return Curried(f, arity)


def uncurry[R](curried: Curried[R]) -> Callable[..., R]:
    """Function form of Curried.uncurry()."""
    return curried.uncurry()


__all__ = ("Curried", "SlotState", "curry", "uncurry")
