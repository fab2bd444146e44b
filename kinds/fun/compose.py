"""
Function composition
====================

`chain(f, g)` is "apply f, feed its output to g". The result is itself a
callable (Fn when both halves are repeatable), so it can be chained further,
forming a left-nested tree that collapses only when invoked.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from .callable import call, call_once, is_repeatable


@dataclass(frozen=True, slots=True)
class Compose[A, X, B]:
    """f: A -> X followed by g: X -> B."""

    f: Callable[[A], X]
    g: Callable[[X], B]

    @property
    def repeatable(self) -> bool:
        return is_repeatable(self.f) and is_repeatable(self.g)

    def call(self, a: A, /) -> B:
        return call(self.g, call(self.f, a))

    def call_once(self, a: A, /) -> B:
        return call_once(self.g, call_once(self.f, a))

    def __call__(self, a: A, /) -> B:
        return self.call_once(a)

    def chain[C](self, h: Callable[[B], C], /) -> Compose[A, B, C]:
        """Append another step: Compose(Compose(f, g), h)."""
        _check_link(self.g, h)
        return Compose(self, h)


class SequenceView[T](Sequence[T]):
    """Read-only, non-copying view of a list."""

    __slots__ = ("_items",)

    def __init__(self, items: list[T]) -> None:
        self._items = items

    @typing.overload
    def __getitem__(self, index: int) -> T: ...
    @typing.overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SequenceView):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return list(self._items) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        raise TypeError("unhashable type: 'SequenceView'")

    def __repr__(self) -> str:
        return f"SequenceView({self._items!r})"


def borrow(value: typing.Any) -> typing.Any:
    """
    Read-only view of an owned value.

    list -> SequenceView, dict -> MappingProxyType, bytes/bytearray -> read-only
    memoryview. Anything else is returned as is.
    """
    if isinstance(value, list):
        return SequenceView(value)
    if isinstance(value, dict):
        return MappingProxyType(value)
    if isinstance(value, (bytes, bytearray)):
        return memoryview(value).toreadonly()
    return value


def _outermost(f: object, side: typing.Literal["f", "g"]) -> object:
    while isinstance(f, Compose):
        f = f.f if side == "f" else f.g
    return f


def _hints(f: object) -> dict[str, typing.Any]:
    # Unresolvable or absent annotations only disable the link check
    try:
        return typing.get_type_hints(f)
    except (AttributeError, NameError, TypeError):
        return {}


def _produces(f: object) -> type | None:
    found = _hints(_outermost(f, "g")).get("return")
    return found if isinstance(found, type) else None


def _expects(g: object) -> type | None:
    target = _outermost(g, "f")
    try:
        params = list(inspect.signature(target).parameters.values())  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not params:
        return None
    found = _hints(target).get(params[0].name)
    return found if isinstance(found, type) else None


# int is accepted where float is expected, int and float where complex is
_PROMOTIONS: dict[type, tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}


def _fits(produced: type, expected: type) -> bool:
    return issubclass(produced, expected) or issubclass(produced, _PROMOTIONS.get(expected, ()))


def _check_link(f: object, g: object) -> None:
    produced = _produces(f)
    expected = _expects(g)
    if produced is None or expected is None:
        return
    if not _fits(produced, expected):
        raise TypeError(
            f"cannot chain: {produced.__name__} output does not fit {expected.__name__} input"
        )


def chain(f: Callable[..., typing.Any], g: Callable[..., typing.Any], *more: Callable[..., typing.Any]) -> Compose:
    """
    Compose left to right: chain(f, g, h)(x) == h(g(f(x))).

    Raises TypeError when annotations prove the output of one step cannot be
    the input of the next.
    """
    _check_link(f, g)
    composed = Compose(f, g)
    for step in more:
        composed = composed.chain(step)
    return composed


def compose[A, X, B](f: Callable[[A], X], g: Callable[[X], B]) -> Compose[A, X, B]:
    """Two-function composition, f first. compose(f, g)(x) == g(f(x))."""
    return chain(f, g)


def chain_ref(f: Callable[..., typing.Any], g: Callable[..., typing.Any]) -> Compose:
    """
    Chain a step expecting a borrowed view after one producing an owned value.

    chain_ref(build_list, sum_view)(x) == sum_view(borrow(build_list(x)))
    """
    return Compose(Compose(f, borrow), g)


__all__ = (
    "Compose",
    "SequenceView",
    "borrow",
    "chain",
    "chain_ref",
    "compose",
)
