"""
Kind markers
============

A kind marker is a tag class standing for "a container shape with open
element slots". `Marker.of(A)` maps element types to the concrete type:

    VecKind.of(int)            # list[int]
    ResultOkKind[OSError].of(bytes)   # Result[bytes, OSError]

Markers are never instantiated. Typeclasses (Functor, Monad, ...) are mixins
of classmethods; a marker inherits the ones it implements, so generic code
takes the marker and calls `kind.fmap(fa, f)` without knowing the container.

Маркер + реестр: по значению находим маркер, по маркеру находим операции.
"""

from __future__ import annotations

import functools
import typing
from collections.abc import Callable

from ._errors import MissingInstanceError
from ._logging import logger as _package_logger
from ._types import Kind

logger = _package_logger.getChild("hkt")

# ============================================================================
# Markers
# ============================================================================


class HKT:
    """
    Base of every kind marker.

    - `types`: concrete runtime classes owned by the marker (filled by register)
    - `param`: marker parameter for pinned markers such as ResultOkKind[E]
    - `single`: the container holds at most one element (Option, Result, Id, IO)
    """

    types: typing.ClassVar[tuple[type, ...]] = ()
    param: typing.ClassVar[typing.Any] = None
    single: typing.ClassVar[bool] = False

    def __new__(cls, *args: typing.Any, **kwargs: typing.Any) -> typing.NoReturn:
        raise TypeError(f"{cls.__name__} is a kind marker and cannot be instantiated")

    def __class_getitem__(cls, param: typing.Any) -> type[typing.Self]:
        return _pinned(cls, param)

    @classmethod
    def owns(cls, value: object) -> bool:
        """Whether `value` is an instantiation of this marker."""
        return isinstance(value, cls.types)


class HKT1(HKT):
    """Marker with one open element slot."""

    @classmethod
    def of(cls, a: typing.Any = typing.Any) -> typing.Any:
        """Concrete type at element type `a`. Same `a` always yields the same type."""
        return _of(cls, (a,))

    @classmethod
    def _of(cls, a: typing.Any) -> typing.Any:
        raise NotImplementedError


class HKT2(HKT):
    """Marker with two open element slots."""

    @classmethod
    def of(cls, a: typing.Any = typing.Any, b: typing.Any = typing.Any) -> typing.Any:
        return _of(cls, (a, b))

    @classmethod
    def _of(cls, a: typing.Any, b: typing.Any) -> typing.Any:
        raise NotImplementedError


@functools.cache
def _of(kind: Kind, args: tuple[typing.Any, ...]) -> typing.Any:
    return kind._of(*args)


def _param_name(param: typing.Any) -> str:
    return param.__name__ if isinstance(param, type) else repr(param)


@functools.cache
def _pinned(kind: Kind, param: typing.Any) -> Kind:
    pinned = type(
        f"{kind.__name__}[{_param_name(param)}]",
        (kind,),
        {"param": param, "__module__": kind.__module__, "__qualname__": f"{kind.__qualname__}[{_param_name(param)}]"},
    )
    return pinned


# ============================================================================
# Registry
# ============================================================================

type Resolver = Callable[[typing.Any], Kind]

_KINDS: dict[type, Resolver] = {}


def register[K: HKT](
    kind: type[K],
    *types: type,
    resolver: Resolver | None = None,
    resolvable: bool = True,
) -> type[K]:
    """
    Register concrete classes as instantiations of `kind`.

    `resolver` picks a pinned marker from a value (e.g. ArrayVecKind[capacity]).
    With `resolvable=False` the kind owns the types but value lookup keeps
    resolving them to their primary kind (Ok stays ResultOkKind, not ResultKind).
    """
    kind.types = (*kind.types, *types)
    if not resolvable:
        return kind
    for tp in types:
        _KINDS[tp] = resolver if resolver is not None else functools.partial(_constant, kind)
        logger.debug("registered %s as %s", tp.__name__, kind.__name__)
    return kind


def _constant(kind: Kind, _: typing.Any) -> Kind:
    return kind


def kind_of(value: object) -> Kind:
    """Find the marker owning `value`."""
    for tp in type(value).__mro__:
        resolver = _KINDS.get(tp)
        if resolver is not None:
            return resolver(value)
    logger.debug("no kind registered for %s", type(value).__name__)
    raise MissingInstanceError(value, "kind")


def resolve(value: object, kind: Kind | None = None) -> Kind:
    """Marker for `value`; an explicit `kind` must own the value."""
    if kind is None:
        return kind_of(value)
    if not kind.owns(value):
        raise TypeError(f"{type(value).__name__} is not an instantiation of {kind.__name__}")
    return kind


def require(kind: Kind, capability: type, name: str | None = None) -> None:
    """Reject a kind lacking `capability` before any user function runs."""
    if not (isinstance(kind, type) and issubclass(kind, capability)):
        logger.debug("%s lacks %s", getattr(kind, "__name__", kind), capability.__name__)
        raise MissingInstanceError(kind, name or capability.__name__)


# ============================================================================
# Equivalence (surrogate values)
# ============================================================================


@typing.runtime_checkable
class Equiv(typing.Protocol):
    """A value type equivalent to (not literally) an instantiation of a kind."""

    @classmethod
    def equiv(cls) -> Kind: ...


def register_equiv[K: HKT](kind: type[K], *types: type) -> type[K]:
    """
    Register surrogate classes equivalent to `kind`.

    Checked once, here: each class must name `kind` as its equivalent and
    provide every method in `kind.equiv_requires`.
    """
    required: tuple[str, ...] = getattr(kind, "equiv_requires", ())
    for tp in types:
        if not issubclass(tp, Equiv) or tp.equiv() is not kind:
            raise TypeError(f"{tp.__name__} is not equivalent to {kind.__name__}")
        missing = [name for name in required if not callable(getattr(tp, name, None))]
        if missing:
            raise TypeError(f"{tp.__name__} is missing {', '.join(missing)} required by {kind.__name__}")
    return register(kind, *types)


def is_equiv(value: object, kind: Kind) -> bool:
    return isinstance(value, Equiv) and type(value).equiv() is kind


__all__ = (
    "HKT",
    "HKT1",
    "HKT2",
    "Equiv",
    "is_equiv",
    "kind_of",
    "register",
    "register_equiv",
    "require",
    "resolve",
)
