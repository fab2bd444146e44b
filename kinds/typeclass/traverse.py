"""
Traverse
========

Run an effectful function over every element and collect the effects into
one effect of the rebuilt container:

    traverse([1, 2, 3], parse, ap=ResultOkKind)     # Ok([...]) or the first Error
    sequence([Some(1), Some(2)])                    # Some([1, 2])

Four shapes, picked from the source kind and the target applicative:

    source \\ target   single outcome      multiple outcomes
    many elements      traversem1          traversemm
    one element        traverse11          traverse1m

Single-outcome targets (Option, Result, Id, ...) short-circuit: once the
accumulator is failure-like (Applicative.halted) the function is not invoked
for the remaining elements, and the first failure is the result.

Multi-outcome targets (list, ArrayVec) combine every outcome of every step.
That grows multiplicatively; TraversePolicy.max_outcomes bounds it.

Обход = fold по источнику + apply в целевом аппликативе.
"""

from __future__ import annotations

import copy
import functools
import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._errors import CombinatorialLimitError, MissingInstanceError
from .._helpers import identity, invoker
from .._logging import logger as _package_logger
from .._types import Cloner, Kind
from ..fun.callable import call_once
from ..fun.curry import curry
from ..hkt import kind_of, require, resolve
from .apply import Applicative
from .fold import Foldable, FoldableIndexed, FoldableOnce
from .functor import Functor

logger = _package_logger.getChild("traverse")


# ============================================================================
# Policy
# ============================================================================


@dataclass(frozen=True, slots=True)
class TraversePolicy:
    """
    Traversal configuration.

    - max_outcomes: upper bound on outcomes a multi-outcome target may hold
      at any step (None = unbounded)
    - clone: copies an element each time a multi-outcome apply reuses it
    """

    max_outcomes: int | None = None
    clone: Cloner[typing.Any] = copy.copy

    def __post_init__(self) -> None:
        if self.max_outcomes is not None and self.max_outcomes < 1:
            raise ValueError("TraversePolicy.max_outcomes must be >= 1")


DEFAULT_POLICY = TraversePolicy()


def _check_outcomes(ap: Kind, acc: typing.Any, policy: TraversePolicy) -> None:
    if policy.max_outcomes is None or not issubclass(ap, Foldable):
        return
    outcomes = ap.length(acc)
    if outcomes > policy.max_outcomes:
        logger.debug("traversal into %s reached %d outcomes", ap.__name__, outcomes)
        raise CombinatorialLimitError(policy.max_outcomes, outcomes)


# ============================================================================
# Typeclasses
# ============================================================================


class Traversable(Functor, FoldableIndexed):
    """
    Traversable source with zero or more elements.

    Instances supply `seed` (an empty container shaped like the source) and
    `grow` (a new container with one more element at index or key `i`);
    the traversal folds the source with foldl_idx and grows the container
    inside the target applicative.
    """

    @classmethod
    def seed(cls, fa: typing.Any) -> typing.Any:
        raise NotImplementedError

    @classmethod
    def grow(cls, acc: typing.Any, i: typing.Any, b: typing.Any) -> typing.Any:
        raise NotImplementedError

    @classmethod
    def traversem1(cls, fa: typing.Any, f: Callable[[typing.Any], typing.Any], ap: Kind) -> typing.Any:
        """Collect into a single-outcome applicative; stops at the first failure."""
        return cls._traverse_many(fa, f, ap, DEFAULT_POLICY)

    @classmethod
    def traversemm(
        cls,
        fa: typing.Any,
        f: Callable[[typing.Any], typing.Any],
        ap: Kind,
        policy: TraversePolicy = DEFAULT_POLICY,
    ) -> typing.Any:
        """Collect into a multi-outcome applicative: every combination of outcomes."""
        return cls._traverse_many(fa, f, ap, policy)

    @classmethod
    def traverse(
        cls,
        fa: typing.Any,
        f: Callable[[typing.Any], typing.Any],
        ap: Kind,
        policy: TraversePolicy = DEFAULT_POLICY,
    ) -> typing.Any:
        if ap.single:
            return cls.traversem1(fa, f, ap)
        return cls.traversemm(fa, f, ap, policy)

    @classmethod
    def _traverse_many(
        cls,
        fa: typing.Any,
        f: Callable[[typing.Any], typing.Any],
        ap: Kind,
        policy: TraversePolicy,
    ) -> typing.Any:
        require(ap, Applicative)
        effect = invoker(cls, f, f"{cls.__name__}.traverse()")
        grow = curry(cls.grow, 3)
        multi = not ap.single

        def step(acc: typing.Any, i: typing.Any, a: typing.Any) -> typing.Any:
            if ap.halted(acc):
                return acc
            partial = ap.fmap(acc, lambda container: grow(container)(i))
            acc = ap.apply(partial, effect(a), clone=policy.clone)
            if multi:
                _check_outcomes(ap, acc, policy)
            return acc

        return cls.foldl_idx(fa, step, ap.pure(cls.seed(fa)))


class TraversableOnce(Functor, FoldableOnce):
    """
    Traversable source with zero or one element (Option, Result, Id).

    `rewrap(fa, b)` puts `b` back into the shape of `fa`; an empty source
    is lifted into the target unchanged.
    """

    @classmethod
    def rewrap(cls, fa: typing.Any, b: typing.Any) -> typing.Any:
        raise NotImplementedError

    @classmethod
    def traverse11(cls, fa: typing.Any, f: Callable[[typing.Any], typing.Any], ap: Kind) -> typing.Any:
        """Swap the layers: Option[Result[B]] -> Result[Option[B]]."""
        require(ap, Applicative)
        rewrap = functools.partial(cls.rewrap, fa)
        return cls.foldl(fa, lambda _, a: ap.fmap(call_once(f, a), rewrap), ap.pure(fa))

    @classmethod
    def traverse1m(
        cls,
        fa: typing.Any,
        f: Callable[[typing.Any], typing.Any],
        ap: Kind,
        policy: TraversePolicy = DEFAULT_POLICY,
    ) -> typing.Any:
        """Replicate the container for every outcome: Option[list[B]] -> list[Option[B]]."""
        out = cls.traverse11(fa, f, ap)
        _check_outcomes(ap, out, policy)
        return out

    @classmethod
    def traverse(
        cls,
        fa: typing.Any,
        f: Callable[[typing.Any], typing.Any],
        ap: Kind,
        policy: TraversePolicy = DEFAULT_POLICY,
    ) -> typing.Any:
        if ap.single:
            return cls.traverse11(fa, f, ap)
        return cls.traverse1m(fa, f, ap, policy)

    # Names by what the shape does to the layers
    @classmethod
    def traverse_swap(cls, fa: typing.Any, f: Callable[[typing.Any], typing.Any], ap: Kind) -> typing.Any:
        return cls.traverse11(fa, f, ap)

    @classmethod
    def traverse_replicate(
        cls,
        fa: typing.Any,
        f: Callable[[typing.Any], typing.Any],
        ap: Kind,
        policy: TraversePolicy = DEFAULT_POLICY,
    ) -> typing.Any:
        return cls.traverse1m(fa, f, ap, policy)


# ============================================================================
# Generic functions
# ============================================================================


def _traversable(fa: typing.Any, kind: Kind | None) -> type[Traversable] | type[TraversableOnce]:
    k = resolve(fa, kind)
    if not issubclass(k, (Traversable, TraversableOnce)):
        raise MissingInstanceError(k, "Traversable")
    return k


def traverse(
    fa: typing.Any,
    f: Callable[[typing.Any], typing.Any],
    /,
    *,
    ap: Kind,
    kind: Kind | None = None,
    policy: TraversePolicy = DEFAULT_POLICY,
) -> typing.Any:
    """
    Traverse `fa` with `f`, collecting into the applicative `ap`.

    Both capabilities are checked before `f` runs for the first time.
    """
    k = _traversable(fa, kind)
    require(ap, Applicative)
    return k.traverse(fa, f, ap, policy)


def sequence(
    fa: typing.Any,
    /,
    *,
    ap: Kind | None = None,
    kind: Kind | None = None,
    policy: TraversePolicy = DEFAULT_POLICY,
) -> typing.Any:
    """
    Turn a container of effects into an effect of a container.

    Without `ap` the target is taken from the first element; an empty
    container gives nothing to look at, so `ap` is then required.
    """
    k = _traversable(fa, kind)
    if ap is None:
        if k.is_empty(fa):
            raise ValueError("sequence() of an empty container needs an explicit ap=")
        ap = kind_of(k.find(fa, _always).unwrap())
    require(ap, Applicative)
    return k.traverse(fa, identity, ap, policy)


def _always(_: typing.Any) -> bool:
    return True


__all__ = (
    "DEFAULT_POLICY",
    "Traversable",
    "TraversableOnce",
    "TraversePolicy",
    "sequence",
    "traverse",
)
