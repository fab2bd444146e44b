"""Typeclass hierarchy: classmethod mixins for kind markers plus generic functions."""

from .alt import Alt, Plus, alt, empty
from .apply import Applicative, Apply, append_one, apply, lift_a2, pure
from .bifunctor import Bifunctor, Join, JoinKind, bifunctor_of, bimap, join, lmap, rmap
from .fold import (
    Foldable,
    FoldableIndexed,
    FoldableOnce,
    all_of,
    any_of,
    contains,
    find,
    find_map,
    fold,
    fold_map,
    foldl,
    foldl_idx,
    foldr,
    foldr_idx,
    get_or,
    intercalate,
    is_empty,
    length,
    not_contains,
    to_list,
)
from .functor import Functor, fmap
from .monad import Monad, bind, flatten
from .semigroup import (
    BytesMonoid,
    Monoid,
    Semigroup,
    StrMonoid,
    TupleMonoid,
    append,
    concat,
    identity,
    monoid_from_plus,
    monoid_of,
    register_semigroup,
    semigroup_of,
)
from .surrogate import ApplicativeSurrogate, ApplySurrogate, FunctorSurrogate, MonadSurrogate
from .traverse import DEFAULT_POLICY, Traversable, TraversableOnce, TraversePolicy, sequence, traverse

__all__ = (
    # Semigroup / Monoid
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
    # Functor
    "Functor",
    "fmap",
    # Bifunctor
    "Bifunctor",
    "Join",
    "JoinKind",
    "bifunctor_of",
    "bimap",
    "join",
    "lmap",
    "rmap",
    # Apply / Applicative
    "Applicative",
    "Apply",
    "append_one",
    "apply",
    "lift_a2",
    "pure",
    # Alt / Plus
    "Alt",
    "Plus",
    "alt",
    "empty",
    # Foldable
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
    # Traversable
    "DEFAULT_POLICY",
    "Traversable",
    "TraversableOnce",
    "TraversePolicy",
    "sequence",
    "traverse",
    # Monad
    "Monad",
    "bind",
    "flatten",
    # Surrogates
    "ApplicativeSurrogate",
    "ApplySurrogate",
    "FunctorSurrogate",
    "MonadSurrogate",
)
