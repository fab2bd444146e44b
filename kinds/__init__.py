"""
Typeclasses over container kinds.

Write an algorithm once against Functor / Monad / Foldable / Traversable and
run it over lists, maps, kungfu Option and Result, fixed-capacity ArrayVecs,
Id and lazy IO alike.

Architecture:
- Kind markers (hkt) tag a container shape; a registry finds the marker for a value
- Typeclasses are classmethod mixins on markers, with generic functions on top
- Surrogate typeclasses let lazy IO nodes stand in for the IO kind
- Curried and composed callables (fun) glue user functions into the hierarchy
"""

# Core types
from ._types import Cloner, Fn1, Fn2, Fn3, Kind, Predicate, Thunk

# Errors
from ._errors import CapacityError, CombinatorialLimitError, ConsumedError, MissingInstanceError

# Logging
from ._logging import setup_logger

# Internal helpers (for custom instances)
from . import _helpers

# Functions
from . import fun
from .fun import (
    Compose,
    Curried,
    Fn,
    FnOnce,
    Function,
    Once,
    SequenceView,
    borrow,
    call,
    call_once,
    chain,
    chain_ref,
    compose,
    curry,
    is_repeatable,
    require_repeatable,
    uncurry,
)

# Kind markers and registry
from .hkt import HKT, HKT1, HKT2, Equiv, is_equiv, kind_of, register, register_equiv, require, resolve

# Typeclasses
from . import typeclass
from .typeclass import (
    DEFAULT_POLICY,
    Alt,
    Applicative,
    ApplicativeSurrogate,
    Apply,
    ApplySurrogate,
    Bifunctor,
    Foldable,
    FoldableIndexed,
    FoldableOnce,
    Functor,
    FunctorSurrogate,
    Join,
    JoinKind,
    Monad,
    MonadSurrogate,
    Monoid,
    Plus,
    Semigroup,
    Traversable,
    TraversableOnce,
    TraversePolicy,
    all_of,
    alt,
    any_of,
    append,
    append_one,
    apply,
    bimap,
    bind,
    concat,
    contains,
    empty,
    find,
    find_map,
    flatten,
    fmap,
    fold,
    fold_map,
    foldl,
    foldl_idx,
    foldr,
    foldr_idx,
    get_or,
    identity,
    intercalate,
    is_empty,
    join,
    length,
    lift_a2,
    lmap,
    monoid_from_plus,
    monoid_of,
    not_contains,
    pure,
    register_semigroup,
    rmap,
    semigroup_of,
    sequence,
    to_list,
    traverse,
)

# Container kinds
from . import instances
from .instances import (
    ArrayVec,
    ArrayVecKind,
    HashMapKind,
    Id,
    IdKind,
    OptionKind,
    OrderedMap,
    OrderedMapKind,
    ResultKind,
    ResultOkKind,
    VecKind,
    discard_err,
    filter_ok,
    insert,
    recover,
    swap,
    zip_ok,
)

# Lazy IO
from . import io
from .io import IO, IOKind, Suspend

# Fluent API
from .fluent import Kinded, kinded

__all__ = (
    # Types
    "Cloner",
    "Fn1",
    "Fn2",
    "Fn3",
    "Kind",
    "Predicate",
    "Thunk",
    # Errors
    "CapacityError",
    "CombinatorialLimitError",
    "ConsumedError",
    "MissingInstanceError",
    # Logging
    "setup_logger",
    # Modules
    "_helpers",
    "fun",
    "instances",
    "io",
    "typeclass",
    # Functions
    "Compose",
    "Curried",
    "Fn",
    "FnOnce",
    "Function",
    "Once",
    "SequenceView",
    "borrow",
    "call",
    "call_once",
    "chain",
    "chain_ref",
    "compose",
    "curry",
    "is_repeatable",
    "require_repeatable",
    "uncurry",
    # Kinds
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
    # Typeclasses
    "Alt",
    "Applicative",
    "ApplicativeSurrogate",
    "Apply",
    "ApplySurrogate",
    "Bifunctor",
    "Foldable",
    "FoldableIndexed",
    "FoldableOnce",
    "Functor",
    "FunctorSurrogate",
    "Join",
    "JoinKind",
    "Monad",
    "MonadSurrogate",
    "Monoid",
    "Plus",
    "Semigroup",
    "Traversable",
    "TraversableOnce",
    # Operations
    "DEFAULT_POLICY",
    "TraversePolicy",
    "all_of",
    "alt",
    "any_of",
    "append",
    "append_one",
    "apply",
    "bimap",
    "bind",
    "concat",
    "contains",
    "empty",
    "find",
    "find_map",
    "flatten",
    "fmap",
    "fold",
    "fold_map",
    "foldl",
    "foldl_idx",
    "foldr",
    "foldr_idx",
    "get_or",
    "identity",
    "intercalate",
    "is_empty",
    "join",
    "length",
    "lift_a2",
    "lmap",
    "monoid_from_plus",
    "monoid_of",
    "not_contains",
    "pure",
    "register_semigroup",
    "rmap",
    "semigroup_of",
    "sequence",
    "to_list",
    "traverse",
    # Containers
    "ArrayVec",
    "ArrayVecKind",
    "HashMapKind",
    "Id",
    "IdKind",
    "OptionKind",
    "OrderedMap",
    "OrderedMapKind",
    "ResultKind",
    "ResultOkKind",
    "VecKind",
    "discard_err",
    "filter_ok",
    "insert",
    "recover",
    "swap",
    "zip_ok",
    # Lazy IO
    "IO",
    "IOKind",
    "Suspend",
    # Fluent
    "Kinded",
    "kinded",
)
