"""Kinds for concrete containers. Importing this package registers them."""

from .array_vec import ArrayVec, ArrayVecKind, ArrayVecSemigroup
from .hash_map import HashMapKind, HashMapMonoid, MapKind, insert
from .identity import Id, IdKind, IdSemigroup
from .option import OptionKind, OptionMonoid
from .ordered_map import OrderedMap, OrderedMapKind, OrderedMapMonoid
from .result import ResultKind, ResultOkKind, discard_err, filter_ok, recover, swap, zip_ok
from .vec import VecKind, VecMonoid

__all__ = (
    # Option
    "OptionKind",
    "OptionMonoid",
    # Result
    "ResultKind",
    "ResultOkKind",
    "discard_err",
    "filter_ok",
    "recover",
    "swap",
    "zip_ok",
    # Sequences
    "ArrayVec",
    "ArrayVecKind",
    "ArrayVecSemigroup",
    "VecKind",
    "VecMonoid",
    # Maps
    "HashMapKind",
    "HashMapMonoid",
    "MapKind",
    "OrderedMap",
    "OrderedMapKind",
    "OrderedMapMonoid",
    "insert",
    # Identity
    "Id",
    "IdKind",
    "IdSemigroup",
)
