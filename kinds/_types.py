"""
Core type definitions for kinds.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Fn1/Fn2/Fn3 = plain callables of arity 1/2/3
type Fn1[A, B] = Callable[[A], B]
type Fn2[A, B, C] = Callable[[A, B], C]
type Fn3[A, B, C, D] = Callable[[A, B, C], D]

# Thunk = zero-argument deferred computation
type Thunk[T] = Callable[[], T]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Cloner = produces an independent copy of a value (multi-outcome apply/traverse)
type Cloner[T] = Callable[[T], T]

# Kind = a marker class (never instantiated)
# NOTE: Маркеры - это классы, а не экземпляры. type[Any] здесь точнее не выразить.
type Kind = type[typing.Any]

__all__ = (
    "Cloner",
    "Fn1",
    "Fn2",
    "Fn3",
    "Kind",
    "Predicate",
    "Thunk",
)
