"""
Functions: callable capabilities, currying, composition.

    from kinds import fun

    add = fun.curry(lambda a, b: a + b)
    inc_then_show = fun.chain(add(1), str)
"""

from .callable import Fn, FnOnce, Function, Once, call, call_once, is_repeatable, require_repeatable
from .compose import Compose, SequenceView, borrow, chain, chain_ref, compose
from .curry import Curried, curry, uncurry

__all__ = (
    # Callable
    "Fn",
    "FnOnce",
    "Function",
    "Once",
    "call",
    "call_once",
    "is_repeatable",
    "require_repeatable",
    # Currying
    "Curried",
    "curry",
    "uncurry",
    # Composition
    "Compose",
    "SequenceView",
    "borrow",
    "chain",
    "chain_ref",
    "compose",
)
