"""Lazy, once-only IO computations."""

from .engine import IO, Apply, Bind, IOKind, IOLike, Map, Suspend

__all__ = (
    "IO",
    "Apply",
    "Bind",
    "IOKind",
    "IOLike",
    "Map",
    "Suspend",
)
