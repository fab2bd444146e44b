"""Shared helpers for kinds tests."""

from __future__ import annotations

import typing
from collections.abc import Mapping

import pytest
from hypothesis import strategies as st
from kungfu import Error, Nothing, Ok, Some

from kinds import ArrayVec, Id


def norm(value: typing.Any) -> typing.Any:
    """
    Structural form of a value for equality checks.

    kungfu containers become tagged tuples so tests compare contents,
    independent of how the containers implement __eq__.
    """
    if isinstance(value, Some):
        return ("some", norm(value.unwrap()))
    if isinstance(value, Nothing):
        return ("nothing",)
    match value:
        case Ok(inner):
            return ("ok", norm(inner))
        case Error(inner):
            return ("error", norm(inner))
    if isinstance(value, Id):
        return ("id", norm(value.value))
    if isinstance(value, ArrayVec):
        return ("arrayvec", value.capacity, [norm(v) for v in value])
    if isinstance(value, list):
        return [norm(v) for v in value]
    if isinstance(value, tuple):
        return tuple(norm(v) for v in value)
    if isinstance(value, Mapping):
        return {k: norm(v) for k, v in value.items()}
    return value


@pytest.fixture
def calls() -> list[typing.Any]:
    """Record of side effects, in order."""
    return []


# ============================================================================
# Hypothesis strategies
# ============================================================================

small_ints = st.integers(min_value=-1000, max_value=1000)
int_lists = st.lists(small_ints, max_size=8)
options = st.one_of(st.builds(Some, small_ints), st.just(None).map(lambda _: Nothing()))
results = st.one_of(st.builds(Ok, small_ints), st.builds(Error, st.text(max_size=5)))
str_dicts = st.dictionaries(st.sampled_from("abcdef"), small_ints, max_size=6)

# Total functions on ints
int_functions = st.sampled_from(
    [
        lambda n: n + 1,
        lambda n: n * 2,
        lambda n: -n,
        lambda n: n % 7,
    ]
)
