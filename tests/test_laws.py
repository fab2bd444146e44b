"""Property tests for Functor / Applicative / Monad / Alt laws across kinds."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from kungfu import Error, Nothing, Ok, Some

from kinds import (
    ArrayVec,
    ArrayVecKind,
    HashMapKind,
    Id,
    IdKind,
    OptionKind,
    OrderedMap,
    OrderedMapKind,
    ResultOkKind,
    VecKind,
    alt,
    apply,
    bind,
    compose,
    empty,
    fmap,
    pure,
)
from tests.conftest import int_functions, int_lists, norm, options, results, small_ints, str_dicts


def same(x):
    return x


def halves(n):
    return Some(n // 2) if n % 2 == 0 else Nothing()


def checked(n):
    return Ok(n * 3) if n >= 0 else Error(f"negative: {n}")


def spread(n):
    return [n, n + 1]


values_by_kind = [
    (VecKind, int_lists, spread),
    (OptionKind, options, halves),
    (ResultOkKind, results, checked),
    (IdKind, st.builds(Id, small_ints), lambda n: Id(n - 1)),
]


# ============================================================================
# Functor
# ============================================================================


@pytest.mark.hypothesis
@pytest.mark.parametrize(("kind", "strategy", "_"), values_by_kind)
def test_functor_identity(kind, strategy, _):
    @given(fa=strategy)
    def check(fa):
        assert norm(fmap(fa, same)) == norm(fa)

    check()


@pytest.mark.hypothesis
@pytest.mark.parametrize(("kind", "strategy", "_"), values_by_kind)
def test_functor_composition(kind, strategy, _):
    @given(fa=strategy, f=int_functions, g=int_functions)
    def check(fa, f, g):
        assert norm(fmap(fmap(fa, f), g)) == norm(fmap(fa, compose(f, g)))

    check()


@pytest.mark.hypothesis
@given(fa=str_dicts, f=int_functions, g=int_functions)
def test_map_functor_composition(fa, f, g):
    assert fmap(fmap(fa, f), g) == fmap(fa, compose(f, g))


# ============================================================================
# Applicative
# ============================================================================


@pytest.mark.hypothesis
@pytest.mark.parametrize(("kind", "strategy", "_"), values_by_kind)
def test_applicative_identity(kind, strategy, _):
    @given(v=strategy)
    def check(v):
        assert norm(apply(pure(kind, same), v)) == norm(v)

    check()


@pytest.mark.hypothesis
@pytest.mark.parametrize(("kind", "strategy", "_"), values_by_kind)
def test_applicative_homomorphism(kind, strategy, _):
    @given(x=small_ints, f=int_functions)
    def check(x, f):
        assert norm(apply(pure(kind, f), pure(kind, x))) == norm(pure(kind, f(x)))

    check()


# ============================================================================
# Monad
# ============================================================================


@pytest.mark.hypothesis
@pytest.mark.parametrize(("kind", "strategy", "f"), values_by_kind)
def test_monad_left_identity(kind, strategy, f):
    @given(a=small_ints)
    def check(a):
        assert norm(bind(pure(kind, a), f)) == norm(f(a))

    check()


@pytest.mark.hypothesis
@pytest.mark.parametrize(("kind", "strategy", "_"), values_by_kind)
def test_monad_right_identity(kind, strategy, _):
    @given(m=strategy)
    def check(m):
        assert norm(bind(m, lambda a: pure(kind, a))) == norm(m)

    check()


@pytest.mark.hypothesis
@pytest.mark.parametrize(("kind", "strategy", "f"), values_by_kind)
def test_monad_associativity(kind, strategy, f):
    @given(m=strategy)
    def check(m):
        left = bind(bind(m, f), f)
        right = bind(m, lambda a: bind(f(a), f))
        assert norm(left) == norm(right)

    check()


# ============================================================================
# Alt / Plus
# ============================================================================

# Capacity fits three concatenated int_lists
array_vecs = int_lists.map(lambda xs: ArrayVec.collect(xs, 24))

alternatives_by_kind = [
    (VecKind, int_lists),
    (OptionKind, options),
    (HashMapKind, str_dicts),
    (OrderedMapKind, str_dicts.map(OrderedMap)),
    (ArrayVecKind[24], array_vecs),
]


@pytest.mark.hypothesis
@pytest.mark.parametrize(("kind", "strategy"), alternatives_by_kind)
def test_alt_associativity(kind, strategy):
    @given(a=strategy, b=strategy, c=strategy)
    def check(a, b, c):
        assert norm(alt(alt(a, b), c)) == norm(alt(a, alt(b, c)))

    check()


@pytest.mark.hypothesis
@pytest.mark.parametrize(("kind", "strategy"), alternatives_by_kind)
def test_alt_distributivity(kind, strategy):
    @given(a=strategy, b=strategy, f=int_functions)
    def check(a, b, f):
        assert norm(fmap(alt(a, b), f)) == norm(alt(fmap(a, f), fmap(b, f)))

    check()


@pytest.mark.hypothesis
@pytest.mark.parametrize(("kind", "strategy"), alternatives_by_kind)
def test_plus_identity(kind, strategy):
    @given(x=strategy)
    def check(x):
        assert norm(alt(x, empty(kind))) == norm(x)
        assert norm(alt(empty(kind), x)) == norm(x)

    check()


def test_plus_identity_keeps_type():
    assert isinstance(alt(OrderedMap({"b": 1}), empty(OrderedMapKind)), OrderedMap)
    assert alt(empty(ArrayVecKind[24]), ArrayVec.of(1, capacity=24)).capacity == 24
