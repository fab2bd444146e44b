"""Tests for value-level Semigroup / Monoid."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from kungfu import Nothing, Some

from kinds import (
    ArrayVec,
    CapacityError,
    Id,
    MissingInstanceError,
    Monoid,
    OrderedMap,
    append,
    concat,
    identity,
    monoid_of,
    register_semigroup,
)
from kinds.instances import IdSemigroup
from tests.conftest import int_lists, norm, str_dicts


class TestBuiltins:
    """str / bytes / tuple / list / dict."""

    def test_str(self):
        assert append("ab", "cd") == "abcd"
        assert identity(str) == ""

    def test_bytes_and_tuple(self):
        assert append(b"a", b"b") == b"ab"
        assert append((1,), (2,), (3,)) == (1, 2, 3)

    def test_list(self):
        assert append([1], [2, 3]) == [1, 2, 3]
        assert identity(list) == []

    def test_dict_left_biased(self):
        assert append({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 2, "c": 4}
        assert identity(dict) == {}

    def test_concat(self):
        assert concat(["a", "b", "c"], str) == "abc"
        assert concat([], list) == []

    def test_missing(self):
        with pytest.raises(MissingInstanceError):
            append(1, 2)


class TestContainers:
    """Option, Id, ArrayVec, OrderedMap."""

    def test_option_combines_inner(self):
        assert norm(append(Some("a"), Some("b"))) == ("some", "ab")
        assert norm(append(Some("a"), Nothing())) == ("some", "a")
        assert norm(append(Nothing(), Some("b"))) == ("some", "b")
        assert norm(identity(Some)) == ("nothing",)

    def test_id(self):
        assert append(Id([1]), Id([2])) == Id([1, 2])
        assert IdSemigroup.identity_of(str) == Id("")

    def test_array_vec(self):
        joined = append(ArrayVec.of(1, capacity=3), ArrayVec.of(2, 3, capacity=3))
        assert list(joined) == [1, 2, 3]
        with pytest.raises(CapacityError):
            append(ArrayVec.of(1, 2, capacity=3), ArrayVec.of(3, 4, capacity=3))

    def test_ordered_map(self):
        joined = append(OrderedMap({"b": 1}), OrderedMap({"a": 2, "b": 3}))
        assert list(joined.items()) == [("a", 2), ("b", 1)]


class TestCustom:
    """User-registered instances."""

    def test_register(self):
        class Max:
            def __init__(self, n):
                self.n = n

        class MaxMonoid(Monoid):
            @classmethod
            def append(cls, a, b):
                return Max(max(a.n, b.n))

            @classmethod
            def identity(cls):
                return Max(float("-inf"))

        register_semigroup(MaxMonoid, Max)
        assert monoid_of(Max) is MaxMonoid
        assert concat([Max(3), Max(7), Max(5)], Max).n == 7


# ============================================================================
# Laws
# ============================================================================


@given(x=st.text(max_size=4), y=st.text(max_size=4), z=st.text(max_size=4))
def test_str_associativity(x, y, z):
    assert append(append(x, y), z) == append(x, append(y, z))


@given(x=int_lists, y=int_lists, z=int_lists)
def test_list_associativity(x, y, z):
    assert append(append(x, y), z) == append(x, append(y, z))


@given(x=str_dicts, y=str_dicts, z=str_dicts)
def test_dict_associativity(x, y, z):
    assert append(append(x, y), z) == append(x, append(y, z))


text_options = st.one_of(st.builds(Some, st.text(max_size=4)), st.just(None).map(lambda _: Nothing()))

monoids = [
    (str, st.text(max_size=4)),
    (bytes, st.binary(max_size=4)),
    (tuple, st.lists(st.integers(), max_size=4).map(tuple)),
    (list, int_lists),
    (dict, str_dicts),
    (Some, text_options),
]


@pytest.mark.parametrize(("tp", "strategy"), monoids)
def test_monoid_identity(tp, strategy):
    @given(x=strategy)
    def check(x):
        assert norm(append(x, identity(tp))) == norm(x)
        assert norm(append(identity(tp), x)) == norm(x)

    check()
