"""Tests for Functor / Apply / Monad / Alt behaviour beyond the laws."""

import pytest
from kungfu import Error, Nothing, Ok, Some

from kinds import (
    IO,
    HashMapKind,
    Id,
    IdKind,
    MissingInstanceError,
    Once,
    OptionKind,
    VecKind,
    alt,
    append_one,
    apply,
    bind,
    empty,
    flatten,
    fmap,
    lift_a2,
    pure,
)
from kinds.typeclass import Functor
from tests.conftest import norm


def inc(n):
    return n + 1


def add(a, b):
    return a + b


class TestFunctor:
    """fmap per kind."""

    def test_vec(self):
        assert fmap([1, 2, 3], inc) == [2, 3, 4]

    def test_option(self):
        assert norm(fmap(Some(1), inc)) == ("some", 2)
        assert norm(fmap(Nothing(), inc)) == ("nothing",)

    def test_result(self):
        assert norm(fmap(Ok(1), inc)) == ("ok", 2)
        assert norm(fmap(Error("e"), inc)) == ("error", "e")

    def test_map(self):
        assert fmap({"a": 1, "b": 2}, inc) == {"a": 2, "b": 3}

    def test_void(self):
        assert VecKind.void([1, 2]) == [None, None]

    def test_single_kinds_accept_once(self):
        assert norm(fmap(Some(1), Once(inc))) == ("some", 2)
        assert fmap(Id(1), Once(inc)) == Id(2)

    def test_multi_kinds_reject_once_before_running(self, calls):
        def record(n):
            calls.append(n)
            return n

        with pytest.raises(TypeError):
            fmap([1, 2], Once(record))
        assert calls == []

    def test_unknown_kind(self):
        with pytest.raises(MissingInstanceError):
            fmap(42, inc)

    def test_explicit_kind(self):
        assert fmap([1], inc, kind=VecKind) == [2]
        assert issubclass(VecKind, Functor)


class TestApply:
    """apply / lift_a2 / pure / append_one."""

    def test_vec_cross_product(self):
        assert apply([inc, lambda n: n * 10], [1, 2]) == [2, 3, 10, 20]

    def test_vec_clones_values(self):
        shared = [0]
        out = apply([lambda xs: xs, lambda xs: xs], [shared])
        assert out == [[0], [0]]
        assert out[0] is not shared
        assert out[0] is not out[1]

    def test_custom_clone(self):
        seen = []

        def clone(value):
            seen.append(value)
            return value

        apply([inc, inc], [1], clone=clone)
        assert seen == [1, 1]

    def test_option(self):
        assert norm(apply(Some(inc), Some(1))) == ("some", 2)
        assert norm(apply(Some(inc), Nothing())) == ("nothing",)
        assert norm(apply(Nothing(), Some(1))) == ("nothing",)

    def test_result_function_error_wins(self):
        assert norm(apply(Error("f"), Error("a"))) == ("error", "f")
        assert norm(apply(Ok(inc), Error("a"))) == ("error", "a")

    def test_lift_a2(self):
        assert lift_a2(add, [1, 2], [10, 20]) == [11, 21, 12, 22]
        assert norm(lift_a2(add, Some(1), Some(2))) == ("some", 3)
        assert norm(lift_a2(add, Some(1), Nothing())) == ("nothing",)

    def test_pure(self):
        assert pure(VecKind, 1) == [1]
        assert norm(pure(OptionKind, 1)) == ("some", 1)
        assert pure(IdKind, 1) == Id(1)

    def test_pure_needs_applicative(self):
        with pytest.raises(MissingInstanceError):
            pure(HashMapKind, 1)

    def test_append_one(self):
        assert append_one([1, 2], 3) == [1, 2, 3]
        assert norm(append_one(Some("a"), "b")) == ("some", "ab")

    def test_map_apply_intersects_keys(self):
        assert apply({"a": inc, "b": lambda n: -n}, {"b": 5, "c": 6}) == {"b": -5}


class TestMonad:
    """bind / flatten and short-circuiting."""

    def test_vec(self):
        assert bind([1, 2], lambda n: [n, n * 10]) == [1, 10, 2, 20]

    def test_option_short_circuit(self, calls):
        def f(n):
            calls.append(n)
            return Some(n)

        assert norm(bind(Nothing(), f)) == ("nothing",)
        assert calls == []

    def test_result_short_circuit(self, calls):
        def f(n):
            calls.append(n)
            return Ok(n)

        assert norm(bind(Error("boom"), f)) == ("error", "boom")
        assert calls == []

    def test_flatten(self):
        assert flatten([[1], [], [2, 3]]) == [1, 2, 3]
        assert norm(flatten(Some(Some(1)))) == ("some", 1)
        assert norm(flatten(Ok(Error("e")))) == ("error", "e")
        assert flatten(Id(Id(1))) == Id(1)

    def test_maps_are_not_monads(self):
        with pytest.raises(MissingInstanceError):
            bind({"a": 1}, lambda n: {"a": n})

    def test_io_uses_surrogate(self):
        assert bind(IO(1), lambda n: IO(n + 1)).execute() == 2


class TestAlt:
    """alt / empty."""

    def test_vec_concatenates(self):
        assert alt([1], [2], [3]) == [1, 2, 3]
        assert empty(VecKind) == []

    def test_option_first_some(self):
        assert norm(alt(Nothing(), Some(2), Some(3))) == ("some", 2)

    def test_result_first_ok(self):
        assert norm(alt(Error("a"), Ok(1))) == ("ok", 1)
        assert norm(alt(Error("a"), Error("b"))) == ("error", "b")

    def test_map_left_biased(self):
        assert alt({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 2, "c": 4}
        assert empty(HashMapKind) == {}

    def test_id_keeps_left(self):
        assert alt(Id(1), Id(2)) == Id(1)

    def test_empty_needs_plus(self):
        with pytest.raises(MissingInstanceError):
            empty(IdKind)
