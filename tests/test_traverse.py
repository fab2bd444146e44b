"""Tests for traverse / sequence across every source and target shape."""

import pytest
from kungfu import Error, Nothing, Ok, Some

from kinds import (
    IO,
    ArrayVec,
    ArrayVecKind,
    CombinatorialLimitError,
    CapacityError,
    HashMapKind,
    Id,
    IdKind,
    MissingInstanceError,
    Once,
    OptionKind,
    OrderedMap,
    ResultOkKind,
    TraversePolicy,
    VecKind,
    sequence,
    traverse,
)
from tests.conftest import norm


def parse(s):
    return Ok(int(s)) if s.isdigit() else Error(f"bad: {s}")


class TestManyIntoSingle:
    """List / map sources into Option, Result, Id."""

    def test_all_succeed(self):
        assert norm(traverse(["1", "2", "3"], parse, ap=ResultOkKind)) == ("ok", [1, 2, 3])

    def test_first_error_wins_and_stops(self, calls):
        def tracked(s):
            calls.append(s)
            return parse(s)

        out = traverse(["1", "x", "y"], tracked, ap=ResultOkKind)
        assert norm(out) == ("error", "bad: x")
        assert calls == ["1", "x"]

    def test_error_in_the_middle(self, calls):
        def tenfold(n):
            calls.append(n)
            return Error(f"bad {n}") if n == 2 else Ok(n * 10)

        assert norm(traverse([1, 2, 3], tenfold, ap=ResultOkKind)) == ("error", "bad 2")
        assert calls == [1, 2]

    def test_option_target(self, calls):
        def half(n):
            calls.append(n)
            return Some(n // 2) if n % 2 == 0 else Nothing()

        assert norm(traverse([2, 4], half, ap=OptionKind)) == ("some", [1, 2])
        calls.clear()
        assert norm(traverse([2, 3, 4], half, ap=OptionKind)) == ("nothing",)
        assert calls == [2, 3]

    def test_empty_source(self):
        assert norm(traverse([], parse, ap=ResultOkKind)) == ("ok", [])
        assert norm(traverse([], parse, ap=OptionKind)) == ("some", [])

    def test_id_target(self):
        assert traverse([1, 2], lambda n: Id(n * 2), ap=IdKind) == Id([2, 4])

    def test_hash_map_source(self):
        out = traverse({"a": "1", "b": "2"}, parse, ap=ResultOkKind)
        assert norm(out) == ("ok", {"a": 1, "b": 2})

    def test_ordered_map_source_keeps_type(self):
        out = traverse(OrderedMap({"b": "2", "a": "1"}), parse, ap=ResultOkKind)
        rebuilt = out.unwrap()
        assert isinstance(rebuilt, OrderedMap)
        assert list(rebuilt.items()) == [("a", 1), ("b", 2)]

    def test_array_vec_source(self):
        out = traverse(ArrayVec.of("1", "2", capacity=2), parse, ap=ResultOkKind)
        assert norm(out) == ("ok", ("arrayvec", 2, [1, 2]))


class TestManyIntoMulti:
    """List sources into list / ArrayVec targets: every combination."""

    def test_cross_product(self):
        out = traverse([1, 2], lambda n: [n, -n], ap=VecKind)
        assert out == [[1, 2], [1, -2], [-1, 2], [-1, -2]]

    def test_empty_outcome_stops(self, calls):
        def f(n):
            calls.append(n)
            return [] if n == 1 else [n]

        assert traverse([1, 2, 3], f, ap=VecKind) == []
        assert calls == [1]

    def test_outcome_limit(self):
        policy = TraversePolicy(max_outcomes=4)
        assert len(traverse([1, 2], lambda n: [n, -n], ap=VecKind, policy=policy)) == 4
        with pytest.raises(CombinatorialLimitError) as exc_info:
            traverse([1, 2, 3], lambda n: [n, -n], ap=VecKind, policy=policy)
        assert exc_info.value.limit == 4
        assert exc_info.value.outcomes == 8

    def test_policy_validation(self):
        with pytest.raises(ValueError):
            TraversePolicy(max_outcomes=0)

    def test_clone_used_for_reused_elements(self):
        seen = []

        def clone(value):
            seen.append(value)
            return value

        traverse([1], lambda n: [n, n], ap=VecKind, policy=TraversePolicy(clone=clone))
        assert seen == [1, 1]

    def test_once_rejected_before_running(self, calls):
        def f(n):
            calls.append(n)
            return [n]

        with pytest.raises(TypeError):
            traverse([1, 2], Once(f), ap=VecKind)
        assert calls == []

    def test_array_vec_target_capacity(self):
        kind = ArrayVecKind[4]
        out = traverse([1, 2], lambda n: ArrayVec.of(n, -n, capacity=4), ap=kind)
        assert [list(o) for o in out] == [[1, 2], [1, -2], [-1, 2], [-1, -2]]
        with pytest.raises(CapacityError):
            traverse([1, 2, 3], lambda n: ArrayVec.of(n, -n, capacity=4), ap=kind)


class TestOneElementSources:
    """Option / Result / Id sources."""

    def test_swap_layers(self):
        assert norm(traverse(Some(1), lambda n: Ok(n + 1), ap=ResultOkKind)) == ("ok", ("some", 2))
        assert norm(traverse(Some(1), lambda n: Error("bad"), ap=ResultOkKind)) == ("error", "bad")

    def test_empty_source_not_called(self, calls):
        def f(n):
            calls.append(n)
            return Ok(n)

        assert norm(traverse(Nothing(), f, ap=ResultOkKind)) == ("ok", ("nothing",))
        assert norm(traverse(Error("e"), f, ap=OptionKind)) == ("some", ("error", "e"))
        assert calls == []

    def test_replicate(self):
        out = traverse(Some(2), lambda n: [n, n * 10], ap=VecKind)
        assert norm(out) == [("some", 2), ("some", 20)]
        assert norm(OptionKind.traverse_replicate(Some(2), lambda n: [n], VecKind)) == [("some", 2)]

    def test_swap_alias(self):
        assert norm(OptionKind.traverse_swap(Some(1), lambda n: Ok(n), ResultOkKind)) == ("ok", ("some", 1))

    def test_accepts_once(self):
        out = traverse(Some(1), Once(lambda n: Some(n)), ap=OptionKind)
        assert norm(out) == ("some", ("some", 1))

    def test_id_source(self):
        assert norm(traverse(Id(3), lambda n: Some(n), ap=OptionKind)) == ("some", ("id", 3))

    def test_replicate_limit(self):
        with pytest.raises(CombinatorialLimitError):
            traverse(Some(1), lambda n: [1, 2, 3], ap=VecKind, policy=TraversePolicy(max_outcomes=2))


class TestCapabilities:
    """Missing capabilities are reported before any call."""

    def test_target_must_be_applicative(self, calls):
        with pytest.raises(MissingInstanceError):
            traverse([1], lambda n: calls.append(n) or {"a": n}, ap=HashMapKind)
        assert calls == []

    def test_source_must_be_traversable(self):
        with pytest.raises(MissingInstanceError):
            traverse(IO(1), lambda n: Some(n), ap=OptionKind)


class TestSequence:
    """sequence = traverse with identity."""

    def test_target_from_first_element(self):
        assert norm(sequence([Some(1), Some(2)])) == ("some", [1, 2])
        assert norm(sequence([Some(1), Nothing()])) == ("nothing",)
        assert norm(sequence([Ok(1), Error("e"), Error("f")])) == ("error", "e")

    @pytest.mark.parametrize(
        "items",
        [
            [Error("e"), Ok(2), Ok(3)],
            [Ok(1), Error("e"), Ok(3)],
            [Ok(1), Ok(2), Error("e")],
        ],
    )
    def test_single_error_at_any_position(self, items):
        assert norm(sequence(items)) == ("error", "e")

    def test_empty_needs_ap(self):
        with pytest.raises(ValueError):
            sequence([])
        assert norm(sequence([], ap=OptionKind)) == ("some", [])

    def test_nested_lists(self):
        assert sequence([[1, 2], [3]]) == [[1, 3], [2, 3]]

    def test_option_of_list(self):
        assert norm(sequence(Some([1, 2]))) == [("some", 1), ("some", 2)]
