"""Tests for composition and borrowing."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from kinds import Compose, Once, SequenceView, borrow, chain, chain_ref, compose


def inc(n: int) -> int:
    return n + 1


def show(n: int) -> str:
    return f"<{n}>"


def shout(s: str) -> str:
    return s.upper()


class TestCompose:
    """f then g."""

    def test_order(self):
        assert compose(inc, show)(1) == "<2>"
        assert chain(inc, show)(1) == "<2>"

    def test_many(self):
        assert chain(inc, inc, show, shout)(0) == "<2>"

    def test_method_chain_nests_left(self):
        composed = Compose(inc, inc).chain(show)
        assert isinstance(composed.f, Compose)
        assert composed(0) == "<2>"

    def test_repeatable_call(self):
        composed = chain(inc, show)
        assert composed.repeatable
        assert composed.call(1) == "<2>"
        assert composed.call(2) == "<3>"

    def test_once_half_makes_once(self):
        composed = chain(Once(inc), show)
        assert not composed.repeatable
        with pytest.raises(TypeError):
            composed.call(1)
        assert composed.call_once(1) == "<2>"


class TestLinkCheck:
    """Annotation-based mismatch detection."""

    def test_mismatch_rejected(self):
        with pytest.raises(TypeError, match="cannot chain"):
            chain(show, inc)

    def test_mismatch_deep_in_chain(self):
        with pytest.raises(TypeError):
            chain(inc, show, inc)

    def test_numeric_promotion(self):
        def halve(x: float) -> float:
            return x / 2

        def rotate(z: complex) -> complex:
            return z * 1j

        assert chain(inc, halve)(1) == 1.0
        assert chain(halve, rotate)(4) == 2j
        assert chain(inc, rotate)(0) == 1j

    def test_no_promotion_from_str(self):
        def halve(x: float) -> float:
            return x / 2

        with pytest.raises(TypeError, match="cannot chain"):
            chain(show, halve)

    def test_unannotated_passes(self):
        assert chain(lambda n: n * 3, inc)(2) == 7


class TestBorrow:
    """Read-only views."""

    def test_list_view(self):
        items = [1, 2, 3]
        view = borrow(items)
        assert isinstance(view, SequenceView)
        assert view == [1, 2, 3]
        assert view[1:] == (2, 3)
        assert not hasattr(view, "append")

    def test_view_is_live_and_unhashable(self):
        items = [1]
        view = borrow(items)
        items.append(2)
        assert len(view) == 2
        with pytest.raises(TypeError):
            hash(view)

    def test_dict_view(self):
        view = borrow({"a": 1})
        assert isinstance(view, MappingProxyType)
        with pytest.raises(TypeError):
            view["b"] = 2  # type: ignore[index]

    def test_bytes_view(self):
        view = borrow(bytearray(b"ab"))
        assert view.readonly
        assert bytes(view) == b"ab"

    def test_other_values_pass_through(self):
        marker = object()
        assert borrow(marker) is marker

    def test_chain_ref(self):
        composed = chain_ref(lambda n: list(range(n)), lambda view: (type(view).__name__, sum(view)))
        assert composed(4) == ("SequenceView", 6)
