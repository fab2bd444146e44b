from __future__ import annotations

from _infra import banner, run

from kinds import alt, bind, fmap, fold_map, intercalate, kinded, lift_a2, pure
from kinds import OptionKind, VecKind
from kungfu import Nothing, Some


def main() -> None:
    banner("01_quickstart: one vocabulary for every container")

    # Same function, different kinds
    double = lambda n: n * 2  # noqa: E731
    print(fmap([1, 2, 3], double))  # [2, 4, 6]
    print(fmap(Some(21), double))  # Some(42)
    print(fmap({"a": 1, "b": 2}, double))  # {'a': 2, 'b': 4}

    # Monad: list comprehension without the comprehension
    pairs = bind([1, 2], lambda a: bind(["x", "y"], lambda b: pure(VecKind, (a, b))))
    print(pairs)

    # Applicative over Option: both or nothing
    add = lambda a, b: a + b  # noqa: E731
    print(lift_a2(add, Some(1), Some(2)))  # Some(3)
    print(lift_a2(add, Some(1), Nothing()))  # Nothing

    # Alt: first present value
    print(alt(Nothing(), Some("cache"), Some("api")))

    # Foldable
    print(intercalate(["a", "b", "c"], ", "))
    print(fold_map([1, 2, 3], str, str))

    # Fluent form of the same calls
    print(
        kinded([1, 2, 3])
        .fmap(double)
        .bind(lambda n: [n, n])
        .foldl(lambda acc, n: acc + n, 0)
    )
    print(kinded(Some(1), OptionKind).alt(Nothing()).lower())


if __name__ == "__main__":
    run(main)
