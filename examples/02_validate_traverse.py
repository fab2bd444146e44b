from __future__ import annotations

from _infra import Failure, User, banner, parse_int, run

from kinds import ResultOkKind, TraversePolicy, VecKind, lift_a2, sequence, traverse
from kinds import CombinatorialLimitError
from kungfu import Error, Ok, Result


def parse_user(row: dict[str, str]) -> Result[User, Failure]:
    """Validate one row; the first bad field wins."""

    def build(user_id: int, age: int) -> User:
        return User(user_id, row.get("name", "?"), age)

    return lift_a2(build, parse_int("id", row.get("id", "")), parse_int("age", row.get("age", "")))


def main() -> None:
    banner("02_validate_traverse: all-or-nothing validation")

    rows = [
        {"id": "1", "name": "ann", "age": "31"},
        {"id": "2", "name": "bob", "age": "27"},
    ]
    match traverse(rows, parse_user, ap=ResultOkKind):
        case Ok(users):
            print(f"ok: {users!r}")
        case Error(err):
            print(f"error: {err}")

    broken = [*rows, {"id": "x", "name": "eve", "age": "?"}, {"id": "y"}]
    match traverse(broken, parse_user, ap=ResultOkKind):
        case Ok(users):
            print(f"ok: {users!r}")
        case Error(err):
            print(f"error (first only): {err}")

    # Already have a list of Results: sequence picks the target from the first
    print(sequence([parse_int("a", "1"), parse_int("b", "2")]))

    banner("02_validate_traverse: every combination")

    sizes = ["S", "M"]
    colours = ["red", "blue"]
    variant = lambda size, colour: f"{size}/{colour}"  # noqa: E731
    print(lift_a2(variant, sizes, colours))

    options = traverse(["a", "b", "c"], lambda ch: [ch.lower(), ch.upper()], ap=VecKind)
    print(f"{len(options)} spellings: {options[:3]!r} ...")

    try:
        traverse(list("abcdefghij"), lambda ch: [ch, ch.upper()], ap=VecKind, policy=TraversePolicy(max_outcomes=256))
    except CombinatorialLimitError as exc:
        print(f"stopped: {exc}")


if __name__ == "__main__":
    run(main)
