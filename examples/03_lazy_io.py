from __future__ import annotations

import json

from _infra import Failure, banner, run

from kinds import IO, ConsumedError, bind, fmap
from kinds.io import IOLike
from kungfu import Error, Ok, Result

RAW_CONFIG = '{"retries": 3, "endpoint": "https://api.local"}'


def read_config(raw: str) -> IOLike[Result[object, Failure]]:
    return IO.catching(lambda: json.loads(raw), on_error=lambda e: Failure(f"bad config: {e}"))


def main() -> None:
    banner("03_lazy_io: describe first, run later")

    program = (
        IO.suspend(lambda: print("  reading config") or RAW_CONFIG)
        .bind(read_config)
        .map(lambda r: fmap(r, lambda cfg: cfg["endpoint"]))
    )
    print(f"built: {program!r} (nothing printed yet)")

    match program.execute():
        case Ok(endpoint):
            print(f"endpoint: {endpoint}")
        case Error(err):
            print(f"error: {err}")

    try:
        program.execute()
    except ConsumedError as exc:
        print(f"second run refused: {exc}")

    # Generic functions accept IO nodes too
    answer = bind(fmap(IO(20), lambda n: n + 1), lambda n: IO(n * 2))
    print(f"answer: {answer.execute()}")

    # Deep chains run on an explicit stack
    node = IO(0)
    for _ in range(100_000):
        node = node.map(lambda n: n + 1)
    print(f"deep: {node.execute()}")

    print(f"broken: {read_config('{').execute()}")


if __name__ == "__main__":
    run(main)
