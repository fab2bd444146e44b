from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str
    field: str | None = None

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message if self.field is None else f"{self.field}: {self.message}"


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    age: int


def parse_int(field: str, raw: str) -> Result[int, Failure]:
    if raw.strip().lstrip("-").isdigit():
        return Ok(int(raw))
    return Error(Failure(f"not an integer: {raw!r}", field=field))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    from kinds import setup_logger

    setup_logger()
    main()
