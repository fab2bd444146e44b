"""
Lazy IO
=======

A computation is a tree of nodes built up front and run once:

- IO(value): already-computed leaf
- Suspend(thunk): zero-argument side effect, runs at execution
- Map(f, io): transform the result of `io`
- Bind(f, io): `f` receives the result of `io` and returns the next node
- Apply(fio, aio): `fio` produces a function, `aio` its argument

Nothing runs while the tree is being built. `execute()` walks it with an
explicit stack, so a chain of a hundred thousand `map`s does not touch the
recursion limit.

Nodes are used at most once: composing a node into a bigger one, or
executing it, claims it; a second claim raises ConsumedError.

    greet = IO.suspend(read_name).map(str.title).bind(lambda name: IO.suspend(lambda: print(f"hi {name}")))
    greet.execute()

Узлы одноразовые: собрали дерево, выполнили один раз.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from typing import Literal

from kungfu import Error, Ok, Result

from .._errors import ConsumedError
from .._logging import logger as _package_logger
from .._types import Kind, Thunk
from ..fun.callable import call_once
from ..hkt import register_equiv
from ..typeclass.surrogate import MonadSurrogate

logger = _package_logger.getChild("io")


# ============================================================================
# Kind
# ============================================================================


class IOKind(MonadSurrogate):
    """Kind of lazy computations. Every node type is equivalent to IO."""

    single = True
    equiv_requires = ("execute",)

    @classmethod
    def _of(cls, a: typing.Any) -> typing.Any:
        return IO[a]

    @classmethod
    def map_[A, B](cls, fa: IOLike[A], f: Callable[[A], B]) -> Map[A, B]:
        return fa.map(f)

    @classmethod
    def apply_(cls, fab: IOLike[typing.Any], fa: IOLike[typing.Any]) -> Apply[typing.Any, typing.Any]:
        return fab.apply(fa)

    @classmethod
    def pure[A](cls, a: A) -> IO[A]:
        return IO(a)

    @classmethod
    def bind_[A, B](cls, ma: IOLike[A], f: Callable[[A], IOLike[B]]) -> Bind[A, B]:
        return ma.bind(f)


# ============================================================================
# Nodes
# ============================================================================


class IOLike[A]:
    """Base of every lazy node."""

    __slots__ = ("_claimed",)

    def __init__(self) -> None:
        self._claimed = False

    @classmethod
    def equiv(cls) -> Kind:
        return IOKind

    @property
    def claimed(self) -> bool:
        return self._claimed

    def _claim(self) -> None:
        if self._claimed:
            raise ConsumedError(repr(self))
        self._claimed = True

    def map[B](self, f: Callable[[A], B]) -> Map[A, B]:
        return Map(f, self)

    def bind[B](self, f: Callable[[A], IOLike[B]]) -> Bind[A, B]:
        return Bind(f, self)

    def apply(self, arg: IOLike[typing.Any]) -> Apply[typing.Any, typing.Any]:
        """`self` must produce a function; it is applied to the result of `arg`."""
        return Apply(self, arg)

    def execute(self) -> A:
        """Run the computation. A node can be executed once."""
        self._claim()
        logger.debug("executing %r", self)
        value = _interpret(self)
        logger.debug("executed %r", self)
        return value

    def __repr__(self) -> str:
        state = ", claimed" if self._claimed else ""
        return f"{type(self).__name__}({self._describe()}{state})"

    def _describe(self) -> str:
        return ""


def _name(f: object) -> str:
    return getattr(f, "__name__", type(f).__name__)


class IO[A](IOLike[A]):
    """Leaf holding an already-computed value."""

    __slots__ = ("_value",)

    def __init__(self, value: A) -> None:
        super().__init__()
        self._value = value

    @classmethod
    def pure(cls, value: A) -> IO[A]:
        return cls(value)

    @staticmethod
    def suspend[T](thunk: Thunk[T]) -> Suspend[T]:
        return Suspend(thunk)

    @staticmethod
    def catching[T, E](thunk: Thunk[T], *, on_error: Callable[[Exception], E]) -> Suspend[Result[T, E]]:
        """
        Lift exception-based code into IO with a Result channel.

        Example:
            config = IO.catching(lambda: json.loads(raw), on_error=lambda e: ParseError(str(e)))
            config.execute()   # Ok({...}) or Error(ParseError(...))

        NOTE: Catches all Exception subclasses. For specific exceptions,
              filter in on_error or use try/except manually.
        """

        def run() -> Result[T, E]:
            try:
                return Ok(call_once(thunk))
            except Exception as exc:
                return Error(on_error(exc))

        return Suspend(run)

    def _describe(self) -> str:
        return repr(self._value)


class Suspend[A](IOLike[A]):
    """Deferred side effect. The thunk runs once, at execution."""

    __slots__ = ("_thunk",)

    def __init__(self, thunk: Thunk[A]) -> None:
        super().__init__()
        self._thunk = thunk

    def _describe(self) -> str:
        return _name(self._thunk)


class Map[A, B](IOLike[B]):
    __slots__ = ("_f", "_io")

    def __init__(self, f: Callable[[A], B], io: IOLike[A]) -> None:
        io._claim()
        super().__init__()
        self._f = f
        self._io = io

    def _describe(self) -> str:
        return _name(self._f)


class Bind[A, B](IOLike[B]):
    __slots__ = ("_f", "_io")

    def __init__(self, f: Callable[[A], IOLike[B]], io: IOLike[A]) -> None:
        io._claim()
        super().__init__()
        self._f = f
        self._io = io

    def _describe(self) -> str:
        return _name(self._f)


class Apply[A, B](IOLike[B]):
    __slots__ = ("_fn", "_arg")

    def __init__(self, fn: IOLike[Callable[[A], B]], arg: IOLike[A]) -> None:
        # Neither node is claimed unless both can be
        if fn is arg:
            raise ConsumedError(repr(arg))
        for node in (fn, arg):
            if node.claimed:
                raise ConsumedError(repr(node))
        fn._claim()
        arg._claim()
        super().__init__()
        self._fn = fn
        self._arg = arg


# ============================================================================
# Interpreter
# ============================================================================

# Pending work while a subtree is evaluated:
# - "map": apply the function to the subtree's value
# - "bind": the function turns the value into the next node to run
# - "arg": the function node just finished; run the argument node next
# - "call": the argument node just finished; call the stored function on it
type _Frame = tuple[Literal["map", "bind", "arg", "call"], typing.Any]


def _interpret(root: IOLike[typing.Any]) -> typing.Any:
    stack: list[_Frame] = []
    node: IOLike[typing.Any] | None = root
    value: typing.Any = None

    while node is not None:
        # Descend to the leftmost leaf
        if isinstance(node, Map):
            stack.append(("map", node._f))
            node = node._io
            continue
        if isinstance(node, Bind):
            stack.append(("bind", node._f))
            node = node._io
            continue
        if isinstance(node, Apply):
            stack.append(("arg", node._arg))
            node = node._fn
            continue
        if isinstance(node, IO):
            value = node._value
        elif isinstance(node, Suspend):
            value = call_once(node._thunk)
        else:
            raise TypeError(f"cannot execute {type(node).__name__}")

        # Unwind until a frame schedules another node
        node = None
        while stack and node is None:
            tag, payload = stack.pop()
            if tag == "map":
                value = call_once(payload, value)
            elif tag == "bind":
                node = call_once(payload, value)
                if not isinstance(node, IOLike):
                    raise TypeError(f"bind function must return an IO node, got {type(node).__name__}")
                node._claim()
            elif tag == "arg":
                stack.append(("call", value))
                node = payload
            else:
                value = call_once(payload, value)

    return value


register_equiv(IOKind, IO, Suspend, Map, Bind, Apply)


__all__ = (
    "IO",
    "Apply",
    "Bind",
    "IOKind",
    "IOLike",
    "Map",
    "Suspend",
)
