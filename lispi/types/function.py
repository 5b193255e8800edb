"""Callable values: native functions and user closures.

Both share one contract: they are called with the caller's Environment and
the *unevaluated* argument forms, and decide for themselves which arguments
to evaluate. Builtins that want eager arguments evaluate them internally.
"""

from __future__ import annotations

import uuid
from typing import Callable, TYPE_CHECKING

from lispi import LispValue
from lispi.types.lisp_list import LispList
from lispi.types.symbol import Symbol

if TYPE_CHECKING:
    from lispi.types.environment import Environment

FunctionType = Callable[["Environment", LispList], LispValue]


class Function:
    """A named callable. The name is a debug label and the basis of equality."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: FunctionType | None = None):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: LispList) -> LispValue:
        return self.fn(env, args)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Function) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Function({self.name!r})"


class Closure(Function):
    """A function created by `fn`: parameters, body and captured local scope."""

    __slots__ = ("params", "body", "captured")

    def __init__(
        self, params: list[Symbol], body: LispValue, captured: dict[Symbol, LispValue]
    ):
        super().__init__(str(uuid.uuid4()))
        self.params: list[Symbol] = params
        self.body: LispValue = body
        # Snapshot of the defining frame's locals; globals are reached through
        # the caller's Environment at call time.
        self.captured: dict[Symbol, LispValue] = captured

    def __call__(self, env: Environment, args: LispList) -> LispValue:
        from lispi.evaluation.apply import apply_closure
        return apply_closure(self, env, args)

    def __repr__(self) -> str:
        params = " ".join(str(p) for p in self.params)
        return f"Closure(({params}), name={self.name!r})"


def is_integer(value: LispValue) -> bool:
    """True for Integer values; bool is an int subclass but not an Integer."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality for lispi values."""
    if a is b:
        return True
    if isinstance(a, LispList) and isinstance(b, LispList):
        return a == b
    if type(a) != type(b):
        return False
    return a == b
