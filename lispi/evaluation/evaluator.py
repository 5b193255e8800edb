"""Core evaluator for the lispi interpreter.

Atoms evaluate to themselves, symbols resolve through the Environment, and a
non-empty list is a call: its head is evaluated to a Function which receives
the remaining forms *unevaluated*. A list headed by `recur` is returned as is;
only the closure trampoline in `lispi.evaluation.apply` gives it meaning.
"""

from __future__ import annotations

from lispi import SExpression, LispValue
from lispi.printer import to_source
from lispi.types.environment import Environment
from lispi.types.errors import LispiEmptyCall, LispiNotCallable
from lispi.types.function import Function
from lispi.types.lisp_list import LispList
from lispi.types.symbol import Symbol, RECUR


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one form in `env` and return its value."""
    match expr:
        case Symbol():
            return env.lookup(expr)
        case LispList():
            if expr.is_empty():
                raise LispiEmptyCall("Can't evaluate empty list")
            head = expr.first()
            if head == RECUR:
                return expr
            fn = evaluate(head, env)
            if not isinstance(fn, Function):
                raise LispiNotCallable(f"Value {to_source(fn)} is not a function")
            return fn(env, expr.rest())

    # --- Atoms return as-is ---
    return expr


def is_recur(value: LispValue) -> bool:
    """True for the inert `(recur ...)` list handed back to a closure trampoline."""
    return isinstance(value, LispList) and not value.is_empty() and value.first() == RECUR
