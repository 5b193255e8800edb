"""Closure application for lispi.

A closure call evaluates its arguments in the *caller's* environment, binds
them over a fresh copy of the captured locals, then runs the body in a loop.
When the body yields an inert `(recur ...)` list, the loop evaluates the new
argument forms in the callee frame, rebinds the parameters in place and runs
the body again. Self tail calls written with `recur` therefore use constant
host stack; every other call recurses on the Python stack.
"""

from __future__ import annotations

import logging

from lispi import LispValue
from lispi.types.environment import Environment
from lispi.types.errors import LispiArityError
from lispi.types.function import Closure
from lispi.types.lisp_list import LispList
from lispi.evaluation.evaluator import evaluate, is_recur

logger = logging.getLogger(__name__)


def apply_closure(fn: Closure, caller_env: Environment, args: LispList) -> LispValue:
    """Apply `fn` to the unevaluated argument forms `args`.

    Raises LispiArityError when the call site or a `recur` supplies the wrong
    number of arguments.
    """
    params = fn.params
    arity = len(params)
    if len(args) != arity:
        raise LispiArityError(
            f"Wrong number of arguments, expected {arity}, got {len(args)}",
            expected=arity,
            actual=len(args),
        )

    local_env = caller_env.child(dict(fn.captured))
    for name, arg in zip(params, args):
        local_env.bind(name, evaluate(arg, caller_env))

    iterations = 0
    while True:
        result = evaluate(fn.body, local_env)
        if not is_recur(result):
            break
        new_args = result.rest()
        if len(new_args) != arity:
            raise LispiArityError(
                f"Wrong number of arguments passed to 'recur'. Expected {arity}, got {len(new_args)}",
                expected=arity,
                actual=len(new_args),
            )
        # All new values are computed before any parameter is rebound.
        values = [evaluate(arg, local_env) for arg in new_args]
        for name, value in zip(params, values):
            local_env.bind(name, value)
        iterations += 1

    if iterations:
        logger.debug("closure %s recurred %d times", fn.name, iterations)
    return result
