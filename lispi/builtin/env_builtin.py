"""Built-in functions for the lispi runtime environment.

Every builtin receives the caller's Environment and its *unevaluated*
argument forms, evaluates them itself, and returns a value. `register` binds
the builtins, the special forms and the constants nil/true/false into a
global scope.
"""
from __future__ import annotations

from lispi import LispValue
from lispi.evaluation.evaluator import evaluate
from lispi.evaluation.special_forms import SPECIAL_FORMS
from lispi.printer import to_source
from lispi.types.environment import Environment
from lispi.types.errors import LispiArityError, LispiOverflowError, LispiTypeError
from lispi.types.function import Function, is_equal, is_integer
from lispi.types.lisp_list import LispList
from lispi.types.nil import Nil
from lispi.types.symbol import Symbol

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _evaluated(env: Environment, args: LispList) -> list[LispValue]:
    return [evaluate(arg, env) for arg in args]


def _require_arity(name: str, args: LispList, expected: int) -> None:
    if len(args) != expected:
        plural = "argument" if expected == 1 else "arguments"
        raise LispiArityError(
            f"Function '{name}' requires {expected} {plural}, got {len(args)}",
            expected=expected,
            actual=len(args),
        )


def _require_list(name: str, value: LispValue, position: str = "argument") -> LispList:
    if not isinstance(value, LispList):
        raise LispiTypeError(f"Only list is supported for '{name}' {position}, got: {to_source(value)}")
    return value


def check_int64(value: int) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise LispiOverflowError(f"Integer overflow: {value} does not fit in 64 bits")
    return value


# -------------------------------
# Arithmetic and equality
# -------------------------------
def add(env: Environment, args: LispList) -> int:
    """(+ a b ...) sums integers; (+) is 0."""
    result = 0
    for arg in args:
        value = evaluate(arg, env)
        if not is_integer(value):
            raise LispiTypeError(f"Calling function '+' with arg: {to_source(value)}")
        result = check_int64(result + value)
    return result


def equals(env: Environment, args: LispList) -> bool:
    """(= a b ...) is true when every argument equals the first."""
    if args.is_empty():
        raise LispiArityError(
            "Function '=' requires at least 1 argument, got 0", expected=1, actual=0
        )
    first = evaluate(args.first(), env)
    for arg in args.rest():
        if not is_equal(first, evaluate(arg, env)):
            return False
    return True


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: LispList) -> LispList:
    return LispList(_evaluated(env, args))


def first(env: Environment, args: LispList) -> LispValue:
    _require_arity("first", args, 1)
    elements = _require_list("first", evaluate(args.first(), env))
    if elements.is_empty():
        raise LispiTypeError("Function 'first' requires non-empty list")
    return elements.first()


def rest(env: Environment, args: LispList) -> LispList:
    _require_arity("rest", args, 1)
    elements = _require_list("rest", evaluate(args.first(), env))
    if elements.is_empty():
        raise LispiTypeError("Function 'rest' requires non-empty list")
    return elements.rest()


def cons(env: Environment, args: LispList) -> LispList:
    _require_arity("cons", args, 2)
    head, tail = _evaluated(env, args)
    return _require_list("cons", tail, "2nd argument").cons(head)


def is_empty(env: Environment, args: LispList) -> bool:
    _require_arity("empty?", args, 1)
    return _require_list("empty?", evaluate(args.first(), env)).is_empty()


BUILTINS = {
    "+": add,
    "=": equals,
    "list": list_builtin,
    "first": first,
    "rest": rest,
    "cons": cons,
    "empty?": is_empty,
}


def _special_form(form):
    def call(env: Environment, args: LispList) -> LispValue:
        return form(args, env, evaluate)
    return call


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.scope.update({
        Symbol("nil"): Nil,
        Symbol("true"): True,
        Symbol("false"): False,
    })
    env.scope.update({
        name: Function(str(name), _special_form(form)) for name, form in SPECIAL_FORMS.items()
    })
    env.scope.update({
        Symbol(name): Function(name, fn) for name, fn in BUILTINS.items()
    })
