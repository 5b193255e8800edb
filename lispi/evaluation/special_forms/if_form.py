from lispi import EvaluatorFn, LispValue
from lispi.types.errors import LispiArityError
from lispi.types.lisp_list import LispList
from lispi.types.nil import Nil
from lispi.types.environment import Environment


def is_truthy(value: LispValue) -> bool:
    # Only false and nil are false; 0 and the empty list are true.
    return value is not False and value is not Nil


def if_form(
    tail: LispList,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not 2 <= len(tail) <= 3:
        raise LispiArityError(
            f"Function 'if' requires 2 or 3 arguments, got {len(tail)}",
            actual=len(tail),
        )

    cond = evaluate_fn(tail[0], env)
    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
