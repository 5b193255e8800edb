import logging

from lispi import EvaluatorFn, LispValue
from lispi.printer import to_source
from lispi.types.environment import Environment
from lispi.types.errors import LispiArityError, LispiMalformedForm
from lispi.types.function import Closure
from lispi.types.lisp_list import LispList
from lispi.types.symbol import Symbol

logger = logging.getLogger(__name__)

FN_SHAPE = "'fn' has form (fn (arg1 arg2 ...) body)"


def lambda_form(
    tail: LispList,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn (params) body): exactly one body form, evaluated on each call.
    if len(tail) != 2:
        raise LispiArityError(f"{FN_SHAPE}, got {len(tail)} arguments", expected=2, actual=len(tail))

    params, body = tail
    if not isinstance(params, LispList):
        raise LispiMalformedForm(FN_SHAPE)

    formals: list[Symbol] = []
    for param in params:
        if not isinstance(param, Symbol):
            raise LispiMalformedForm(f"Function arguments must be symbols, got {to_source(param)}.")
        formals.append(param)

    closure = Closure(formals, body, env.snapshot())
    logger.debug("closure %s created with params %s", closure.name, [str(f) for f in formals])
    return closure
