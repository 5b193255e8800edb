import logging

from lispi import EvaluatorFn, LispValue
from lispi.types.errors import LispiArityError, LispiMalformedForm
from lispi.types.lisp_list import LispList
from lispi.types.nil import Nil
from lispi.types.symbol import Symbol
from lispi.printer import to_source
from lispi.types.environment import Environment

logger = logging.getLogger(__name__)


def define_form(
    tail: LispList,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    The name is taken literally; the value is evaluated and bound globally.
    """
    if len(tail) != 2:
        raise LispiArityError(
            f"Invalid arguments for def: expected 2, got {len(tail)}",
            expected=2,
            actual=len(tail),
        )

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LispiMalformedForm(f"'def' first argument must be a symbol, got: {to_source(name)}")
    value = evaluate_fn(val_expr, env)  # normal evaluation
    env.define(name, value)
    logger.debug("def %s", name)
    return Nil
