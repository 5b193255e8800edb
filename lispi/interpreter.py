from __future__ import annotations

import logging
from pathlib import Path

from lispi import SExpression, LispValue
from lispi.builtin.env_builtin import register
from lispi.evaluation.evaluator import evaluate
from lispi.evaluation.special_forms.import_form import read_source
from lispi.reader.parser import Parser, read_all
from lispi.types.environment import Environment, GlobalScope
from lispi.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates lispi code against one long-lived global scope.
    Definitions made by one call to `eval` are visible to the next.
    """

    def __init__(self, prelude: str | None = None):
        self.scope = GlobalScope()
        self.env: Environment = Environment(self.scope)
        register(self.env)
        # Incremental reader for line-at-a-time input (the REPL)
        self.parser = Parser()

        if prelude:
            self.eval(prelude)

    def eval_form(self, expr: SExpression) -> LispValue:
        """Evaluate one already-read form at top level."""
        return evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Read every form of `code`, evaluate them in order, return the last value."""
        result: LispValue = Nil
        for expr in read_all(code):
            result = self.eval_form(expr)
        return result

    def feed(self, line: str) -> list[LispValue]:
        """Feed a chunk of input; evaluate and return the results of the forms it completes.

        Evaluation stops at the first error, which propagates to the caller.
        """
        return [self.eval_form(expr) for expr in self.parser.feed(line)]

    def load(self, path: str | Path) -> LispValue:
        """Evaluate every form of a source file, returning the last value."""
        logger.debug("loading %s", path)
        result: LispValue = Nil
        for expr in read_source(Path(path)):
            result = self.eval_form(expr)
        return result
