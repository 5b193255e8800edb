# Core type aliases for the lispi data model.
# Code and data share one representation: Python atoms (bool, int, str),
# Symbol, Nil, LispList and Function values. A list is "code" only when it is
# the form handed to evaluate(); everywhere else it is plain data.
#
# Naming guidance:
# - SExpression: reader / special-form code handling unevaluated forms.
# - LispValue:  evaluator / builtin code handling evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: passed to special forms so they evaluate lazily
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
