from lispi.types.symbol import Symbol, RECUR
from lispi.types.nil import Nil, NilType
from lispi.types.lisp_list import LispList, EMPTY
from lispi.types.function import Function, Closure, is_equal, is_integer
from lispi.types.environment import Environment, GlobalScope

__all__ = [
    "Symbol",
    "RECUR",
    "Nil",
    "NilType",
    "LispList",
    "EMPTY",
    "Function",
    "Closure",
    "is_equal",
    "is_integer",
    "Environment",
    "GlobalScope",
]
