"""Render lispi values back into surface syntax."""

from __future__ import annotations

from io import StringIO

from lispi import LispValue
from lispi.types.function import Closure, Function
from lispi.types.lisp_list import LispList
from lispi.types.nil import NilType
from lispi.types.symbol import Symbol


def to_source(value: LispValue) -> str:
    """Return the printed form of `value`.

    Strings are double-quoted (the language has no escapes), functions print
    as `<fn name>` and closures as `<closure (params)>`.
    """
    with StringIO() as buffer:
        _write(buffer, value)
        return buffer.getvalue()


def _write(buffer: StringIO, value: LispValue) -> None:
    if value is True:
        buffer.write("true")
    elif value is False:
        buffer.write("false")
    elif isinstance(value, NilType):
        buffer.write("nil")
    elif isinstance(value, str):
        buffer.write(f'"{value}"')
    elif isinstance(value, Symbol):
        buffer.write(value.id)
    elif isinstance(value, LispList):
        buffer.write("(")
        for i, item in enumerate(value):
            if i:
                buffer.write(" ")
            _write(buffer, item)
        buffer.write(")")
    elif isinstance(value, Closure):
        buffer.write("<closure (")
        buffer.write(" ".join(str(p) for p in value.params))
        buffer.write(")>")
    elif isinstance(value, Function):
        buffer.write(f"<fn {value.name}>")
    else:
        buffer.write(str(value))
