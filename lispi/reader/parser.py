"""
  lispi reader

- Incremental: `Parser.feed` may be called with arbitrary chunks of source
  (one REPL line at a time); lists left open at the end of a chunk stay on
  the parser's paren stack and are completed by later chunks.
- Emits lispi values directly, the same values the evaluator consumes:

    - integers        -> int (signed 64-bit)
    - "text"          -> str (no escape sequences)
    - symbols         -> Symbol
    - ( ... )         -> LispList
    - ; comment       -> skipped to end of line
"""

from __future__ import annotations

import logging
import re

from lispi import SExpression
from lispi.types.errors import LispiSyntaxError
from lispi.types.lisp_list import LispList
from lispi.types.symbol import Symbol

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"[^"]*")'  # double-quoted string, no escapes
    r'|(?P<open_string>"[^"]*)'  # string missing its closing quote
    r"|(?P<atom>[^\s)]+)",  # integer or symbol, ends at whitespace or ')'
)

INTEGER_RE = re.compile(r"[+-]?\d+")

OPERATOR_SYMBOLS = frozenset({"+", "-", "*", "/", "=", ">", "<"})

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def is_symbol(token: str) -> bool:
    if token in OPERATOR_SYMBOLS:
        return True
    return token[:1].isalpha() and all(c.isalnum() or c in "?/_" for c in token[1:])


def parse_atom(token: str) -> SExpression:
    """Turn one atom token into an integer or a Symbol."""
    if INTEGER_RE.fullmatch(token):
        value = int(token)
        if INT64_MIN <= value <= INT64_MAX:
            return value
    elif is_symbol(token):
        return Symbol(token)
    raise LispiSyntaxError(f"Unsupported token '{token}'")


class Parser:
    """Reader with a persistent paren stack."""

    def __init__(self):
        self.stack: list[list[SExpression]] = []

    @property
    def depth(self) -> int:
        """Number of lists currently open."""
        return len(self.stack)

    def reset(self) -> None:
        """Drop any partially read form."""
        self.stack.clear()

    def _add(self, value: SExpression, out: list[SExpression]) -> None:
        if self.stack:
            self.stack[-1].append(value)
        else:
            out.append(value)

    def feed(self, source: str) -> list[SExpression]:
        """Read `source` and return every top-level form it completes.

        Raises LispiSyntaxError on an unmatched ')', an unterminated string or
        an unsupported token.
        """
        out: list[SExpression] = []
        pos = 0
        n = len(source)
        while pos < n:
            if source[pos].isspace():
                pos += 1
                continue
            m = TOKEN_RE.match(source, pos)
            kind = m.lastgroup
            pos = m.end()

            if kind == "comment":
                continue
            if kind == "lparen":
                self.stack.append([])
            elif kind == "rparen":
                if not self.stack:
                    raise LispiSyntaxError("Unmatched closing parenthesis")
                items = self.stack.pop()
                self._add(LispList(items), out)
            elif kind == "string":
                self._add(m.group(kind)[1:-1], out)
            elif kind == "open_string":
                raise LispiSyntaxError(f"Unterminated string: {m.group(kind)[1:]}")
            else:
                self._add(parse_atom(m.group(kind)), out)

        logger.debug("read %d forms, %d lists open", len(out), len(self.stack))
        return out

    def finish(self) -> None:
        """Raise LispiSyntaxError if a list is still open."""
        if self.stack:
            partial = " ".join(str(LispList(items)) for items in self.stack)
            raise LispiSyntaxError(f"Syntax error, partially parsed state: {partial}")


def read_all(source: str) -> list[SExpression]:
    """Read a complete source text into its top-level forms."""
    parser = Parser()
    forms = parser.feed(source)
    parser.finish()
    return forms
