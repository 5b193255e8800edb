"""Runtime environment for lispi.

Symbol resolution has exactly two tiers. The *global* tier is one GlobalScope
per interpreter run, shared by reference by every Environment and therefore
by every closure call; `def` writes to it and the write is visible
everywhere immediately. The *local* tier is a plain dict owned by one call
frame and populated by argument binding.
"""

from __future__ import annotations

import threading
from io import StringIO
from typing import Iterator, Optional

from lispi import LispValue
from lispi.types.errors import LispiUnresolvedSymbol, LispiTypeError
from lispi.types.symbol import Symbol


class GlobalScope:
    """The single mutable table of global definitions."""

    __slots__ = ("_vars", "_lock")

    def __init__(self):
        self._vars: dict[Symbol, LispValue] = {}
        self._lock = threading.RLock()

    def define(self, name: Symbol, value: LispValue) -> None:
        with self._lock:
            self._vars[name] = value

    def get(self, name: Symbol, default: LispValue = None) -> LispValue:
        return self._vars.get(name, default)

    def update(self, bindings: dict[Symbol, LispValue]) -> None:
        with self._lock:
            self._vars.update(bindings)

    def names(self) -> Iterator[Symbol]:
        return iter(list(self._vars))

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __len__(self) -> int:
        return len(self._vars)


class Environment:
    """A call frame: local bindings over a shared GlobalScope."""

    __slots__ = ("scope", "vars")

    def __init__(
        self,
        scope: Optional[GlobalScope] = None,
        local: Optional[dict[Symbol, LispValue]] = None,
    ):
        self.scope: GlobalScope = scope if scope is not None else GlobalScope()
        self.vars: dict[Symbol, LispValue] = local if local is not None else {}

    def child(self, local: Optional[dict[Symbol, LispValue]] = None) -> Environment:
        """A new frame with its own locals over the same global scope."""
        return Environment(self.scope, local)

    def snapshot(self) -> dict[Symbol, LispValue]:
        """Copy of the current local bindings, used for closure capture."""
        return dict(self.vars)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` globally. Raises LispiTypeError if `name` is not a Symbol."""
        if not isinstance(name, Symbol):
            raise LispiTypeError(f"Cannot define {name!r} as a symbol")
        self.scope.define(name, value)

    def bind(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in this frame only."""
        self.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Resolve `name`: local frame first, then the global scope.

        Raises LispiUnresolvedSymbol if neither tier binds it.
        """
        try:
            return self.vars[name]
        except KeyError:
            pass
        value = self.scope.get(name, _MISSING)
        if value is _MISSING:
            raise LispiUnresolvedSymbol(f"Can't resolve symbol '{name}'")
        return value

    def __contains__(self, name: object) -> bool:
        return name in self.vars or name in self.scope

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment local={")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write(f"}} globals={len(self.scope)}>")
            return buffer.getvalue()


_MISSING = object()
