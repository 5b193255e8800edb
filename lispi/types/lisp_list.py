"""Persistent singly-linked list used for both code and data.

Every LispList is immutable. `cons` and `rest` are O(1) and share their tail
with the list they came from, so handing the same list to a closure body on
every call, or to the recur trampoline on every iteration, never copies it.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from lispi import LispValue


class LispList:
    """An immutable cons list. All empty lists are the shared `EMPTY` node."""

    __slots__ = ("_head", "_tail", "_length")

    def __new__(cls, items: Iterable[LispValue] = ()) -> LispList:
        if isinstance(items, LispList):
            return items
        result = EMPTY
        for value in reversed(list(items)):
            result = result.cons(value)
        return result

    @classmethod
    def of(cls, *items: LispValue) -> LispList:
        return cls(items)

    def cons(self, value: LispValue) -> LispList:
        """Return a new list with `value` in front of this one."""
        return _node(value, self, self._length + 1)

    def first(self) -> LispValue:
        if self._length == 0:
            raise IndexError("first of empty list")
        return self._head

    def rest(self) -> LispList:
        if self._length == 0:
            raise IndexError("rest of empty list")
        return self._tail

    def is_empty(self) -> bool:
        return self._length == 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[LispValue]:
        node = self
        while node._length:
            yield node._head
            node = node._tail

    def __getitem__(self, index: int) -> LispValue:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("list index out of range")
        node = self
        for _ in range(index):
            node = node._tail
        return node._head

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, LispList) or len(self) != len(other):
            return False
        from lispi.types.function import is_equal
        return all(is_equal(a, b) for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        from lispi.printer import to_source
        return to_source(self)

    def __repr__(self) -> str:
        return f"LispList({list(self)!r})"


def _node(head: LispValue, tail: LispList | None, length: int) -> LispList:
    node = object.__new__(LispList)
    node._head = head
    node._tail = tail
    node._length = length
    return node


EMPTY = _node(None, None, 0)
