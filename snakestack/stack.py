"""Stack of board positions backed by a singly linked list."""

from __future__ import annotations

import random
import string
from typing import Optional

from snakestack.objpos import ObjPos
from snakestack.poslist import LinkedPosList

ITEM_NUMBER = 1
ITEM_SYMBOL = "*"
MAX_ITEM_X = 28
MAX_ITEM_Y = 12


class EmptyStackError(IndexError):
    """Raised when reading from an empty stack."""


def _tens_digit(pos: ObjPos) -> int:
    """Tens digit of the position's number, signed like truncating division."""
    tens = abs(pos.number) // 10 % 10
    return -tens if pos.number < 0 else tens


class PosStack:
    """LIFO stack of positions; the top is the head of the underlying list."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._list = LinkedPosList()

    def populate_random_elements(self, count: int) -> None:
        """Push ``count`` random items, then sort the whole stack by tens digit.

        After sorting, the smallest tens digit is on top; equal digits keep
        their relative order.
        """
        self._generate_objects(count)
        self._sort_by_tens()

    def _generate_objects(self, count: int) -> None:
        for _ in range(count):
            if self._rng.randrange(2) == 0:
                alphabet = string.ascii_lowercase
            else:
                alphabet = string.ascii_uppercase
            prefix = alphabet[self._rng.randrange(len(alphabet))]
            x = self._rng.randrange(MAX_ITEM_X) + 1
            y = self._rng.randrange(MAX_ITEM_Y) + 1
            self.push(ObjPos(x, y, ITEM_NUMBER, prefix, ITEM_SYMBOL))

    def _sort_by_tens(self) -> None:
        ordered = sorted(self._list, key=_tens_digit)
        for index, pos in enumerate(ordered):
            self._list.set(pos, index)

    def push(self, pos: ObjPos) -> None:
        """Put a copy of ``pos`` on top of the stack."""
        self._list.insert_head(pos)

    def pop(self) -> ObjPos:
        """Remove and return the top position."""
        if self._list.is_empty():
            raise EmptyStackError("pop from an empty stack")
        return self._list.remove_head()

    def top(self) -> ObjPos:
        """Return a copy of the top position without removing it."""
        if self._list.is_empty():
            raise EmptyStackError("top of an empty stack")
        return self._list.head()

    def __len__(self) -> int:
        return len(self._list)

    def __str__(self) -> str:
        return str(self._list)