"""Source of collectible items placed on the board."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Optional

from snakestack.objpos import ObjPos
from snakestack.stack import EmptyStackError, PosStack

if TYPE_CHECKING:
    from snakestack.mechanics import GameMechs

STACK_SIZE = 100
EMPTY = " "


class ItemBin:
    """Pre-generates a stack of items and places them on free board cells."""

    def __init__(
        self,
        game: GameMechs,
        rng: Optional[random.Random] = None,
        stack_size: int = STACK_SIZE,
    ) -> None:
        self._game = game
        self._rng = rng if rng is not None else random.Random()
        self._stack = PosStack(self._rng)
        self._stack.populate_random_elements(stack_size)
        self._item: Optional[ObjPos] = self._stack.top() if len(self._stack) else None

    def _cells(self) -> list[tuple[int, int, str]]:
        item = self._item
        tens, ones = divmod(item.number, 10)
        return [
            (item.x, item.y, item.symbol),
            (item.x - 1, item.y - 1, item.prefix),
            (item.x, item.y - 1, chr(ord("0") + tens)),
            (item.x + 1, item.y - 1, chr(ord("0") + ones)),
        ]

    def draw_item(self) -> None:
        """Draw the current item: symbol, with prefix and two digits above it."""
        if self._item is None:
            return
        board = self._game.board
        for x, y, char in self._cells():
            board[y][x] = char

    def _undraw_item(self) -> None:
        if self._item is None or self._item.x == 0 or self._item.y == 0:
            return
        board = self._game.board
        for x, y, _ in self._cells():
            board[y][x] = EMPTY

    def generate_item(self) -> None:
        """Move to the next stacked item at a random cell no player occupies.

        When the stack runs out the game is told to exit and no item remains.
        """
        occupied = {
            (pos.x, pos.y)
            for player in self._game.players
            for pos in player.positions()
        }
        while True:
            x = self._rng.randrange(self._game.size_x - 4) + 2
            y = self._rng.randrange(self._game.size_y - 4) + 2
            if (x, y) not in occupied:
                break

        self._undraw_item()
        try:
            self._item = self._stack.pop()
        except EmptyStackError:
            self._item = None
            self._game.set_exit()
            return

        self._item.x = x
        self._item.y = y
        self.draw_item()

    def item(self) -> Optional[ObjPos]:
        """Return a copy of the current item, or None once the bin is empty."""
        return None if self._item is None else self._item.copy()