"""A snake steered by four control keys."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from snakestack.cmdqueue import CommandQueue, QueueFullError
from snakestack.objpos import ObjPos
from snakestack.poslist import LinkedPosList

if TYPE_CHECKING:
    from snakestack.itembin import ItemBin
    from snakestack.mechanics import GameMechs

EMPTY = " "
MIN_SELF_COLLISION_LENGTH = 4


class Direction(enum.Enum):
    STOP = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Player:
    """A snake on the board; ``controls`` are the up, down, left, right keys."""

    def __init__(
        self,
        x: int,
        y: int,
        symbol: str,
        game: GameMechs,
        item_bin: ItemBin,
        controls: str,
    ) -> None:
        if len(controls) != 4:
            raise ValueError(f"expected four control keys, got {controls!r}")
        self._body = LinkedPosList()
        self._body.insert_head(ObjPos(x, y, -1, "\0", symbol))
        self._keys = dict(
            zip(
                controls,
                (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT),
            )
        )
        self._controls = controls
        self._game = game
        self._item_bin = item_bin
        self._direction = Direction.STOP
        self._score = 0
        self._commands = CommandQueue()
        game.add_player(self)

    @property
    def score(self) -> int:
        return self._score

    @property
    def direction(self) -> Direction:
        return self._direction

    def _update_direction(self) -> None:
        if not len(self._commands):
            return
        key = self._commands.dequeue()
        for control, wanted in zip(
            self._controls,
            (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT),
        ):
            if key == control:
                if self._direction is not _OPPOSITE[wanted]:
                    self._direction = wanted
                return

    def move(self) -> None:
        """Apply one queued command and advance one cell, wrapping at walls."""
        self._update_direction()
        if self._direction is Direction.STOP:
            return

        self._undraw()
        head = self._body.head()
        inner_x = self._game.size_x - 2
        inner_y = self._game.size_y - 2
        match self._direction:
            case Direction.UP:
                head.y = head.y - 1 if head.y - 1 >= 1 else inner_y
            case Direction.DOWN:
                head.y = head.y + 1 if head.y + 1 <= inner_y else 1
            case Direction.LEFT:
                head.x = head.x - 1 if head.x - 1 >= 1 else inner_x
            case Direction.RIGHT:
                head.x = head.x + 1 if head.x + 1 <= inner_x else 1

        self._body.insert_head(head)
        if not self._check_collision():
            self._body.remove_tail()
        if self._check_self_collision():
            self._game.set_game_lost()

    def _check_collision(self) -> bool:
        target = self._item_bin.item()
        if target is None:
            return False
        collided = self._body.head().overlaps(target)
        if collided:
            self._item_bin.generate_item()
            self._score += target.number
        return collided

    def _check_self_collision(self) -> bool:
        if len(self._body) < MIN_SELF_COLLISION_LENGTH:
            return False
        head, *rest = self._body
        return any(head.overlaps(pos) for pos in rest)

    def draw(self) -> None:
        """Write the snake's symbol onto every cell it occupies."""
        board = self._game.board
        for pos in self._body:
            board[pos.y][pos.x] = pos.symbol

    def _undraw(self) -> None:
        board = self._game.board
        for pos in self._body:
            board[pos.y][pos.x] = EMPTY

    def increase_score(self) -> None:
        self._score += 1

    def positions(self) -> list[ObjPos]:
        """Return copies of the snake's cells, head first."""
        return list(self._body)

    def is_my_control(self, key: str) -> bool:
        return key in self._keys

    def receive_command(self, key: str) -> None:
        """Queue a key; it is dropped when the queue is full."""
        try:
            self._commands.enqueue(key)
        except QueueFullError:
            pass