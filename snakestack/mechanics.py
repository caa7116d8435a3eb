"""Game state: board, flags, last command and registered players."""

from __future__ import annotations

from typing import Any

DEFAULT_SIZE_X = 30
DEFAULT_SIZE_Y = 15
DEFAULT_DELAY = 5000
MAX_PLAYERS = 4
BORDER = "#"
EMPTY = " "
ESCAPE = "\x1b"


class GameMechs:
    """Holds the game board and the game's flags and players."""

    def __init__(
        self,
        size_x: int = DEFAULT_SIZE_X,
        size_y: int = DEFAULT_SIZE_Y,
        delay: int = DEFAULT_DELAY,
    ) -> None:
        if size_x < 1 or size_y < 1:
            raise ValueError(f"board size must be positive, got {size_x}x{size_y}")
        self._size_x = size_x
        self._size_y = size_y
        self._delay = delay
        self._exit = False
        self._lost = False
        self._cmd = "\0"
        self._players: list[Any] = []
        self._board = [
            [
                BORDER
                if row in (0, size_y - 1) or col in (0, size_x - 1)
                else EMPTY
                for col in range(size_x)
            ]
            for row in range(size_y)
        ]

    @property
    def size_x(self) -> int:
        return self._size_x

    @property
    def size_y(self) -> int:
        return self._size_y

    @property
    def delay(self) -> int:
        return self._delay

    @property
    def exit_flag(self) -> bool:
        return self._exit

    @property
    def lose_flag(self) -> bool:
        return self._lost

    @property
    def cmd(self) -> str:
        """The last key read from the terminal."""
        return self._cmd

    @property
    def board(self) -> list[list[str]]:
        """The board grid, indexed as ``board[y][x]``; shared, not copied."""
        return self._board

    @property
    def players(self) -> tuple[Any, ...]:
        return tuple(self._players)

    @property
    def player_count(self) -> int:
        return len(self._players)

    def add_player(self, player: Any) -> None:
        """Register a player; at most four players are allowed."""
        if len(self._players) >= MAX_PLAYERS:
            raise ValueError(f"at most {MAX_PLAYERS} players are supported")
        self._players.append(player)

    def _check_input(self, terminal: Any) -> bool:
        while terminal.has_char():
            self._cmd = terminal.get_char()
            for player in self._players:
                if player.is_my_control(self._cmd):
                    player.receive_command(self._cmd)
                    return True
        return False

    def process_input(self, terminal: Any) -> None:
        """Read pending keys, hand the first owned one to its player.

        The escape key sets the exit flag.
        """
        self._check_input(terminal)
        if self._cmd == ESCAPE:
            self.set_exit()

    def apply_delay(self, terminal: Any) -> None:
        """Pause for the game's loop delay, in microseconds."""
        terminal.delay(self._delay)

    def set_exit(self) -> None:
        self._exit = True

    def set_game_lost(self) -> None:
        """End the game as lost."""
        self._exit = True
        self._lost = True

    def render_rows(self) -> list[str]:
        """Return the board as one string per row."""
        return ["".join(row) for row in self._board]