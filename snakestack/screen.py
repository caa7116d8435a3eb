"""Drawing the board, scores and end-of-game messages."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from snakestack.itembin import ItemBin
    from snakestack.mechanics import GameMechs


class ScreenDrawer:
    """Renders the game onto a terminal.

    The players are those registered with the game when the drawer is made.
    """

    def __init__(self, game: GameMechs, item_bin: ItemBin, terminal: Any) -> None:
        self._game = game
        self._players = game.players
        self._item_bin = item_bin
        self._terminal = terminal

    def draw(self) -> None:
        """Clear the screen, redraw items and players, print board and scores."""
        self._terminal.clear()
        self._item_bin.draw_item()
        for player in self._players:
            player.draw()

        for row in self._game.render_rows():
            self._terminal.write(row + "\n")

        for number, player in enumerate(self._players, start=1):
            self._terminal.write(f"Player{number} Score: {player.score}\n")

    def draw_end_game(self) -> None:
        if self._game.lose_flag:
            self._terminal.write("You have Lost!\n")
        else:
            self._terminal.write("Game Shuts Down\n")

    def draw_average_computation_time(self, data: float) -> None:
        self._terminal.write(f"Average Computation Time: {data:.10f} ms\n")