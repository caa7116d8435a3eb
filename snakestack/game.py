"""The two-player snake game and its command-line entry point."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Any, Optional, Sequence

from snakestack.itembin import ItemBin
from snakestack.mechanics import GameMechs
from snakestack.player import Player
from snakestack.screen import ScreenDrawer
from snakestack.terminal import Terminal, curses

MOVE_EVERY = 10
PLAYER_SETUPS = (
    (3, 3, "@", "wsad"),
    (12, 12, "&", "ikjl"),
)


def run(terminal: Any, rng: Optional[random.Random] = None) -> GameMechs:
    """Play one game on ``terminal`` until it ends; return the final state."""
    game = GameMechs()
    item_bin = ItemBin(game, rng)
    players = [
        Player(x, y, symbol, game, item_bin, controls)
        for x, y, symbol, controls in PLAYER_SETUPS
    ]
    item_bin.generate_item()
    drawer = ScreenDrawer(game, item_bin, terminal)

    iteration = 0
    while not game.exit_flag:
        game.process_input(terminal)
        if iteration % MOVE_EVERY == 0:
            for player in players:
                player.move()
            drawer.draw()
        game.apply_delay(terminal)
        iteration += 1

    drawer.draw_end_game()
    return game


def _play(window: Any, seed: Optional[int]) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    terminal = Terminal(window)
    run(terminal, random.Random(seed))
    terminal.wait_for_enter()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Two-player snake: WSAD and IKJL steer, Esc quits."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    if curses is None:
        print("a curses-capable terminal is required", file=sys.stderr)
        return 1
    curses.wrapper(_play, args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())