# snakestack

A two-player snake game for the terminal. Two snakes share a 30 × 15 board
with a `#` border; moving off one edge brings a snake back in at the opposite
edge. The snakes chase numbered items. Eating an item makes the snake one cell
longer and adds the item's number to its score. The items are made ahead of
time and kept on a stack. A snake that runs into itself loses the game.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
snakestack
snakestack --seed 42
```

`--seed` fixes the random numbers, so item placement repeats from run to run.

| Player | Symbol | Up | Down | Left | Right |
|--------|--------|----|------|------|-------|
| 1      | `@`    | w  | s    | a    | d     |
| 2      | `&`    | i  | k    | j    | l     |

Each player has its own command queue, so two people can play at the same
keyboard. A snake cannot turn straight back on itself. Press Escape to quit.
The game also stops when the item stack runs out. At the end the game prints
"You have Lost!" or "Game Shuts Down" and waits for Enter.

The game draws through the standard `curses` module. Where Python has no
`curses` (as on a stock Windows install), `snakestack` prints an error and
exits with status 1.

## Self-check

```
snakestack-selfcheck
snakestack-selfcheck --seed 42
```

This runs the built-in checks on the position stack and the command queue.
It prints an assertion score and a test-case score, and exits with status 1
if any assertion fails. The same checks are available as
`snakestack.selfcheck.run_all_checks(rng, out)`, which returns a
`CheckReport`.

## Library use

The data structures work without the game:

- `snakestack.objpos.ObjPos`: a board position with a prefix, a number and a
  symbol. Assigning to `number` keeps only its last two digits.
- `snakestack.cmdqueue.CommandQueue`: a first-in first-out queue of key
  commands with a fixed capacity (100 by default). When it is full, `enqueue`
  raises `QueueFullError`; `dequeue` on an empty queue raises `IndexError`.
- `snakestack.poslist.LinkedPosList` and `snakestack.poslist.ArrayPosList`:
  two implementations of the `PosList` interface. Reading from or removing
  from an empty list raises `IndexError`; out-of-range indices are clamped.
  `ArrayPosList` ignores inserts once it is full.
- `snakestack.stack.PosStack`: a stack of positions. `pop` and `top` on an
  empty stack raise `EmptyStackError`. `populate_random_elements` pushes
  random items and sorts the stack by their tens digit, smallest on top.

```python
from snakestack.cmdqueue import CommandQueue

queue = CommandQueue(4)
queue.enqueue("w")
queue.enqueue("d")
assert queue.dequeue() == "w"
assert len(queue) == 1
```

The game itself can be driven with any object that offers the methods of
`snakestack.terminal.Terminal`: `snakestack.game.run(terminal, rng)` plays one
game and returns the final `GameMechs`.