"""
obstacles.py — Random obstacle drift once the score is high enough.

Completely isolated from rendering and input.
Receives read-only views of the board and returns the new obstacle list.

Strategy:
  - Each obstacle, in insertion order, rolls against ``chance``.
  - On success it tries up to ``attempts`` random one-tile steps (wrapping).
  - The first step that lands off the snake, off the food and off every other
    obstacle is taken. If none does, the obstacle stays put this tick.
"""

import random
from typing import Collection, Sequence

from .config import OBSTACLE_MOVE_ATTEMPTS, OBSTACLE_MOVE_CHANCE
from .motion import Cell, wrap

# up, right, down, left
STEPS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def move_all(
    obstacles: Sequence[Cell],
    snake: Collection[Cell],
    food: Cell,
    tiles: int,
    rng: random.Random,
    chance: float = OBSTACLE_MOVE_CHANCE,
    attempts: int = OBSTACLE_MOVE_ATTEMPTS,
) -> list[Cell]:
    """
    Return the obstacle positions after one tick of drift.

    Parameters
    ----------
    obstacles : current obstacle cells; not mutated
    snake     : cells of every snake segment
    food      : the food cell
    tiles     : board edge length, used for wrapping
    rng       : random source; one ``random()`` roll per obstacle, then one
                ``randrange(4)`` per attempted step
    """
    moved = list(obstacles)
    blocked = set(snake)
    blocked.add(food)

    for i, (ox, oy) in enumerate(moved):
        if rng.random() >= chance:
            continue
        # positions of the others as they stand right now, moves included
        others = set(moved[:i]) | set(moved[i + 1:])
        for _ in range(attempts):
            dx, dy = STEPS[rng.randrange(len(STEPS))]
            candidate = wrap(ox + dx, oy + dy, tiles)
            if candidate not in blocked and candidate not in others:
                moved[i] = candidate
                break

    return moved
