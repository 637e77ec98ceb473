"""
motion.py — Snake motion and collision rules.

Pure functions over plain cells; no rendering, no input, no randomness.
Directions are duck-typed: anything with integer ``x`` / ``y`` attributes.

The board wraps: leaving one edge re-enters from the opposite one, so there
is no wall collision. The only fatal contacts are the snake's own body and
obstacles.
"""

from collections import deque
from itertools import islice
from typing import Iterable

Cell = tuple[int, int]


def wrap(x: int, y: int, tiles: int) -> Cell:
    """Fold an arbitrary coordinate back onto a ``tiles`` x ``tiles`` board."""
    return x % tiles, y % tiles


def next_head(head: Cell, direction, tiles: int) -> Cell:
    hx, hy = head
    return wrap(hx + direction.x, hy + direction.y, tiles)


def advance(body: deque, direction, tiles: int) -> deque:
    """
    Return a new body with the next head prepended.

    The tail is left in place: whether it is dropped depends on growth,
    which the caller decides once it knows what the head landed on.
    A neutral direction yields a head equal to the current one.
    """
    moved = deque(body)
    moved.appendleft(next_head(body[0], direction, tiles))
    return moved


def detect_collision(body: deque, obstacles: Iterable[Cell]) -> bool:
    """True when the head sits on a non-head segment or on an obstacle."""
    head = body[0]
    if any(segment == head for segment in islice(body, 1, None)):
        return True
    return head in obstacles
