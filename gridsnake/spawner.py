"""
spawner.py — Places food and obstacles on free tiles.

Rejection sampling first: draw uniform cells until one is free. Sparse boards
accept almost immediately. After ``max_attempts`` rejections the board is
crowded enough that a full scan is cheaper, so every free cell is collected
and one is picked uniformly from the same generator. Only a board with no free
cell at all raises :class:`GridFull`.
"""

import logging
import random
from typing import Collection

from .config import SPAWN_ATTEMPTS
from .motion import Cell

logger = logging.getLogger(__name__)


class GridFull(RuntimeError):
    """Raised when every tile on the board is occupied."""

    def __init__(self, tiles: int):
        super().__init__(f"no free tile left on the {tiles}x{tiles} board")
        self.tiles = tiles


def free_cells(occupied: Collection[Cell], tiles: int) -> list[Cell]:
    return [
        (x, y)
        for y in range(tiles)
        for x in range(tiles)
        if (x, y) not in occupied
    ]


def spawn(
    occupied: Collection[Cell],
    tiles: int,
    rng: random.Random,
    max_attempts: int = SPAWN_ATTEMPTS,
) -> Cell:
    """Return a uniformly random cell that is not in ``occupied``."""
    for _ in range(max_attempts):
        cell = (rng.randrange(tiles), rng.randrange(tiles))
        if cell not in occupied:
            return cell

    free = free_cells(occupied, tiles)
    if not free:
        raise GridFull(tiles)
    logger.debug("rejection sampling gave up after %d draws; %d free tiles left",
                 max_attempts, len(free))
    return rng.choice(free)
