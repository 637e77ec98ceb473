"""
difficulty.py — Score-driven speed and obstacle progression.
"""

from typing import NamedTuple

from .config import FOOD_SCORE, INTERVAL_STEP, MIN_INTERVAL, OBSTACLE_EVERY


class DifficultyStep(NamedTuple):
    score: int
    interval: int
    obstacle_delta: int


def adds_obstacle(score: int) -> bool:
    """An obstacle appears on every multiple of OBSTACLE_EVERY, from the first one up."""
    return score >= OBSTACLE_EVERY and score % OBSTACLE_EVERY == 0


def next_interval(interval: int) -> int:
    if interval <= MIN_INTERVAL:
        return interval
    return max(MIN_INTERVAL, interval - INTERVAL_STEP)


def on_food_eaten(score: int, interval: int) -> DifficultyStep:
    """Apply one food's worth of progression to ``score`` and ``interval``."""
    score += FOOD_SCORE
    return DifficultyStep(
        score=score,
        interval=next_interval(interval),
        obstacle_delta=1 if adds_obstacle(score) else 0,
    )
