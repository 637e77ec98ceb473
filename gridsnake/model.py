"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

Classes:
    Direction    — immutable (dx, dy) value object
    Snake        — body and direction (applied + queued)
    EngineState  — every mutable piece of one game
    Snapshot     — read-only view handed to the render sink
    GameModel    — lifecycle state machine; advances one tick per clock call
"""

import logging
import random
from collections import deque
from typing import Callable, Iterable, NamedTuple

from .clock import Clock
from .config import (
    TILES, INITIAL_INTERVAL, MOVING_OBSTACLES_SCORE,
    STATE_IDLE, STATE_RUNNING, STATE_PAUSED, STATE_OVER,
    END_COLLISION, END_BOARD_FULL,
    EVENT_FOOD_EATEN, EVENT_GAME_OVER, EVENT_HIGH_SCORE,
)
from .difficulty import on_food_eaten
from .motion import Cell, advance, detect_collision
from .obstacles import move_all
from .spawner import GridFull, spawn
from .storage import MemoryHighScoreStore

logger = logging.getLogger(__name__)


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction. NONE is the resting state before the first key."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None
    NONE  = None

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def __bool__(self) -> bool:
        return bool(self.x or self.y)

    def is_opposite(self, other: "Direction") -> bool:
        """True for the axis-reverse of a moving direction; NONE has no opposite."""
        return bool(self) and self.x == -other.x and self.y == -other.y

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


Direction.LEFT  = Direction(-1,  0)
Direction.RIGHT = Direction( 1,  0)
Direction.UP    = Direction( 0, -1)
Direction.DOWN  = Direction( 0,  1)
Direction.NONE  = Direction( 0,  0)


# ──────────────────────────── Snake ──────────────────────────────
class Snake:
    """
    Pure game data for the snake.
    No rendering. No input handling.
    """

    def __init__(self, body: Iterable[Cell], direction: Direction = Direction.NONE):
        self.body: deque[Cell] = deque(body)
        if not self.body:
            raise ValueError("a snake needs at least one segment")
        self.dir: Direction = direction
        self._next_dir: Direction = direction

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def tail(self) -> Cell:
        return self.body[-1]

    @property
    def next_dir(self) -> Direction:
        return self._next_dir

    def __len__(self) -> int:
        return len(self.body)

    # ── Commands ─────────────────────────────────────────────────
    def request_direction(self, new_dir: Direction) -> bool:
        """
        Queue a direction for the next step.
        Ignored (returns False) if it would reverse the applied direction.
        """
        if not new_dir or new_dir.is_opposite(self.dir):
            return False
        self._next_dir = new_dir
        return True

    def step(self, tiles: int, food: Cell) -> bool:
        """
        Advance one cell, wrapping at the edges.
        Returns True if the new head landed on ``food``; the tail is then
        kept so the snake grows by one.
        """
        self.dir = self._next_dir
        self.body = advance(self.body, self.dir, tiles)
        ate = self.head == food
        if not ate:
            self.body.pop()
        return ate


# ───────────────────────── EngineState ───────────────────────────
class EngineState:
    """Everything that changes during one game. Owned by a single GameModel."""

    def __init__(self, tiles: int, rng: random.Random):
        self.snake: Snake = Snake([(tiles // 2, tiles // 2)])
        self.obstacles: list[Cell] = []
        self.food: Cell = spawn(set(self.snake.body), tiles, rng)
        self.score: int = 0
        self.interval: int = INITIAL_INTERVAL
        self.ticks: int = 0
        self.status: str = STATE_IDLE
        self.end_reason: str | None = None

    def food_exclusions(self) -> set[Cell]:
        return set(self.snake.body) | set(self.obstacles)

    def obstacle_exclusions(self) -> set[Cell]:
        occupied = self.food_exclusions()
        occupied.add(self.food)
        return occupied


class Snapshot(NamedTuple):
    tiles: int
    snake: tuple[Cell, ...]
    direction: Direction
    food: Cell
    obstacles: tuple[Cell, ...]
    score: int
    high_score: int
    interval: int
    state: str
    end_reason: str | None


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model.  Owns all game state.
    The clock calls tick() once per period while a game is on.
    """

    def __init__(
        self,
        clock: Clock,
        store=None,
        rng: random.Random | None = None,
        tiles: int = TILES,
    ):
        if tiles < 2:
            raise ValueError(f"board needs at least 2x2 tiles, got {tiles}")
        self.clock = clock
        self.store = store if store is not None else MemoryHighScoreStore()
        self.rng = rng if rng is not None else random.Random()
        self.tiles = tiles
        self.high_score: int = self.store.load()
        self.engine: EngineState = EngineState(tiles, self.rng)
        self._timer = None
        self._listeners: list[Callable[[str], None]] = []

    # ── Public API ───────────────────────────────────────────────
    @property
    def state(self) -> str:
        return self.engine.status

    @property
    def timer(self):
        """Clock handle of the running tick timer, or None."""
        return self._timer

    def add_listener(self, callback: Callable[[str], None]) -> None:
        """Register a sink for model events (food eaten, game over, high score)."""
        self._listeners.append(callback)

    def start(self) -> None:
        """Begin a fresh game. Doubles as restart when a game is already on."""
        self.restart()

    def restart(self) -> None:
        self._reset_entities()
        self.engine.status = STATE_RUNNING
        self._schedule()
        logger.info("game started on a %dx%d board", self.tiles, self.tiles)

    def pause(self) -> None:
        if self.engine.status == STATE_RUNNING:
            self.engine.status = STATE_PAUSED

    def resume(self) -> None:
        if self.engine.status == STATE_PAUSED:
            self.engine.status = STATE_RUNNING

    def toggle_pause(self) -> None:
        if self.engine.status == STATE_RUNNING:
            self.pause()
        else:
            self.resume()

    def request_direction(self, direction: Direction) -> bool:
        """Queue a turn for the next tick. Only honoured while running."""
        if self.engine.status != STATE_RUNNING:
            return False
        return self.engine.snake.request_direction(direction)

    def tick(self) -> None:
        """Advance the simulation by one step. A no-op unless running."""
        eng = self.engine
        if eng.status != STATE_RUNNING:
            return
        eng.ticks += 1

        ate = eng.snake.step(self.tiles, eng.food)
        if detect_collision(eng.snake.body, eng.obstacles):
            self._end(END_COLLISION)
            return

        if ate:
            try:
                self._eat()
            except GridFull:
                self._end(END_BOARD_FULL)
                return

        if eng.score >= MOVING_OBSTACLES_SCORE:
            eng.obstacles = move_all(
                eng.obstacles, eng.snake.body, eng.food, self.tiles, self.rng,
            )

    def snapshot(self) -> Snapshot:
        eng = self.engine
        return Snapshot(
            tiles=self.tiles,
            snake=tuple(eng.snake.body),
            direction=eng.snake.dir,
            food=eng.food,
            obstacles=tuple(eng.obstacles),
            score=eng.score,
            high_score=self.high_score,
            interval=eng.interval,
            state=eng.status,
            end_reason=eng.end_reason,
        )

    # ── Private helpers ──────────────────────────────────────────
    def _reset_entities(self) -> None:
        self.engine = EngineState(self.tiles, self.rng)

    def _schedule(self) -> None:
        if self._timer is None:
            self._timer = self.clock.schedule(self.engine.interval, self.tick)
        else:
            self.clock.reschedule(self._timer, self.engine.interval)

    def _emit(self, event: str) -> None:
        for listener in self._listeners:
            listener(event)

    def _eat(self) -> None:
        eng = self.engine
        step = on_food_eaten(eng.score, eng.interval)
        eng.score = step.score

        if eng.score > self.high_score:
            self.high_score = eng.score
            self.store.save(eng.score)
            self._emit(EVENT_HIGH_SCORE)

        for _ in range(step.obstacle_delta):
            eng.obstacles.append(spawn(eng.obstacle_exclusions(), self.tiles, self.rng))
            logger.debug("obstacle %d placed at score %d", len(eng.obstacles), eng.score)

        if step.interval != eng.interval:
            eng.interval = step.interval
            self._schedule()
            logger.debug("tick interval now %d ms", eng.interval)

        eng.food = spawn(eng.food_exclusions(), self.tiles, self.rng)
        self._emit(EVENT_FOOD_EATEN)

    def _end(self, reason: str) -> None:
        eng = self.engine
        eng.status = STATE_OVER
        eng.end_reason = reason
        if self._timer is not None:
            self.clock.cancel(self._timer)
            self._timer = None
        logger.info("game over (%s) with score %d", reason, eng.score)
        self._emit(EVENT_GAME_OVER)
