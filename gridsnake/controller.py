"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate raw keyboard events into model commands.
  - Drive the tick clock: pygame timer events become model ticks.
  - Route model events to the sound board.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

Timing notes:
  - Ticks come from pygame.time.set_timer, one custom event type per
    scheduled timer. Changing the period re-arms the timer, so a speed-up
    takes effect from the very next tick.
  - Frames are drawn at FPS regardless of the tick rate; each frame renders
    the latest model snapshot.

The controller is the only layer that imports pygame directly for events.
"""

import logging
import random
import sys
from typing import Callable

import pygame

from .audio import SoundBoard
from .clock import Clock
from .config import (
    WIDTH, HEIGHT, FPS,
    STATE_IDLE, STATE_RUNNING, STATE_PAUSED, STATE_OVER,
)
from .model import Direction, GameModel
from .storage import HighScoreStore
from .view import GameView

logger = logging.getLogger(__name__)

DIRECTION_KEYS = {
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP:    Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_a:     Direction.LEFT,
    pygame.K_d:     Direction.RIGHT,
    pygame.K_w:     Direction.UP,
    pygame.K_s:     Direction.DOWN,
}


class PygameClock(Clock):
    """Clock backed by pygame timer events; the event loop calls dispatch()."""

    def __init__(self):
        self._callbacks: dict[int, Callable[[], None]] = {}
        self._spare: list[int] = []

    def schedule(self, period_ms: int, callback: Callable[[], None]) -> int:
        event_type = self._spare.pop() if self._spare else pygame.event.custom_type()
        self._callbacks[event_type] = callback
        pygame.time.set_timer(event_type, period_ms)
        return event_type

    def reschedule(self, handle: int, period_ms: int) -> None:
        pygame.time.set_timer(handle, period_ms)

    def cancel(self, handle: int) -> None:
        pygame.time.set_timer(handle, 0)
        if self._callbacks.pop(handle, None) is not None:
            self._spare.append(handle)

    def dispatch(self, event: pygame.event.Event) -> bool:
        """Run the callback owning ``event``; False if it is not a timer event."""
        callback = self._callbacks.get(event.type)
        if callback is None:
            return False
        callback()
        return True


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    Also owns the sound board so audio lifecycle stays in one place.
    """

    def __init__(
        self,
        high_score_file: str | None = None,
        seed: int | None = None,
        mute: bool = False,
    ):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("SNAKE — wrap-around arena")
        self.frame_clock = pygame.time.Clock()
        self.tick_clock = PygameClock()
        store = HighScoreStore(high_score_file) if high_score_file else HighScoreStore()
        self.model = GameModel(self.tick_clock, store, random.Random(seed))
        self.view = GameView(self.screen)
        self.sounds = SoundBoard(enabled=not mute)
        self.model.add_listener(self.sounds.play)
        self.model.add_listener(self._log_event)

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        while True:
            self.frame_clock.tick(FPS)
            self._handle_events()
            self.view.render(self.model.snapshot())

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)
            else:
                self.tick_clock.dispatch(event)

    def _handle_keydown(self, key: int) -> None:
        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._quit()

        state = self.model.state

        if state in (STATE_IDLE, STATE_OVER):
            self._handle_waiting_keys(key)
        elif state == STATE_RUNNING:
            self._handle_running_keys(key)
        elif state == STATE_PAUSED:
            self._handle_paused_keys(key)

    # ── Per-state key handlers ────────────────────────────────────
    def _handle_waiting_keys(self, key: int) -> None:
        if key in (pygame.K_RETURN, pygame.K_SPACE, pygame.K_r):
            self.model.start()

    def _handle_running_keys(self, key: int) -> None:
        if key in DIRECTION_KEYS:
            self.model.request_direction(DIRECTION_KEYS[key])
        elif key == pygame.K_p:
            self.model.toggle_pause()
        elif key == pygame.K_r:
            self.model.restart()

    def _handle_paused_keys(self, key: int) -> None:
        if key in (pygame.K_p, pygame.K_SPACE):
            self.model.toggle_pause()
        elif key == pygame.K_r:
            self.model.restart()

    def _log_event(self, event: str) -> None:
        logger.debug("model event %s (score %d)", event, self.model.engine.score)

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        pygame.quit()
        sys.exit()
