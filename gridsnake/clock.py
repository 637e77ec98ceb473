"""
clock.py — Periodic tick drivers.

The model never sleeps or reads the wall clock. It asks a Clock to call it
back every ``period_ms`` and to change that period when the game speeds up.

Classes:
    Clock        — the interface: schedule / reschedule / cancel
    ManualClock  — virtual time advanced explicitly; used by the tests

The pygame-backed implementation lives in controller.py, the only layer that
touches pygame events.
"""

from typing import Callable, Hashable


class Clock:
    """Periodic callback scheduler."""

    def schedule(self, period_ms: int, callback: Callable[[], None]) -> Hashable:
        raise NotImplementedError

    def reschedule(self, handle: Hashable, period_ms: int) -> None:
        """Change the period; the next call comes ``period_ms`` from now."""
        raise NotImplementedError

    def cancel(self, handle: Hashable) -> None:
        raise NotImplementedError


class _Timer:
    def __init__(self, period_ms: int, callback: Callable[[], None], due: int):
        self.period = period_ms
        self.callback = callback
        self.due = due


class ManualClock(Clock):
    """
    Deterministic clock driven by ``advance(ms)``.

    Timers fire in due-time order (handle order on ties). A callback may
    reschedule or cancel any timer, including its own, and the change is
    honoured for the rest of the same ``advance`` call.
    """

    def __init__(self):
        self.now: int = 0
        self._timers: dict[int, _Timer] = {}
        self._next_handle: int = 1

    # ── Clock API ────────────────────────────────────────────────
    def schedule(self, period_ms: int, callback: Callable[[], None]) -> int:
        if period_ms <= 0:
            raise ValueError(f"period must be positive, got {period_ms}")
        handle = self._next_handle
        self._next_handle += 1
        self._timers[handle] = _Timer(period_ms, callback, self.now + period_ms)
        return handle

    def reschedule(self, handle: int, period_ms: int) -> None:
        if period_ms <= 0:
            raise ValueError(f"period must be positive, got {period_ms}")
        timer = self._timers[handle]
        timer.period = period_ms
        timer.due = self.now + period_ms

    def cancel(self, handle: int) -> None:
        self._timers.pop(handle, None)

    # ── Test helpers ─────────────────────────────────────────────
    def period(self, handle: int) -> int | None:
        timer = self._timers.get(handle)
        return timer.period if timer else None

    @property
    def active(self) -> int:
        return len(self._timers)

    def advance(self, ms: int) -> int:
        """Move virtual time forward, firing due timers. Returns the number of calls."""
        target = self.now + ms
        fired = 0
        while True:
            due = [(t.due, h) for h, t in self._timers.items() if t.due <= target]
            if not due:
                break
            when, handle = min(due)
            self.now = when
            timer = self._timers[handle]
            timer.due = when + timer.period
            timer.callback()
            fired += 1
        self.now = target
        return fired
