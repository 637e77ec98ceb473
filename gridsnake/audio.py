"""
audio.py — Sound effects.

Two short synthesised cues, built once with numpy and handed to the pygame
mixer through pygame.sndarray:
  - food eaten : bright 800 Hz sine blip, 0.1 s
  - game over  : sawtooth sweeping 400 Hz -> 100 Hz, 0.3 s
Both fade exponentially from VOLUME to near silence.

If the mixer cannot start (no audio device, headless CI) the game runs
silently with a logged warning.
"""

import logging

import numpy as np
import pygame

from .config import SAMPLE_RATE, VOLUME, EVENT_FOOD_EATEN, EVENT_GAME_OVER

logger = logging.getLogger(__name__)


def synth_tone(
    freq_start: float,
    freq_end: float,
    duration: float,
    wave: str = "sine",
    sample_rate: int = SAMPLE_RATE,
    volume: float = VOLUME,
) -> np.ndarray:
    """Mono int16 samples of an exponentially swept, exponentially fading tone."""
    n = int(sample_rate * duration)
    t = np.arange(n) / sample_rate
    ramp = t / duration

    freq = freq_start * (freq_end / freq_start) ** ramp
    phase = 2 * np.pi * np.cumsum(freq) / sample_rate
    if wave == "sine":
        samples = np.sin(phase)
    elif wave == "sawtooth":
        samples = 2.0 * ((phase / (2 * np.pi)) % 1.0) - 1.0
    else:
        raise ValueError(f"unknown waveform {wave!r}")

    envelope = volume * (0.01 / volume) ** ramp
    return (samples * envelope * 32767).astype(np.int16)


def _to_channels(mono: np.ndarray, channels: int) -> np.ndarray:
    if channels == 1:
        return mono
    return np.ascontiguousarray(np.repeat(mono[:, None], channels, axis=1))


class SoundBoard:
    """Plays the cue for a model event; unknown events are ignored."""

    def __init__(self, enabled: bool = True):
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        if enabled:
            self._sounds = self._load()

    @property
    def enabled(self) -> bool:
        return bool(self._sounds)

    def _load(self) -> dict:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(SAMPLE_RATE, -16, 1)
            channels = pygame.mixer.get_init()[2]
            return {
                EVENT_FOOD_EATEN: pygame.sndarray.make_sound(
                    _to_channels(synth_tone(800, 800, 0.1, "sine"), channels)),
                EVENT_GAME_OVER: pygame.sndarray.make_sound(
                    _to_channels(synth_tone(400, 100, 0.3, "sawtooth"), channels)),
            }
        except pygame.error as exc:
            logger.warning("[audio] mixer unavailable, running without sound: %s", exc)
            return {}

    def play(self, event: str) -> None:
        sound = self._sounds.get(event)
        if sound is not None:
            sound.play()
