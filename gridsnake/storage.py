"""
storage.py — High-score persistence.

A tiny JSON key-value file. Other keys in the file are preserved on save.
Read and write failures are logged and otherwise ignored: losing a high
score must never stop the game.
"""

import json
import logging
from pathlib import Path

from .config import HIGH_SCORE_FILE, HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore:
    """High score kept in a JSON object under ``HIGH_SCORE_KEY``."""

    def __init__(self, path: str | Path = HIGH_SCORE_FILE):
        self.path = Path(path)

    def _read(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("could not read high score from %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("ignoring malformed high score file %s", self.path)
            return {}
        return data

    def load(self) -> int:
        value = self._read().get(HIGH_SCORE_KEY, 0)
        try:
            return max(0, int(value))
        except (TypeError, ValueError):
            logger.warning("ignoring non-integer high score %r in %s", value, self.path)
            return 0

    def save(self, score: int) -> None:
        data = self._read()
        data[HIGH_SCORE_KEY] = int(score)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("could not save high score to %s: %s", self.path, exc)


class MemoryHighScoreStore:
    """In-process store; remembers every save."""

    def __init__(self, value: int = 0):
        self.value = value
        self.saves: list[int] = []

    def load(self) -> int:
        return self.value

    def save(self, score: int) -> None:
        self.value = score
        self.saves.append(score)
