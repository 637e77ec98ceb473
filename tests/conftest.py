from __future__ import annotations

import random

import pytest

from gridsnake.clock import ManualClock
from gridsnake.model import GameModel
from gridsnake.storage import MemoryHighScoreStore


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def store() -> MemoryHighScoreStore:
    return MemoryHighScoreStore()


@pytest.fixture
def model(clock: ManualClock, store: MemoryHighScoreStore, rng: random.Random) -> GameModel:
    return GameModel(clock, store, rng)


@pytest.fixture
def running(model: GameModel) -> GameModel:
    model.start()
    return model
