from __future__ import annotations

import json
import logging
import random
from pathlib import Path

from gridsnake.clock import ManualClock
from gridsnake.config import HIGH_SCORE_KEY
from gridsnake.model import Direction, GameModel, Snake
from gridsnake.storage import HighScoreStore


def test_missing_file_loads_zero(tmp_path: Path):
    assert HighScoreStore(tmp_path / "scores.json").load() == 0


def test_save_then_load(tmp_path: Path):
    store = HighScoreStore(tmp_path / "nested" / "scores.json")
    store.save(120)
    assert HighScoreStore(store.path).load() == 120


def test_save_keeps_other_keys(tmp_path: Path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"volume": 3}), encoding="utf-8")
    HighScoreStore(path).save(40)
    assert json.loads(path.read_text(encoding="utf-8")) == {"volume": 3, HIGH_SCORE_KEY: 40}


def test_corrupt_file_loads_zero_and_warns(tmp_path: Path, caplog):
    path = tmp_path / "scores.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="gridsnake.storage"):
        assert HighScoreStore(path).load() == 0
    assert "could not read high score" in caplog.text


def test_non_integer_value_loads_zero(tmp_path: Path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({HIGH_SCORE_KEY: "lots"}), encoding="utf-8")
    assert HighScoreStore(path).load() == 0


def test_string_digits_are_accepted(tmp_path: Path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({HIGH_SCORE_KEY: "70"}), encoding="utf-8")
    assert HighScoreStore(path).load() == 70


def test_unwritable_path_only_warns(tmp_path: Path, caplog):
    store = HighScoreStore(tmp_path)  # a directory, not a file
    with caplog.at_level(logging.WARNING, logger="gridsnake.storage"):
        store.save(10)
    assert "could not save high score" in caplog.text


def test_high_score_survives_a_new_model(tmp_path: Path):
    path = tmp_path / "scores.json"
    model = GameModel(ManualClock(), HighScoreStore(path), random.Random(3))
    model.start()
    model.engine.snake = Snake([(10, 10)], Direction.RIGHT)
    model.engine.food = (11, 10)
    model.tick()
    assert model.high_score == 10

    again = GameModel(ManualClock(), HighScoreStore(path), random.Random(3))
    assert again.high_score == 10
    assert again.snapshot().high_score == 10
