"""Tests for GameConfig."""

import json

import pytest

from snekhaus.config import GameConfig


class TestGameConfig:
    def test_defaults(self):
        config = GameConfig()
        assert config.tick_rate_ms == 150
        assert config.initial_length == 3
        assert config.max_growth_value == 5
        assert config.tick_interval == pytest.approx(0.15)

    def test_frozen(self):
        config = GameConfig()
        with pytest.raises(AttributeError):
            config.tick_rate_ms = 10

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"tick_rate_ms": 0},
            {"initial_length": 0},
            {"max_growth_value": 6},
            {"max_growth_value": 0},
            {"spawn_attempts": -1},
            {"arena_width": 0},
            {"arena_width": 3, "arena_height": 3},
            {"arena_width": 5, "initial_length": 5},
        ],
    )
    def test_validation(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs)

    def test_save_and_load(self, tmp_path):
        config = GameConfig(tick_rate_ms=90, arena_width=30, high_score_path="hs.txt")
        path = tmp_path / "sub" / "config.json"
        config.save(path)
        assert json.loads(path.read_text())["tick_rate_ms"] == 90
        assert GameConfig.load(path) == config

    def test_load_rejects_unknown_keys(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"speed": 3}))
        with pytest.raises(TypeError):
            GameConfig.load(path)
