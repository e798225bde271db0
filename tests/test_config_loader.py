"""Tests for config loading and validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from configs.loader import ConfigLoader, ConfigValidationError, GameConfig


def test_load_yaml_config_with_partial_overrides(tmp_path) -> None:
    config_path = tmp_path / "game.yaml"
    config_path.write_text("gravity: -1.0\nmilestone_score: 50\n", encoding="utf-8")

    config = ConfigLoader.load(config_path)

    assert config.gravity == -1.0
    assert config.milestone_score == 50
    assert config.jump_velocity == GameConfig().jump_velocity


def test_load_json_config_coerces_ints_to_floats(tmp_path) -> None:
    config_path = tmp_path / "game.json"
    config_path.write_text(json.dumps({"obstacle_speed": 5, "spawn_x": 900, "screen_width": 900}), encoding="utf-8")

    config = ConfigLoader.load(config_path)

    assert config.obstacle_speed == 5.0
    assert isinstance(config.spawn_x, float)
    assert config.minimum_gap == 500.0


def test_default_config_file_matches_defaults() -> None:
    assert ConfigLoader.load(Path(__file__).resolve().parents[1] / "configs" / "default_game.yaml") == GameConfig()


def test_empty_yaml_gives_defaults(tmp_path) -> None:
    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.load(config_path) == GameConfig()


def test_unknown_key_rejected() -> None:
    with pytest.raises(ConfigValidationError, match="Unknown config keys: speed_ramp"):
        ConfigLoader.from_mapping({"speed_ramp": 1.5})


def test_wrong_type_rejected() -> None:
    with pytest.raises(ConfigValidationError, match="expected float"):
        ConfigLoader.from_mapping({"gravity": "heavy"})
    with pytest.raises(ConfigValidationError, match="expected int"):
        ConfigLoader.from_mapping({"milestone_score": 10.5})


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"gravity": 0.8}, "gravity"),
        ({"jump_velocity": -15.0}, "jump_velocity"),
        ({"spawn_trigger_x": 900.0}, "spawn_trigger_x"),
        ({"spawn_x": 2000.0, "spawn_trigger_x": 1900.0}, "spawn_x must be <= screen_width"),
        ({"obstacle_width": 450.0}, "obstacle_width"),
        ({"tick_interval": 0.0}, "tick_interval"),
        ({"obstacle_height": -1.0}, "obstacle_height"),
    ],
)
def test_inconsistent_values_rejected(overrides, message) -> None:
    with pytest.raises(ConfigValidationError, match=message):
        ConfigLoader.from_mapping(overrides)


def test_unsupported_extension(tmp_path) -> None:
    config_path = tmp_path / "game.toml"
    config_path.write_text("gravity = -0.8\n", encoding="utf-8")

    with pytest.raises(ConfigValidationError, match="Unsupported config extension"):
        ConfigLoader.load(config_path)


def test_replace_revalidates() -> None:
    config = GameConfig().replace(obstacle_height=0.0)

    assert config.obstacle_height == 0.0
    with pytest.raises(ConfigValidationError):
        GameConfig().replace(score_rate=2.0)
