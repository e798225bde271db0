"""Configuration loading and validation utilities for the runner game."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml


class ConfigValidationError(ValueError):
    """Raised when a game configuration fails validation."""


@dataclass(frozen=True)
class GameConfig:
    """Validated game tuning container.

    Lengths are in world units (pixels in the desktop front end), velocities
    and accelerations are per tick. Heights are measured upward from the
    ground, so ``gravity`` is negative and ``jump_velocity`` positive.
    """

    gravity: float = -0.8
    jump_velocity: float = 15.0
    ground_epsilon: float = 0.1

    character_x: float = 100.0
    character_width: float = 60.0
    character_height: float = 45.0

    obstacle_width: float = 20.0
    obstacle_height: float = 60.0
    obstacle_speed: float = 4.0
    spawn_x: float = 800.0
    spawn_trigger_x: float = 400.0

    screen_width: float = 800.0
    ground_height: float = 150.0

    score_rate: float = 0.1
    milestone_score: int = 100
    milestone_message: str = "Secret code: SpaceCapybara"

    tick_interval: float = 0.02

    @property
    def minimum_gap(self) -> float:
        """Distance an obstacle travels between two consecutive spawns."""
        return self.spawn_x - self.spawn_trigger_x

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary view of the configuration."""
        return dataclasses.asdict(self)

    def replace(self, **overrides: Any) -> GameConfig:
        """Return a validated copy with ``overrides`` applied."""
        payload = self.to_dict()
        payload.update(overrides)
        return ConfigLoader.from_mapping(payload)


_FIELD_TYPES: dict[str, type] = {
    field.name: {"float": float, "int": int, "str": str}[str(field.type)]
    for field in dataclasses.fields(GameConfig)
}


class ConfigLoader:
    """Load and validate game configuration files (YAML or JSON)."""

    @staticmethod
    def load(path: str | Path) -> GameConfig:
        """Load a game config from ``path``.

        Args:
            path: Path to a YAML or JSON config file. Keys left out fall back
                to ``GameConfig`` defaults.

        Returns:
            A validated ``GameConfig`` instance.
        """
        payload = _read_config_payload(path)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ConfigValidationError("Game config file must contain a mapping object.")
        return _validate_and_build(payload)

    @staticmethod
    def from_mapping(payload: Mapping[str, Any] | None = None) -> GameConfig:
        """Validate an in-memory mapping, e.g. CLI overrides."""
        return _validate_and_build(dict(payload or {}))


def _read_config_payload(path: str | Path) -> Any:
    """Read raw config payload from JSON or YAML file."""
    config_path = Path(path)
    suffix = config_path.suffix.lower()
    if suffix not in {".json", ".yaml", ".yml"}:
        raise ConfigValidationError(f"Unsupported config extension: {suffix}")

    content = config_path.read_text(encoding="utf-8")
    if suffix == ".json":
        return json.loads(content)
    return yaml.safe_load(content)


def _coerce(key: str, value: Any) -> Any:
    expected = _FIELD_TYPES[key]
    if expected is str:
        if not isinstance(value, str):
            raise ConfigValidationError(f"Parameter '{key}' expected str, got {type(value).__name__}.")
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigValidationError(
            f"Parameter '{key}' expected {expected.__name__}, got {type(value).__name__}."
        )
    if expected is int:
        if float(value) != int(value):
            raise ConfigValidationError(f"Parameter '{key}' expected int, got {value!r}.")
        return int(value)
    return float(value)


def _validate_and_build(payload: Mapping[str, Any]) -> GameConfig:
    """Validate raw mapping and build ``GameConfig``."""
    unknown = sorted(str(key) for key in payload if key not in _FIELD_TYPES)
    if unknown:
        raise ConfigValidationError(f"Unknown config keys: {', '.join(unknown)}")

    values = {key: _coerce(key, value) for key, value in payload.items()}
    config = GameConfig(**values)

    if config.gravity >= 0.0:
        raise ConfigValidationError("gravity must be < 0 (heights grow upward)")
    if config.jump_velocity <= 0.0:
        raise ConfigValidationError("jump_velocity must be > 0")
    if config.ground_epsilon < 0.0:
        raise ConfigValidationError("ground_epsilon must be >= 0")
    for key in ("character_width", "character_height", "obstacle_width", "obstacle_height", "ground_height"):
        if float(getattr(config, key)) < 0.0:
            raise ConfigValidationError(f"{key} must be >= 0")
    if config.obstacle_speed <= 0.0:
        raise ConfigValidationError("obstacle_speed must be > 0")
    if config.spawn_trigger_x >= config.spawn_x:
        raise ConfigValidationError("spawn_trigger_x must be < spawn_x")
    if config.screen_width <= 0.0:
        raise ConfigValidationError("screen_width must be > 0")
    if config.spawn_x > config.screen_width:
        raise ConfigValidationError("spawn_x must be <= screen_width")
    if config.obstacle_width > config.minimum_gap:
        raise ConfigValidationError("obstacle_width must be <= spawn_x - spawn_trigger_x")
    if not 0.0 < config.score_rate <= 1.0:
        raise ConfigValidationError("score_rate must be in (0.0, 1.0]")
    if config.milestone_score <= 0:
        raise ConfigValidationError("milestone_score must be > 0")
    if config.tick_interval <= 0.0:
        raise ConfigValidationError("tick_interval must be > 0")

    return config
