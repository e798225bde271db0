"""Axis-aligned bounding-box collision checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from configs.loader import GameConfig
from engine.obstacles import Obstacle


@dataclass(frozen=True)
class CharacterBox:
    """Fixed horizontal footprint and size of the character."""

    left: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @classmethod
    def from_config(cls, config: GameConfig) -> CharacterBox:
        return cls(left=config.character_x, width=config.character_width, height=config.character_height)


def overlaps(box: CharacterBox, character_y: float, obstacle: Obstacle) -> bool:
    """Strict separating-axis test; shared edges do not count as contact."""
    if box.right <= obstacle.x:
        return False
    if box.left >= obstacle.right:
        return False
    # Obstacles span [0, height] above the ground.
    if character_y >= obstacle.height:
        return False
    if character_y + box.height <= 0.0:
        return False
    return True


def detect_collision(character_y: float, obstacles: Iterable[Obstacle], box: CharacterBox) -> bool:
    """Return whether the character overlaps any obstacle."""
    return any(overlaps(box, character_y, obstacle) for obstacle in obstacles)
