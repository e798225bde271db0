"""Obstacle scrolling, culling and spawning."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Sequence

from configs.loader import GameConfig


@dataclass(frozen=True)
class Obstacle:
    """Ground-anchored block; only ``x`` changes after spawn."""

    x: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width


def spawn_obstacle(config: GameConfig) -> Obstacle:
    """Build one obstacle at the off-screen spawn position."""
    return Obstacle(x=config.spawn_x, width=config.obstacle_width, height=config.obstacle_height)


def needs_spawn(obstacles: Sequence[Obstacle], config: GameConfig) -> bool:
    """Return whether enough gap has opened behind the rightmost obstacle."""
    if not obstacles:
        return True
    return obstacles[-1].x < config.spawn_trigger_x


def advance_obstacles(obstacles: Sequence[Obstacle], config: GameConfig) -> tuple[Obstacle, ...]:
    """Scroll, cull and spawn for one tick.

    Order matters: obstacles move first, anything fully past the left edge is
    dropped, then at most one new obstacle is appended. The result stays
    sorted by ``x`` because spawns always land at ``spawn_x``, right of every
    live obstacle.
    """
    moved = [replace(obstacle, x=obstacle.x - config.obstacle_speed) for obstacle in obstacles]
    kept = [obstacle for obstacle in moved if obstacle.right > 0.0]
    if needs_spawn(kept, config):
        kept.append(spawn_obstacle(config))
    return tuple(kept)


def max_obstacle_count(config: GameConfig) -> int:
    """Upper bound on live obstacles for ``config``.

    Holds for any loader-validated config: spawns land on screen
    (``spawn_x <= screen_width``) and obstacles are no wider than the gap
    between spawns.
    """
    return math.ceil(config.screen_width / config.minimum_gap) + 1
