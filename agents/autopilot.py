"""Rule-based pilots for headless runs and demos."""

from __future__ import annotations

from configs.loader import GameConfig
from agents.base import Pilot
from engine.obstacles import Obstacle
from engine.physics import is_grounded
from engine.state_machine import SimulationState


class IdlePilot(Pilot):
    """Never jumps."""

    def decide(self, state: SimulationState) -> bool:
        return False


class ThresholdPilot(Pilot):
    """Jumps when the nearest obstacle ahead enters a lookahead window.

    ``lookahead`` is the horizontal gap, measured from the character's right
    edge to the obstacle's left edge, at or under which the pilot jumps. The
    default suits the default tuning: the character clears a 60-unit block
    for roughly 30 ticks of its 38-tick arc.
    """

    def __init__(self, config: GameConfig, lookahead: float = 48.0) -> None:
        self.config = config
        self.lookahead = float(lookahead)
        self.jumps_requested = 0

    def nearest_ahead(self, state: SimulationState) -> Obstacle | None:
        character_right = self.config.character_x + self.config.character_width
        ahead = [obstacle for obstacle in state.obstacles if obstacle.x >= character_right]
        return min(ahead, key=lambda obstacle: obstacle.x, default=None)

    def decide(self, state: SimulationState) -> bool:
        if not state.running:
            return False
        if not is_grounded(state.character_y, self.config.ground_epsilon):
            return False
        obstacle = self.nearest_ahead(self.observe(state))
        if obstacle is None:
            return False
        gap = obstacle.x - (self.config.character_x + self.config.character_width)
        if gap <= self.lookahead:
            self.jumps_requested += 1
            return True
        return False

    def reset(self) -> None:
        self.jumps_requested = 0
