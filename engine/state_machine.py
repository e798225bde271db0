"""Authoritative game state and its transition rules."""

from __future__ import annotations

import enum
import logging
import math
import threading
from dataclasses import dataclass, replace

from configs.loader import GameConfig
from engine.collision import CharacterBox, detect_collision
from engine.obstacles import Obstacle, advance_obstacles
from engine.physics import apply_jump, integrate

LOGGER = logging.getLogger(__name__)


class GamePhase(str, enum.Enum):
    """Lifecycle phases of one game."""

    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class SimulationState:
    """Immutable snapshot handed to renderers and pilots."""

    running: bool = False
    game_over: bool = False
    score: int = 0
    character_y: float = 0.0
    character_velocity: float = 0.0
    obstacles: tuple[Obstacle, ...] = ()
    milestone_reached: bool = False
    ticks: int = 0

    @property
    def phase(self) -> GamePhase:
        if self.game_over:
            return GamePhase.GAME_OVER
        if self.running:
            return GamePhase.RUNNING
        return GamePhase.IDLE


def score_for_ticks(ticks: int, rate: float) -> int:
    """Floored score after ``ticks`` survived ticks."""
    # Rounding first keeps 1000 * 0.1 from flooring to 99.
    return int(math.floor(round(ticks * rate, 9)))


class GameStateMachine:
    """Owns the current ``SimulationState`` and applies commands and ticks.

    Every operation swaps in a new immutable state under a lock and returns
    it. Commands that do not apply in the current phase are ignored.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config or GameConfig()
        self._box = CharacterBox.from_config(self.config)
        self._state = SimulationState()
        self._lock = threading.RLock()

    @property
    def phase(self) -> GamePhase:
        return self.snapshot().phase

    def snapshot(self) -> SimulationState:
        """Return the current state."""
        with self._lock:
            return self._state

    def start(self) -> SimulationState:
        """Begin a fresh run from Idle."""
        with self._lock:
            if self._state.phase != GamePhase.IDLE:
                LOGGER.debug("start ignored in phase %s", self._state.phase.value)
                return self._state
            self._state = SimulationState(running=True)
            LOGGER.info("Game started")
            return self._state

    def jump(self) -> SimulationState:
        """Apply the jump impulse if running and grounded."""
        with self._lock:
            state = self._state
            if state.phase != GamePhase.RUNNING:
                LOGGER.debug("jump ignored in phase %s", state.phase.value)
                return state
            velocity = apply_jump(
                state.character_y,
                state.character_velocity,
                self.config.jump_velocity,
                self.config.ground_epsilon,
            )
            if velocity == state.character_velocity:
                return state
            LOGGER.debug("Jump at y=%.2f, velocity=%.2f", state.character_y, velocity)
            self._state = replace(state, character_velocity=velocity)
            return self._state

    def tick(self) -> SimulationState:
        """Advance one fixed timestep: physics, obstacles, then collision."""
        with self._lock:
            state = self._state
            if state.phase != GamePhase.RUNNING:
                return state

            y, velocity = integrate(state.character_y, state.character_velocity, self.config.gravity)
            obstacles = advance_obstacles(state.obstacles, self.config)

            if detect_collision(y, obstacles, self._box):
                self._state = replace(state, running=False, game_over=True)
                LOGGER.info("Game over at tick %d with score %d", state.ticks, state.score)
                return self._state

            ticks = state.ticks + 1
            score = max(state.score, score_for_ticks(ticks, self.config.score_rate))
            milestone = state.milestone_reached or score >= self.config.milestone_score
            if milestone and not state.milestone_reached:
                LOGGER.info("Milestone reached: score %d", score)

            self._state = replace(
                state,
                character_y=y,
                character_velocity=velocity,
                obstacles=obstacles,
                score=score,
                milestone_reached=milestone,
                ticks=ticks,
            )
            return self._state

    def reset(self) -> SimulationState:
        """Return to Idle with initial values from any phase."""
        with self._lock:
            if self._state.phase != GamePhase.IDLE:
                LOGGER.info("Game reset from %s", self._state.phase.value)
            self._state = SimulationState()
            return self._state
