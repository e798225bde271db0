"""Synchronous game driver for deterministic runs without a wall clock."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from agents.base import Pilot
from configs.loader import GameConfig
from engine.state_machine import GameStateMachine, SimulationState


SnapshotCallback = Callable[[SimulationState], None]


@dataclass
class HeadlessResult:
    """Outcome of one headless run."""

    final_state: SimulationState
    ticks_simulated: int
    jumps: int
    trace: list[SimulationState] = field(default_factory=list)

    @property
    def survived(self) -> bool:
        return not self.final_state.game_over


def run_headless(
    config: GameConfig,
    ticks: int,
    pilot: Pilot | None = None,
    on_snapshot: SnapshotCallback | None = None,
    record_trace: bool = False,
) -> HeadlessResult:
    """Start a game and tick it up to ``ticks`` times.

    The pilot, if any, is consulted before every tick, the same point at which
    a player's key press would land between two clock ticks. The run stops
    early on game over.
    """
    if ticks < 0:
        raise ValueError("ticks must be non-negative")

    machine = GameStateMachine(config)
    if pilot is not None:
        pilot.reset()
    state = machine.start()
    trace: list[SimulationState] = [state] if record_trace else []

    simulated = 0
    jumps = 0
    for _ in range(ticks):
        if pilot is not None and pilot.decide(state):
            before = state.character_velocity
            state = machine.jump()
            if state.character_velocity != before:
                jumps += 1
        state = machine.tick()
        simulated += 1
        if record_trace:
            trace.append(state)
        if on_snapshot is not None:
            on_snapshot(state)
        if state.game_over:
            break

    return HeadlessResult(final_state=state, ticks_simulated=simulated, jumps=jumps, trace=trace)
