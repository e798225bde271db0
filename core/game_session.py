"""Live game session: state machine driven by a wall-clock tick thread."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from configs.loader import GameConfig
from core.clock import TickClock
from engine.state_machine import GamePhase, GameStateMachine, SimulationState

LOGGER = logging.getLogger(__name__)


SnapshotCallback = Callable[[SimulationState], None]
ClockFactory = Callable[..., TickClock]


class GameSession:
    """Serializes player commands with clock ticks and publishes snapshots.

    The clock runs only while the game is in ``RUNNING``: it is started by
    ``start()`` and stopped as soon as a tick ends the game, on ``reset()``,
    and on ``close()``. Subscribers receive every new snapshot; they run on
    whichever thread produced it (the clock thread for ticks).
    """

    def __init__(self, config: GameConfig | None = None, clock_factory: ClockFactory = TickClock) -> None:
        self.config = config or GameConfig()
        self.machine = GameStateMachine(self.config)
        self._lock = threading.RLock()
        self._subscribers: list[SnapshotCallback] = []
        self._closed = False
        self.clock = clock_factory(
            interval=self.config.tick_interval,
            on_tick=self._on_tick,
            lock=self._lock,
            name="game-clock",
        )

    def __enter__(self) -> GameSession:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, callback: SnapshotCallback) -> None:
        with self._lock:
            self._subscribers.append(callback)

    def snapshot(self) -> SimulationState:
        """Return the latest complete state."""
        return self.machine.snapshot()

    def start(self) -> None:
        """Start a run; ignored unless idle."""
        self._command("start", self.machine.start)

    def jump(self) -> None:
        """Request a jump; ignored unless running and grounded."""
        self._command("jump", self.machine.jump)

    def reset(self) -> None:
        """Return to idle from any phase."""
        self._command("reset", self.machine.reset)

    def close(self) -> None:
        """Stop the clock for good; later commands are ignored."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self.clock.stop()
        self.clock.join(timeout=max(1.0, self.config.tick_interval * 10))
        LOGGER.info("Game session closed")

    def _command(self, name: str, operation: Callable[[], SimulationState]) -> None:
        with self._lock:
            if self._closed:
                LOGGER.debug("%s ignored: session closed", name)
                return
            before = self.machine.snapshot()
            after = operation()
            self._sync_clock(after)
            if after is not before:
                self._publish(after)

    def _on_tick(self) -> None:
        # Runs on the clock thread with self._lock already held.
        before = self.machine.snapshot()
        after = self.machine.tick()
        self._sync_clock(after)
        if after is not before:
            self._publish(after)

    def _sync_clock(self, state: SimulationState) -> None:
        if state.phase == GamePhase.RUNNING:
            self.clock.start()
        else:
            self.clock.stop()

    def _publish(self, state: SimulationState) -> None:
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception:
                LOGGER.exception("Snapshot subscriber %r failed", callback)
