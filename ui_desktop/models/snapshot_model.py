"""Snapshot fan-out for GUI widgets."""

from __future__ import annotations

from threading import Lock
from typing import Callable

from engine.state_machine import SimulationState


Subscriber = Callable[[SimulationState], None]


class SnapshotModel:
    """Forwards each new snapshot to widgets, once.

    The session hands over a fresh state object for every change, so an
    identical object arriving again (initial sync racing the first tick)
    is dropped instead of repainting.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._current: SimulationState | None = None
        self._subscribers: list[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> None:
        with self._lock:
            self._subscribers.append(callback)

    def update_state(self, state: SimulationState) -> bool:
        """Publish ``state``; returns False when it was already current."""
        with self._lock:
            if state is self._current:
                return False
            self._current = state
            subscribers = list(self._subscribers)
        for callback in subscribers:
            callback(state)
        return True
