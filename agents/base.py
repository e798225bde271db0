"""Pilot interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod

from engine.state_machine import SimulationState


class Pilot(ABC):
    """Automated input source that decides when the character jumps.

    Pilots stand in for the keyboard: they only see immutable snapshots and
    answer with a jump request, so they cannot reach into the engine.
    """

    def observe(self, state: SimulationState) -> SimulationState:
        """Transform a snapshot into a pilot-specific observation.

        Default behavior is pass-through. Subclasses may override to build
        richer features.
        """
        return state

    @abstractmethod
    def decide(self, state: SimulationState) -> bool:
        """Return ``True`` to request a jump before the next tick.

        Args:
            state (SimulationState): Snapshot after the latest tick.

        Returns:
            bool: Whether to issue ``jump()``.

        Invariants:
            - Must not mutate the snapshot.
            - Same snapshot and pilot state give the same answer.
        """

    def reset(self) -> None:
        """Optional hook called when a new run starts."""
