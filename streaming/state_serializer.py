"""Snapshot serialization utilities."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any, Iterable

from engine.obstacles import Obstacle
from engine.state_machine import SimulationState


MAX_FRAME_BYTES = 1024 * 1024


def _to_jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value):
        return {k: _to_jsonable(v) for k, v in dataclasses.asdict(value).items()}
    if isinstance(value, dict):
        return {str(k): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    return value


def state_to_dict(state: SimulationState) -> dict[str, Any]:
    """Return a JSON-compatible view of ``state`` including its phase."""
    payload = _to_jsonable(state)
    payload["phase"] = state.phase.value
    return payload


def state_from_dict(payload: dict[str, Any]) -> SimulationState:
    """Rebuild a ``SimulationState`` from ``state_to_dict`` output."""
    return SimulationState(
        running=bool(payload["running"]),
        game_over=bool(payload["game_over"]),
        score=int(payload["score"]),
        character_y=float(payload["character_y"]),
        character_velocity=float(payload["character_velocity"]),
        obstacles=tuple(
            Obstacle(x=float(o["x"]), width=float(o["width"]), height=float(o["height"]))
            for o in payload.get("obstacles", [])
        ),
        milestone_reached=bool(payload["milestone_reached"]),
        ticks=int(payload.get("ticks", 0)),
    )


def serialize_state(state: SimulationState) -> bytes:
    """Serialize a snapshot into deterministic JSON bytes."""
    data = json.dumps(state_to_dict(state), sort_keys=True, separators=(",", ":")).encode("utf-8")
    if len(data) > MAX_FRAME_BYTES:
        raise ValueError(
            f"Serialized frame exceeds max size ({len(data)} bytes > {MAX_FRAME_BYTES})."
        )
    return data


def write_trace(states: Iterable[SimulationState], path: str | Path) -> Path:
    """Write snapshots as JSON lines, one per tick."""
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("wb") as handle:
        for state in states:
            handle.write(serialize_state(state))
            handle.write(b"\n")
    return output


def read_trace(path: str | Path) -> list[SimulationState]:
    """Load snapshots written by ``write_trace``."""
    states: list[SimulationState] = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        if line.strip():
            states.append(state_from_dict(json.loads(line)))
    return states
