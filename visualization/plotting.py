"""Plot utilities for recorded game traces."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from engine.state_machine import SimulationState  # noqa: E402
from streaming.state_serializer import read_trace  # noqa: E402


def build_trace_figure(states: Sequence[SimulationState]):
    """Height and score curves over ticks, with a game-over marker."""
    ticks = [state.ticks for state in states]
    heights = [state.character_y for state in states]
    scores = [state.score for state in states]

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(8, 6), sharex=True)
    ax1.plot(ticks, heights, label="character_y")
    if states and states[-1].game_over:
        ax1.axvline(states[-1].ticks, color="tab:red", linestyle="--", label="game over")
    ax1.set_ylabel("height")
    ax1.legend()

    ax2.plot(ticks, scores, label="score", color="tab:green")
    ax2.set_ylabel("score")
    ax2.set_xlabel("tick")
    ax2.legend()

    fig.tight_layout()
    return fig


def plot_trace(trace_path: str | Path, output_path: str | Path) -> Path:
    """Render a trace file to an image at ``output_path``."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    fig = build_trace_figure(read_trace(trace_path))
    fig.savefig(output)
    plt.close(fig)
    return output
