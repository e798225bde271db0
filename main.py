"""Simple game runner for local validation."""

from __future__ import annotations

import logging

from agents.autopilot import ThresholdPilot
from configs.loader import ConfigLoader
from engine.headless import HeadlessResult, run_headless

LOGGER = logging.getLogger(__name__)


def main(config_path: str = "configs/default_game.yaml", ticks: int = 2000) -> HeadlessResult:
    """Load config and let the autopilot play a headless game."""
    config = ConfigLoader.load(config_path)
    result = run_headless(config, ticks, pilot=ThresholdPilot(config))
    state = result.final_state
    LOGGER.info(
        "Run finished after %d ticks: score=%d jumps=%d game_over=%s milestone=%s",
        result.ticks_simulated,
        state.score,
        result.jumps,
        state.game_over,
        state.milestone_reached,
    )
    return result


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
