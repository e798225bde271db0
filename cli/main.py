"""Command-line entry points for headless runs, trace plots and the desktop game."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

# Allow `python cli/main.py ...` execution from IDEs by adding repo root to sys.path.
if __package__ in {None, ""}:
    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))

from agents.autopilot import IdlePilot, ThresholdPilot
from configs.loader import ConfigLoader, GameConfig
from engine.headless import run_headless
from streaming.state_serializer import state_to_dict, write_trace

LOGGER = logging.getLogger(__name__)


def _load_config(path: str | None) -> GameConfig:
    if path:
        return ConfigLoader.load(path)
    return GameConfig()


def run_cli(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="runner")
    parser.add_argument("--log-level", default="WARNING")
    sub = parser.add_subparsers(dest="command", required=False)

    run_cmd = sub.add_parser("run", help="simulate a game without a window")
    run_cmd.add_argument("--config")
    run_cmd.add_argument("--ticks", type=int, default=2000)
    run_cmd.add_argument("--pilot", choices=["auto", "idle"], default="auto")
    run_cmd.add_argument("--lookahead", type=float, default=48.0)
    run_cmd.add_argument("--trace", help="write per-tick snapshots as JSON lines")

    plot_cmd = sub.add_parser("plot", help="plot a recorded trace")
    plot_cmd.add_argument("--trace", required=True)
    plot_cmd.add_argument("--out", default="artifacts/trace.png")

    play_cmd = sub.add_parser("play", help="open the desktop game")
    play_cmd.add_argument("--config")

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    if args.command is None or args.command == "play":
        from ui_desktop.app import main as desktop_main

        forwarded: list[str] = []
        if getattr(args, "config", None):
            forwarded.extend(["--config", str(args.config)])
        return int(desktop_main(forwarded))

    if args.command == "run":
        config = _load_config(args.config)
        pilot = ThresholdPilot(config, lookahead=args.lookahead) if args.pilot == "auto" else IdlePilot()
        result = run_headless(config, args.ticks, pilot=pilot, record_trace=bool(args.trace))
        if args.trace:
            path = write_trace(result.trace, args.trace)
            LOGGER.info("Trace written to %s", path)
        summary = {
            "ticks_simulated": result.ticks_simulated,
            "jumps": result.jumps,
            "final_state": state_to_dict(result.final_state),
        }
        print(json.dumps(summary, sort_keys=True))
        return 0

    if args.command == "plot":
        from visualization.plotting import plot_trace

        path = plot_trace(args.trace, args.out)
        print(path)
        return 0

    return 1


if __name__ == "__main__":
    raise SystemExit(run_cli())
