"""Tests for CLI run/plot flow."""

from __future__ import annotations

import json
from pathlib import Path

from cli.main import run_cli


def test_cli_run_prints_summary(tmp_path, capsys) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"obstacle_height": 0.0}), encoding="utf-8")

    assert run_cli(["run", "--config", str(config_path), "--ticks", "120", "--pilot", "idle"]) == 0

    summary = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert summary["ticks_simulated"] == 120
    assert summary["final_state"]["score"] == 12
    assert summary["final_state"]["phase"] == "running"


def test_cli_run_and_plot(tmp_path, capsys) -> None:
    trace_path = tmp_path / "trace.jsonl"
    out_path = tmp_path / "plot.png"

    assert run_cli(["run", "--ticks", "300", "--trace", str(trace_path)]) == 0
    assert trace_path.exists()
    assert len(trace_path.read_text(encoding="utf-8").splitlines()) == 301

    assert run_cli(["plot", "--trace", str(trace_path), "--out", str(out_path)]) == 0
    assert Path(out_path).exists()
    assert str(out_path) in capsys.readouterr().out


def test_trace_figure_legend_marks_game_over() -> None:
    import matplotlib.pyplot as plt

    from configs.loader import GameConfig
    from engine.headless import run_headless
    from visualization.plotting import build_trace_figure

    result = run_headless(GameConfig(), 400, record_trace=True)
    assert result.final_state.game_over

    fig = build_trace_figure(result.trace)
    try:
        labels = [text.get_text() for text in fig.axes[0].get_legend().get_texts()]
        assert labels == ["character_y", "game over"]
    finally:
        plt.close(fig)
