"""Tests for the desktop front end."""

from __future__ import annotations

import pytest

from configs.loader import GameConfig
from core.game_session import GameSession
from engine.state_machine import GamePhase, SimulationState
from ui_desktop.models.snapshot_model import SnapshotModel


def test_snapshot_model_forwards_each_new_state_once() -> None:
    model = SnapshotModel()
    seen: list[int] = []
    model.subscribe(lambda s: seen.append(s.ticks))

    first = SimulationState(running=True, ticks=1)
    second = SimulationState(running=True, ticks=2)

    assert model.update_state(first) is True
    assert model.update_state(first) is False
    assert model.update_state(second) is True
    assert seen == [1, 2]


def test_game_window_wires_buttons_and_keys() -> None:
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    from PySide6.QtCore import QEvent, Qt
    from PySide6.QtGui import QKeyEvent

    from ui_desktop.game_window import GameWindow

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    session = GameSession(GameConfig(tick_interval=10.0))
    window = GameWindow(session=session)
    try:
        window.show()
        app.processEvents()
        assert window.controls.start_btn.isVisibleTo(window)
        assert not window.controls.jump_btn.isVisibleTo(window)

        window.controls.start_btn.click()
        app.processEvents()
        assert session.snapshot().phase == GamePhase.RUNNING
        assert window.controls.jump_btn.isVisibleTo(window)

        press = QKeyEvent(QEvent.KeyPress, Qt.Key_Space, Qt.NoModifier)
        repeat = QKeyEvent(QEvent.KeyPress, Qt.Key_Space, Qt.NoModifier, "", True)
        window.keyPressEvent(press)
        assert session.snapshot().character_velocity == session.config.jump_velocity
        window.keyPressEvent(repeat)

        window.controls.reset_btn.click()
        app.processEvents()
        assert session.snapshot() == SimulationState()
        assert window.canvas.frame.show_start_prompt is True
    finally:
        window.close()
        session.close()


def test_canvas_paints_running_frame() -> None:
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    from engine.obstacles import Obstacle
    from ui_desktop.game_canvas import GameCanvas

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    canvas = GameCanvas(GameConfig())
    canvas.set_state(
        SimulationState(
            running=True,
            character_y=20.0,
            obstacles=(Obstacle(300.0, 20.0, 60.0),),
            milestone_reached=True,
        )
    )
    canvas.resize(640, 260)
    canvas.show()
    app.processEvents()
    canvas.repaint()

    assert canvas.frame.show_milestone is True
    assert len(canvas.frame.obstacles) == 1
    canvas.close()
