"""Desktop game window composition."""

from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QObject, Qt, Signal
from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from core.game_session import GameSession
from engine.state_machine import SimulationState
from ui_desktop.controls_panel import ControlsPanel
from ui_desktop.game_canvas import GameCanvas
from ui_desktop.input_binding import JumpTrigger
from ui_desktop.models.snapshot_model import SnapshotModel

LOGGER = logging.getLogger(__name__)

JUMP_KEYS = (Qt.Key_Space, Qt.Key_Up, Qt.Key_W)


def key_code(key: Any) -> int:
    """Normalize Qt key enums and raw ints to plain ints."""
    return int(getattr(key, "value", key))


class SnapshotBridge(QObject):
    """Carries snapshots from the clock thread onto the GUI thread."""

    snapshot_ready = Signal(object)


class GameWindow(QMainWindow):
    """Canvas above a control row; keyboard jumps go through ``JumpTrigger``."""

    def __init__(self, session: GameSession, model: SnapshotModel | None = None) -> None:
        super().__init__()
        self.session = session
        self.model = model or SnapshotModel()
        self.setWindowTitle("Runner")
        self.resize(960, 440)

        self.canvas = GameCanvas(session.config)
        self.controls = ControlsPanel()
        self.jump_trigger = JumpTrigger(session.jump, keys=[key_code(key) for key in JUMP_KEYS])

        center = QWidget()
        root = QVBoxLayout(center)
        root.addWidget(self.canvas, stretch=9)
        root.addWidget(self.controls, stretch=1)
        self.setCentralWidget(center)
        self.setFocusPolicy(Qt.StrongFocus)

        self.controls.on_start = self.session.start
        self.controls.on_jump = self.jump_trigger.click
        self.controls.on_reset = self.session.reset

        self._bridge = SnapshotBridge()
        self._bridge.snapshot_ready.connect(self.model.update_state)
        self.model.subscribe(self._on_model_update)
        self.session.subscribe(self._bridge.snapshot_ready.emit)
        self.model.update_state(self.session.snapshot())

    def _on_model_update(self, state: SimulationState) -> None:
        self.canvas.set_state(state)
        self.controls.update_state(state, self.session.config.milestone_message)

    def keyPressEvent(self, event: Any) -> None:  # type: ignore[override]
        if not self.jump_trigger.press(key_code(event.key()), auto_repeat=event.isAutoRepeat()):
            super().keyPressEvent(event)

    def keyReleaseEvent(self, event: Any) -> None:  # type: ignore[override]
        self.jump_trigger.release(key_code(event.key()), auto_repeat=event.isAutoRepeat())
        super().keyReleaseEvent(event)

    def focusOutEvent(self, event: Any) -> None:  # type: ignore[override]
        self.jump_trigger.clear()
        super().focusOutEvent(event)

    def closeEvent(self, event: Any) -> None:  # type: ignore[override]
        LOGGER.info("Window closed; tearing down session")
        self.session.close()
        super().closeEvent(event)
