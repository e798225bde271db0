"""Game command buttons and score readout."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget

from engine.state_machine import GamePhase, SimulationState


class ControlsPanel(QWidget):
    """Start/Jump/Restart buttons; visibility follows the game phase."""

    def __init__(self) -> None:
        super().__init__()
        self.on_start: Callable[[], None] | None = None
        self.on_jump: Callable[[], None] | None = None
        self.on_reset: Callable[[], None] | None = None

        layout = QHBoxLayout(self)

        self.score_label = QLabel("Score: 0")
        self.milestone_label = QLabel("")
        self.start_btn = QPushButton("Start")
        self.jump_btn = QPushButton("Jump")
        self.reset_btn = QPushButton("Restart")

        layout.addWidget(self.score_label)
        layout.addWidget(self.milestone_label, stretch=1)
        layout.addWidget(self.start_btn)
        layout.addWidget(self.jump_btn)
        layout.addWidget(self.reset_btn)

        # Buttons must not take keyboard focus, or Space would click them.
        for button in (self.start_btn, self.jump_btn, self.reset_btn):
            button.setFocusPolicy(Qt.NoFocus)

        self.start_btn.clicked.connect(lambda: self.on_start and self.on_start())
        self.jump_btn.clicked.connect(lambda: self.on_jump and self.on_jump())
        self.reset_btn.clicked.connect(lambda: self.on_reset and self.on_reset())

        self.update_state(SimulationState(), "")

    def update_state(self, state: SimulationState, milestone_message: str) -> None:
        phase = state.phase
        self.score_label.setText(f"Score: {state.score}")
        self.milestone_label.setText(milestone_message if state.milestone_reached else "")
        self.start_btn.setVisible(phase == GamePhase.IDLE)
        self.jump_btn.setVisible(phase == GamePhase.RUNNING)
        self.reset_btn.setVisible(phase != GamePhase.IDLE)
