"""Painter-based canvas for the runner game."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QFont, QPainter
from PySide6.QtWidgets import QWidget

from configs.loader import GameConfig
from core.render_state import RenderFrame, build_render_frame
from engine.state_machine import SimulationState


class GameCanvas(QWidget):
    """Draws one ``RenderFrame`` scaled to the widget size."""

    def __init__(self, config: GameConfig) -> None:
        super().__init__()
        self.config = config
        self.setMinimumSize(400, 160)
        self._frame: RenderFrame = build_render_frame(SimulationState(), config, self.world_height)

    @property
    def world_height(self) -> float:
        return self.config.ground_height + 170.0

    @property
    def frame(self) -> RenderFrame:
        return self._frame

    def set_state(self, state: SimulationState) -> None:
        self._frame = build_render_frame(state, self.config, self.world_height)
        self.update()

    def paintEvent(self, _event: Any) -> None:  # type: ignore[override]
        frame = self._frame
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        sx = self.width() / max(frame.width, 1.0)
        sy = self.height() / max(frame.height, 1.0)
        painter.scale(sx, sy)

        painter.fillRect(QRectF(0, 0, frame.width, frame.ground_top), QColor(219, 234, 254))
        painter.fillRect(
            QRectF(0, frame.ground_top, frame.width, frame.height - frame.ground_top),
            QColor(134, 239, 172),
        )

        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor(22, 163, 74))
        for rect in frame.obstacles:
            painter.drawRect(QRectF(rect.left, rect.top, rect.width, rect.height))

        body = frame.character
        painter.setBrush(QColor(180, 120, 70) if not frame.rising else QColor(205, 145, 90))
        painter.drawRoundedRect(QRectF(body.left, body.top, body.width, body.height), 8, 8)

        painter.setPen(QColor(31, 41, 55))
        painter.setFont(QFont("Sans", 14, QFont.Bold))
        painter.drawText(QRectF(0, 8, frame.width - 12, 24), Qt.AlignRight, f"Score: {frame.score}")

        if frame.show_milestone:
            painter.setPen(QColor(133, 77, 14))
            painter.drawText(QRectF(12, 8, frame.width / 2, 24), Qt.AlignLeft, frame.milestone_message)

        if frame.show_start_prompt:
            self._draw_overlay(painter, frame, "Press Start, then Space to jump")
        elif frame.show_game_over:
            self._draw_overlay(painter, frame, f"Game over! Score: {frame.score}")

        painter.end()

    @staticmethod
    def _draw_overlay(painter: QPainter, frame: RenderFrame, text: str) -> None:
        painter.fillRect(QRectF(0, 0, frame.width, frame.height), QColor(0, 0, 0, 110))
        painter.setPen(QColor(255, 255, 255))
        painter.setFont(QFont("Sans", 20, QFont.Bold))
        painter.drawText(QRectF(0, 0, frame.width, frame.height), Qt.AlignCenter, text)
