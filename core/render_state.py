"""Immutable render-frame contracts for the desktop front end."""

from __future__ import annotations

from dataclasses import dataclass, field

from configs.loader import GameConfig
from engine.state_machine import GamePhase, SimulationState


@dataclass(frozen=True)
class Rect:
    """Screen-space rectangle, origin at the top-left corner."""

    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True)
class RenderFrame:
    """Everything a painter needs for one frame, in screen coordinates."""

    width: float
    height: float
    ground_top: float
    character: Rect
    obstacles: list[Rect] = field(default_factory=list)
    score: int = 0
    rising: bool = False
    show_start_prompt: bool = False
    show_game_over: bool = False
    show_milestone: bool = False
    milestone_message: str = ""


def build_render_frame(state: SimulationState, config: GameConfig, viewport_height: float) -> RenderFrame:
    """Map a ground-relative snapshot onto a viewport of ``viewport_height``.

    The world is ``config.screen_width`` wide; the ground band takes the
    bottom ``config.ground_height`` units.
    """
    ground_top = float(viewport_height) - config.ground_height
    character = Rect(
        left=config.character_x,
        top=ground_top - max(0.0, state.character_y) - config.character_height,
        width=config.character_width,
        height=config.character_height,
    )
    obstacles = [
        Rect(left=obstacle.x, top=ground_top - obstacle.height, width=obstacle.width, height=obstacle.height)
        for obstacle in state.obstacles
    ]
    return RenderFrame(
        width=config.screen_width,
        height=float(viewport_height),
        ground_top=ground_top,
        character=character,
        obstacles=obstacles,
        score=state.score,
        rising=state.character_velocity > 0.0,
        show_start_prompt=state.phase == GamePhase.IDLE,
        show_game_over=state.phase == GamePhase.GAME_OVER,
        show_milestone=state.milestone_reached,
        milestone_message=config.milestone_message if state.milestone_reached else "",
    )
