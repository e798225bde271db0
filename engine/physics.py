"""Constant-gravity vertical kinematics for the runner character."""

from __future__ import annotations


def integrate(y: float, velocity: float, gravity: float) -> tuple[float, float]:
    """Advance ``(y, velocity)`` by one tick.

    Position moves by the pre-update velocity, then gravity is applied to the
    velocity. Reaching or passing the ground lands the character at rest.
    """
    next_velocity = velocity + gravity
    next_y = y + velocity
    if next_y <= 0.0:
        return 0.0, 0.0
    return next_y, next_velocity


def is_grounded(y: float, epsilon: float) -> bool:
    """Return whether ``y`` is within ``epsilon`` of the ground."""
    return y <= epsilon


def apply_jump(y: float, velocity: float, jump_velocity: float, epsilon: float) -> float:
    """Return the velocity after a jump request.

    Only a grounded character receives the impulse; mid-air requests leave
    ``velocity`` untouched.
    """
    if not is_grounded(y, epsilon):
        return velocity
    return jump_velocity
