"""Tests for jump key debouncing."""

from __future__ import annotations

from ui_desktop.input_binding import JumpTrigger

SPACE = 32
UP = 38
ENTER = 13


def test_one_jump_per_physical_press() -> None:
    jumps: list[int] = []
    trigger = JumpTrigger(lambda: jumps.append(1), keys=[SPACE, UP])

    assert trigger.press(SPACE) is True
    assert trigger.press(SPACE, auto_repeat=True) is False
    assert trigger.press(SPACE) is False
    trigger.release(SPACE, auto_repeat=True)
    assert trigger.press(SPACE) is False
    trigger.release(SPACE)
    assert trigger.press(SPACE) is True

    assert jumps == [1, 1]


def test_unbound_keys_ignored_and_keys_tracked_separately() -> None:
    jumps: list[int] = []
    trigger = JumpTrigger(lambda: jumps.append(1), keys=[SPACE, UP])

    assert trigger.press(ENTER) is False
    assert trigger.press(SPACE) is True
    assert trigger.press(UP) is True
    trigger.clear()
    assert trigger.press(SPACE) is True

    assert len(jumps) == 3


def test_click_always_jumps() -> None:
    jumps: list[int] = []
    trigger = JumpTrigger(lambda: jumps.append(1), keys=[SPACE])

    trigger.click()
    trigger.click()

    assert jumps == [1, 1]
