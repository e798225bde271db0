"""Tests for the fixed-cadence tick clock."""

from __future__ import annotations

import threading
import time

import pytest

from core.clock import ClockError, TickClock


def _wait_for(predicate, timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


def test_clock_fires_repeatedly_until_stopped() -> None:
    fired: list[float] = []
    clock = TickClock(interval=0.005, on_tick=lambda: fired.append(time.monotonic()))

    clock.start()
    assert _wait_for(lambda: len(fired) >= 5)
    clock.stop()
    clock.join(timeout=1.0)

    count = len(fired)
    time.sleep(0.05)
    assert len(fired) == count
    assert clock.running is False


def test_no_tick_after_stop_returns() -> None:
    lock = threading.RLock()
    stopped = threading.Event()
    late_ticks: list[int] = []

    def on_tick() -> None:
        if stopped.is_set():
            late_ticks.append(1)

    clock = TickClock(interval=0.001, on_tick=on_tick, lock=lock)
    clock.start()
    time.sleep(0.02)
    clock.stop()
    stopped.set()
    clock.join(timeout=1.0)

    assert late_ticks == []


def test_stop_from_inside_tick() -> None:
    fired: list[int] = []
    clock: TickClock

    def on_tick() -> None:
        fired.append(1)
        if len(fired) == 3:
            clock.stop()

    clock = TickClock(interval=0.002, on_tick=on_tick)
    clock.start()
    assert _wait_for(lambda: not clock.running)
    clock.join(timeout=1.0)
    time.sleep(0.02)

    assert len(fired) == 3


def test_restart_after_stop() -> None:
    fired: list[int] = []
    clock = TickClock(interval=0.002, on_tick=lambda: fired.append(1))

    clock.start()
    assert _wait_for(lambda: len(fired) >= 2)
    clock.stop()
    clock.join(timeout=1.0)
    count = len(fired)

    clock.start()
    assert _wait_for(lambda: len(fired) >= count + 2)
    clock.stop()
    clock.join(timeout=1.0)


def test_failing_tick_stops_clock() -> None:
    calls: list[int] = []

    def on_tick() -> None:
        calls.append(1)
        raise RuntimeError("boom")

    clock = TickClock(interval=0.002, on_tick=on_tick)
    clock.start()
    clock.join(timeout=1.0)

    assert calls == [1]
    assert clock.running is False


def test_invalid_interval_rejected() -> None:
    with pytest.raises(ClockError):
        TickClock(interval=0.0, on_tick=lambda: None)
