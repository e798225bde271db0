"""Fixed-cadence background tick driver."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable

LOGGER = logging.getLogger(__name__)


class ClockError(RuntimeError):
    """Raised when a clock is misconfigured."""


class TickClock:
    """Fires ``on_tick`` every ``interval`` seconds on a daemon thread.

    Ticks fire while holding ``lock``. ``stop()`` raises the stop flag under
    the same lock, so once it returns no further tick can fire, even if the
    worker thread was already waiting for the lock. Sharing the lock with
    command handlers serializes ticks and commands.
    """

    def __init__(
        self,
        interval: float,
        on_tick: Callable[[], None],
        lock: threading.RLock | None = None,
        name: str = "tick-clock",
    ) -> None:
        if interval <= 0:
            raise ClockError("interval must be > 0")
        self.interval = float(interval)
        self.on_tick = on_tick
        self.name = name
        self._lock = lock if lock is not None else threading.RLock()
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()
        self.ticks_fired = 0

    @property
    def running(self) -> bool:
        with self._lock:
            return self._thread is not None and self._thread.is_alive() and not self._stop_event.is_set()

    def start(self) -> None:
        """Start ticking; no-op while already running."""
        with self._lock:
            if self._thread is not None and self._thread.is_alive() and not self._stop_event.is_set():
                return
            # Each run owns its own event so a late-exiting old thread cannot
            # observe the new run's cleared flag.
            stop_event = threading.Event()
            self._stop_event = stop_event
            self._thread = threading.Thread(target=self._run, args=(stop_event,), name=self.name, daemon=True)
            self._thread.start()
            LOGGER.debug("%s started (interval=%.4fs)", self.name, self.interval)

    def stop(self) -> None:
        """Request stop. Safe to call from inside ``on_tick``."""
        with self._lock:
            if not self._stop_event.is_set():
                self._stop_event.set()
                LOGGER.debug("%s stopped after %d ticks", self.name, self.ticks_fired)

    def join(self, timeout: float | None = None) -> None:
        """Join the worker thread; must not be called while holding the lock."""
        thread = self._thread
        if thread is None or thread is threading.current_thread():
            return
        thread.join(timeout=timeout)

    def _run(self, stop_event: threading.Event) -> None:
        next_deadline = time.monotonic() + self.interval
        while not stop_event.wait(max(0.0, next_deadline - time.monotonic())):
            with self._lock:
                if stop_event.is_set():
                    break
                try:
                    self.on_tick()
                except Exception:
                    LOGGER.exception("%s tick failed; stopping", self.name)
                    stop_event.set()
                    break
                self.ticks_fired += 1

            next_deadline += self.interval
            now = time.monotonic()
            if now - next_deadline > self.interval:
                # Fell behind by more than a period: resync instead of bursting.
                next_deadline = now + self.interval
