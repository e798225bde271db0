"""Keyboard-to-command binding with key-repeat suppression."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable


class JumpTrigger:
    """Maps designated keys to exactly one ``jump()`` per physical press.

    Holding a key produces auto-repeat press events without releases in
    between; those are swallowed until the key is released.
    """

    def __init__(self, on_jump: Callable[[], None], keys: Iterable[Hashable]) -> None:
        self.on_jump = on_jump
        self.keys = frozenset(keys)
        self._held: set[Hashable] = set()

    def press(self, key: Hashable, auto_repeat: bool = False) -> bool:
        """Handle a key press; return whether a jump was issued."""
        if key not in self.keys:
            return False
        if auto_repeat or key in self._held:
            return False
        self._held.add(key)
        self.on_jump()
        return True

    def release(self, key: Hashable, auto_repeat: bool = False) -> None:
        if auto_repeat:
            return
        self._held.discard(key)

    def click(self) -> None:
        """On-screen button: one click, one jump."""
        self.on_jump()

    def clear(self) -> None:
        """Forget held keys, e.g. when the window loses focus."""
        self._held.clear()
