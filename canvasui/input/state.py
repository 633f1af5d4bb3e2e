"""
Input State

Raw key up/down tracking plus an edge-triggered "typed" set that is
snapshotted once per paint callback (on_frame_start). Passed explicitly
to the simulation step instead of living in module globals.
"""

from __future__ import annotations
from typing import Set

from canvasui.core.signal import SignalReceiver, SIGNAL_KEY_DOWN, SIGNAL_KEY_UP


class InputState(SignalReceiver):
    """
    Keyboard state for the game loop.

    A key counts as typed for one frame after it completes a
    press-and-release.
    """

    def __init__(self):
        self._down: Set[int] = set()
        self._released: Set[int] = set()
        self._typed: frozenset = frozenset()

    def bind_bridge(self, bridge):
        super().bind_bridge(bridge)
        self.subscribe(SIGNAL_KEY_DOWN, self.key_down)
        self.subscribe(SIGNAL_KEY_UP, self.key_up)

    # -------------------------------------------------------------------------
    # Raw events
    # -------------------------------------------------------------------------

    def key_down(self, code: int):
        self._down.add(int(code))

    def key_up(self, code: int):
        code = int(code)
        if code in self._down:
            self._down.discard(code)
            self._released.add(code)

    # -------------------------------------------------------------------------
    # Frame snapshot
    # -------------------------------------------------------------------------

    def on_frame_start(self):
        """Publish keys released since the previous frame as typed."""
        self._typed = frozenset(self._released)
        self._released.clear()

    def is_key_down(self, code: int) -> bool:
        return int(code) in self._down

    def is_key_typed(self, code: int) -> bool:
        return int(code) in self._typed

    @property
    def keys_down(self) -> frozenset:
        return frozenset(self._down)
