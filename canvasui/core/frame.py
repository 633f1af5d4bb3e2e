"""
Frame State

Immutable record of one paint callback.
Contains timing info and how much simulation ran.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class FrameState:
    """
    Immutable frame information returned by GameLoop.step().
    """
    frame_id: int           # Monotonically increasing paint counter
    timestamp: float        # Paint callback timestamp (ms)
    elapsed_ms: float       # Wall-clock time since the previous paint
    ticks: int              # Simulation ticks run during this paint
    accumulated_ms: float   # Unconsumed time carried into the next paint

    @property
    def fps(self) -> float:
        """Estimated FPS from elapsed time."""
        return 1000.0 / max(1e-6, self.elapsed_ms)
