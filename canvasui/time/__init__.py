"""
Timing: fixed-timestep game loop.
"""

from canvasui.time.loop import GameLoop, LoopConfig, MS_PER_GAME_TICK

__all__ = ["GameLoop", "LoopConfig", "MS_PER_GAME_TICK"]
