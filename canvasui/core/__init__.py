"""
Core value types: Vector, Color, UDim, plus frame state and signals.
"""

from canvasui.core.vector import Vector, DivisionByZero
from canvasui.core.color import Color, parse_rgba
from canvasui.core.udim import UDim
from canvasui.core.frame import FrameState
from canvasui.core.signal import (
    Signal, SignalBridge, SignalReceiver, Connection,
    SIGNAL_RESIZE, SIGNAL_KEY_DOWN, SIGNAL_KEY_UP,
)

__all__ = [
    "Vector", "DivisionByZero",
    "Color", "parse_rgba",
    "UDim",
    "FrameState",
    "Signal", "SignalBridge", "SignalReceiver", "Connection",
    "SIGNAL_RESIZE", "SIGNAL_KEY_DOWN", "SIGNAL_KEY_UP",
]
