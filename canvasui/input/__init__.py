"""
Keyboard input: key code table and per-frame input state.
"""

from canvasui.input.keys import KeyCode, key_map_from
from canvasui.input.state import InputState

__all__ = ["KeyCode", "key_map_from", "InputState"]
