"""
Key Codes

Named key codes (DOM keyCode values).
"""

from __future__ import annotations
from enum import IntEnum
from typing import Any, Dict


class KeyCode(IntEnum):
    ENTER = 13
    SHIFT = 16
    CTRL = 17
    ALT = 18
    ESC = 27
    SPACE = 32
    LEFT = 37
    UP = 38
    RIGHT = 39
    DOWN = 40
    DEL = 46

    KEY_0 = 48
    KEY_1 = 49
    KEY_2 = 50
    KEY_3 = 51
    KEY_4 = 52
    KEY_5 = 53
    KEY_6 = 54
    KEY_7 = 55
    KEY_8 = 56
    KEY_9 = 57

    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90


# Window-toolkit key names that differ from KeyCode member names
_WINDOW_KEY_ALIASES = {
    "ESCAPE": KeyCode.ESC,
    "DELETE": KeyCode.DEL,
    "LEFT_SHIFT": KeyCode.SHIFT,
    "RIGHT_SHIFT": KeyCode.SHIFT,
    "LEFT_CTRL": KeyCode.CTRL,
    "RIGHT_CTRL": KeyCode.CTRL,
    "LEFT_ALT": KeyCode.ALT,
    "RIGHT_ALT": KeyCode.ALT,
}


def key_map_from(keys: Any) -> Dict[Any, KeyCode]:
    """
    Build a window-key -> KeyCode table from a key constant namespace
    (e.g. moderngl_window's ``wnd.keys``). Names missing on the
    namespace are skipped.
    """
    names: Dict[str, KeyCode] = {}
    for code in KeyCode:
        if code.name.startswith("KEY_"):
            names["NUMBER_" + code.name[4:]] = code
        else:
            names[code.name] = code
    names.update(_WINDOW_KEY_ALIASES)

    table: Dict[Any, KeyCode] = {}
    for name, code in names.items():
        value = getattr(keys, name, None)
        if value is not None:
            table[value] = code
    return table
