"""
Color

RGBA color with clamped channels, HSL construction and interpolation.

The string form `rgba(r, g, b, a)` is what drawing contexts take as
fill/stroke style, so its exact format matters:

    >>> str(Color.from_hsla(0, 100, 50, 1))
    'rgba(255, 0, 0, 1)'
"""

from __future__ import annotations
import math
import random as _random
import re
from typing import Optional, Tuple

from canvasui.core.vector import format_number


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _channel(value: float) -> int:
    return _round_half_up(_clamp(value, 0, 255))


# =============================================================================
# Color
# =============================================================================

class Color:
    """
    RGBA color.

    Build through the named factories (from_rgb, from_rgba, from_hsl,
    from_hsla, random); the constructor only clamps.
    """

    __hash__ = None  # lerp() mutates

    def __init__(self, red: float, green: float, blue: float, alpha: float):
        self._r = _channel(red)
        self._g = _channel(green)
        self._b = _channel(blue)
        self._a = float(_clamp(alpha, 0.0, 1.0))

    @property
    def r(self) -> int:
        return self._r

    @property
    def g(self) -> int:
        return self._g

    @property
    def b(self) -> int:
        return self._b

    @property
    def a(self) -> float:
        return self._a

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def from_rgb(cls, red: float, green: float, blue: float) -> Color:
        """red/green/blue 0-255, opaque."""
        return cls.from_rgba(red, green, blue, 1.0)

    @classmethod
    def from_rgba(cls, red: float, green: float, blue: float, alpha: float) -> Color:
        """red/green/blue 0-255, alpha 0-1."""
        return cls(red, green, blue, alpha)

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> Color:
        return cls.from_hsla(hue, saturation, lightness, 1.0)

    @classmethod
    def from_hsla(cls, hue: float, saturation: float, lightness: float, alpha: float) -> Color:
        """
        Convert from HSL.

        Args:
            hue: degrees, wrapped into [0, 360)
            saturation: 0-100
            lightness: 0-100
            alpha: 0-1
        """
        hue = hue % 360
        s = _clamp(saturation, 0, 100) / 100
        light = _clamp(lightness, 0, 100) / 100

        c = (1 - abs(2 * light - 1)) * s
        x = c * (1 - abs((hue / 60) % 2 - 1))
        m = light - c / 2

        sector = int(hue // 60)
        if sector == 0:
            r, g, b = c, x, 0.0
        elif sector == 1:
            r, g, b = x, c, 0.0
        elif sector == 2:
            r, g, b = 0.0, c, x
        elif sector == 3:
            r, g, b = 0.0, x, c
        elif sector == 4:
            r, g, b = x, 0.0, c
        else:
            r, g, b = c, 0.0, x

        return cls(
            _round_half_up((r + m) * 255),
            _round_half_up((g + m) * 255),
            _round_half_up((b + m) * 255),
            alpha,
        )

    @classmethod
    def random(cls, rng: Optional[_random.Random] = None) -> Color:
        """Random hue/saturation/lightness (uniform in HSL, not RGB)."""
        rng = rng or _random
        return cls.from_hsl(
            round(rng.random() * 360),
            round(rng.random() * 100),
            round(rng.random() * 100),
        )

    def copy(self) -> Color:
        return Color(self._r, self._g, self._b, self._a)

    # -------------------------------------------------------------------------
    # Interpolation
    # -------------------------------------------------------------------------

    def lerp(self, target: Color, alpha: float) -> Color:
        """Blend towards target in place, per channel."""
        blended = lerp(self, target, alpha)
        self._r, self._g, self._b, self._a = blended._r, blended._g, blended._b, blended._a
        return self

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        return f"rgba({self._r}, {self._g}, {self._b}, {format_number(self._a)})"

    def to_tuple(self) -> Tuple[int, int, int, float]:
        return (self._r, self._g, self._b, self._a)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Color.from_rgba({self._r}, {self._g}, {self._b}, {self._a!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()


def lerp(current: Color, target: Color, alpha: float) -> Color:
    """Per-channel blend of two colors into a new Color."""
    inv = 1 - alpha
    return Color.from_rgba(
        current.r * inv + target.r * alpha,
        current.g * inv + target.g * alpha,
        current.b * inv + target.b * alpha,
        current.a * inv + target.a * alpha,
    )


# =============================================================================
# Style strings
# =============================================================================

_RGBA_RE = re.compile(
    r"^\s*rgba\(\s*([-+\d.eE]+)\s*,\s*([-+\d.eE]+)\s*,\s*([-+\d.eE]+)\s*,\s*([-+\d.eE]+)\s*\)\s*$"
)


def parse_rgba(style: str) -> Tuple[float, float, float, float]:
    """
    Parse an `rgba(r, g, b, a)` style string into 0-1 floats.

    Used by drawing backends that take Color.to_string() output.
    """
    match = _RGBA_RE.match(style)
    if match is None:
        raise ValueError(f"Invalid rgba style: {style!r}")
    try:
        r, g, b, a = (float(part) for part in match.groups())
    except ValueError as e:
        raise ValueError(f"Invalid rgba style: {style!r}") from e
    return (
        _clamp(r, 0, 255) / 255.0,
        _clamp(g, 0, 255) / 255.0,
        _clamp(b, 0, 255) / 255.0,
        _clamp(a, 0, 1),
    )
