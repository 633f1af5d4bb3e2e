# canvasui/core/vector.py
"""
2D vector for screen/viewport coordinates.

Vector methods mutate in place and return the same instance so calls chain:

    v = Vector(3, 4).normalize().mul(10)

The module-level functions (add, sub, mul, div, normalize, rotate, lerp)
are the pure twins: they always allocate a new Vector and never touch
their arguments. Operators follow the same split - `a + b` is pure,
`a += b` mutates `a`.
"""

from __future__ import annotations
import math
import random as _random
from typing import Iterator, Optional, Tuple, Union

Number = Union[int, float]
Operand = Union["Vector", int, float]


class DivisionByZero(ZeroDivisionError):
    """Raised when a vector is divided by zero on any axis."""

    MESSAGE = "Cannot divide by zero."

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


# =============================================================================
# Vector
# =============================================================================

class Vector:
    """Mutable 2D float vector."""

    __hash__ = None  # mutable

    def __init__(self, x: Number = 0.0, y: Number = 0.0):
        self._x = float(x)
        self._y = float(y)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def from_angle(cls, theta: float, magnitude: float = 1.0) -> Vector:
        """Vector of the given length pointing at theta (radians)."""
        return cls(math.cos(theta) * magnitude, math.sin(theta) * magnitude)

    @classmethod
    def random(cls, rng: Optional[_random.Random] = None) -> Vector:
        """Unit vector in a random direction."""
        rng = rng or _random
        return cls.from_angle(rng.random() * math.tau, 1.0)

    def copy(self) -> Vector:
        return Vector(self._x, self._y)

    def set(self, x: Number, y: Number) -> Vector:
        self._x = float(x)
        self._y = float(y)
        return self

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def angle(self) -> float:
        """Direction in radians, atan2(y, x)."""
        return math.atan2(self._y, self._x)

    @angle.setter
    def angle(self, radians: float):
        radius = self.magnitude
        self._x = radius * math.cos(radians)
        self._y = radius * math.sin(radians)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_sq)

    @magnitude.setter
    def magnitude(self, length: float):
        self.normalize().mul(length)

    @property
    def magnitude_sq(self) -> float:
        return self._x * self._x + self._y * self._y

    # -------------------------------------------------------------------------
    # In-place operations
    # -------------------------------------------------------------------------

    def normalize(self) -> Vector:
        """Scale to unit length. The zero vector stays zero."""
        m = self.magnitude
        if m != 0:
            self._x /= m
            self._y /= m
        else:
            self._x = 0.0
            self._y = 0.0
        return self

    def add(self, v: Operand) -> Vector:
        vx, vy = _components(v)
        self._x += vx
        self._y += vy
        return self

    def sub(self, v: Operand) -> Vector:
        vx, vy = _components(v)
        self._x -= vx
        self._y -= vy
        return self

    def mul(self, v: Operand) -> Vector:
        vx, vy = _components(v)
        self._x *= vx
        self._y *= vy
        return self

    def div(self, v: Operand) -> Vector:
        vx, vy = _divisor(v)
        self._x /= vx
        self._y /= vy
        return self

    def rotate(self, radians: float) -> Vector:
        self.angle = self.angle + radians
        return self

    def lerp(self, target: Vector, alpha: float) -> Vector:
        """Move towards target by alpha (0 -> unchanged, 1 -> target)."""
        self._x = self._x * (1 - alpha) + target._x * alpha
        self._y = self._y * (1 - alpha) + target._y * alpha
        return self

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def dot(self, v: Vector) -> float:
        return self._x * v._x + self._y * v._y

    def cross(self, v: Vector) -> float:
        """Z component of the 3D cross product."""
        return self._x * v._y - self._y * v._x

    def angle_between(self, v: Vector) -> float:
        """Unsigned angle to v in radians. NaN if either vector is zero."""
        lengths = self.magnitude * v.magnitude
        if lengths == 0:
            return math.nan
        cos_theta = max(-1.0, min(1.0, self.dot(v) / lengths))
        return math.acos(cos_theta)

    def distance(self, v: Vector) -> float:
        return sub(self, v).magnitude

    def equals(self, v: Vector) -> bool:
        return self._x == v._x and self._y == v._y

    def to_tuple(self) -> Tuple[float, float]:
        return (self._x, self._y)

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    def __iter__(self) -> Iterator[float]:
        return iter((self._x, self._y))

    def __repr__(self) -> str:
        return f"Vector({self._x!r}, {self._y!r})"

    def __str__(self) -> str:
        return f"X: {format_number(self._x)} Y: {format_number(self._y)}"

    def __neg__(self) -> Vector:
        return Vector(-self._x, -self._y)

    def __add__(self, other: Operand) -> Vector:
        return add(self, other)

    def __radd__(self, other: Operand) -> Vector:
        return add(other, self)

    def __sub__(self, other: Operand) -> Vector:
        return sub(self, other)

    def __rsub__(self, other: Operand) -> Vector:
        return sub(other, self)

    def __mul__(self, other: Operand) -> Vector:
        return mul(self, other)

    def __rmul__(self, other: Operand) -> Vector:
        return mul(other, self)

    def __truediv__(self, other: Operand) -> Vector:
        return div(self, other)

    def __rtruediv__(self, other: Operand) -> Vector:
        return div(other, self)

    def __iadd__(self, other: Operand) -> Vector:
        return self.add(other)

    def __isub__(self, other: Operand) -> Vector:
        return self.sub(other)

    def __imul__(self, other: Operand) -> Vector:
        return self.mul(other)

    def __itruediv__(self, other: Operand) -> Vector:
        return self.div(other)


# =============================================================================
# Pure functions
# =============================================================================

def _components(v: Operand) -> Tuple[float, float]:
    """Broadcast a scalar across both axes."""
    if isinstance(v, Vector):
        return v._x, v._y
    return v, v


def _divisor(v: Operand) -> Tuple[float, float]:
    vx, vy = _components(v)
    if vx == 0 or vy == 0:
        raise DivisionByZero()
    return vx, vy


def format_number(value: float) -> str:
    # 1.0 -> "1", 0.5 -> "0.5"
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def add(a: Operand, b: Operand) -> Vector:
    ax, ay = _components(a)
    bx, by = _components(b)
    return Vector(ax + bx, ay + by)


def sub(a: Operand, b: Operand) -> Vector:
    ax, ay = _components(a)
    bx, by = _components(b)
    return Vector(ax - bx, ay - by)


def mul(a: Operand, b: Operand) -> Vector:
    ax, ay = _components(a)
    bx, by = _components(b)
    return Vector(ax * bx, ay * by)


def div(a: Operand, b: Operand) -> Vector:
    ax, ay = _components(a)
    bx, by = _divisor(b)
    return Vector(ax / bx, ay / by)


def normalize(v: Vector) -> Vector:
    return v.copy().normalize()


def rotate(v: Vector, radians: float) -> Vector:
    return Vector.from_angle(v.angle + radians, v.magnitude)


def lerp(current: Vector, target: Vector, alpha: float) -> Vector:
    return Vector(
        current.x * (1 - alpha) + target.x * alpha,
        current.y * (1 - alpha) + target.y * alpha,
    )
