"""
UDim

Position/size value made of a viewport-relative scale and a pixel offset:

    absolute = scale * (viewport.width, viewport.height) + offset

`absolute` is cached and recomputed by every mutator before it returns,
so reads are never stale with respect to scale/offset. After the viewport
itself changes size, the owner calls recalculate().
"""

from __future__ import annotations
from typing import Any

from canvasui.core.vector import Vector


class UDim:
    """
    Scale + offset pair resolved against a viewport.

    `viewport` is any object with `width` and `height` (normally a Surface).
    It is borrowed, not owned.
    """

    def __init__(
        self,
        viewport: Any,
        scale_x: float = 0.0,
        offset_x: float = 0.0,
        scale_y: float = 0.0,
        offset_y: float = 0.0,
    ):
        self._viewport = viewport
        self._scale = Vector(scale_x, scale_y)
        self._offset = Vector(offset_x, offset_y)
        self._absolute = Vector()
        self.recalculate()

    @classmethod
    def from_scale(cls, viewport: Any, x: float, y: float) -> UDim:
        return cls(viewport, x, 0.0, y, 0.0)

    @classmethod
    def from_offset(cls, viewport: Any, x: float, y: float) -> UDim:
        return cls(viewport, 0.0, x, 0.0, y)

    def copy(self) -> UDim:
        return UDim(self._viewport, self._scale.x, self._offset.x, self._scale.y, self._offset.y)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def recalculate(self) -> None:
        """Resolve against the viewport's current size."""
        self._absolute = Vector(
            self._scale.x * self._viewport.width + self._offset.x,
            self._scale.y * self._viewport.height + self._offset.y,
        )

    @property
    def viewport(self) -> Any:
        return self._viewport

    @property
    def absolute(self) -> Vector:
        return self._absolute.copy()

    @property
    def scale(self) -> Vector:
        return self._scale.copy()

    @property
    def offset(self) -> Vector:
        return self._offset.copy()

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------

    def add_scale(self, v: Vector) -> None:
        self._scale.add(v)
        self.recalculate()

    def sub_scale(self, v: Vector) -> None:
        self._scale.sub(v)
        self.recalculate()

    def add_offset(self, v: Vector) -> None:
        self._offset.add(v)
        self.recalculate()

    def sub_offset(self, v: Vector) -> None:
        self._offset.sub(v)
        self.recalculate()

    def lerp(self, other: UDim, alpha: float) -> None:
        """Blend scale and offset towards other independently."""
        self._scale.lerp(other._scale, alpha)
        self._offset.lerp(other._offset, alpha)
        self.recalculate()

    def __repr__(self) -> str:
        return (
            f"UDim(scale=({self._scale.x}, {self._scale.y}), "
            f"offset=({self._offset.x}, {self._offset.y}))"
        )
