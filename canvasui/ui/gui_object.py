"""
GuiObject Base

Drawable shape interface:
- draw() - paint into the borrowed surface context
- update() - re-resolve layout after the viewport changed size
- rotate(degrees) - accumulate rotation
- z_index - stacking order (lower paints first)

Shared fields live in one embedded GuiSettings struct; concrete shapes
(canvasui.ui.shapes) add only what is specific to them.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from canvasui.core import vector
from canvasui.core.color import Color
from canvasui.core.udim import UDim
from canvasui.core.vector import Vector

if TYPE_CHECKING:
    from canvasui.ui.draw import DrawContext
    from canvasui.ui.surface import Surface


# =============================================================================
# Shared Settings
# =============================================================================

@dataclass
class GuiSettings:
    """Fields common to every shape."""
    anchor_point: Vector
    background: Color
    border_color: Color
    border_size: float
    position: UDim
    rotation: float  # degrees
    size: UDim
    z_index: int

    @classmethod
    def defaults(cls, surface: Surface) -> GuiSettings:
        return cls(
            anchor_point=Vector(0, 0),
            background=Color.from_rgb(255, 255, 255),
            border_color=Color.from_rgb(0, 0, 0),
            border_size=0.0,
            position=UDim(surface, 0, 0, 0, 0),
            rotation=0.0,
            size=UDim(surface, 0, 100, 0, 100),
            z_index=0,
        )


# =============================================================================
# GuiObject
# =============================================================================

class GuiObject(ABC):
    """
    Base for drawable shapes.

    Takes ownership of the Vector/Color/UDim values passed in; the surface
    and its context are borrowed.
    """

    def __init__(
        self,
        surface: Surface,
        anchor_point: Optional[Vector] = None,
        background: Optional[Color] = None,
        border_color: Optional[Color] = None,
        border_size: Optional[float] = None,
        position: Optional[UDim] = None,
        rotation: Optional[float] = None,
        size: Optional[UDim] = None,
        z_index: Optional[int] = None,
    ):
        self._surface = surface
        self._ctx = surface.get_context()

        settings = GuiSettings.defaults(surface)
        if anchor_point is not None:
            settings.anchor_point = anchor_point
        if background is not None:
            settings.background = background
        if border_color is not None:
            settings.border_color = border_color
        if border_size is not None:
            settings.border_size = max(0.0, float(border_size))
        if position is not None:
            settings.position = position
        if rotation is not None:
            settings.rotation = float(rotation)
        if size is not None:
            settings.size = size
        if z_index is not None:
            settings.z_index = int(z_index)
        self.settings = settings

    # -------------------------------------------------------------------------
    # Borrowed surface
    # -------------------------------------------------------------------------

    @property
    def surface(self) -> Surface:
        return self._surface

    @property
    def ctx(self) -> DrawContext:
        return self._ctx

    # -------------------------------------------------------------------------
    # Shared fields
    # -------------------------------------------------------------------------

    @property
    def anchor_point(self) -> Vector:
        return self.settings.anchor_point

    @property
    def position(self) -> UDim:
        return self.settings.position

    @property
    def size(self) -> UDim:
        return self.settings.size

    @property
    def rotation(self) -> float:
        return self.settings.rotation

    @property
    def border_size(self) -> float:
        return self.settings.border_size

    @property
    def z_index(self) -> int:
        return self.settings.z_index

    @z_index.setter
    def z_index(self, value: int):
        self.settings.z_index = int(value)

    # -------------------------------------------------------------------------
    # Behaviour
    # -------------------------------------------------------------------------

    def rotate(self, degrees: float):
        self.settings.rotation += degrees

    def update(self):
        """Called after a viewport resize; re-resolves position and size."""
        self.settings.position.recalculate()
        self.settings.size.recalculate()

    def draw_origin(self) -> Vector:
        """Top-left of the bounding box: position - anchor * size."""
        return vector.sub(
            self.settings.position.absolute,
            vector.mul(self.settings.anchor_point, self.settings.size.absolute),
        )

    def _apply_styles(self):
        ctx = self._ctx
        ctx.fill_style = self.settings.background.to_string()
        ctx.stroke_style = self.settings.border_color.to_string()
        ctx.line_width = self.settings.border_size

    @abstractmethod
    def draw(self):
        """Paint into the surface context."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(z_index={self.settings.z_index}, "
            f"position={self.settings.position!r}, size={self.settings.size!r})"
        )
