"""
UI System

Proportional + pixel layout of drawable shapes on a resizable surface.

Components:
- surface: Mutable-size bitmap target owning one DrawContext
- draw: Canvas-style context recording a retained DrawBatch
- gui_object: Shape interface and shared GuiSettings
- shapes/: Concrete shapes (Frame, Ellipse)

Example usage:

    from canvasui.core import Color, UDim, Vector
    from canvasui.ui import Surface, Frame

    surface = Surface(640, 480)
    frame = Frame(
        surface,
        anchor_point=Vector(0.5, 0.5),
        position=UDim.from_scale(surface, 0.5, 0.5),
        size=UDim.from_scale(surface, 0.5, 0.5),
        border_size=5,
        border_color=Color.from_rgb(255, 0, 0),
    )
    frame.draw()
    batch = surface.get_context().batch
"""

from canvasui.ui.draw import (
    DrawContext, DrawBatch, DrawConfig,
    DrawClear, DrawFill, DrawStroke,
)
from canvasui.ui.surface import Surface
from canvasui.ui.gui_object import GuiObject, GuiSettings
from canvasui.ui.shapes import Frame, Ellipse

__all__ = [
    # Draw
    "DrawContext", "DrawBatch", "DrawConfig",
    "DrawClear", "DrawFill", "DrawStroke",
    # Surface
    "Surface",
    # Shapes
    "GuiObject", "GuiSettings",
    "Frame", "Ellipse",
]
