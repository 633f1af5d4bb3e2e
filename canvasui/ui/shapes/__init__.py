"""
Built-in Shapes

- Frame: rectangle, rotated about its center
- Ellipse: ellipse or arc with winding direction
"""

from canvasui.ui.shapes.frame import Frame
from canvasui.ui.shapes.ellipse import Ellipse

__all__ = [
    "Frame",
    "Ellipse",
]
