"""
Frame Shape

Axis-aligned rectangle, rotated about its own center.
"""

from __future__ import annotations
import math

from canvasui.core import vector
from canvasui.ui.gui_object import GuiObject


class Frame(GuiObject):
    """
    Filled rectangle with optional border.

    Accepts the shared GuiObject keyword arguments (anchor_point,
    background, border_color, border_size, position, rotation, size,
    z_index).
    """

    def draw(self):
        ctx = self.ctx
        ctx.save()

        origin = self.draw_origin()
        size = self.settings.size.absolute

        self._apply_styles()
        if self.settings.rotation != 0:
            center = vector.add(origin, vector.mul(size, 0.5))
            ctx.translate(center.x, center.y)
            ctx.rotate(math.radians(self.settings.rotation))
            ctx.translate(-center.x, -center.y)

        ctx.fill_rect(origin.x, origin.y, size.x, size.y)
        if self.settings.border_size != 0:
            ctx.begin_path()
            ctx.rect(origin.x, origin.y, size.x, size.y)
            ctx.stroke()

        ctx.restore()
