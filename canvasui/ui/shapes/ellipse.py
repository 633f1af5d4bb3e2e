"""
Ellipse Shape

Ellipse or elliptical arc inscribed in the shape's size, with the
arc's center at the draw origin.
"""

from __future__ import annotations
import math

from canvasui.ui.gui_object import GuiObject


class Ellipse(GuiObject):
    """
    Filled ellipse/arc with optional border.

    Extra arguments:
        start_angle: arc start in radians (default 0)
        end_angle: arc end in radians (default 2*pi, full ellipse)
        anti_clockwise: winding direction of the arc
    """

    def __init__(
        self,
        surface,
        start_angle: float = 0.0,
        end_angle: float = 2 * math.pi,
        anti_clockwise: bool = False,
        **kwargs,
    ):
        super().__init__(surface, **kwargs)
        self.start_angle = start_angle
        self.end_angle = end_angle
        self.anti_clockwise = anti_clockwise

    def draw(self):
        ctx = self.ctx
        ctx.save()

        origin = self.draw_origin()
        size = self.settings.size.absolute

        self._apply_styles()
        ctx.begin_path()
        ctx.ellipse(
            origin.x, origin.y,
            max(0.0, 0.5 * size.x), max(0.0, 0.5 * size.y),
            math.radians(self.settings.rotation),
            self.start_angle, self.end_angle,
            self.anti_clockwise,
        )
        ctx.fill()
        if self.settings.border_size != 0:
            ctx.stroke()

        ctx.restore()
