"""
canvasui - moderngl-window Host

Standalone demo using moderngl-window.
Demonstrates:
- Fixed-timestep loop driven by the window's paint callback
- UDim layout re-resolved on window resize
- Keyboard events routed through the signal bridge
"""

from __future__ import annotations
import logging
import math
from typing import Callable, List, Optional

import moderngl_window as mglw

from canvasui.core import Color, UDim, Vector, SignalBridge
from canvasui.core import SIGNAL_RESIZE, SIGNAL_KEY_DOWN, SIGNAL_KEY_UP
from canvasui.input import InputState, key_map_from
from canvasui.render import CanvasRenderer
from canvasui.time import GameLoop
from canvasui.ui import Surface, Frame, Ellipse, GuiObject

logger = logging.getLogger(__name__)


class CanvasApp(mglw.WindowConfig):
    """Main application window."""

    gl_version = (3, 3)
    title = "canvasui - moderngl-window host"
    window_size = (1280, 720)
    resource_dir = "."

    # 1 degree per 60 Hz frame, expressed per 4 ms tick
    spin_degrees_per_tick = 0.24

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        self.ctx.enable(self.ctx.BLEND)
        self.ctx.blend_func = self.ctx.SRC_ALPHA, self.ctx.ONE_MINUS_SRC_ALPHA

        self.renderer = CanvasRenderer(self.ctx)
        self.surface = Surface()

        # Host callbacks
        self._pending_frame: Optional[Callable[[float], object]] = None
        self._key_map = key_map_from(self.wnd.keys)

        # Loop + signals
        self.bridge = SignalBridge()
        self.input_state = InputState()
        self.loop = GameLoop(
            self.surface,
            entities=demo_scene(self.surface),
            input_state=self.input_state,
            request_frame=self._request_frame,
            on_tick=self._spin,
        )
        self.loop.bind_bridge(self.bridge)

        self.bridge.emit(SIGNAL_RESIZE, *self.wnd.buffer_size)
        self.loop.start(0.0)

    def _request_frame(self, callback: Callable[[float], object]):
        self._pending_frame = callback

    def _spin(self, loop: GameLoop, input_state: InputState):
        for entity in loop.entities:
            entity.rotate(self.spin_degrees_per_tick)

    def on_render(self, time: float, frame_time: float):
        """Main render loop."""
        callback, self._pending_frame = self._pending_frame, None
        if callback is not None:
            callback(time * 1000.0)

        # Composite to screen
        fb_w, fb_h = self.wnd.buffer_size
        self.ctx.screen.use()
        self.ctx.viewport = (0, 0, fb_w, fb_h)
        self.ctx.clear(0.08, 0.09, 0.11, 1.0)

        # Surface sits at the window's top-left
        self.renderer.render(
            self.surface.get_context().batch,
            self.surface.width,
            self.surface.height,
            origin=(0, int(fb_h - self.surface.height)),
        )

    # -------------------------------------------------------------------------
    # Window events
    # -------------------------------------------------------------------------

    def on_resize(self, width: int, height: int):
        self.bridge.emit(SIGNAL_RESIZE, *self.wnd.buffer_size)

    def on_key_event(self, key, action, modifiers):
        code = self._key_map.get(key)
        if code is None:
            return

        keys = self.wnd.keys
        if action == keys.ACTION_PRESS:
            self.bridge.emit(SIGNAL_KEY_DOWN, code)
        elif action == keys.ACTION_RELEASE:
            self.bridge.emit(SIGNAL_KEY_UP, code)

    def on_close(self):
        self.loop.stop()
        self.renderer.release()


def demo_scene(surface: Surface) -> List[GuiObject]:
    """Bordered frame with an ellipse on top, both centered on the surface."""
    frame = Frame(
        surface,
        anchor_point=Vector(0.5, 0.5),
        border_size=5,
        border_color=Color.from_rgb(255, 0, 0),
        position=UDim.from_scale(surface, 0.5, 0.5),
        size=UDim.from_scale(surface, 0.5, 0.5),
        z_index=0,
    )
    # Ellipses are centered on their draw origin, so no anchor offset
    ellipse = Ellipse(
        surface,
        anchor_point=Vector(0, 0),
        background=Color.from_rgb(255, 255, 0),
        border_size=5,
        border_color=Color.from_rgb(0, 0, 0),
        position=UDim.from_scale(surface, 0.5, 0.5),
        size=UDim.from_scale(surface, 0.5, 0.5),
        start_angle=0,
        end_angle=math.pi * 2,
        z_index=1,
    )
    return [frame, ellipse]


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    mglw.run_window_config(CanvasApp)
