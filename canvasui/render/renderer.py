"""
Canvas Renderer

Renders a DrawBatch with moderngl.

Fills are convex (rects, ellipses, chord-closed arcs) and are drawn as
triangle fans; strokes are expanded into one quad per segment so line
width does not depend on driver line-width support. Commands are drawn
in batch order, flushing at every clear so paint order is preserved.
"""

from __future__ import annotations
from typing import List, Tuple, TYPE_CHECKING
import logging
import numpy as np

from canvasui.ui.draw import DrawClear, DrawFill, DrawStroke

if TYPE_CHECKING:
    import moderngl
    from canvasui.ui.draw import DrawBatch

logger = logging.getLogger(__name__)

FLOATS_PER_VERTEX = 6  # pos(2f) + color(4f)


# =============================================================================
# Tessellation
# =============================================================================

def fill_triangles(points: np.ndarray) -> np.ndarray:
    """Fan-triangulate a convex polygon: (N, 2) -> ((N-2)*3, 2)."""
    n = len(points)
    if n < 3:
        return np.zeros((0, 2), dtype=np.float32)
    idx = np.arange(1, n - 1)
    tris = np.stack([
        np.zeros_like(idx),
        idx,
        idx + 1,
    ], axis=1).reshape(-1)
    return points[tris].astype(np.float32)


def stroke_triangles(points: np.ndarray, width: float, closed: bool = False) -> np.ndarray:
    """Expand a polyline into quads of the given width: 6 vertices per segment."""
    if len(points) < 2 or width <= 0:
        return np.zeros((0, 2), dtype=np.float32)

    if closed:
        points = np.vstack([points, points[:1]])

    p0 = points[:-1]
    p1 = points[1:]
    d = p1 - p0
    length = np.linalg.norm(d, axis=1, keepdims=True)
    keep = length[:, 0] > 0
    if not np.any(keep):
        return np.zeros((0, 2), dtype=np.float32)
    p0, p1, d, length = p0[keep], p1[keep], d[keep], length[keep]

    normal = np.column_stack((-d[:, 1], d[:, 0])) / length * (width / 2.0)
    a = p0 + normal
    b = p1 + normal
    c = p1 - normal
    e = p0 - normal

    quads = np.stack([a, b, c, a, c, e], axis=1).reshape(-1, 2)
    return quads.astype(np.float32)


def _with_color(positions: np.ndarray, color: Tuple[float, float, float, float]) -> np.ndarray:
    out = np.empty((len(positions), FLOATS_PER_VERTEX), dtype=np.float32)
    out[:, :2] = positions
    out[:, 2:] = color
    return out


# =============================================================================
# Renderer
# =============================================================================

class CanvasRenderer:
    """
    Draws DrawBatch commands to the current framebuffer.

    Usage:
        renderer = CanvasRenderer(ctx)

        # Each frame:
        renderer.render(surface.get_context().batch, surface.width, surface.height)
    """

    def __init__(self, ctx: 'moderngl.Context', clear_color=(0.0, 0.0, 0.0, 0.0)):
        self.ctx = ctx
        self.clear_color = clear_color

        self._prog = None
        self._vbo = None
        self._vao = None
        self._capacity = 0

        self._initialized = False

    def _ensure_initialized(self):
        """Create GPU resources on first use."""
        if self._initialized:
            return

        self._prog = self.ctx.program(
            vertex_shader="""
            #version 330
            in vec2 in_pos;
            in vec4 in_color;
            out vec4 v_color;
            uniform vec2 u_screen_size;

            void main() {
                vec2 ndc = (in_pos / u_screen_size) * 2.0 - 1.0;
                ndc.y = -ndc.y;
                gl_Position = vec4(ndc, 0.0, 1.0);
                v_color = in_color;
            }
            """,
            fragment_shader="""
            #version 330
            in vec4 v_color;
            out vec4 frag_color;
            void main() { frag_color = v_color; }
            """
        )

        self._initialized = True

    def _ensure_buffer(self, vertex_count: int):
        """Ensure the VBO can hold vertex_count vertices."""
        if self._capacity >= vertex_count and self._vbo is not None:
            return

        new_capacity = max(vertex_count, self._capacity * 2, 1024)
        byte_size = new_capacity * FLOATS_PER_VERTEX * 4

        if self._vbo:
            self._vbo.release()
        if self._vao:
            self._vao.release()

        self._vbo = self.ctx.buffer(reserve=byte_size, dynamic=True)
        self._capacity = new_capacity
        logger.debug(f"CanvasRenderer vertex buffer grown to {new_capacity} vertices")

        self._vao = self.ctx.vertex_array(
            self._prog,
            [(self._vbo, "2f 4f", "in_pos", "in_color")],
        )

    def render(
        self,
        batch: 'DrawBatch',
        width: float,
        height: float,
        origin: Tuple[int, int] = (0, 0),
    ):
        """
        Render a DrawBatch.

        Args:
            batch: Commands recorded by a DrawContext.
            width: Surface width in pixels.
            height: Surface height in pixels.
            origin: Framebuffer position (GL, bottom-left) of the surface.
        """
        if width <= 0 or height <= 0:
            return

        self._ensure_initialized()

        ox, oy = origin
        self.ctx.viewport = (int(ox), int(oy), int(width), int(height))
        self._prog["u_screen_size"].value = (float(width), float(height))

        pending: List[np.ndarray] = []
        for command in batch.commands:
            if isinstance(command, DrawClear):
                self._flush(pending)
                pending = []
                self._clear(command, width, height, ox, oy)
            elif isinstance(command, DrawFill):
                pending.append(_with_color(fill_triangles(command.points), command.color))
            elif isinstance(command, DrawStroke):
                tris = stroke_triangles(command.points, command.width, command.closed)
                pending.append(_with_color(tris, command.color))

        self._flush(pending)

    def _flush(self, chunks: List[np.ndarray]):
        chunks = [c for c in chunks if len(c)]
        if not chunks:
            return

        vertices = np.concatenate(chunks)
        self._ensure_buffer(len(vertices))
        self._vbo.write(vertices.tobytes())
        self._vao.render(mode=self.ctx.TRIANGLES, vertices=len(vertices))

    def _clear(self, command: DrawClear, width: float, height: float, ox: int, oy: int):
        # Canvas is y-down, GL scissor is y-up
        x0 = max(0.0, command.x)
        y0 = max(0.0, command.y)
        x1 = min(float(width), command.x + command.w)
        y1 = min(float(height), command.y + command.h)
        if x1 <= x0 or y1 <= y0:
            return

        self.ctx.scissor = (
            int(ox + x0),
            int(oy + (height - y1)),
            int(x1 - x0),
            int(y1 - y0),
        )
        self.ctx.clear(*self.clear_color)
        self.ctx.scissor = None

    def release(self):
        """Release GPU resources."""
        if self._vbo:
            self._vbo.release()
        if self._vao:
            self._vao.release()
        if self._prog:
            self._prog.release()
