"""
Draw Context

Canvas-style 2D drawing context that records into a retained DrawBatch.

Design:
- Same call surface as a browser 2D context (fill_style, save/restore,
  translate/rotate, begin_path/rect/ellipse, fill/stroke, fill_rect,
  clear_rect) so shapes draw against it like a bitmap canvas
- Paths are flattened to device-space points through the current
  affine transform at the time they are added
- Commands are kept in paint order; a clear covering the whole surface
  drops everything painted before it
- Renderers consume the batch (see canvasui.render.renderer)

Primitives:
- Filled convex polygons (rects, ellipses, chord-closed arcs)
- Polyline strokes with width
- Rect clears
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union, TYPE_CHECKING
import math
import numpy as np

from canvasui.core.color import parse_rgba

if TYPE_CHECKING:
    from canvasui.ui.surface import Surface

RGBA = Tuple[float, float, float, float]

DEFAULT_STYLE = "rgba(0, 0, 0, 1)"


# =============================================================================
# Config
# =============================================================================

@dataclass
class DrawConfig:
    ellipse_segments: int = 64  # Segments for a full turn
    min_arc_segments: int = 2


# =============================================================================
# Draw Commands (internal representation)
# =============================================================================

@dataclass(frozen=True)
class DrawClear:
    """Reset a device-space rectangle to transparent."""
    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class DrawFill:
    """Filled convex polygon, device-space points (N, 2)."""
    points: np.ndarray
    color: RGBA
    style: str


@dataclass(frozen=True)
class DrawStroke:
    """Stroked polyline, device-space points (N, 2)."""
    points: np.ndarray
    color: RGBA
    style: str
    width: float
    closed: bool = False


DrawCommand = Union[DrawClear, DrawFill, DrawStroke]


# =============================================================================
# Draw Batch
# =============================================================================

@dataclass
class DrawBatch:
    """Ordered paint commands; index order is back-to-front."""
    commands: List[DrawCommand] = field(default_factory=list)

    def add(self, command: DrawCommand):
        self.commands.append(command)

    def clear(self):
        self.commands.clear()

    @property
    def fills(self) -> List[DrawFill]:
        return [c for c in self.commands if isinstance(c, DrawFill)]

    @property
    def strokes(self) -> List[DrawStroke]:
        return [c for c in self.commands if isinstance(c, DrawStroke)]

    @property
    def clears(self) -> List[DrawClear]:
        return [c for c in self.commands if isinstance(c, DrawClear)]

    def __len__(self) -> int:
        return len(self.commands)


# =============================================================================
# Geometry helpers
# =============================================================================

def _translation(tx: float, ty: float) -> np.ndarray:
    m = np.identity(3)
    m[0, 2] = tx
    m[1, 2] = ty
    return m


def _rotation(radians: float) -> np.ndarray:
    c, s = math.cos(radians), math.sin(radians)
    return np.array([
        [c, -s, 0.0],
        [s, c, 0.0],
        [0.0, 0.0, 1.0],
    ])


def arc_sweep(start: float, end: float, anticlockwise: bool = False) -> float:
    """
    Signed sweep of a canvas arc, in radians.

    Clockwise (increasing angle in y-down space) unless anticlockwise.
    A requested span of a full turn or more draws the full ellipse.
    """
    tau = math.tau
    if not anticlockwise:
        if end - start >= tau:
            return tau
        return (end - start) % tau
    if start - end >= tau:
        return -tau
    return -((start - end) % tau)


def ellipse_points(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    rotation: float,
    start: float,
    end: float,
    anticlockwise: bool = False,
    segments: int = 64,
    min_segments: int = 2,
) -> np.ndarray:
    """Flatten an elliptical arc to (N, 2) points in local space."""
    sweep = arc_sweep(start, end, anticlockwise)
    n = max(min_segments, int(math.ceil(segments * abs(sweep) / math.tau)))
    if abs(sweep) >= math.tau:
        # Full turn: drop the duplicated closing point
        t = start + sweep * np.arange(n) / n
    else:
        t = start + sweep * np.linspace(0.0, 1.0, n + 1)

    px = rx * np.cos(t)
    py = ry * np.sin(t)
    c, s = math.cos(rotation), math.sin(rotation)
    return np.column_stack((cx + px * c - py * s, cy + px * s + py * c))


# =============================================================================
# Draw Context
# =============================================================================

@dataclass
class _SubPath:
    points: np.ndarray
    closed: bool


class DrawContext:
    """
    Stateful 2D context bound to one Surface.

    Shapes borrow it from the surface; it is shared, not owned.
    """

    def __init__(self, surface: Surface, config: Optional[DrawConfig] = None):
        self.surface = surface
        self.config = config or DrawConfig()

        self.batch = DrawBatch()

        # Paint state (saved/restored together, like a canvas)
        self._matrix = np.identity(3)
        self._fill_style = DEFAULT_STYLE
        self._fill_rgba = parse_rgba(DEFAULT_STYLE)
        self._stroke_style = DEFAULT_STYLE
        self._stroke_rgba = parse_rgba(DEFAULT_STYLE)
        self._line_width = 1.0
        self._state_stack: List[tuple] = []

        # Current path
        self._path: List[_SubPath] = []

    # -------------------------------------------------------------------------
    # Style State
    # -------------------------------------------------------------------------

    @property
    def fill_style(self) -> str:
        return self._fill_style

    @fill_style.setter
    def fill_style(self, style):
        style = str(style)
        self._fill_rgba = parse_rgba(style)
        self._fill_style = style

    @property
    def stroke_style(self) -> str:
        return self._stroke_style

    @stroke_style.setter
    def stroke_style(self, style):
        style = str(style)
        self._stroke_rgba = parse_rgba(style)
        self._stroke_style = style

    @property
    def line_width(self) -> float:
        return self._line_width

    @line_width.setter
    def line_width(self, width: float):
        # Canvas ignores non-positive widths
        if width > 0:
            self._line_width = float(width)

    # -------------------------------------------------------------------------
    # Transform Stack
    # -------------------------------------------------------------------------

    def save(self):
        self._state_stack.append((
            self._matrix.copy(),
            self._fill_style, self._fill_rgba,
            self._stroke_style, self._stroke_rgba,
            self._line_width,
        ))

    def restore(self):
        if not self._state_stack:
            return
        (
            self._matrix,
            self._fill_style, self._fill_rgba,
            self._stroke_style, self._stroke_rgba,
            self._line_width,
        ) = self._state_stack.pop()

    def translate(self, x: float, y: float):
        self._matrix = self._matrix @ _translation(x, y)

    def rotate(self, radians: float):
        self._matrix = self._matrix @ _rotation(radians)

    def reset_transform(self):
        self._matrix = np.identity(3)

    @property
    def transform(self) -> np.ndarray:
        return self._matrix.copy()

    def _apply(self, points: np.ndarray) -> np.ndarray:
        """Map local (N, 2) points to device space."""
        m = self._matrix
        return points @ m[:2, :2].T + m[:2, 2]

    def _is_identity(self) -> bool:
        return np.array_equal(self._matrix, np.identity(3))

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    def begin_path(self):
        self._path = []

    def rect(self, x: float, y: float, w: float, h: float):
        self._path.append(_SubPath(self._apply(_rect_points(x, y, w, h)), closed=True))

    def ellipse(
        self,
        x: float,
        y: float,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ):
        """Add an elliptical arc centered at (x, y)."""
        points = ellipse_points(
            x, y,
            max(0.0, radius_x), max(0.0, radius_y),
            rotation, start_angle, end_angle, anticlockwise,
            segments=self.config.ellipse_segments,
            min_segments=self.config.min_arc_segments,
        )
        full = abs(arc_sweep(start_angle, end_angle, anticlockwise)) >= math.tau
        self._path.append(_SubPath(self._apply(points), closed=full))

    # -------------------------------------------------------------------------
    # Painting
    # -------------------------------------------------------------------------

    def fill(self):
        for sub in self._path:
            if len(sub.points) >= 3:
                self.batch.add(DrawFill(sub.points, self._fill_rgba, self._fill_style))

    def stroke(self):
        for sub in self._path:
            if len(sub.points) >= 2:
                self.batch.add(DrawStroke(
                    points=sub.points,
                    color=self._stroke_rgba,
                    style=self._stroke_style,
                    width=self._line_width,
                    closed=sub.closed,
                ))

    def fill_rect(self, x: float, y: float, w: float, h: float):
        """Fill a rectangle without touching the current path."""
        points = self._apply(_rect_points(x, y, w, h))
        self.batch.add(DrawFill(points, self._fill_rgba, self._fill_style))

    def clear_rect(self, x: float, y: float, w: float, h: float):
        """Clear a rectangle; clearing the whole surface drops older commands."""
        points = self._apply(_rect_points(x, y, w, h))
        x0, y0 = points.min(axis=0)
        x1, y1 = points.max(axis=0)

        if self._covers_surface(x0, y0, x1, y1):
            self.batch.clear()

        self.batch.add(DrawClear(float(x0), float(y0), float(x1 - x0), float(y1 - y0)))

    def _covers_surface(self, x0: float, y0: float, x1: float, y1: float) -> bool:
        if not self._is_identity():
            return False
        return (
            x0 <= 0 and y0 <= 0 and
            x1 >= self.surface.width and y1 >= self.surface.height
        )


def _rect_points(x: float, y: float, w: float, h: float) -> np.ndarray:
    return np.array([
        [x, y],
        [x + w, y],
        [x + w, y + h],
        [x, y + h],
    ], dtype=np.float64)
