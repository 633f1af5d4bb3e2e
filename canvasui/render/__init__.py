"""
moderngl backend for DrawBatch output.
"""

from canvasui.render.renderer import CanvasRenderer, fill_triangles, stroke_triangles

__all__ = ["CanvasRenderer", "fill_triangles", "stroke_triangles"]
