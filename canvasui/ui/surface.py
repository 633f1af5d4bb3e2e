"""
Surface

Mutable-size bitmap target. Owns the one DrawContext that shapes borrow.
"""

from __future__ import annotations
from typing import Optional, Tuple

from canvasui.ui.draw import DrawContext, DrawConfig


class Surface:
    """Drawing surface whose pixel size can change at runtime."""

    def __init__(self, width: float = 300, height: float = 150, config: Optional[DrawConfig] = None):
        self.width = width
        self.height = height
        self._config = config
        self._context: Optional[DrawContext] = None

    def resize(self, width: float, height: float):
        self.width = width
        self.height = height

    @property
    def size(self) -> Tuple[float, float]:
        return (self.width, self.height)

    def get_context(self) -> DrawContext:
        """The surface's 2D context (created on first use, then shared)."""
        if self._context is None:
            self._context = DrawContext(self, self._config)
        return self._context

    def __repr__(self) -> str:
        return f"Surface({self.width}x{self.height})"
