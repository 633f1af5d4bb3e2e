"""
canvasui - 2D scene layout and rendering

Packages:
- core: Vector, Color, UDim value types, frame state, signals
- ui: Surface, DrawContext and the GuiObject shapes (Frame, Ellipse)
- input: Key codes and per-frame keyboard state
- time: Fixed-timestep GameLoop
- render: moderngl backend for recorded draw batches
"""

__version__ = "0.1.0"
