# canvasui/time/loop.py
"""
GameLoop - Fixed-timestep simulation decoupled from paint cadence.

Two clocks:
- wall-clock paint callbacks (arbitrary cadence, driven by the host)
- simulation ticks of a fixed size (tick_ms)

Each paint callback drains the accumulator in whole ticks and then
renders exactly once. Leftover time carries into the next paint, so
a late frame runs more ticks instead of changing simulation speed.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional
import bisect
import logging
import threading

from ..core.frame import FrameState
from ..core.signal import SignalReceiver, SIGNAL_RESIZE
from ..input.state import InputState
from ..ui.gui_object import GuiObject
from ..ui.surface import Surface

logger = logging.getLogger(__name__)

MS_PER_GAME_TICK = 4

# Host paint scheduler: request_frame(callback) must call
# callback(timestamp_ms) once, on the next display refresh.
FrameRequester = Callable[[Callable[[float], FrameState]], None]
TickHandler = Callable[["GameLoop", InputState], None]


@dataclass
class LoopConfig:
    tick_ms: float = MS_PER_GAME_TICK
    viewport_width_ratio: float = 1.0 / 3.0
    viewport_height_ratio: float = 1.0


class GameLoop(SignalReceiver):
    """Accumulator loop that owns the draw order of its entities."""

    def __init__(
        self,
        surface: Surface,
        entities: Iterable[GuiObject] = (),
        config: Optional[LoopConfig] = None,
        input_state: Optional[InputState] = None,
        request_frame: Optional[FrameRequester] = None,
        on_tick: Optional[TickHandler] = None,
    ):
        self.surface = surface
        self.ctx = surface.get_context()
        self.config = config or LoopConfig()
        self.input_state = input_state or InputState()
        self._request_frame = request_frame
        self._on_tick = on_tick

        # Stable sort: equal z_index keeps insertion order
        self._entities: List[GuiObject] = sorted(entities, key=_z_key)
        self._lock = threading.RLock()

        self.previous_timestamp = 0.0
        self.accumulated_time = 0.0
        self.frame_id = 0
        self.tick_count = 0
        self.running = False

    # -------------------------------------------------------------------------
    # Entities
    # -------------------------------------------------------------------------

    @property
    def entities(self) -> List[GuiObject]:
        """Snapshot of the draw order."""
        with self._lock:
            return list(self._entities)

    def add(self, entity: GuiObject):
        """Insert after every entity with a z_index <= entity.z_index."""
        with self._lock:
            # z_index may have changed since the last sort
            self.sort_entities()
            keys = [e.z_index for e in self._entities]
            index = bisect.bisect_right(keys, entity.z_index)
            self._entities.insert(index, entity)

    def remove(self, entity: GuiObject):
        with self._lock:
            if entity in self._entities:
                self._entities.remove(entity)

    def sort_entities(self):
        """Restore back-to-front order after z_index changes."""
        with self._lock:
            self._entities.sort(key=_z_key)

    # -------------------------------------------------------------------------
    # Signals
    # -------------------------------------------------------------------------

    def bind_bridge(self, bridge):
        super().bind_bridge(bridge)
        self.subscribe(SIGNAL_RESIZE, self.on_resize)
        self.input_state.bind_bridge(bridge)

    # -------------------------------------------------------------------------
    # Paint chain
    # -------------------------------------------------------------------------

    def start(self, timestamp: float):
        """Reset the clocks and request the first paint callback."""
        self.previous_timestamp = timestamp
        self.accumulated_time = 0.0
        self.running = True
        logger.debug(f"GameLoop started at {timestamp:.3f}ms, tick={self.config.tick_ms}ms")
        self._schedule()

    def stop(self):
        self.running = False

    def step(self, timestamp: float) -> FrameState:
        """Paint callback: input, queued ticks, one draw, reschedule."""
        elapsed = timestamp - self.previous_timestamp
        self.previous_timestamp = timestamp
        self.accumulated_time += elapsed

        self.process_input()

        tick = self.config.tick_ms
        ticks = 0
        while self.accumulated_time >= tick:
            self.update()
            self.accumulated_time -= tick
            ticks += 1

        self.draw()

        self.frame_id += 1
        frame = FrameState(
            frame_id=self.frame_id,
            timestamp=timestamp,
            elapsed_ms=elapsed,
            ticks=ticks,
            accumulated_ms=self.accumulated_time,
        )

        self._schedule()
        return frame

    def _schedule(self):
        if self.running and self._request_frame is not None:
            self._request_frame(self.step)

    def process_input(self):
        self.input_state.on_frame_start()

    def update(self):
        """One fixed simulation tick."""
        self.tick_count += 1
        if self._on_tick is not None:
            self._on_tick(self, self.input_state)

    def draw(self):
        """Clear the surface and paint entities back to front."""
        with self._lock:
            self.ctx.clear_rect(0, 0, self.surface.width, self.surface.height)
            for entity in self._entities:
                entity.draw()

    # -------------------------------------------------------------------------
    # Resize
    # -------------------------------------------------------------------------

    def on_resize(self, window_width: float, window_height: float):
        """Resize the surface, re-resolve entity layout and restore z order."""
        width = window_width * self.config.viewport_width_ratio
        height = window_height * self.config.viewport_height_ratio
        with self._lock:
            self.surface.resize(width, height)
            for entity in self._entities:
                entity.update()
            self._entities.sort(key=_z_key)
        logger.debug(f"Resized surface to {width:.0f}x{height:.0f}, {len(self._entities)} entities re-sorted")


def _z_key(entity: GuiObject) -> int:
    return entity.z_index
