# canvasui/core/signal.py
"""
Host event routing.

The host window emits a small fixed set of signals; the GameLoop and
InputState subscribe to them. Unknown signal names are rejected at
connect/emit time so a typo cannot silently drop events.

    bridge = SignalBridge()
    loop.bind_bridge(bridge)
    bridge.emit(SIGNAL_RESIZE, 1280, 720)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class Signal(str, Enum):
    RESIZE = 'resize'        # (window_width, window_height)
    KEY_DOWN = 'key_down'    # (key_code,)
    KEY_UP = 'key_up'        # (key_code,)


SIGNAL_RESIZE = Signal.RESIZE
SIGNAL_KEY_DOWN = Signal.KEY_DOWN
SIGNAL_KEY_UP = Signal.KEY_UP


@dataclass(eq=False)
class Connection:
    """One handler subscribed to one signal. Disconnecting is idempotent."""
    signal: Signal
    handler: Callable
    bridge: Optional[SignalBridge] = field(default=None, repr=False)

    @property
    def connected(self) -> bool:
        return self.bridge is not None

    def disconnect(self):
        if self.bridge is not None:
            self.bridge._drop(self)
            self.bridge = None


class SignalBridge:
    """Routes host signals to subscribed handlers, in subscription order."""

    def __init__(self):
        self._handlers: Dict[Signal, List[Connection]] = {s: [] for s in Signal}

    def connect(self, signal: str, handler: Callable) -> Connection:
        conn = Connection(Signal(signal), handler, self)
        self._handlers[conn.signal].append(conn)
        return conn

    def emit(self, signal: str, *args):
        """
        Call every handler connected to signal.

        Handlers see a snapshot of the subscriber list: one that
        disconnects another mid-emit does not skip it. A failing handler
        is logged and the rest still run.
        """
        signal = Signal(signal)
        for conn in list(self._handlers[signal]):
            try:
                conn.handler(*args)
            except Exception as e:
                logger.error(f"Handler for '{signal.value}' failed: {e}", exc_info=True)

    def is_connected(self, signal: str) -> bool:
        return bool(self._handlers[Signal(signal)])

    def _drop(self, conn: Connection):
        handlers = self._handlers[conn.signal]
        if conn in handlers:
            handlers.remove(conn)


class SignalReceiver:
    """Mixin for objects that subscribe to a bridge and may later detach."""

    _bridge: Optional[SignalBridge] = None
    _connections: Optional[List[Connection]] = None

    def bind_bridge(self, bridge: SignalBridge):
        self._bridge = bridge
        self._connections = []

    def subscribe(self, signal: str, handler: Callable):
        if self._bridge is None:
            raise RuntimeError(f"{type(self).__name__} is not bound to a SignalBridge")
        self._connections.append(self._bridge.connect(signal, handler))

    def unsubscribe_all(self):
        for conn in self._connections or ():
            conn.disconnect()
        if self._connections:
            self._connections.clear()
