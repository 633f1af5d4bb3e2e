import logging

import pytest

from canvasui.core.signal import (
    Signal, SignalBridge, SignalReceiver,
    SIGNAL_RESIZE, SIGNAL_KEY_DOWN, SIGNAL_KEY_UP,
)


def test_emit_reaches_handlers():
    bridge = SignalBridge()
    got = []
    bridge.connect(SIGNAL_RESIZE, lambda w, h: got.append((w, h)))
    bridge.emit(SIGNAL_RESIZE, 640, 480)
    assert got == [(640, 480)]
    assert bridge.is_connected(SIGNAL_RESIZE)
    assert not bridge.is_connected(SIGNAL_KEY_UP)


def test_signal_names_accepted_as_strings():
    bridge = SignalBridge()
    got = []
    conn = bridge.connect("key_down", got.append)
    assert conn.signal is Signal.KEY_DOWN

    bridge.emit(SIGNAL_KEY_DOWN, 65)
    assert got == [65]


def test_unknown_signal_rejected():
    bridge = SignalBridge()
    with pytest.raises(ValueError):
        bridge.connect("resise", lambda w, h: None)
    with pytest.raises(ValueError):
        bridge.emit("keydown", 65)


def test_disconnect():
    bridge = SignalBridge()
    got = []
    conn = bridge.connect(SIGNAL_KEY_UP, got.append)
    conn.disconnect()
    conn.disconnect()
    assert not conn.connected

    bridge.emit(SIGNAL_KEY_UP, 65)
    assert got == []
    assert not bridge.is_connected(SIGNAL_KEY_UP)


def test_disconnect_during_emit_applies_to_next_emit():
    bridge = SignalBridge()
    got = []
    conns = []

    def first(code):
        got.append("first")
        conns[1].disconnect()

    conns.append(bridge.connect(SIGNAL_KEY_DOWN, first))
    conns.append(bridge.connect(SIGNAL_KEY_DOWN, lambda code: got.append("second")))

    bridge.emit(SIGNAL_KEY_DOWN, 1)
    assert got == ["first", "second"]

    bridge.emit(SIGNAL_KEY_DOWN, 1)
    assert got == ["first", "second", "first"]


def test_handler_error_is_logged(caplog):
    bridge = SignalBridge()
    got = []

    def broken(w, h):
        raise RuntimeError("boom")

    bridge.connect(SIGNAL_RESIZE, broken)
    bridge.connect(SIGNAL_RESIZE, lambda w, h: got.append(w))

    with caplog.at_level(logging.ERROR):
        bridge.emit(SIGNAL_RESIZE, 10, 20)

    assert got == [10]
    assert "boom" in caplog.text
    assert "resize" in caplog.text


def test_receiver_must_be_bound():
    with pytest.raises(RuntimeError):
        SignalReceiver().subscribe(SIGNAL_RESIZE, lambda w, h: None)


def test_receiver_unsubscribe_all():
    bridge = SignalBridge()
    got = []

    receiver = SignalReceiver()
    receiver.bind_bridge(bridge)
    receiver.subscribe(SIGNAL_KEY_UP, got.append)
    bridge.emit(SIGNAL_KEY_UP, 1)

    receiver.unsubscribe_all()
    bridge.emit(SIGNAL_KEY_UP, 2)
    assert got == [1]
    assert not bridge.is_connected(SIGNAL_KEY_UP)
