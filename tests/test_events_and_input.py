import logging

from dinorun.core.events import Event, EventBus, EventType
from dinorun.simulator.mock_hardware.input import SimulatedButton


def test_emit_reaches_subscribers():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.ACTIVATE, received.append)

    event = Event(EventType.ACTIVATE, source="keyboard")
    bus.emit(event)
    bus.emit(Event(EventType.RESIZE))

    assert received == [event]


def test_unsubscribe():
    bus = EventBus()
    received = []
    unsubscribe = bus.subscribe(EventType.TICK, received.append)

    unsubscribe()
    bus.emit(Event(EventType.TICK))

    assert received == []


def test_failing_handler_does_not_stop_others(caplog):
    bus = EventBus()
    received = []

    def broken(event):
        raise ValueError("bad handler")

    bus.subscribe(EventType.RESIZE, broken)
    bus.subscribe(EventType.RESIZE, received.append)

    with caplog.at_level(logging.ERROR):
        bus.emit(Event(EventType.RESIZE))

    assert len(received) == 1
    assert "bad handler" in caplog.text


def test_history_skips_ticks_and_is_bounded():
    bus = EventBus(history_limit=3)
    for _ in range(5):
        bus.emit(Event(EventType.TICK))
    for i in range(5):
        bus.emit(Event(EventType.MODE_CHANGED, data={"i": i}))
    bus.emit(Event(EventType.ACTIVATE))

    history = bus.get_history()
    assert [e.type for e in history] == [
        EventType.MODE_CHANGED, EventType.MODE_CHANGED, EventType.ACTIVATE,
    ]
    assert [e.data["i"] for e in bus.get_history(EventType.MODE_CHANGED)] == [3, 4]


def test_button_fires_once_while_held():
    button = SimulatedButton()
    presses = []
    button.on_activate(lambda: presses.append(1))

    button._press()
    button._press()
    assert button.is_pressed()
    button._release()
    button._press()

    assert len(presses) == 2
    assert button.press_count == 2


def test_button_tap_releases():
    button = SimulatedButton()
    presses = []
    button.on_activate(lambda: presses.append(1))

    button.tap()
    button.tap()

    assert not button.is_pressed()
    assert len(presses) == 2


def test_button_callback_error_is_logged(caplog):
    button = SimulatedButton()
    presses = []

    def broken():
        raise RuntimeError("callback failed")

    button.on_activate(broken)
    button.on_activate(lambda: presses.append(1))

    with caplog.at_level(logging.ERROR):
        button.tap()

    assert presses == [1]
    assert "Error in activate callback" in caplog.text


def test_button_unsubscribe():
    button = SimulatedButton()
    presses = []
    unsubscribe = button.on_activate(lambda: presses.append(1))

    unsubscribe()
    button.tap()

    assert presses == []
