"""
Simulated input for the simulator.

Keyboard and mouse presses are mapped to the single activate button.
"""

import logging
from typing import Callable

from ...hardware.base import InputSource

logger = logging.getLogger(__name__)


class SimulatedButton(InputSource):
    """
    Simulates the jump/start button.

    Press state is controlled by the simulator window (SPACE, ENTER or a
    mouse click). A press fires once; holding the key does not repeat.
    """

    def __init__(self) -> None:
        self._pressed = False
        self._callbacks: list[Callable[[], None]] = []
        self.press_count = 0

    def is_pressed(self) -> bool:
        return self._pressed

    def on_activate(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def _press(self) -> None:
        """Called by simulator when button is pressed."""
        if self._pressed:
            return
        self._pressed = True
        self.press_count += 1
        for callback in list(self._callbacks):
            try:
                callback()
            except Exception:
                logger.exception("Error in activate callback")

    def _release(self) -> None:
        """Called by simulator when button is released."""
        self._pressed = False

    def tap(self) -> None:
        """Press and release in one go (scripted input)."""
        self._press()
        self._release()
