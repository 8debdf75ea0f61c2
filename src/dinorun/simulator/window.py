"""
Main simulator window using pygame.

Hosts the game on a desktop: owns the display surface, turns keyboard and
mouse input into button presses and emits one TICK per display refresh.
"""

import pygame
import asyncio
import logging
from dataclasses import dataclass

from ..core.layout import Layout
from ..core.events import EventBus, EventType, Event
from ..hardware.base import Viewport
from .mock_hardware.display import BufferRenderer
from .mock_hardware.input import SimulatedButton

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Simulator window configuration."""
    width: int = 1280
    height: int = 720
    title: str = "DINO RUN"
    fullscreen: bool = False
    fps: int = 60

    # Score line, "42px Arial"
    font_name: str = "Arial"
    font_size: int = 42
    text_color: tuple[int, int, int] = (255, 255, 255)


class SimulatorWindow(Viewport):
    """
    Desktop window for the game.

    Keyboard Mapping:
        SPACE / ENTER / mouse click: Activate (start, jump, restart)
        ESC / Q: Exit simulator
    """

    def __init__(
        self,
        renderer: BufferRenderer,
        button: SimulatedButton,
        config: WindowConfig | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config or WindowConfig()
        self.event_bus = event_bus or EventBus()
        self.renderer = renderer
        self.button = button

        self._size = (self.config.width, self.config.height)
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._running = False

        self.event_bus.subscribe(EventType.MODE_CHANGED, self._on_mode_changed)

        logger.info("SimulatorWindow created")

    def get_viewport_size(self) -> tuple[int, int]:
        return self._size

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        self._screen = pygame.display.set_mode(self._size, self._display_flags())
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont(self.config.font_name, self.config.font_size)

        logger.info(f"Pygame initialized: {self._size[0]}x{self._size[1]}")

    def _display_flags(self) -> int:
        if self.config.fullscreen:
            return pygame.DOUBLEBUF | pygame.FULLSCREEN
        return pygame.DOUBLEBUF | pygame.RESIZABLE

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self._running = False
                elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                    self._activate("keyboard")

            elif event.type == pygame.KEYUP:
                if event.key in (pygame.K_SPACE, pygame.K_RETURN):
                    self.button._release()

            elif event.type == pygame.MOUSEBUTTONDOWN:
                self._activate("mouse")

            elif event.type == pygame.MOUSEBUTTONUP:
                self.button._release()

            elif event.type == pygame.VIDEORESIZE:
                self._resize(event.w, event.h)

    def _activate(self, source: str) -> None:
        self.button._press()
        self.event_bus.emit(Event(EventType.ACTIVATE, source=source))

    def _resize(self, width: int, height: int) -> None:
        self._size = (width, height)
        self._screen = pygame.display.set_mode(self._size, self._display_flags())
        self.event_bus.emit(Event(
            EventType.RESIZE, data={"width": width, "height": height}, source="window"
        ))

    def _on_mode_changed(self, event: Event) -> None:
        mode = event.data.get("mode", "")
        pygame.display.set_caption(f"{self.config.title} - {mode}")

    def _render(self) -> None:
        """Blit the frame buffer and the score line."""
        if not self._screen:
            return

        surface = pygame.surfarray.make_surface(self.renderer.buffer.swapaxes(0, 1))
        self._screen.blit(surface, (0, 0))

        if self._font and self.renderer.score_text:
            text_surface = self._font.render(
                self.renderer.score_text, True, self.config.text_color
            )
            self._screen.blit(text_surface, self._score_text_pos())

        pygame.display.flip()

    def _score_text_pos(self) -> tuple[int, int]:
        x, y = Layout.from_viewport(self._size).score_text_pos
        return (int(x), int(y))

    async def run(self) -> None:
        """Main simulator loop."""
        self._init_pygame()
        self._running = True

        self.event_bus.emit(Event(
            EventType.RESIZE, data={"width": self._size[0], "height": self._size[1]},
            source="window",
        ))
        logger.info("Simulator started")

        while self._running:
            self._handle_events()

            # One game tick per refresh
            if self._clock:
                self.event_bus.emit(Event(EventType.TICK, source="window"))

            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            # Yield to other tasks
            await asyncio.sleep(0)

        self.event_bus.emit(Event(EventType.SHUTDOWN, source="window"))
        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Simulator stopped")

    def stop(self) -> None:
        """Stop the simulator."""
        self._running = False
