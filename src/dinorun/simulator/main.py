"""
Simulator entry point.

Runs DINO RUN in a desktop pygame window, or headless for a fixed number of
frames with scripted presses.
"""

import argparse
import asyncio
import logging
import random
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from dinorun.config.settings import Settings, get_settings
from dinorun.core.events import EventBus, Event, EventType
from dinorun.core.layout import Layout
from dinorun.core.state import GameMode, GameStateMachine, RoundState
from dinorun.game.driver import GameDriver
from dinorun.game.scenery import CloudField
from dinorun.hardware.base import Renderer, Viewport
from dinorun.simulator.mock_hardware.display import (
    BufferRenderer, FixedViewport, RecordingRenderer,
)
from dinorun.simulator.mock_hardware.input import SimulatedButton
from dinorun.simulator.window import SimulatorWindow, WindowConfig

logger = logging.getLogger(__name__)


def setup_logging(log_file: Optional[str] = None, debug: bool = False) -> None:
    """Configure logging with console and optional file output."""
    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        # Truncate on each run for fresh logs
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logging.info(f"Logging to file: {Path(log_file).resolve()}")


def build_game(
    settings: Settings,
    renderer: Renderer,
    viewport: Viewport,
    button: SimulatedButton,
) -> GameDriver:
    """Wire a state machine and driver from settings."""
    rng = random.Random(settings.game.seed)
    layout = Layout.from_viewport(viewport.get_viewport_size())

    machine = GameStateMachine(layout=layout, tuning=settings.game.to_tuning(), rng=rng)
    clouds = CloudField(layout.width, rng=rng) if settings.game.clouds_enabled else None

    driver = GameDriver(
        machine=machine,
        renderer=renderer,
        viewport=viewport,
        input_source=button,
        clouds=clouds,
    )
    driver.resize()
    return driver


class DinoRunSimulator:
    """Desktop application: window, game and the event wiring between them."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.event_bus = EventBus()
        self.button = SimulatedButton()

        display = settings.display
        self.renderer = BufferRenderer(display.width, display.height)
        self.window = SimulatorWindow(
            renderer=self.renderer,
            button=self.button,
            config=WindowConfig(
                width=display.width,
                height=display.height,
                title=display.title,
                fullscreen=display.fullscreen,
                fps=display.fps,
            ),
            event_bus=self.event_bus,
        )

        self.driver = build_game(settings, self.renderer, self.window, self.button)
        self.driver.machine.add_listener(self._on_mode_changed)

        self._setup_event_handlers()

        logger.info("DinoRunSimulator initialized")

    def _setup_event_handlers(self) -> None:
        self.event_bus.subscribe(EventType.TICK, self._on_tick)
        self.event_bus.subscribe(EventType.RESIZE, self._on_resize)
        self.event_bus.subscribe(EventType.ACTIVATE, self._on_activate)
        self.event_bus.subscribe(EventType.SHUTDOWN, self._on_shutdown)

    def _on_tick(self, event: Event) -> None:
        self.driver.tick()

    def _on_resize(self, event: Event) -> None:
        self.driver.resize()

    def _on_activate(self, event: Event) -> None:
        logger.debug(f"Activate from {event.source} at frame {self.driver.frame}")

    def _on_shutdown(self, event: Event) -> None:
        self.driver.close()

    def _on_mode_changed(self, old: GameMode, new: GameMode, state: RoundState) -> None:
        self.event_bus.emit(Event(
            EventType.MODE_CHANGED,
            data={"mode": new.name, "previous": old.name, "score": state.score},
            source="game",
        ))

    async def run(self) -> None:
        logger.info("Starting DINO RUN...")
        await self.window.run()


def run_headless(
    settings: Settings,
    frames: int,
    activate_every: int = 30,
) -> GameStateMachine:
    """
    Run the game without a window.

    The button is tapped before the first frame and then every
    `activate_every` frames.

    Returns:
        The state machine after the last frame
    """
    button = SimulatedButton()
    viewport = FixedViewport(settings.display.width, settings.display.height)
    renderer = RecordingRenderer()
    driver = build_game(settings, renderer, viewport, button)

    rounds = 0
    for i in range(frames):
        if activate_every > 0 and i % activate_every == 0:
            button.tap()
        before = driver.machine.mode
        mode = driver.tick()
        if before is GameMode.PLAYING and mode is GameMode.GAME_OVER:
            rounds += 1
            logger.info(f"Round {rounds} over with score {driver.machine.state.score}")

    machine = driver.machine
    driver.close()
    logger.info(
        f"Headless run finished after {frames} frames: "
        f"mode {machine.mode.name}, score {machine.state.score}, rounds lost {rounds}"
    )
    return machine


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="DINO RUN - jump over the barrels")
    parser.add_argument("--fps", type=int, help="Frames per second (game speed)")
    parser.add_argument("--width", type=int, help="Window width")
    parser.add_argument("--height", type=int, help="Window height")
    parser.add_argument("--seed", type=int, help="Random seed for barrel respawns")
    parser.add_argument("--clouds", action="store_true", help="Show drifting clouds")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument("--frames", type=int, default=600,
                        help="Frames to run in headless mode")
    parser.add_argument("--activate-every", type=int, default=30,
                        help="Headless mode: press the button every N frames")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def apply_args(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return settings with command line overrides applied."""
    display = settings.display.model_copy(update={
        key: value for key, value in (
            ("fps", args.fps), ("width", args.width), ("height", args.height),
        ) if value is not None
    })
    game_updates = {}
    if args.seed is not None:
        game_updates["seed"] = args.seed
    if args.clouds:
        game_updates["clouds_enabled"] = True
    game = settings.game.model_copy(update=game_updates)

    return settings.model_copy(update={
        "display": display,
        "game": game,
        "debug": settings.debug or args.debug,
    })


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the simulator."""
    load_dotenv()
    args = parse_args(argv)

    try:
        settings = apply_args(get_settings(), args)
        # Validate overrides the same way env values are validated
        settings = Settings.model_validate(settings.model_dump())
    except ValidationError as e:
        setup_logging(None, args.debug)
        logger.error(f"Invalid settings: {e}")
        sys.exit(1)

    setup_logging(None if args.headless else settings.log_file, settings.debug)

    logger.info("=" * 50)
    logger.info("DINO RUN Starting")
    logger.info("=" * 50)
    logger.info("Controls:")
    logger.info("  SPACE/ENTER/CLICK - Start, jump, restart")
    logger.info("  ESC/Q             - Quit")

    try:
        if args.headless:
            run_headless(settings, args.frames, args.activate_every)
        else:
            asyncio.run(DinoRunSimulator(settings).run())
    except KeyboardInterrupt:
        logger.info("Simulator stopped by user")
    except Exception as e:
        logger.exception(f"Simulator error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
