"""
Game state machine for DINO RUN.

States:
    READY: Waiting for the player to press start (static scene)
    PLAYING: Barrel rolls toward the dinosaur, player jumps over it
    GAME_OVER: Dinosaur was hit, final score shown until the next press

Transitions happen only on an activate signal or on a collision, never on
time alone. All constants are per tick, so the game runs faster on a display
with a higher refresh rate.
"""

from enum import Enum, auto
from dataclasses import dataclass, replace
from typing import Callable
import logging
import random

from dinorun.core.layout import Layout

logger = logging.getLogger(__name__)


class GameMode(Enum):
    """Game modes."""
    READY = auto()
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class Tuning:
    """Per-tick game constants."""
    base_speed: float = 8.0
    jump_impulse: float = -12.0      # Negative is upward
    ascent_damping: float = 1.1      # Velocity divisor while rising
    apex_threshold: float = -2.0     # Rising velocity above this flips to falling
    apex_velocity: float = 2.0       # Falling velocity right after the apex
    descent_gain: float = 1.2        # Velocity multiplier while falling
    respawn_spread: float = 200.0    # Random extra distance past the right edge
    collision_min: float = 220.0     # Open band (min, max) of barrel x that hits
    collision_max: float = 380.0


@dataclass
class RoundState:
    """All mutable state of one round."""
    score: int = 0
    obstacle_x: float = 0.0
    vertical_velocity: float = 0.0
    character_y: float = 0.0
    is_jumping: bool = False
    activate_pending: bool = False

    @classmethod
    def ready_defaults(cls, layout: Layout) -> "RoundState":
        return cls(obstacle_x=layout.obstacle_start_x, character_y=layout.ground_y)


ModeListener = Callable[[GameMode, GameMode, RoundState], None]


class GameStateMachine:
    """
    Owns the round state and advances it one tick at a time.

    The machine never schedules anything itself: a driver calls update()
    once per frame and activate() whenever the player presses the button.
    Presses between two updates collapse into one.
    """

    def __init__(
        self,
        layout: Layout | None = None,
        tuning: Tuning | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._layout = layout or Layout()
        self._tuning = tuning or Tuning()
        self._rng = rng or random.Random()
        self._mode = GameMode.READY
        self._state = RoundState.ready_defaults(self._layout)
        self._listeners: list[ModeListener] = []
        self._last_tick = 0
        logger.info(f"GameStateMachine initialized with mode: {self._mode.name}")

    @property
    def mode(self) -> GameMode:
        """Get current mode."""
        return self._mode

    @property
    def state(self) -> RoundState:
        """Get the live round state."""
        return self._state

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def tuning(self) -> Tuning:
        return self._tuning

    def snapshot(self) -> RoundState:
        """Get a detached copy of the round state."""
        return replace(self._state)

    def add_listener(self, callback: ModeListener) -> None:
        """Add a mode change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: ModeListener) -> None:
        """Remove a mode change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    # Input

    def activate(self) -> None:
        """Record a player press, consumed by the next update."""
        self._state.activate_pending = True

    # Per-tick update

    def update(self, tick: int = 0) -> GameMode:
        """
        Advance the game by one frame.

        Args:
            tick: Frame index from the driver, used for logging only

        Returns:
            Mode after the update
        """
        self._last_tick = tick

        activated = self._state.activate_pending
        self._state.activate_pending = False
        if activated:
            self._on_activate()

        if self._mode is GameMode.READY:
            self._update_ready()
        elif self._mode is GameMode.PLAYING:
            self._update_playing()
        elif self._mode is GameMode.GAME_OVER:
            pass  # Frozen until the next press

        return self._mode

    def _on_activate(self) -> None:
        # Playing is checked first so the press that starts a round
        # does not also start a jump.
        if self._mode is GameMode.PLAYING:
            if not self._state.is_jumping:
                self._start_jump()
        elif self._mode is GameMode.READY:
            self._transition(GameMode.PLAYING)
        elif self._mode is GameMode.GAME_OVER:
            self.reset()

    def _update_ready(self) -> None:
        state = self._state
        state.score = 0
        state.obstacle_x = self._layout.obstacle_start_x
        state.is_jumping = False
        state.vertical_velocity = 0.0
        state.character_y = self._layout.ground_y

    def _update_playing(self) -> None:
        self._advance_obstacle()
        if self._state.is_jumping:
            self._integrate_jump()
        if self.is_colliding():
            self._state.obstacle_x = self._tuning.collision_max
            logger.info(
                f"Round over at tick {self._last_tick}, score {self._state.score}"
            )
            self._transition(GameMode.GAME_OVER)

    def _advance_obstacle(self) -> None:
        state = self._state
        # Barrel speeds up with every point
        state.obstacle_x -= self._tuning.base_speed + state.score
        if state.obstacle_x < 0:
            offset = self._rng.random() * self._tuning.respawn_spread
            state.obstacle_x = self._layout.width + offset
            state.score += 1
            logger.debug(f"Barrel passed, score {state.score}")

    def _start_jump(self) -> None:
        self._state.is_jumping = True
        self._state.vertical_velocity = self._tuning.jump_impulse
        logger.debug(f"Jump started at tick {self._last_tick}")

    def _integrate_jump(self) -> None:
        state = self._state
        tuning = self._tuning

        state.character_y += state.vertical_velocity
        if state.vertical_velocity < 0:
            state.vertical_velocity /= tuning.ascent_damping
            if state.vertical_velocity > tuning.apex_threshold:
                state.vertical_velocity = tuning.apex_velocity
        else:
            state.vertical_velocity *= tuning.descent_gain
            if state.character_y >= self._layout.ground_y:
                state.character_y = self._layout.ground_y
                state.is_jumping = False

    def is_colliding(self) -> bool:
        """
        Check whether the barrel hits the dinosaur.

        Only the barrel's x is tested against a fixed band and only while the
        dinosaur is on the ground. A fast barrel can step over the band
        between two ticks without being seen inside it.
        """
        x = self._state.obstacle_x
        return (
            self._tuning.collision_min < x < self._tuning.collision_max
            and not self._state.is_jumping
        )

    # Lifecycle

    def reset(self) -> None:
        """Reset the round to its Ready defaults."""
        self._state = RoundState.ready_defaults(self._layout)
        if self._mode is not GameMode.READY:
            self._transition(GameMode.READY)
        logger.info("Round reset to READY")

    def resize(self, layout: Layout) -> None:
        """Adopt a new layout after the viewport changed."""
        self._layout = layout
        if not self._state.is_jumping:
            self._state.character_y = layout.ground_y
        if self._mode is GameMode.READY:
            self._state.obstacle_x = layout.obstacle_start_x
        logger.info(f"Layout changed: {layout.width:.0f}x{layout.height:.0f}")

    def _transition(self, to_mode: GameMode) -> None:
        old_mode = self._mode
        self._mode = to_mode

        logger.info(f"Mode transition: {old_mode.name} -> {to_mode.name}")

        for listener in self._listeners:
            try:
                listener(old_mode, to_mode, self._state)
            except Exception as e:
                logger.error(f"Error in mode listener: {e}")
