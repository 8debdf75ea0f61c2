"""
Frame driver: runs one game update per display refresh and presents it.

The driver holds no game state. It forwards presses into the state machine,
updates it exactly once per tick and pushes the resulting scene to the
renderer.
"""

from typing import Optional
import logging

from dinorun.core.layout import Layout
from dinorun.core.state import GameMode, GameStateMachine
from dinorun.game.scenery import CloudField
from dinorun.game.visual import VisualState, build_visual_state
from dinorun.hardware.base import CLOUDS, Entity, InputSource, Renderer, Viewport

logger = logging.getLogger(__name__)


class GameDriver:
    """Sequences state machine updates and rendering, one tick at a time."""

    def __init__(
        self,
        machine: GameStateMachine,
        renderer: Renderer,
        viewport: Viewport,
        input_source: Optional[InputSource] = None,
        clouds: Optional[CloudField] = None,
    ) -> None:
        self.machine = machine
        self.renderer = renderer
        self.viewport = viewport
        self.clouds = clouds

        self._frame = 0
        self._activate_pending = False
        self._unsubscribe = None
        if input_source is not None:
            self._unsubscribe = input_source.on_activate(self.request_activate)

        logger.debug("GameDriver created")

    @property
    def frame(self) -> int:
        """Number of ticks run so far."""
        return self._frame

    def request_activate(self) -> None:
        """Queue a press for the next tick. Repeated presses collapse."""
        self._activate_pending = True

    def resize(self) -> None:
        """Re-read the viewport size and re-place static scenery."""
        width, height = self.viewport.get_viewport_size()
        layout = Layout.from_viewport((width, height))

        self.machine.resize(layout)
        self.renderer.resize(width, height)
        if self.clouds:
            self.clouds.resize(layout.width)

        sky_x, sky_y, _, _ = layout.sky_rect
        grass_x, grass_y, _, _ = layout.grass_rect
        self.renderer.set_position(Entity.SKY, sky_x, sky_y)
        self.renderer.set_position(Entity.GRASS, grass_x, grass_y)
        self.renderer.set_pose(Entity.SKY, True)
        self.renderer.set_pose(Entity.GRASS, True)

        for entity in CLOUDS:
            self.renderer.set_pose(entity, False)
        if self.clouds:
            for entity, _ in zip(CLOUDS, self.clouds.clouds):
                self.renderer.set_pose(entity, True)

    def tick(self) -> GameMode:
        """Run one frame: deliver input, update, present."""
        self._frame += 1

        if self._activate_pending:
            self._activate_pending = False
            self.machine.activate()

        mode = self.machine.update(self._frame)

        if self.clouds:
            self.clouds.advance()

        self._present(build_visual_state(self.machine))
        return mode

    def _present(self, visual: VisualState) -> None:
        renderer = self.renderer

        for entity, visible in visual.visibility().items():
            renderer.set_pose(entity, visible)

        renderer.set_position(Entity.DINO_STAND, *visual.stand_pos)
        renderer.set_position(Entity.DINO_WALK, *visual.walk_pos)
        renderer.set_position(Entity.DINO_LYING, *visual.lying_pos)
        renderer.set_position(Entity.BARREL, *visual.obstacle_pos)
        renderer.set_rotation(Entity.BARREL, visual.obstacle_rotation)

        if self.clouds:
            for entity, (x, y) in zip(CLOUDS, self.clouds.positions()):
                renderer.set_position(entity, x, y)

        renderer.set_score_text(visual.score_text)
        renderer.present()

    def close(self) -> None:
        """Detach from the input source."""
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
