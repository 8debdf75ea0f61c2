"""
Renderers and viewports for the simulator.

BufferRenderer draws the scene into a numpy RGB buffer that the pygame
window blits every frame. RecordingRenderer keeps only what it was told,
for headless runs.
"""

import math
import logging

import numpy as np
from numpy.typing import NDArray

from ...graphics.primitives import Color, fill, draw_rect, draw_circle, draw_line
from ...hardware.base import CLOUDS, Entity, Renderer, Viewport

logger = logging.getLogger(__name__)


class FixedViewport(Viewport):
    """Viewport with a size set by code instead of a window."""

    def __init__(self, width: int = 1280, height: int = 720) -> None:
        self._size = (width, height)

    def get_viewport_size(self) -> tuple[int, int]:
        return self._size

    def set_size(self, width: int, height: int) -> None:
        self._size = (width, height)


class RecordingRenderer(Renderer):
    """Renderer that records the scene description without drawing it."""

    def __init__(self) -> None:
        self.visible: dict[Entity, bool] = {}
        self.positions: dict[Entity, tuple[float, float]] = {}
        self.rotations: dict[Entity, float] = {}
        self.score_text = ""
        self.size: tuple[int, int] | None = None
        self.present_count = 0

    def set_pose(self, entity: Entity, visible: bool) -> None:
        self.visible[entity] = visible

    def set_position(self, entity: Entity, x: float, y: float) -> None:
        self.positions[entity] = (x, y)

    def set_rotation(self, entity: Entity, angle: float) -> None:
        self.rotations[entity] = angle

    def set_score_text(self, text: str) -> None:
        self.score_text = text

    def present(self) -> None:
        self.present_count += 1

    def resize(self, width: int, height: int) -> None:
        self.size = (width, height)

    def visible_entities(self) -> set[Entity]:
        return {entity for entity, shown in self.visible.items() if shown}


class BufferRenderer(RecordingRenderer):
    """
    Draws the scene into an RGB buffer of shape (height, width, 3).

    Dinosaur positions are the top-left corner of a 373x256 sprite frame.
    The barrel position is its center.
    """

    SKY_COLOR: Color = (0, 191, 255)
    GRASS_COLOR: Color = (0, 128, 0)
    DINO_COLOR: Color = (96, 160, 72)
    DINO_EYE_COLOR: Color = (20, 20, 20)
    BARREL_COLOR: Color = (139, 90, 43)
    BARREL_BAND_COLOR: Color = (70, 45, 20)
    CLOUD_COLOR: Color = (250, 250, 255)

    BARREL_RADIUS = 32

    # Back to front
    Z_ORDER = (
        Entity.SKY, Entity.GRASS, *CLOUDS,
        Entity.DINO_STAND, Entity.DINO_WALK, Entity.DINO_LYING,
        Entity.BARREL,
    )

    def __init__(self, width: int = 1280, height: int = 720) -> None:
        super().__init__()
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)
        self.size = (width, height)

    @property
    def buffer(self) -> NDArray[np.uint8]:
        return self._buffer

    def resize(self, width: int, height: int) -> None:
        super().resize(width, height)
        if self._buffer.shape[:2] != (height, width):
            self._buffer = np.zeros((height, width, 3), dtype=np.uint8)
            logger.debug(f"Frame buffer resized to {width}x{height}")

    def present(self) -> None:
        fill(self._buffer, (0, 0, 0))
        for entity in self.Z_ORDER:
            if self.visible.get(entity) and entity in self.positions:
                x, y = self.positions[entity]
                self._draw(entity, int(x), int(y))
        super().present()

    def _draw(self, entity: Entity, x: int, y: int) -> None:
        width, height = self.size
        horizon = height // 2

        if entity is Entity.SKY:
            draw_rect(self._buffer, x, y, width, horizon, self.SKY_COLOR)
        elif entity is Entity.GRASS:
            draw_rect(self._buffer, x, y, width, height - horizon, self.GRASS_COLOR)
        elif entity in CLOUDS:
            self._draw_cloud(x, y)
        elif entity in (Entity.DINO_STAND, Entity.DINO_WALK):
            self._draw_dino(x, y)
        elif entity is Entity.DINO_LYING:
            self._draw_dino_lying(x, y)
        elif entity is Entity.BARREL:
            self._draw_barrel(x, y, self.rotations.get(Entity.BARREL, 0.0))

    def _draw_cloud(self, x: int, y: int) -> None:
        for dx, dy, r in ((30, 20, 20), (60, 12, 26), (90, 20, 20)):
            draw_circle(self._buffer, x + dx, y + dy, r, self.CLOUD_COLOR)

    def _draw_dino(self, x: int, y: int) -> None:
        buf = self._buffer
        draw_rect(buf, x + 80, y + 130, 70, 30, self.DINO_COLOR)    # tail
        draw_rect(buf, x + 140, y + 110, 150, 80, self.DINO_COLOR)  # body
        draw_rect(buf, x + 250, y + 50, 90, 60, self.DINO_COLOR)    # head
        draw_rect(buf, x + 310, y + 65, 10, 10, self.DINO_EYE_COLOR)
        draw_rect(buf, x + 160, y + 190, 25, 60, self.DINO_COLOR)   # legs
        draw_rect(buf, x + 250, y + 190, 25, 60, self.DINO_COLOR)

    def _draw_dino_lying(self, x: int, y: int) -> None:
        buf = self._buffer
        draw_rect(buf, x + 140, y + 150, 230, 60, self.DINO_COLOR)
        draw_rect(buf, x + 360, y + 160, 80, 50, self.DINO_COLOR)
        draw_rect(buf, x + 410, y + 172, 10, 10, self.DINO_EYE_COLOR)
        draw_rect(buf, x + 180, y + 120, 25, 30, self.DINO_COLOR)
        draw_rect(buf, x + 280, y + 120, 25, 30, self.DINO_COLOR)

    def _draw_barrel(self, cx: int, cy: int, angle: float) -> None:
        r = self.BARREL_RADIUS
        draw_circle(self._buffer, cx, cy, r, self.BARREL_COLOR)

        # Spoke shows the barrel rolling
        rad = math.radians(angle)
        ex = cx + int(round(math.cos(rad) * (r - 4)))
        ey = cy + int(round(math.sin(rad) * (r - 4)))
        sx = cx - int(round(math.cos(rad) * (r - 4)))
        sy = cy - int(round(math.sin(rad) * (r - 4)))
        draw_line(self._buffer, sx, sy, ex, ey, self.BARREL_BAND_COLOR, thickness=4)
