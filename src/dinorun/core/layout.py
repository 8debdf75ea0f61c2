"""Screen layout derived from the viewport size.

All positions are in screen pixels with the origin at the top-left corner.
The horizon sits at half the viewport height: sky above, grass below.
"""

from dataclasses import dataclass

# Fixed horizontal position of the dinosaur (it never moves sideways)
CHARACTER_X = 100.0

# Sprite offsets relative to the horizon
GROUND_OFFSET = 100.0
LYING_OFFSET = 75.0
OBSTACLE_OFFSET = 100.0

# Ready-state obstacle sits this far past the right edge
OBSTACLE_START_MARGIN = 100.0

SCORE_TEXT_OFFSET = 100.0
SCORE_TEXT_Y = 16.0


@dataclass(frozen=True)
class Layout:
    """Entity placement for a given viewport."""

    width: float = 1280.0
    height: float = 720.0

    @classmethod
    def from_viewport(cls, size: tuple[int, int]) -> "Layout":
        width, height = size
        return cls(width=float(width), height=float(height))

    @property
    def horizon_y(self) -> float:
        return self.height / 2

    @property
    def character_x(self) -> float:
        return CHARACTER_X

    @property
    def ground_y(self) -> float:
        """Character y when standing on the ground."""
        return self.horizon_y - GROUND_OFFSET

    @property
    def lying_x(self) -> float:
        return self.character_x - LYING_OFFSET

    @property
    def lying_y(self) -> float:
        return self.ground_y + LYING_OFFSET

    @property
    def obstacle_y(self) -> float:
        return self.horizon_y + OBSTACLE_OFFSET

    @property
    def obstacle_start_x(self) -> float:
        return self.width + OBSTACLE_START_MARGIN

    @property
    def score_text_pos(self) -> tuple[float, float]:
        return (self.width / 2 - SCORE_TEXT_OFFSET, SCORE_TEXT_Y)

    @property
    def sky_rect(self) -> tuple[float, float, float, float]:
        return (0.0, 0.0, self.width, self.horizon_y)

    @property
    def grass_rect(self) -> tuple[float, float, float, float]:
        return (0.0, self.horizon_y, self.width, self.height - self.horizon_y)
