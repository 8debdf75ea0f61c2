"""Decorative background clouds. They have no effect on the game."""

from dataclasses import dataclass
import random

CLOUD_COUNT = 3
CLOUD_START_SPAN = 1024.0
CLOUD_TOP = 64.0
CLOUD_SPACING = 48.0
CLOUD_WRAP = 128.0


@dataclass
class Cloud:
    x: float
    y: float
    speed: float


class CloudField:
    """
    Clouds drifting right to left at different speeds.

    Cloud i moves i + 1 pixels per tick and re-enters past the right edge
    once it is fully off the left edge.
    """

    def __init__(self, width: float, rng: random.Random | None = None,
                 count: int = CLOUD_COUNT) -> None:
        self._width = width
        rng = rng or random.Random()
        self.clouds = [
            Cloud(
                x=rng.random() * CLOUD_START_SPAN,
                y=CLOUD_TOP + i * CLOUD_SPACING,
                speed=float(i + 1),
            )
            for i in range(count)
        ]

    def resize(self, width: float) -> None:
        self._width = width

    def advance(self) -> None:
        for cloud in self.clouds:
            cloud.x -= cloud.speed
            if cloud.x < -CLOUD_WRAP:
                cloud.x = self._width + CLOUD_WRAP

    def positions(self) -> list[tuple[float, float]]:
        return [(c.x, c.y) for c in self.clouds]
