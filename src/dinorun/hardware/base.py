"""
Abstract base classes for the game's collaborators.

The game core only talks to these interfaces. The simulator window and the
headless renderer both implement them.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable


class Entity(Enum):
    """Visual entities the renderer knows how to draw."""
    SKY = "sky"
    GRASS = "grass"
    CLOUD_0 = "cloud_0"
    CLOUD_1 = "cloud_1"
    CLOUD_2 = "cloud_2"
    DINO_STAND = "dino_stand"
    DINO_WALK = "dino_walk"
    DINO_LYING = "dino_lying"
    BARREL = "barrel"


CLOUDS = (Entity.CLOUD_0, Entity.CLOUD_1, Entity.CLOUD_2)


class Renderer(ABC):
    """Abstract base class for scene renderers."""

    @abstractmethod
    def set_pose(self, entity: Entity, visible: bool) -> None:
        """Show or hide an entity."""
        ...

    @abstractmethod
    def set_position(self, entity: Entity, x: float, y: float) -> None:
        """Move an entity."""
        ...

    @abstractmethod
    def set_rotation(self, entity: Entity, angle: float) -> None:
        """Set entity rotation in degrees."""
        ...

    @abstractmethod
    def set_score_text(self, text: str) -> None:
        """Set the score/status line."""
        ...

    @abstractmethod
    def present(self) -> None:
        """Compose the current frame."""
        ...

    def resize(self, width: int, height: int) -> None:
        """Called when the viewport size changes."""
        pass


class InputSource(ABC):
    """Abstract base class for the activate input (button, key, click)."""

    @abstractmethod
    def on_activate(self, callback: Callable[[], None]) -> Callable[[], None]:
        """
        Register activate callback.

        Returns:
            Function to unregister callback
        """
        ...


class Viewport(ABC):
    """Abstract base class for the drawable area."""

    @abstractmethod
    def get_viewport_size(self) -> tuple[int, int]:
        """Get (width, height) in pixels."""
        ...
