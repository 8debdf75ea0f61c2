"""What the renderer should show for a given game state."""

from dataclasses import dataclass
from enum import Enum, auto

from dinorun.core.state import GameMode, GameStateMachine
from dinorun.hardware.base import Entity


class Pose(Enum):
    """Dinosaur poses. Exactly one is visible at a time."""
    STANDING = auto()
    RUNNING = auto()  # Also used mid-jump, the sprite is just raised
    LYING = auto()


POSE_ENTITIES: dict[Pose, Entity] = {
    Pose.STANDING: Entity.DINO_STAND,
    Pose.RUNNING: Entity.DINO_WALK,
    Pose.LYING: Entity.DINO_LYING,
}

_MODE_POSES: dict[GameMode, Pose] = {
    GameMode.READY: Pose.STANDING,
    GameMode.PLAYING: Pose.RUNNING,
    GameMode.GAME_OVER: Pose.LYING,
}


def active_pose(mode: GameMode) -> Pose:
    return _MODE_POSES[mode]


def score_text(mode: GameMode, score: int) -> str:
    if mode is GameMode.READY:
        return "Press Space!"
    if mode is GameMode.PLAYING:
        return f"Score: {score}"
    return f"Game Over. Score: {score}"


@dataclass(frozen=True)
class VisualState:
    """Renderer payload for one frame."""
    pose: Pose
    stand_pos: tuple[float, float]
    walk_pos: tuple[float, float]
    lying_pos: tuple[float, float]
    obstacle_pos: tuple[float, float]
    obstacle_rotation: float
    score_text: str

    def visibility(self) -> dict[Entity, bool]:
        return {entity: pose is self.pose for pose, entity in POSE_ENTITIES.items()}


def build_visual_state(machine: GameStateMachine) -> VisualState:
    mode = machine.mode
    state = machine.state
    layout = machine.layout

    return VisualState(
        pose=active_pose(mode),
        stand_pos=(layout.character_x, layout.ground_y),
        walk_pos=(layout.character_x, state.character_y),
        lying_pos=(layout.lying_x, layout.lying_y),
        obstacle_pos=(state.obstacle_x, layout.obstacle_y),
        # Rolling barrel: rotation in degrees tracks its x position
        obstacle_rotation=state.obstacle_x,
        score_text=score_text(mode, state.score),
    )
