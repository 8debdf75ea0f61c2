"""Frame driver and scene description."""

from dinorun.game.driver import GameDriver
from dinorun.game.scenery import CloudField
from dinorun.game.visual import Pose, VisualState, active_pose, build_visual_state, score_text

__all__ = [
    "GameDriver",
    "CloudField",
    "Pose",
    "VisualState",
    "active_pose",
    "build_visual_state",
    "score_text",
]
