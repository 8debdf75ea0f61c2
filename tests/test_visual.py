import pytest

from dinorun.core.state import GameMode
from dinorun.game.visual import (
    POSE_ENTITIES, Pose, active_pose, build_visual_state, score_text,
)
from dinorun.hardware.base import Entity

from conftest import end_round, start_playing


@pytest.mark.parametrize("mode,pose", [
    (GameMode.READY, Pose.STANDING),
    (GameMode.PLAYING, Pose.RUNNING),
    (GameMode.GAME_OVER, Pose.LYING),
])
def test_pose_per_mode(mode, pose):
    assert active_pose(mode) is pose


def test_every_mode_has_a_pose():
    assert {active_pose(mode) for mode in GameMode} == set(Pose)


@pytest.mark.parametrize("mode,score,text", [
    (GameMode.READY, 0, "Press Space!"),
    (GameMode.PLAYING, 12, "Score: 12"),
    (GameMode.GAME_OVER, 7, "Game Over. Score: 7"),
])
def test_score_text(mode, score, text):
    assert score_text(mode, score) == text


def test_visibility_has_exactly_one_pose(machine):
    visual = build_visual_state(machine)
    visibility = visual.visibility()

    assert set(visibility) == set(POSE_ENTITIES.values())
    assert [e for e, shown in visibility.items() if shown] == [Entity.DINO_STAND]


def test_visual_state_while_playing(machine, layout):
    start_playing(machine)
    visual = build_visual_state(machine)

    assert visual.pose is Pose.RUNNING
    assert visual.walk_pos == (layout.character_x, layout.ground_y)
    assert visual.obstacle_pos == (machine.state.obstacle_x, layout.obstacle_y)
    assert visual.obstacle_rotation == machine.state.obstacle_x


def test_visual_state_after_collision(machine, layout):
    start_playing(machine)
    end_round(machine)
    visual = build_visual_state(machine)

    assert visual.pose is Pose.LYING
    assert visual.lying_pos == (layout.lying_x, layout.lying_y)
    assert visual.score_text == "Game Over. Score: 0"
