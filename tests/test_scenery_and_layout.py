import random

from dinorun.core.layout import Layout
from dinorun.game.scenery import CloudField

from conftest import FixedRandom


def test_layout_positions():
    layout = Layout(width=1280, height=720)

    assert layout.ground_y == 260
    assert layout.character_x == 100
    assert (layout.lying_x, layout.lying_y) == (25, 335)
    assert layout.obstacle_y == 460
    assert layout.obstacle_start_x == 1380
    assert layout.score_text_pos == (540, 16)
    assert layout.sky_rect == (0, 0, 1280, 360)
    assert layout.grass_rect == (0, 360, 1280, 360)


def test_layout_from_viewport():
    assert Layout.from_viewport((1024, 768)) == Layout(width=1024.0, height=768.0)


def test_clouds_start_positions():
    field = CloudField(1280, rng=FixedRandom(0.25))

    assert field.positions() == [(256.0, 64.0), (256.0, 112.0), (256.0, 160.0)]


def test_clouds_start_within_span():
    field = CloudField(1280, rng=random.Random(5))
    for x, _ in field.positions():
        assert 0 <= x < 1024


def test_clouds_move_at_their_own_speed():
    field = CloudField(1280, rng=FixedRandom(0.5))
    for _ in range(10):
        field.advance()

    assert [x for x, _ in field.positions()] == [502.0, 492.0, 482.0]


def test_clouds_wrap_past_left_edge():
    field = CloudField(1280, rng=FixedRandom(0.0))
    field.clouds[0].x = -128.0
    field.advance()

    assert field.clouds[0].x == 1280 + 128


def test_clouds_wrap_uses_new_width():
    field = CloudField(1280, rng=FixedRandom(0.0))
    field.resize(640)
    field.clouds[2].x = -126.0
    field.advance()

    assert field.clouds[2].x == 640 + 128
