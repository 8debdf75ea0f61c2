import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import random

import pytest

from dinorun.core.layout import Layout
from dinorun.core.state import GameMode, GameStateMachine


class FixedRandom(random.Random):
    """Random source whose random() always returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    # Keep a developer's .env and log files out of the tests
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("DINORUN_"):
            monkeypatch.delenv(key)


@pytest.fixture
def layout() -> Layout:
    return Layout(width=1280, height=720)


@pytest.fixture
def machine(layout) -> GameStateMachine:
    # Respawn offset is always 100
    return GameStateMachine(layout=layout, rng=FixedRandom(0.5))


def start_playing(machine: GameStateMachine) -> None:
    machine.activate()
    assert machine.update() is GameMode.PLAYING


def end_round(machine: GameStateMachine) -> None:
    """Put the barrel on a grounded dinosaur."""
    state = machine.state
    state.obstacle_x = 300 + machine.tuning.base_speed + state.score
    assert machine.update() is GameMode.GAME_OVER
