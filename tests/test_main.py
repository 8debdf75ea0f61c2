import logging

import pytest

from dinorun.config.settings import Settings, get_settings
from dinorun.core.state import GameMode
from dinorun.simulator.main import apply_args, main, parse_args, run_headless


def seeded_settings(**game) -> Settings:
    settings = Settings()
    return settings.model_copy(update={
        "game": settings.game.model_copy(update={"seed": 11, **game}),
    })


def test_headless_first_press_starts_round():
    machine = run_headless(seeded_settings(), frames=1, activate_every=10)
    assert machine.mode is GameMode.PLAYING


def test_headless_without_presses_stays_ready():
    machine = run_headless(seeded_settings(), frames=20, activate_every=0)

    assert machine.mode is GameMode.READY
    assert machine.state.score == 0


def test_headless_unattended_round_ends():
    # One press starts the round, nobody jumps afterwards
    machine = run_headless(seeded_settings(), frames=400, activate_every=1000)
    assert machine.mode is GameMode.GAME_OVER
    assert machine.state.obstacle_x == 380


def test_headless_is_repeatable_with_seed():
    first = run_headless(seeded_settings(clouds_enabled=True), frames=900, activate_every=23)
    second = run_headless(seeded_settings(clouds_enabled=True), frames=900, activate_every=23)

    assert first.mode is second.mode
    assert first.state == second.state


def test_parse_and_apply_args():
    args = parse_args(["--fps", "30", "--seed", "5", "--clouds", "--width", "800"])
    settings = apply_args(Settings(), args)

    assert settings.display.fps == 30
    assert settings.display.width == 800
    assert settings.display.height == 720
    assert settings.game.seed == 5
    assert settings.game.clouds_enabled is True
    assert settings.debug is False


def test_apply_args_keeps_settings_when_no_flags():
    settings = apply_args(Settings(), parse_args([]))
    assert settings == Settings()


def test_main_rejects_invalid_flag_with_logged_error(caplog):
    get_settings.cache_clear()
    caplog.set_level(logging.ERROR)

    with pytest.raises(SystemExit) as exc:
        main(["--headless", "--fps", "0"])

    assert exc.value.code == 1
    assert "Invalid settings" in caplog.text


def test_main_rejects_invalid_environment(monkeypatch, caplog):
    get_settings.cache_clear()
    monkeypatch.setenv("DINORUN_DISPLAY__WIDTH", "-5")
    caplog.set_level(logging.ERROR)

    with pytest.raises(SystemExit) as exc:
        main(["--headless", "--frames", "1"])

    get_settings.cache_clear()
    assert exc.value.code == 1
    assert "Invalid settings" in caplog.text
