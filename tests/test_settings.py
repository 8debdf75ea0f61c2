import pytest
from pydantic import ValidationError

from dinorun.config.settings import DisplaySettings, GameSettings, Settings
from dinorun.core.state import Tuning


def test_defaults():
    settings = Settings()

    assert settings.debug is False
    assert settings.display.width == 1280
    assert settings.display.height == 720
    assert settings.display.fps == 60
    assert settings.game.clouds_enabled is False
    assert settings.game.seed is None


def test_default_tuning_matches_game_constants():
    assert GameSettings().to_tuning() == Tuning()


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DINORUN_DEBUG", "true")
    monkeypatch.setenv("DINORUN_DISPLAY__FPS", "30")
    monkeypatch.setenv("DINORUN_GAME__SEED", "7")
    monkeypatch.setenv("DINORUN_GAME__BASE_SPEED", "10")

    settings = Settings()

    assert settings.debug is True
    assert settings.display.fps == 30
    assert settings.display.width == 1280
    assert settings.game.seed == 7
    assert settings.game.to_tuning().base_speed == 10


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("DINORUN_GAME__CLOUDS_ENABLED=true\n")

    assert Settings().game.clouds_enabled is True


@pytest.mark.parametrize("field", ["fps", "width", "height"])
def test_display_values_must_be_positive(field):
    with pytest.raises(ValidationError):
        DisplaySettings(**{field: 0})


def test_jump_impulse_must_point_up():
    with pytest.raises(ValidationError):
        GameSettings(jump_impulse=5.0)


def test_apex_threshold_must_be_negative():
    with pytest.raises(ValidationError):
        GameSettings(apex_threshold=0.5)


def test_collision_band_must_be_ordered():
    with pytest.raises(ValidationError):
        GameSettings(collision_min=400, collision_max=300)
    with pytest.raises(ValidationError):
        GameSettings(collision_min=300, collision_max=300)


def test_env_collision_band_is_validated(monkeypatch):
    monkeypatch.setenv("DINORUN_GAME__COLLISION_MIN", "500")

    with pytest.raises(ValidationError):
        Settings()
