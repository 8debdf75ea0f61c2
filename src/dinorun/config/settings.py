"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested values use a double underscore, e.g. DINORUN_DISPLAY__FPS=30.
"""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dinorun.core.state import Tuning


class DisplaySettings(BaseModel):
    """Window and frame rate settings."""

    width: int = Field(default=1280, gt=0)
    height: int = Field(default=720, gt=0)
    title: str = "DINO RUN"
    fullscreen: bool = False

    # Game constants are per frame, so this also sets the game speed
    fps: int = Field(default=60, gt=0)


class GameSettings(BaseModel):
    """Gameplay constants."""

    base_speed: float = Field(default=8.0, gt=0)
    jump_impulse: float = Field(default=-12.0, lt=0)
    ascent_damping: float = Field(default=1.1, gt=1.0)
    apex_threshold: float = Field(default=-2.0, lt=0)
    apex_velocity: float = Field(default=2.0, gt=0)
    descent_gain: float = Field(default=1.2, gt=1.0)
    respawn_spread: float = Field(default=200.0, ge=0)
    collision_min: float = 220.0
    collision_max: float = 380.0

    clouds_enabled: bool = False

    # Fixed seed makes barrel respawns and clouds repeatable
    seed: Optional[int] = None

    @model_validator(mode="after")
    def check_collision_band(self) -> "GameSettings":
        if self.collision_min >= self.collision_max:
            raise ValueError("collision_min must be below collision_max")
        return self

    def to_tuning(self) -> Tuning:
        return Tuning(
            base_speed=self.base_speed,
            jump_impulse=self.jump_impulse,
            ascent_damping=self.ascent_damping,
            apex_threshold=self.apex_threshold,
            apex_velocity=self.apex_velocity,
            descent_gain=self.descent_gain,
            respawn_spread=self.respawn_spread,
            collision_min=self.collision_min,
            collision_max=self.collision_max,
        )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="DINORUN_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False
    log_file: str = "dinorun.log"

    display: DisplaySettings = Field(default_factory=DisplaySettings)
    game: GameSettings = Field(default_factory=GameSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
