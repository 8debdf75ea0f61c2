"""Application configuration."""

from .settings import Settings, DisplaySettings, GameSettings, get_settings

__all__ = ["Settings", "DisplaySettings", "GameSettings", "get_settings"]
