"""Collaborator interfaces for DINO RUN."""

from .base import Entity, CLOUDS, Renderer, InputSource, Viewport

__all__ = ["Entity", "CLOUDS", "Renderer", "InputSource", "Viewport"]
