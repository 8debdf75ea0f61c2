"""Simulated collaborators for the simulator and headless runs."""

from .display import BufferRenderer, RecordingRenderer, FixedViewport
from .input import SimulatedButton

__all__ = [
    "BufferRenderer",
    "RecordingRenderer",
    "FixedViewport",
    "SimulatedButton",
]
