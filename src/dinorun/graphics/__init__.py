"""Drawing primitives for frame buffers."""

from dinorun.graphics.primitives import fill, draw_rect, draw_circle, draw_line

__all__ = ["fill", "draw_rect", "draw_circle", "draw_line"]
