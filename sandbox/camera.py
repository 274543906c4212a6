#!/usr/bin/env python3
"""
Camera utilities for 2D world-to-screen transforms.
"""
import logging
from typing import Tuple

from .constants import VIEW_HEIGHT, VIEW_WIDTH, ZOOM_FACTOR
from .vector_utils import Vec2

logger = logging.getLogger("gravity_sandbox.camera")


class ViewTransform:
    """
    Pan offset plus uniform scale mapping world units to screen pixels.

        screen = (world + (dx, dy)) * scale
        world  = screen / scale - (dx, dy)

    Zooming scales about the transform origin, not the cursor.
    """

    def __init__(self, viewport_size: Tuple[int, int] = (VIEW_WIDTH, VIEW_HEIGHT),
                 dx: float = 0.0, dy: float = 0.0, scale: float = 1.0):
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale!r}")
        self.set_viewport_size(*viewport_size)
        self.dx = float(dx)
        self.dy = float(dy)
        self.scale = float(scale)

    def set_viewport_size(self, w: int, h: int) -> None:
        if w <= 0 or h <= 0:
            raise ValueError(f"viewport size must be positive, got {(w, h)!r}")
        self.viewport_size = (w, h)

    @property
    def offset(self) -> Vec2:
        return Vec2(self.dx, self.dy)

    def world_to_screen(self, pos: Tuple[float, float]) -> Vec2:
        return (Vec2(*pos) + self.offset) * self.scale

    def screen_to_world(self, screen: Tuple[float, float]) -> Vec2:
        return Vec2(*screen) / self.scale - self.offset

    def pan_center(self) -> None:
        """Put the world origin in the middle of the viewport at unit scale."""
        w, h = self.viewport_size
        self.dx = w / 2
        self.dy = h / 2
        self.scale = 1.0

    def zoom(self, delta: int) -> None:
        if delta > 0:
            self.scale *= ZOOM_FACTOR
        elif delta < 0:
            self.scale /= ZOOM_FACTOR
        else:
            return
        logger.debug("zoom %+d -> scale %.4f", delta, self.scale)

    def pan_pixels(self, dx_pixels: float, dy_pixels: float) -> None:
        """Shift the view so content moves by the given screen offset."""
        self.dx += dx_pixels / self.scale
        self.dy += dy_pixels / self.scale

    def copy(self) -> "ViewTransform":
        return ViewTransform(self.viewport_size, self.dx, self.dy, self.scale)
