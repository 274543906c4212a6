#!/usr/bin/env python3
"""
Renderer adapter: turns a controller Snapshot into drawing primitives.

The draw surface is supplied by the host and needs four operations:

    fill_circle(center, diameter, hue)        filled disk, HSB(hue, 1, 1)
    draw_circle(center, diameter, rgb)        1-pixel outline
    draw_line(start, end, rgb)                1-pixel line
    set_status_text(text)

Centers and diameters are passed in screen pixels.
"""
import colorsys
from typing import Iterator, Tuple

from .constants import OUTLINE_COLOR
from .data_models import Body
from .vector_utils import Vec2


def hue_to_rgb(hue: float) -> Tuple[int, int, int]:
    """Fully saturated, full brightness color for an HSB hue (wrapped into [0, 1))."""
    r, g, b = colorsys.hsv_to_rgb(hue % 1.0, 1.0, 1.0)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


def trail_marks(body: Body, dt: float) -> Iterator[Tuple[Vec2, float, float]]:
    """
    Yield (world position, world diameter, hue) for each trail point, oldest first.

    Marks grow from 1 towards the body's diameter and their hue lags the body's
    by dt per point, so the streak reads as a fading history.
    """
    k = len(body.trail)
    if k == 0:
        return
    s = body.diameter
    for i, point in enumerate(body.trail):
        yield point, 1.0 + i * (s / k), (body.hue - dt * k + i * dt) % 1.0


def draw_body(surface, body: Body, view, dt: float) -> None:
    scale = view.scale
    for point, size, hue in trail_marks(body, dt):
        surface.fill_circle(view.world_to_screen(point), size * scale, hue)

    center = view.world_to_screen(body.position)
    s = body.diameter * scale
    surface.fill_circle(center, s, body.hue)
    surface.draw_circle(center, s, OUTLINE_COLOR)
    surface.draw_line(center, view.world_to_screen(body.position + body.velocity), OUTLINE_COLOR)


def draw_snapshot(snapshot, surface) -> None:
    """Draw every body in world order, then publish the clock string."""
    for body in snapshot.bodies:
        draw_body(surface, body, snapshot.view, snapshot.dt)
    surface.set_status_text(snapshot.time_text)
