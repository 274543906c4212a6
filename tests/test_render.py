"""
Renderer adapter tests against a recording draw surface.
Run: python -m pytest tests/test_render.py -v
"""
from collections import deque

import pytest

from sandbox.camera import ViewTransform
from sandbox.controller import Snapshot
from sandbox.data_models import Body
from sandbox.render import draw_snapshot, hue_to_rgb, trail_marks
from sandbox.vector_utils import Vec2


class RecordingSurface:
    def __init__(self):
        self.calls = []
        self.status = None

    def fill_circle(self, center, diameter, hue):
        self.calls.append(("fill", tuple(center), diameter, hue))

    def draw_circle(self, center, diameter, rgb=(0, 0, 0)):
        self.calls.append(("circle", tuple(center), diameter, rgb))

    def draw_line(self, start, end, rgb=(0, 0, 0)):
        self.calls.append(("line", tuple(start), tuple(end), rgb))

    def set_status_text(self, text):
        self.status = text


def sample_body():
    return Body(
        position=Vec2(0, 0),
        velocity=Vec2(3, 4),
        mass=25,
        hue=0.5,
        trail=deque([Vec2(-30, 0), Vec2(-15, 0)], maxlen=20),
    )


def snapshot_of(bodies, scale=1.0, t=0.0):
    view = ViewTransform((200, 100), dx=100, dy=50, scale=scale)
    return Snapshot(bodies=tuple(bodies), view=view, t=t, dt=0.01, paused=False, creation_step=0)


class TestTrailMarks:

    def test_marks_grow_and_lag_in_hue(self):
        marks = list(trail_marks(sample_body(), 0.01))
        assert [m[0] for m in marks] == [Vec2(-30, 0), Vec2(-15, 0)]
        assert [m[1] for m in marks] == pytest.approx([1.0, 6.0])
        assert [m[2] for m in marks] == pytest.approx([0.48, 0.49])

    def test_hue_wraps(self):
        body = sample_body()
        body.hue = 0.005
        hues = [m[2] for m in trail_marks(body, 0.01)]
        assert hues == pytest.approx([0.985, 0.995])

    def test_no_trail_no_marks(self):
        body = sample_body()
        body.trail.clear()
        assert list(trail_marks(body, 0.01)) == []


class TestDrawSnapshot:

    def test_draw_order_and_geometry(self):
        surface = RecordingSurface()
        draw_snapshot(snapshot_of([sample_body()], t=1.23456), surface)

        kinds = [c[0] for c in surface.calls]
        assert kinds == ["fill", "fill", "fill", "circle", "line"]

        _, center, size, hue = surface.calls[1]
        assert center == pytest.approx((85.0, 50.0))
        assert size == pytest.approx(6.0)
        assert hue == pytest.approx(0.49)

        assert surface.calls[2] == ("fill", (100.0, 50.0), 10.0, 0.5)
        assert surface.calls[3] == ("circle", (100.0, 50.0), 10.0, (0, 0, 0))
        assert surface.calls[4] == ("line", (100.0, 50.0), (103.0, 54.0), (0, 0, 0))
        assert surface.status == "t = 1.235"

    def test_sizes_follow_zoom(self):
        surface = RecordingSurface()
        body = sample_body()
        body.trail.clear()
        draw_snapshot(snapshot_of([body], scale=2.0), surface)
        assert surface.calls[0] == ("fill", (200.0, 100.0), 20.0, 0.5)
        assert surface.calls[2] == ("line", (200.0, 100.0), (206.0, 108.0), (0, 0, 0))

    def test_bodies_drawn_in_world_order(self):
        heavy = Body(position=Vec2(10, 0), mass=400, hue=0.1)
        light = Body(position=Vec2(-10, 0), mass=10, hue=0.9)
        surface = RecordingSurface()
        draw_snapshot(snapshot_of([heavy, light]), surface)
        fills = [c for c in surface.calls if c[0] == "fill"]
        assert [f[3] for f in fills] == [0.1, 0.9]

    def test_empty_world_still_publishes_time(self):
        surface = RecordingSurface()
        draw_snapshot(snapshot_of([], t=2.0), surface)
        assert surface.calls == []
        assert surface.status == "t = 2.000"


class TestColor:

    @pytest.mark.parametrize("hue, rgb", [
        (0.0, (255, 0, 0)),
        (1 / 3, (0, 255, 0)),
        (2 / 3, (0, 0, 255)),
        (1.0, (255, 0, 0)),
        (1 / 6, (255, 255, 0)),
    ])
    def test_hue_to_rgb(self, hue, rgb):
        assert hue_to_rgb(hue) == rgb
