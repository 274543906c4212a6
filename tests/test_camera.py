"""
ViewTransform tests.
Run: python -m pytest tests/test_camera.py -v
"""
import pytest

from sandbox.camera import ViewTransform
from sandbox.vector_utils import Vec2


class TestMapping:

    def test_world_to_screen(self):
        view = ViewTransform((800, 600), dx=10, dy=-20, scale=2)
        assert view.world_to_screen((5, 5)) == pytest.approx((30.0, -30.0))

    def test_screen_to_world(self):
        view = ViewTransform((800, 600), dx=10, dy=-20, scale=2)
        assert view.screen_to_world((30, -30)) == pytest.approx((5.0, 5.0))

    @pytest.mark.parametrize("scale", [0.1, 1.0, 1.1 ** 7, 250.0])
    def test_round_trip(self, scale):
        view = ViewTransform((1920, 1080), dx=960.5, dy=-33.25, scale=scale)
        for p in [Vec2(0, 0), Vec2(-460, -40), Vec2(1e4, -3.75e3), Vec2(0.001, 123.456)]:
            back = view.screen_to_world(view.world_to_screen(p))
            assert back.x == pytest.approx(p.x, rel=1e-12, abs=1e-9)
            assert back.y == pytest.approx(p.y, rel=1e-12, abs=1e-9)

    def test_rejects_non_positive_scale(self):
        with pytest.raises(ValueError, match="scale must be positive"):
            ViewTransform((800, 600), scale=0)


class TestViewControl:

    def test_pan_center_uses_viewport_size(self):
        view = ViewTransform((1920, 1080), dx=3, dy=4, scale=5)
        view.pan_center()
        assert (view.dx, view.dy, view.scale) == (960, 540, 1.0)

    def test_pan_center_follows_resize(self):
        view = ViewTransform((1920, 1080))
        view.set_viewport_size(800, 601)
        view.pan_center()
        assert (view.dx, view.dy) == (400, 300.5)

    def test_zoom_in_and_out(self):
        view = ViewTransform()
        view.zoom(1)
        assert view.scale == pytest.approx(1.1)
        view.zoom(-1)
        assert view.scale == pytest.approx(1.0, abs=1e-12)
        view.zoom(-1)
        assert view.scale == pytest.approx(1 / 1.1)

    def test_zoom_is_about_transform_origin(self):
        view = ViewTransform((800, 600), dx=100, dy=50)
        view.zoom(1)
        assert (view.dx, view.dy) == (100, 50)
        assert view.world_to_screen((-100, -50)) == pytest.approx((0.0, 0.0))

    def test_zero_wheel_delta_does_nothing(self):
        view = ViewTransform()
        view.zoom(0)
        assert view.scale == 1.0

    def test_pan_pixels_moves_content_with_pointer(self):
        view = ViewTransform((800, 600), dx=0, dy=0, scale=2)
        before = view.world_to_screen((10, 10))
        view.pan_pixels(40, -20)
        after = view.world_to_screen((10, 10))
        assert (after.x - before.x, after.y - before.y) == pytest.approx((40.0, -20.0))

    def test_copy_is_detached(self):
        view = ViewTransform((800, 600), dx=1, dy=2, scale=3)
        snap = view.copy()
        view.zoom(1)
        view.pan_pixels(10, 10)
        assert (snap.dx, snap.dy, snap.scale, snap.viewport_size) == (1, 2, 3, (800, 600))
