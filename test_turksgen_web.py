from math import pi

import numpy as np
import pytest

from turkshead import InvalidParameters, TurksHead
from turksdraw import draw
from turksgen_web import WebCanvas, draw_turkshead_web, draw_turkshead_web_bytes, fit_scale


def fill_square(canvas: WebCanvas, half: float) -> None:
    canvas.move_to(-half, -half)
    canvas.line_to(half, -half)
    canvas.line_to(half, half)
    canvas.line_to(-half, half)
    canvas.close_path()
    canvas.fill()


class TestWebCanvas:
    def test_origin_is_image_center(self) -> None:
        canvas = WebCanvas((100, 80), scale=10)
        assert canvas.user_to_device(0, 0) == pytest.approx((50, 40))
        # y points up
        assert canvas.user_to_device(1, 2) == pytest.approx((60, 20))

    def test_fill_paints_polygon(self) -> None:
        canvas = WebCanvas((100, 100), scale=10)
        canvas.set_source_rgb(1, 0, 0)
        fill_square(canvas, 1)
        assert canvas.image.getpixel((50, 50)) == (255, 0, 0)
        assert canvas.image.getpixel((5, 5)) == (0, 0, 0)
        assert canvas.fill_count == 1

    def test_fill_clears_path(self) -> None:
        canvas = WebCanvas((100, 100), scale=10)
        canvas.set_source_rgb(0, 1, 0)
        fill_square(canvas, 1)
        canvas.set_source_rgb(0, 0, 1)
        canvas.fill()
        assert canvas.image.getpixel((50, 50)) == (0, 255, 0)
        assert canvas.fill_count == 2

    def test_background(self) -> None:
        canvas = WebCanvas((20, 20), background="white")
        assert canvas.image.getpixel((0, 0)) == (255, 255, 255)

    def test_color_is_clamped(self) -> None:
        canvas = WebCanvas((100, 100), scale=10)
        canvas.set_source_rgb(1.2, -0.1, 0.5)
        fill_square(canvas, 1)
        assert canvas.image.getpixel((50, 50)) == (255, 0, 128)

    def test_rotate(self) -> None:
        canvas = WebCanvas((100, 100), scale=10)
        canvas.rotate(pi / 2)
        assert canvas.user_to_device(1, 0) == pytest.approx((50, 40))

    def test_rotations_accumulate(self) -> None:
        canvas = WebCanvas((100, 100), scale=10)
        canvas.rotate(pi / 4)
        canvas.rotate(pi / 4)
        assert canvas.user_to_device(1, 0) == pytest.approx((50, 40))

    def test_save_restore(self) -> None:
        canvas = WebCanvas((100, 100), scale=10)
        before = canvas.matrix.copy()
        canvas.set_source_rgb(0.1, 0.2, 0.3)
        canvas.save()
        canvas.rotate(1.0)
        canvas.set_source_rgb(1, 1, 1)
        canvas.restore()
        np.testing.assert_allclose(canvas.matrix, before)
        assert canvas.source_rgb == (0.1, 0.2, 0.3)

    def test_unbalanced_restore(self) -> None:
        canvas = WebCanvas((10, 10))
        with pytest.raises(RuntimeError):
            canvas.restore()

    def test_line_to_without_current_point(self) -> None:
        canvas = WebCanvas((100, 100), scale=10)
        canvas.set_source_rgb(1, 1, 1)
        canvas.line_to(-1, -1)
        canvas.line_to(1, -1)
        canvas.line_to(1, 1)
        canvas.line_to(-1, 1)
        canvas.fill()
        assert canvas.image.getpixel((50, 50)) == (255, 255, 255)


class TestDrawTurksHeadWeb:
    def test_draw_on_web_canvas(self) -> None:
        knot = TurksHead(3, 5, 40, 60, 2)
        canvas = WebCanvas((200, 200), scale=fit_scale(knot, (200, 200), 10))
        draw(canvas, knot)
        over = sum(1 for theta in range(knot.max_theta + 1) if knot.altitude(theta) > 0)
        assert canvas.fill_count == 601 + over
        # draw leaves the caller's transform untouched
        np.testing.assert_allclose(canvas.matrix, WebCanvas((200, 200), scale=fit_scale(knot, (200, 200), 10)).matrix)

    def test_fit_scale(self) -> None:
        knot = TurksHead(3, 5, 40, 60, 2)
        assert fit_scale(knot, (200, 200), 10) == pytest.approx(90 / 60)
        # padding larger than the image is ignored
        assert fit_scale(knot, (200, 200), 500) == pytest.approx(100 / 60)

    def test_image_has_knot_and_empty_center(self) -> None:
        img = draw_turkshead_web(3, 5, 40, 60, 2, img_size=(200, 200), padding=10)
        assert img.size == (200, 200)
        assert img.getbbox() is not None
        # the hole of the annulus stays background
        assert img.getpixel((100, 100)) == (0, 0, 0)

    def test_png_bytes(self) -> None:
        data = draw_turkshead_web_bytes(4, 6, 40, 60, 2, img_size=(64, 64), padding=4)
        assert data.startswith(b"\x89PNG\r\n\x1a\n")

    def test_invalid_parameters(self) -> None:
        with pytest.raises(InvalidParameters):
            draw_turkshead_web(0, 5, 40, 60, 2, img_size=(32, 32))
