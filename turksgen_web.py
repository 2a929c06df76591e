import io
from math import cos, sin
import numpy as np
from PIL import Image, ImageDraw
from turkshead import TurksHead
from turksdraw import draw


class WebCanvas:
    """A cairo-like canvas that rasterizes filled paths into a PIL Image.

    Drawing happens in local units centered on the image, y pointing up.
    ``scale`` is the number of pixels per local unit.
    """

    def __init__(self, img_size=(800, 800), scale=1.0, background="black"):
        self.image = Image.new("RGB", img_size, background)
        self._draw = ImageDraw.Draw(self.image)
        w, h = img_size
        self.matrix = np.array([
            [scale, 0.0, w / 2],
            [0.0, -scale, h / 2],
            [0.0, 0.0, 1.0],
        ])
        self.source_rgb = (0.0, 0.0, 0.0)
        self.fill_count = 0
        self._saved = []  # stack of (matrix, source_rgb)
        self._subpaths = []  # list of lists of device points

    def save(self):
        self._saved.append((self.matrix.copy(), self.source_rgb))

    def restore(self):
        if not self._saved:
            raise RuntimeError("restore() called without a matching save()")
        self.matrix, self.source_rgb = self._saved.pop()

    def rotate(self, angle):
        c, s = cos(angle), sin(angle)
        self.matrix = self.matrix @ np.array([
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ])

    def user_to_device(self, x, y):
        dx, dy, _ = self.matrix @ np.array([x, y, 1.0])
        return (float(dx), float(dy))

    def move_to(self, x, y):
        self._subpaths.append([self.user_to_device(x, y)])

    def line_to(self, x, y):
        if not self._subpaths:
            # Same as cairo: line_to without a current point acts as move_to
            self.move_to(x, y)
            return
        self._subpaths[-1].append(self.user_to_device(x, y))

    def close_path(self):
        if self._subpaths and self._subpaths[-1]:
            self._subpaths.append([self._subpaths[-1][0]])

    def set_source_rgb(self, r, g, b):
        self.source_rgb = (r, g, b)

    def _fill_color(self):
        return tuple(int(round(255 * min(1.0, max(0.0, c)))) for c in self.source_rgb)

    def fill(self):
        color = self._fill_color()
        for points in self._subpaths:
            if len(points) >= 3:
                self._draw.polygon(points, fill=color)
        self._subpaths = []
        self.fill_count += 1


def fit_scale(knot, img_size=(800, 800), padding=20):
    """Pixels per unit so that the outer rim fits inside the padded image."""
    usable = min(img_size) / 2 - padding
    if usable <= 0:
        usable = min(img_size) / 2
    extent = max(abs(knot.inner_radius), abs(knot.outer_radius))
    return usable / extent


def draw_turkshead_web(leads=3, bights=5, inner_radius=40, outer_radius=60, line_width=2,
                       img_size=(800, 800), padding=20, background="black"):
    knot = TurksHead(leads, bights, inner_radius, outer_radius, line_width)
    canvas = WebCanvas(img_size, scale=fit_scale(knot, img_size, padding), background=background)
    draw(canvas, knot)
    return canvas.image


def draw_turkshead_web_bytes(leads=3, bights=5, inner_radius=40, outer_radius=60, line_width=2,
                             img_size=(800, 800), padding=20, background="black"):
    """
    Render a Turk's head and return it as PNG bytes (for web API / CLI).
    """
    img = draw_turkshead_web(leads, bights, inner_radius, outer_radius, line_width,
                             img_size, padding, background)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf.getvalue()
