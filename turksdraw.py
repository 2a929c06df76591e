"""
Draw a Turk's head knot on a cairo-like canvas.

The canvas only needs save, restore, rotate, move_to, line_to, close_path, fill
and set_source_rgb. The strand is drawn as a ribbon of small filled
quadrilaterals, one per theta step:

- first pass: every segment, so the strands that go "under" are laid down
- second pass: only segments with a positive altitude, painted on top

The hue follows theta around the path and the brightness follows the altitude,
so crossings read as over/under.
"""

from math import floor, pi, sqrt


def hsv_to_rgb(h, s, v):
    """h in degrees (wrapped), s and v in [0, 1]."""
    hf = floor(h / 60)
    f = h / 60 - hf
    hi = hf % 6
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    if hi == 0:
        return (v, t, p)
    if hi == 1:
        return (q, v, p)
    if hi == 2:
        return (p, v, t)
    if hi == 3:
        return (p, q, v)
    if hi == 4:
        return (t, p, v)
    return (v, p, q)


def set_source_hsv(ctx, h, s, v):
    ctx.set_source_rgb(*hsv_to_rgb(h, s, v))


def segment_corners(knot, theta):
    """Corners of the ribbon piece centered on theta, spanning theta-1 to theta+1."""
    x0, y0 = knot.coordinates(theta - 1)
    x1, y1 = knot.coordinates(theta + 1)

    dx = x1 - x0
    dy = y1 - y0
    n = sqrt(dx * dx + dy * dy)

    if n == 0:
        # Centreline collapsed to a point: no direction, no ribbon width.
        nx = ny = 0.0
    else:
        nx = -knot.line_width * dy / n / 2
        ny = knot.line_width * dx / n / 2

    return [
        (x0 + nx, y0 + ny),
        (x1 + nx, y1 + ny),
        (x1 - nx, y1 - ny),
        (x0 - nx, y0 - ny),
    ]


def draw_segment(ctx, knot, theta):
    (ax, ay), (bx, by), (cx, cy), (dx, dy) = segment_corners(knot, theta)
    ctx.move_to(ax, ay)
    ctx.line_to(bx, by)
    ctx.line_to(cx, cy)
    ctx.line_to(dx, dy)
    ctx.close_path()


def draw_path(ctx, knot, only_positive_z=False):
    """Fill the ribbon of one path. Returns the number of segments filled."""
    filled = 0
    for theta in range(knot.max_theta + 1):
        z = knot.altitude(theta)
        if not only_positive_z or z > 0:
            set_source_hsv(ctx, theta * 360. / knot.max_theta, 0.5, 0.5 + z / 2)
            draw_segment(ctx, knot, theta)
            ctx.fill()
            filled += 1
    return filled


def draw_paths(ctx, knot, only_positive_z=False):
    filled = 0
    for _ in range(knot.paths):
        filled += draw_path(ctx, knot, only_positive_z)
        # Left applied: the next path (or pass) starts from the rotated frame.
        ctx.rotate(2 * pi / knot.paths)
    return filled


def draw(ctx, knot):
    ctx.save()
    try:
        draw_paths(ctx, knot, only_positive_z=False)
        draw_paths(ctx, knot, only_positive_z=True)
    finally:
        ctx.restore()


__all__ = ['hsv_to_rgb', 'set_source_hsv', 'segment_corners', 'draw_segment', 'draw_path', 'draw_paths', 'draw']
