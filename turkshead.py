"""
Turk's head knot model.

A Turk's head with L leads and B bights is a closed strand that winds around an
annulus, crossing itself alternately over and under. The strand is sampled on a
discrete angular parameter theta (STEPS_THETA steps per crossing interval):

- angle(theta) is the polar angle of the sample
- radius(theta) oscillates between the inner and outer edge of the annulus
- altitude(theta) is the weave depth, -1 (under) to +1 (over), interpolated
  between the known crossings

When gcd(L, B) > 1 the figure is made of several identical strands (paths),
each rotated by 2*pi / paths from the previous one.
"""

import operator
from bisect import bisect_right
from math import cos, gcd, isfinite, pi, sin

STEPS_THETA = 20


class InvalidParameters(ValueError):
    pass


class InternalInvariantViolation(AssertionError):
    pass


def _as_count(value, name):
    if isinstance(value, bool):
        raise InvalidParameters(f"{name} must be an integer")
    try:
        value = operator.index(value)
    except TypeError:
        raise InvalidParameters(f"{name} must be an integer") from None
    if value <= 0:
        raise InvalidParameters(f"{name} must be > 0 (got {value})")
    return value


def _as_finite(value, name):
    value = float(value)
    if not isfinite(value):
        raise InvalidParameters(f"{name} must be a finite number (got {value})")
    return value


def compute_known_altitudes(leads, bights):
    """Return the crossing breakpoints as two parallel lists (keys, altitudes).

    Every index that is not a multiple of ``leads`` is a crossing; consecutive
    crossings alternate between under (-1) and over (+1).
    """
    keys = []
    altitudes = []
    alt = -1
    for i in range(-1, 2 * leads * bights + 2):
        if i % leads:
            keys.append(i * STEPS_THETA)
            altitudes.append(alt)
            alt = -alt
    return keys, altitudes


class TurksHead:
    def __init__(self, leads, bights, inner_radius, outer_radius, line_width):
        leads = _as_count(leads, "leads")
        bights = _as_count(bights, "bights")
        if leads == 1:
            # One lead never crosses itself: there is no weave to interpolate.
            raise InvalidParameters("leads must be >= 2 to produce crossings")
        inner_radius = _as_finite(inner_radius, "inner_radius")
        outer_radius = _as_finite(outer_radius, "outer_radius")
        line_width = _as_finite(line_width, "line_width")
        if outer_radius <= inner_radius:
            raise InvalidParameters(
                f"outer_radius ({outer_radius}) must be greater than inner_radius ({inner_radius})"
            )

        self._leads = leads
        self._bights = bights
        self._inner_radius = inner_radius
        self._outer_radius = outer_radius
        self._line_width = line_width

        self._paths = gcd(bights, leads)
        self._max_theta = 2 * leads * bights * STEPS_THETA // self._paths
        self._radius = (inner_radius + outer_radius) / 2
        self._delta_radius = (outer_radius - inner_radius - self._line_width) / 2

        self._keys, self._altitudes = compute_known_altitudes(leads, bights)

    @property
    def leads(self):
        return self._leads

    @property
    def bights(self):
        return self._bights

    @property
    def inner_radius(self):
        return self._inner_radius

    @property
    def outer_radius(self):
        return self._outer_radius

    @property
    def line_width(self):
        return self._line_width

    @property
    def paths(self):
        """Number of rotated copies of the strand needed to draw the whole knot."""
        return self._paths

    @property
    def max_theta(self):
        return self._max_theta

    @property
    def center_radius(self):
        return self._radius

    @property
    def radius_amplitude(self):
        return self._delta_radius

    @property
    def known_altitudes(self):
        return list(zip(self._keys, self._altitudes))

    def altitude(self, theta):
        # First breakpoint strictly after theta, then the one before it.
        nxt = bisect_right(self._keys, theta)
        if nxt == 0 or nxt == len(self._keys):
            raise InternalInvariantViolation(
                f"theta {theta} is outside the altitude table [{self._keys[0]}, {self._keys[-1]})"
            )
        k0, a0 = self._keys[nxt - 1], self._altitudes[nxt - 1]
        k1, a1 = self._keys[nxt], self._altitudes[nxt]
        return a0 + (a1 - a0) * (theta - k0) / float(k1 - k0)

    def angle(self, theta):
        # theta in [0, max_theta] maps to [0, 2*pi*leads/paths]
        return pi * theta / self._bights / STEPS_THETA

    def radius(self, theta):
        return self._radius + self._delta_radius * cos(self._bights * self.angle(theta) / self._leads)

    def coordinates(self, theta):
        r = self.radius(theta)
        a = self.angle(theta)
        return (r * cos(a), r * sin(a))

    def __repr__(self):
        return (
            f"TurksHead(leads={self._leads}, bights={self._bights}, "
            f"inner_radius={self._inner_radius}, outer_radius={self._outer_radius}, "
            f"line_width={self._line_width})"
        )


__all__ = [
    'STEPS_THETA',
    'InvalidParameters',
    'InternalInvariantViolation',
    'TurksHead',
    'compute_known_altitudes',
]
