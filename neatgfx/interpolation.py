"""Linear, Bezier and spherical interpolation."""

from __future__ import annotations

import math
import numbers

import numpy as np

from neatgfx.constants import EPSILON
from neatgfx.quaternion import Quaternion


class QuaternionLerpStepError(ValueError):
    """Raised when a quaternion lerp step lies outside ``[0, 1]``."""

    def __init__(self, message="quaternion lerp step must lie in [0, 1]"):
        super().__init__(message)


def _operand(value):
    if isinstance(value, (numbers.Real, Quaternion)):
        return value
    return np.asarray(value, dtype=float)


def mix(a, b, t):
    """Linear blend ``a * (1 - t) + b * t`` of scalars or vectors."""
    a, b = _operand(a), _operand(b)
    t = float(t)
    return a * (1.0 - t) + b * t


def quadratic_bezier(a, b, c, t):
    """Point at ``t`` on the quadratic Bezier curve with control points a, b, c."""
    d = mix(a, b, t)
    e = mix(b, c, t)
    return mix(d, e, t)


def cubic_bezier(a, b, c, d, t):
    """Point at ``t`` on the cubic Bezier curve with control points a, b, c, d."""
    e = mix(a, b, t)
    f = mix(b, c, t)
    g = mix(c, d, t)
    h = mix(e, f, t)
    i = mix(f, g, t)
    return mix(h, i, t)


def _componentwise_mix(a, b, t):
    return Quaternion(mix(a.w, b.w, t), mix(a.v, b.v, t))


def _spherical(a, b, cos_theta, t):
    angle = math.acos(max(-1.0, min(1.0, cos_theta)))
    t = float(t)
    return (math.sin((1.0 - t) * angle) * a + math.sin(t * angle) * b) / math.sin(angle)


def quat_mix(a, b, t):
    """Spherical interpolation without taking the shortest path."""
    cos_theta = a.dot(b)
    if cos_theta > 1.0 - EPSILON:
        return _componentwise_mix(a, b, t)
    return _spherical(a, b, cos_theta, t)


def quat_lerp(a, b, t):
    """Component-wise linear interpolation; ``t`` must lie in ``[0, 1]``."""
    if t < 0.0 or t > 1.0:
        raise QuaternionLerpStepError()
    t = float(t)
    return a * (1.0 - t) + b * t


def quat_slerp(a, b, t):
    """Spherical interpolation along the shortest path."""
    cos_theta = a.dot(b)
    c = b
    if cos_theta < 0.0:
        c = -b
        cos_theta = -cos_theta

    if cos_theta > 1.0 - EPSILON:
        return _componentwise_mix(a, c, t)
    return _spherical(a, c, cos_theta, t)