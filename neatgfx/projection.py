"""Projection and view matrices."""

from __future__ import annotations

import math

import numpy as np

from neatgfx.quaternion import normalize


def orthographic(left, right, bottom, top, near, far):
    """Orthographic projection mapping the box onto the unit cube."""
    result = np.identity(4)
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -2.0 / (far - near)
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    result[2, 3] = -(far + near) / (far - near)
    return result


def perspective(field_of_view, aspect_ratio, near, far):
    """Perspective projection; ``field_of_view`` is vertical, in radians."""
    result = np.identity(4)
    tan_half_fov = math.tan(field_of_view / 2.0)
    result[0, 0] = 1.0 / (aspect_ratio * tan_half_fov)
    result[1, 1] = 1.0 / tan_half_fov
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -2.0 * far * near / (far - near)
    result[3, 2] = -1.0
    result[3, 3] = 0.0
    return result


def look_at_rh(eye, target, up_direction):
    """Right-handed view matrix looking from ``eye`` towards ``target``."""
    eye = np.asarray(eye, dtype=float)
    front = normalize(np.asarray(target, dtype=float) - eye)
    right = normalize(np.cross(front, np.asarray(up_direction, dtype=float)))
    up = np.cross(right, front)

    return np.array(
        [
            [right[0], right[1], right[2], -np.dot(eye, right)],
            [up[0], up[1], up[2], -np.dot(eye, up)],
            [-front[0], -front[1], -front[2], np.dot(eye, front)],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def look_at_lh(eye, target, up_direction):
    """Left-handed view matrix looking from ``eye`` towards ``target``."""
    eye = np.asarray(eye, dtype=float)
    front = normalize(np.asarray(target, dtype=float) - eye)
    right = normalize(np.cross(np.asarray(up_direction, dtype=float), front))
    up = np.cross(front, right)

    return np.array(
        [
            [right[0], right[1], right[2], -np.dot(eye, right)],
            [up[0], up[1], up[2], -np.dot(eye, up)],
            [front[0], front[1], front[2], -np.dot(eye, front)],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )