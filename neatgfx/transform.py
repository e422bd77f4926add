"""Affine transformation matrices (row-major, column vectors) and quaternion rotation."""

from __future__ import annotations

import math

import numpy as np

from neatgfx.quaternion import Quaternion, normalize


def _as_vec3(vector):
    array = np.asarray(vector, dtype=float)
    if array.shape != (3,):
        raise ValueError("expected a vector with three components")
    return array


def _as_mat4(matrix):
    array = np.asarray(matrix, dtype=float)
    if array.shape != (4, 4):
        raise ValueError("expected a 4x4 matrix")
    return array


def translate(offset, matrix=None):
    """Translation by ``offset``; applied after ``matrix`` when one is given."""
    translation = np.identity(4)
    translation[:3, 3] = _as_vec3(offset)
    if matrix is None:
        return translation
    return _as_mat4(matrix) @ translation


def _rotation3(angle, axis):
    c = math.cos(angle)
    s = math.sin(angle)
    x, y, z = normalize(_as_vec3(axis))

    one_minus_c_x = (1.0 - c) * x
    one_minus_c_y = (1.0 - c) * y
    one_minus_c_z = (1.0 - c) * z

    x2c = one_minus_c_x * x
    xyc = one_minus_c_x * y
    xzc = one_minus_c_x * z
    y2c = one_minus_c_y * y
    yzc = one_minus_c_y * z
    z2c = one_minus_c_z * z

    return np.array(
        [
            [x2c + c, xyc - z * s, xzc + y * s],
            [xyc + z * s, y2c + c, yzc - x * s],
            [xzc - y * s, yzc + x * s, z2c + c],
        ]
    )


def rotate(angle, axis, matrix=None):
    """Rotation of ``angle`` radians about ``axis``.

    With ``matrix``, the rotation is applied to its first three rows and the
    last row becomes ``(0, 0, 0, matrix[3, 3])``.
    """
    rotation = _rotation3(angle, axis)
    if matrix is None:
        result = np.identity(4)
        result[:3, :3] = rotation
        return result

    m = _as_mat4(matrix)
    result = np.zeros((4, 4))
    result[:3, :] = rotation @ m[:3, :]
    result[3, 3] = m[3, 3]
    return result


def rotate_x(angle):
    """Rotation of ``angle`` radians about the x axis."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate_y(angle):
    """Rotation of ``angle`` radians about the y axis."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotate_z(angle):
    """Rotation of ``angle`` radians about the z axis."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scale(factors, matrix=None):
    """Scaling by ``factors``; applied before ``matrix`` when one is given."""
    scaling = np.identity(4)
    scaling[[0, 1, 2], [0, 1, 2]] = _as_vec3(factors)
    if matrix is None:
        return scaling
    return _as_mat4(matrix) @ scaling


def rotate_quaternion(q, angle, axis):
    """Compose ``q`` with a rotation of ``angle`` radians about ``axis``."""
    return q * Quaternion.from_angle_axis(angle, normalize(_as_vec3(axis)))