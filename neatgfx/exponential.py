"""Exponential, logarithm and power functions, including quaternion forms."""

from __future__ import annotations

import math

import numpy as np

from neatgfx.constants import COS_ONE_HALF, EPSILON, PI
from neatgfx.quaternion import Quaternion, norm


class QuaternionLogUndefinedError(ValueError):
    """Raised when taking the logarithm of the zero quaternion."""

    def __init__(self, message="logarithm of the zero quaternion is undefined"):
        super().__init__(message)


def _clamp_unit(value):
    return max(-1.0, min(1.0, value))


def _real_pow(base, exponent):
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan


def inverse_sqrt(value):
    """``1 / sqrt(value)`` for a scalar or element-wise for an array."""
    array = np.asarray(value, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        result = 1.0 / np.sqrt(array)
    return float(result) if result.ndim == 0 else result


def quat_log(q):
    """Natural logarithm of a quaternion."""
    norm_v = norm(q.v)
    if norm_v < EPSILON:
        if q.w > 0.0:
            return Quaternion(math.log(q.w))
        if q.w < 0.0:
            return Quaternion(math.log(-q.w), (PI, 0.0, 0.0))
        raise QuaternionLogUndefinedError()

    norm_q = q.norm()
    angle = math.acos(_clamp_unit(q.w / norm_q))
    return Quaternion(math.log(norm_q), q.v * angle / norm_v)


def quat_exp(q):
    """Exponential of a quaternion; a vanishing vector part gives the identity."""
    norm_v = norm(q.v)
    if norm_v < EPSILON:
        return Quaternion.identity()

    exp_w = math.exp(q.w)
    v = q.v * math.sin(norm_v) / norm_v
    return Quaternion(exp_w * math.cos(norm_v), exp_w * v)


def quat_pow(q, exponent):
    """Raise a quaternion to a real power."""
    if -EPSILON < exponent < EPSILON:
        return Quaternion.identity()

    norm_q = q.norm()
    if abs(q.w / norm_q) > COS_ONE_HALF:
        # asin is more precise than acos near the poles
        norm_v = norm(q.v)
        if abs(norm_v) < EPSILON:
            return Quaternion(_real_pow(q.w, exponent))
        angle = math.asin(_clamp_unit(norm_v / norm_q))
    else:
        angle = math.acos(_clamp_unit(q.w / norm_q))

    new_angle = angle * exponent
    sin_factor = math.sin(new_angle) / math.sin(angle)
    norm_q_factor = _real_pow(norm_q, exponent - 1.0)

    return Quaternion(
        math.cos(new_angle) * norm_q_factor * norm_q,
        sin_factor * norm_q_factor * q.v,
    )