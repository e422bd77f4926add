"""Quaternions and the small vector helpers they rely on."""

from __future__ import annotations

import math
import numbers

import numpy as np


def norm(vector):
    """Euclidean length of a vector."""
    return float(np.linalg.norm(np.asarray(vector, dtype=float)))


def normalize(vector):
    """Return the vector scaled to unit length."""
    array = np.asarray(vector, dtype=float)
    length = float(np.linalg.norm(array))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return array / length


class Quaternion:
    """A quaternion with scalar part ``w`` and vector part ``v``."""

    __slots__ = ("w", "v")

    def __init__(self, w=1.0, v=(0.0, 0.0, 0.0)):
        vector = np.array(v, dtype=float)
        if vector.shape != (3,):
            raise ValueError("the vector part of a quaternion needs three components")
        vector.flags.writeable = False
        self.w = float(w)
        self.v = vector

    @classmethod
    def identity(cls):
        return cls(1.0)

    @classmethod
    def from_angle_axis(cls, angle, axis):
        """Rotation of ``angle`` radians about ``axis`` (expected unit length)."""
        half = angle * 0.5
        return cls(math.cos(half), math.sin(half) * np.asarray(axis, dtype=float))

    @classmethod
    def from_euler_angles(cls, pitch, yaw, roll):
        """Orientation from pitch (x), yaw (y) and roll (z) angles in radians."""
        cx, cy, cz = (math.cos(a * 0.5) for a in (pitch, yaw, roll))
        sx, sy, sz = (math.sin(a * 0.5) for a in (pitch, yaw, roll))
        return cls(
            cx * cy * cz + sx * sy * sz,
            (
                sx * cy * cz - cx * sy * sz,
                cx * sy * cz + sx * cy * sz,
                cx * cy * sz - sx * sy * cz,
            ),
        )

    @property
    def x(self):
        return float(self.v[0])

    @property
    def y(self):
        return float(self.v[1])

    @property
    def z(self):
        return float(self.v[2])

    def norm(self):
        return math.sqrt(self.dot(self))

    def dot(self, other):
        return self.w * other.w + float(np.dot(self.v, other.v))

    def conjugate(self):
        return Quaternion(self.w, -self.v)

    def inverse(self):
        squared = self.dot(self)
        if squared == 0.0:
            raise ZeroDivisionError("the zero quaternion has no inverse")
        return self.conjugate() / squared

    def rotate(self, vector):
        """Rotate a 3-vector by this quaternion."""
        rotated = self * Quaternion(0.0, vector) * self.inverse()
        return np.array(rotated.v)

    def __iter__(self):
        yield self.w
        yield from (float(c) for c in self.v)

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.w == other.w and bool(np.array_equal(self.v, other.v))

    __hash__ = None

    def __repr__(self):
        return f"Quaternion(w={self.w!r}, v=({self.x!r}, {self.y!r}, {self.z!r}))"

    def __add__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w + other.w, self.v + other.v)

    def __sub__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w - other.w, self.v - other.v)

    def __neg__(self):
        return Quaternion(-self.w, -self.v)

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            return Quaternion(
                self.w * other.w - float(np.dot(self.v, other.v)),
                self.w * other.v + other.w * self.v + np.cross(self.v, other.v),
            )
        if isinstance(other, numbers.Real):
            return Quaternion(self.w * other, self.v * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return Quaternion(other * self.w, other * self.v)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, numbers.Real):
            return Quaternion(self.w / other, self.v / other)
        return NotImplemented