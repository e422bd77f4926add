"""A two-dimensional orthographic camera built on :class:`Camera`."""

from __future__ import annotations

import enum

import numpy as np

from neatgfx.camera import Camera


class KeepAspect(enum.Enum):
    """Which side of the view stays fixed when the camera size changes."""

    HEIGHT = enum.auto()
    WIDTH = enum.auto()


class Camera2D:
    """An orthographic camera moving in the xy plane, rotating about z."""

    def __init__(self, position, size, keep_aspect=KeepAspect.HEIGHT):
        self._z = 0.0
        self._zoom_level = 1.0
        self._camera = Camera(self._to_3d(position))
        self._size = size
        self._keep_aspect = keep_aspect
        self._update_projection()

    def _to_3d(self, vector):
        array = np.asarray(vector, dtype=float)
        if array.shape != (2,):
            raise ValueError("expected a vector with two components")
        return np.array([array[0], array[1], self._z])

    @property
    def camera(self):
        return self._camera

    @property
    def position(self):
        return self._camera.position[:2]

    @position.setter
    def position(self, value):
        self._camera.position = self._to_3d(value)

    @property
    def x(self):
        return float(self._camera.position[0])

    @x.setter
    def x(self, value):
        position = self._camera.position
        position[0] = value
        self._camera.position = position

    @property
    def y(self):
        return float(self._camera.position[1])

    @y.setter
    def y(self, value):
        position = self._camera.position
        position[1] = value
        self._camera.position = position

    @property
    def rotation(self):
        """Rotation about the z axis, in degrees."""
        return self._camera.roll

    @rotation.setter
    def rotation(self, value):
        self._camera.roll = value

    @property
    def up_direction(self):
        return self._camera.up_direction[:2]

    @property
    def right_direction(self):
        return self._camera.right_direction[:2]

    @property
    def size(self):
        return self._size

    @size.setter
    def size(self, value):
        self.set_size(value)

    @property
    def keep_aspect(self):
        return self._keep_aspect

    @property
    def zoom_level(self):
        return self._zoom_level

    @zoom_level.setter
    def zoom_level(self, value):
        self._zoom_level = value
        self._update_projection()

    @property
    def near(self):
        return self._camera.near

    @near.setter
    def near(self, value):
        self._camera.near = value

    @property
    def far(self):
        return self._camera.far

    @far.setter
    def far(self, value):
        self._camera.far = value

    def set_size(self, size, keep_aspect=None):
        """Change the size and, optionally, which side is kept fixed."""
        if keep_aspect is not None:
            self._keep_aspect = keep_aspect
        self._size = size
        self._update_projection()

    def rotate(self, rotation):
        """Add ``rotation`` degrees to the rotation about z."""
        self._camera.rotate(0.0, 0.0, rotation)

    def move(self, offset):
        self._camera.move(self._to_3d(offset))

    def move_x(self, distance):
        self._camera.move((distance, 0.0, 0.0))

    def move_y(self, distance):
        self._camera.move((0.0, distance, 0.0))

    def move_up(self, distance):
        self._camera.move_up(distance)

    def move_down(self, distance):
        self._camera.move_down(distance)

    def move_right(self, distance):
        self._camera.move_right(distance)

    def move_left(self, distance):
        self._camera.move_left(distance)

    def projection_matrix(self):
        return self._camera.projection_matrix()

    def view_matrix(self):
        return self._camera.view_matrix()

    def camera_transform(self):
        return self._camera.camera_transform()

    def _update_projection(self):
        zoom = self._zoom_level
        extent = self._size * zoom
        if self._keep_aspect is KeepAspect.HEIGHT:
            self._camera.set_orthographic(-extent, extent, -zoom, zoom)
        else:
            self._camera.set_orthographic(-zoom, zoom, -extent, extent)