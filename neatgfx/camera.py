"""A configurable orthographic or perspective camera."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np

from neatgfx.constants import radians
from neatgfx.projection import look_at_rh, orthographic, perspective
from neatgfx.quaternion import Quaternion, normalize


class CameraType(enum.Enum):
    NONE = enum.auto()
    ORTHOGRAPHIC = enum.auto()
    PERSPECTIVE = enum.auto()


@dataclass
class OrthographicProps:
    left: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    top: float = 0.0


@dataclass
class PerspectiveProps:
    field_of_view: float = 0.0
    aspect_ratio: float = 0.0


class CameraTypeNotSetError(RuntimeError):
    """Raised when a camera is used before a projection type is chosen."""

    def __init__(self, message="camera projection type has not been set"):
        super().__init__(message)


class WrongCameraTypeError(RuntimeError):
    """Raised when a property of the other projection type is accessed."""

    def __init__(self, message="camera has a different projection type"):
        super().__init__(message)


_FORWARD = (0.0, 0.0, -1.0)
_RIGHT = (1.0, 0.0, 0.0)
_UP = (0.0, 1.0, 0.0)


class Camera:
    """A camera with position, Euler orientation (degrees) and a projection."""

    def __init__(self, position=(0.0, 0.0, 1.0), up_direction=(0.0, 1.0, 0.0)):
        self._position = np.array(position, dtype=float)
        self.world_up = normalize(up_direction)
        self._type = CameraType.NONE
        self._data = OrthographicProps()
        self._pitch = 0.0
        self._yaw = 0.0
        self._roll = 0.0
        self.near = -1.0
        self.far = 1.0
        self._update_orientation()

    # Projection setup -------------------------------------------------------
    def set_orthographic(self, left, right, bottom, top, near=None, far=None):
        """Use an orthographic projection; ``near``/``far`` are kept if omitted."""
        self._data = OrthographicProps(left, right, bottom, top)
        if near is not None:
            self.near = near
        if far is not None:
            self.far = far
        self._type = CameraType.ORTHOGRAPHIC
        return self

    def set_perspective(self, field_of_view, aspect_ratio, near, far):
        """Use a perspective projection; ``field_of_view`` is in degrees."""
        self._data = PerspectiveProps(field_of_view, aspect_ratio)
        self.near = near
        self.far = far
        self._type = CameraType.PERSPECTIVE
        return self

    @property
    def camera_type(self):
        return self._type

    @property
    def is_orthographic(self):
        return self._type is CameraType.ORTHOGRAPHIC

    @property
    def is_perspective(self):
        return self._type is CameraType.PERSPECTIVE

    def _checked(self, camera_type):
        if self._type is CameraType.NONE:
            raise CameraTypeNotSetError()
        if self._type is not camera_type:
            raise WrongCameraTypeError()
        return self._data

    # Perspective properties -------------------------------------------------
    @property
    def field_of_view(self):
        return self._checked(CameraType.PERSPECTIVE).field_of_view

    @field_of_view.setter
    def field_of_view(self, value):
        self._checked(CameraType.PERSPECTIVE).field_of_view = value

    @property
    def aspect_ratio(self):
        return self._checked(CameraType.PERSPECTIVE).aspect_ratio

    @aspect_ratio.setter
    def aspect_ratio(self, value):
        self._checked(CameraType.PERSPECTIVE).aspect_ratio = value

    # Orthographic properties ------------------------------------------------
    @property
    def left(self):
        return self._checked(CameraType.ORTHOGRAPHIC).left

    @left.setter
    def left(self, value):
        self._checked(CameraType.ORTHOGRAPHIC).left = value

    @property
    def right(self):
        return self._checked(CameraType.ORTHOGRAPHIC).right

    @right.setter
    def right(self, value):
        self._checked(CameraType.ORTHOGRAPHIC).right = value

    @property
    def bottom(self):
        return self._checked(CameraType.ORTHOGRAPHIC).bottom

    @bottom.setter
    def bottom(self, value):
        self._checked(CameraType.ORTHOGRAPHIC).bottom = value

    @property
    def top(self):
        return self._checked(CameraType.ORTHOGRAPHIC).top

    @top.setter
    def top(self, value):
        self._checked(CameraType.ORTHOGRAPHIC).top = value

    # Position and orientation -----------------------------------------------
    @property
    def position(self):
        return self._position.copy()

    @position.setter
    def position(self, value):
        position = np.array(value, dtype=float)
        if position.shape != (3,):
            raise ValueError("camera position needs three components")
        self._position = position

    @property
    def pitch(self):
        return self._pitch

    @pitch.setter
    def pitch(self, value):
        self._pitch = value
        self._update_orientation()

    @property
    def yaw(self):
        return self._yaw

    @yaw.setter
    def yaw(self, value):
        self._yaw = value
        self._update_orientation()

    @property
    def roll(self):
        return self._roll

    @roll.setter
    def roll(self, value):
        self._roll = value
        self._update_orientation()

    @property
    def forward_direction(self):
        return self._forward.copy()

    @property
    def right_direction(self):
        return self._right.copy()

    @property
    def up_direction(self):
        return self._up.copy()

    def set_rotation(self, pitch, yaw, roll):
        """Set all three Euler angles (degrees)."""
        self._pitch, self._yaw, self._roll = pitch, yaw, roll
        self._update_orientation()

    def rotate(self, pitch, yaw, roll):
        """Add to the Euler angles (degrees)."""
        self._pitch += pitch
        self._yaw += yaw
        self._roll += roll
        self._update_orientation()

    def move(self, offset):
        self._position = self._position + np.asarray(offset, dtype=float)

    def move_up(self, distance):
        self._position = self._position + self._up * distance

    def move_down(self, distance):
        self._position = self._position - self._up * distance

    def move_right(self, distance):
        self._position = self._position + self._right * distance

    def move_left(self, distance):
        self._position = self._position - self._right * distance

    def move_forward(self, distance):
        self._position = self._position + self._forward * distance

    def move_backward(self, distance):
        self._position = self._position - self._forward * distance

    # Matrices ---------------------------------------------------------------
    def projection_matrix(self):
        if self._type is CameraType.ORTHOGRAPHIC:
            data = self._data
            return orthographic(
                data.left, data.right, data.bottom, data.top, self.near, self.far
            )
        if self._type is CameraType.PERSPECTIVE:
            data = self._data
            return perspective(
                radians(data.field_of_view), data.aspect_ratio, self.near, self.far
            )
        raise CameraTypeNotSetError()

    def view_matrix(self):
        return look_at_rh(self._position, self._position + self._forward, self._up)

    def camera_transform(self):
        return self.projection_matrix() @ self.view_matrix()

    def _update_orientation(self):
        orientation = Quaternion.from_euler_angles(
            radians(self._pitch), radians(self._yaw), radians(self._roll)
        )
        self._forward = orientation.rotate(_FORWARD)
        self._right = orientation.rotate(_RIGHT)
        self._up = orientation.rotate(_UP)