import math

import numpy as np
import pytest

from neatgfx.quaternion import Quaternion
from neatgfx.transform import (
    rotate,
    rotate_quaternion,
    rotate_x,
    rotate_y,
    rotate_z,
    scale,
    translate,
)


def _affine():
    m = np.arange(16, dtype=float).reshape(4, 4)
    m[3] = (0.0, 0.0, 0.0, 1.0)
    return m


def test_translate_moves_origin_to_offset():
    offset = (1.5, -2.0, 3.25)
    point = translate(offset) @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(point[:3], offset)
    assert point[3] == 1.0


def test_translate_inverse_is_negated_offset():
    offset = np.array([0.3, 4.0, -7.0])
    assert np.allclose(translate(offset) @ translate(-offset), np.identity(4))


def test_translate_with_matrix_post_multiplies():
    m = np.arange(16, dtype=float).reshape(4, 4)
    offset = (2.0, -1.0, 0.5)
    assert np.allclose(translate(offset, m), m @ translate(offset))


def test_translate_rejects_wrong_shape():
    with pytest.raises(ValueError):
        translate((1.0, 2.0))


@pytest.mark.parametrize("angle", [0.0, 0.4, 1.2, -2.5])
def test_axis_rotations_match_general_rotate(angle):
    assert np.allclose(rotate(angle, (1.0, 0.0, 0.0)), rotate_x(angle))
    assert np.allclose(rotate(angle, (0.0, 1.0, 0.0)), rotate_y(angle))
    assert np.allclose(rotate(angle, (0.0, 0.0, 1.0)), rotate_z(angle))


def test_rotate_normalizes_axis():
    assert np.allclose(rotate(0.7, (0.0, 0.0, 5.0)), rotate_z(0.7))


def test_rotation_is_orthonormal():
    r = rotate(1.1, (1.0, 2.0, 3.0))[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))
    assert math.isclose(np.linalg.det(r), 1.0)


def test_rotation_preserves_axis():
    axis = np.array([1.0, 2.0, 3.0])
    r = rotate(0.9, axis)
    assert np.allclose((r @ np.append(axis, 1.0))[:3], axis)


def test_rotate_x_inverse():
    assert np.allclose(rotate_x(0.8) @ rotate_x(-0.8), np.identity(4))


def test_rotate_with_matrix_pre_multiplies_affine():
    m = _affine()
    axis = (0.2, -1.0, 0.4)
    assert np.allclose(rotate(0.6, axis, m), rotate(0.6, axis) @ m)


def test_rotate_with_matrix_resets_last_row():
    m = np.arange(16, dtype=float).reshape(4, 4)
    result = rotate(0.3, (0.0, 1.0, 0.0), m)
    assert np.array_equal(result[3], [0.0, 0.0, 0.0, m[3, 3]])


def test_scale_multiplies_components():
    factors = (2.0, 3.0, 4.0)
    point = scale(factors) @ np.array([1.0, 1.0, 1.0, 1.0])
    assert np.allclose(point[:3], factors)


def test_scale_with_matrix_post_multiplies():
    m = np.arange(16, dtype=float).reshape(4, 4)
    factors = (0.5, -1.0, 3.0)
    assert np.allclose(scale(factors, m), m @ scale(factors))


def test_rotate_quaternion_from_identity_matches_matrix():
    axis = (1.0, -1.0, 2.0)
    q = rotate_quaternion(Quaternion.identity(), 0.75, axis)
    point = np.array([0.3, 0.4, -1.2])
    expected = rotate(0.75, axis)[:3, :3] @ point
    assert np.allclose(q.rotate(point), expected)


def test_rotate_quaternion_composes():
    q = rotate_quaternion(Quaternion.identity(), 0.4, (0.0, 0.0, 1.0))
    q = rotate_quaternion(q, 0.5, (0.0, 0.0, 1.0))
    point = np.array([1.0, 2.0, 3.0])
    assert np.allclose(q.rotate(point), rotate_z(0.9)[:3, :3] @ point)