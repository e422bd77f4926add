import math

import numpy as np
import pytest

from neatgfx.constants import PI
from neatgfx.exponential import (
    QuaternionLogUndefinedError,
    inverse_sqrt,
    quat_exp,
    quat_log,
    quat_pow,
)
from neatgfx.quaternion import Quaternion, normalize


def approx_q(q):
    return pytest.approx(list(q), abs=1e-9)


def test_inverse_sqrt_scalar():
    assert inverse_sqrt(4.0) == pytest.approx(0.5)


def test_inverse_sqrt_array_invariant():
    values = np.array([1.0, 2.5, 9.0, 100.0])
    result = inverse_sqrt(values)
    assert result * np.sqrt(values) == pytest.approx(np.ones_like(values))


def test_log_of_zero_raises():
    with pytest.raises(QuaternionLogUndefinedError):
        quat_log(Quaternion(0.0))


def test_log_of_positive_scalar():
    result = quat_log(Quaternion(3.0))
    assert list(result) == pytest.approx([math.log(3.0), 0.0, 0.0, 0.0])


def test_log_of_negative_scalar():
    result = quat_log(Quaternion(-3.0))
    assert list(result) == pytest.approx([math.log(3.0), PI, 0.0, 0.0])


@pytest.mark.parametrize(
    "q",
    [
        Quaternion.from_angle_axis(0.9, normalize((1.0, 2.0, -1.0))),
        Quaternion(2.0, (0.5, -1.0, 3.0)),
        Quaternion(-0.4, (0.1, 0.2, 0.3)),
    ],
)
def test_exp_inverts_log(q):
    assert list(quat_exp(quat_log(q))) == approx_q(q)


def test_log_of_unit_has_zero_scalar():
    q = Quaternion.from_angle_axis(1.3, normalize((0.0, 1.0, 1.0)))
    assert quat_log(q).w == pytest.approx(0.0, abs=1e-12)


def test_exp_of_pure_scalar_is_identity():
    assert quat_exp(Quaternion(2.0)) == Quaternion.identity()


def test_pow_zero_is_identity():
    assert quat_pow(Quaternion(1.5, (1.0, 2.0, 3.0)), 0.0) == Quaternion.identity()


@pytest.mark.parametrize("angle", [0.6, 2.0])
def test_pow_one_returns_input(angle):
    q = Quaternion.from_angle_axis(angle, normalize((1.0, -1.0, 2.0))) * 1.5
    assert list(quat_pow(q, 1.0)) == approx_q(q)


@pytest.mark.parametrize("angle", [0.6, 2.0])
def test_pow_two_is_square(angle):
    q = Quaternion.from_angle_axis(angle, normalize((0.0, 3.0, 1.0))) * 1.5
    assert list(quat_pow(q, 2.0)) == approx_q(q * q)


def test_square_root_squared():
    q = Quaternion.from_angle_axis(1.0, normalize((2.0, 1.0, 0.5))) * 4.0
    root = quat_pow(q, 0.5)
    assert list(root * root) == approx_q(q)


def test_pow_of_scalar_quaternion():
    result = quat_pow(Quaternion(4.0), 0.5)
    assert list(result) == pytest.approx([math.sqrt(4.0), 0.0, 0.0, 0.0])