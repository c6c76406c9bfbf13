import numpy as np
import pytest

from vicon_mocap.utils import mm_to_m, normalize_quaternion


def test_mm_to_m():
    np.testing.assert_allclose(mm_to_m((1500.0, -20.0, 0.0)), [1.5, -0.02, 0.0])


def test_normalize_quaternion():
    q = normalize_quaternion([1.0, 1.0, 1.0, 1.0])
    np.testing.assert_allclose(q, [0.5, 0.5, 0.5, 0.5])
    assert np.linalg.norm(q) == pytest.approx(1.0)


def test_normalize_zero_quaternion_is_identity():
    np.testing.assert_allclose(normalize_quaternion([0.0, 0.0, 0.0, 0.0]), [0.0, 0.0, 0.0, 1.0])
