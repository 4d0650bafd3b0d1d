"""Tests for affine and slope helpers."""

import math

import numpy as np
import pytest

from utils.geometry import (
    degrees_to_radians,
    incline_slopes,
    is_integer_translation,
    rotation_matrix,
    translation_matrix,
)


def test_degrees_to_radians():
    assert degrees_to_radians(180) == pytest.approx(math.pi)


def test_incline_slopes_at_45():
    run_per_drop, drop_per_run = incline_slopes(45)
    assert run_per_drop == pytest.approx(1.0)
    assert drop_per_run == pytest.approx(1.0)


def test_incline_slopes_are_reciprocal():
    run_per_drop, drop_per_run = incline_slopes(30)
    assert run_per_drop * drop_per_run == pytest.approx(1.0)
    assert drop_per_run == pytest.approx(math.tan(math.radians(30)))


class TestMatrices:
    """Tests for translation / rotation matrices."""

    def test_translation(self):
        assert np.allclose(translation_matrix(2, -3) @ [1, 1, 1], [3, -2, 1])

    def test_rotation_inverse(self):
        assert np.allclose(rotation_matrix(30) @ rotation_matrix(-30), np.eye(3))

    def test_integer_translation_detection(self):
        assert is_integer_translation(np.eye(3))
        assert is_integer_translation(translation_matrix(4, 7))
        assert not is_integer_translation(translation_matrix(0.5, 0))
        assert not is_integer_translation(rotation_matrix(10))

    def test_full_turn_is_integer_translation(self):
        assert is_integer_translation(rotation_matrix(30) @ rotation_matrix(-30))
