"""
This module provides:
    - degrees_to_radians
    - incline_slopes
    - translation_matrix
    - rotation_matrix
    - is_integer_translation

Affine matrices are 3x3 float arrays acting on column vectors (x, y, 1)
in image coordinates (y grows downwards).
"""

import math

import cv2
import numpy as np


DEGREE_TO_RADIAN = math.pi / 180.0


def degrees_to_radians(angle):
    return angle * DEGREE_TO_RADIAN


# ----------------------------------------------------------------------
#  INCLINED SCAN SLOPES
# ----------------------------------------------------------------------

def incline_slopes(angle):
    """
    Returns (tan(90 - angle), tan(angle)) for an angle in degrees.

    The first value is the horizontal run per unit of vertical drop of a
    line inclined by `angle` below the x axis, the second its vertical
    drop per unit of horizontal run.
    """
    run_per_drop = math.tan(degrees_to_radians(90 - angle))
    drop_per_run = math.tan(degrees_to_radians(angle))
    return run_per_drop, drop_per_run


# ----------------------------------------------------------------------
#  AFFINE MATRICES
# ----------------------------------------------------------------------

def translation_matrix(dx, dy):
    m = np.eye(3, dtype=np.float64)
    m[0, 2] = dx
    m[1, 2] = dy
    return m


def rotation_matrix(angle):
    """
    Rotation about the origin by `angle` degrees, clockwise on screen.

    cv2.getRotationMatrix2D turns counter-clockwise for positive angles,
    hence the negated angle.
    """
    m = np.eye(3, dtype=np.float64)
    m[:2, :] = cv2.getRotationMatrix2D((0.0, 0.0), -angle, 1.0)
    return m


def is_integer_translation(matrix, eps=1e-9):
    """
    True when `matrix` only shifts by whole pixels (no rotation/scale).
    """
    if not np.allclose(matrix[:2, :2], np.eye(2), atol=eps):
        return False
    offsets = matrix[:2, 2]
    return bool(np.allclose(offsets, np.round(offsets), atol=eps))
