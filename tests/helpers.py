"""Shared builders for test textures and images."""

import numpy as np


BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (0, 0, 255)
CYAN = (255, 255, 0)


def gray_row(values):
    """(n, 3) uint8 texture of gray levels."""
    v = np.asarray(values, dtype=np.uint8)
    return np.stack([v, v, v], axis=1)
