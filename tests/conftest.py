"""Pytest fixtures for the edge-profile scanner tests."""

import numpy as np
import pytest

from models.pixel_source import PixelSource
from helpers import WHITE, gray_row


@pytest.fixture
def gradient_source():
    """1 x 10 image whose pixel at x has gray level 10 * x + 5."""
    row = gray_row([10 * x + 5 for x in range(10)])
    return PixelSource(row.reshape(1, 10, 3))


@pytest.fixture
def split_image():
    """4 x 10 image: black for x < 5, white for x >= 5."""
    img = np.zeros((4, 10, 3), dtype=np.uint8)
    img[:, 5:] = WHITE
    return img
