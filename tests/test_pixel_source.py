"""Tests for PixelSource locking and reads."""

import numpy as np
import pytest

from errors import ResourceError
from models.pixel_source import PixelSource


@pytest.fixture
def source():
    img = np.arange(4 * 5 * 3, dtype=np.uint8).reshape(4, 5, 3)
    return PixelSource(img)


class TestLocking:
    """Scoped lock / unlock."""

    def test_lock_twice_raises(self, source):
        source.lock()
        with pytest.raises(ResourceError):
            source.lock()
        source.unlock()

    def test_unlock_without_lock_raises(self, source):
        with pytest.raises(ResourceError):
            source.unlock()

    def test_read_while_unlocked_raises(self, source):
        with pytest.raises(ResourceError):
            source.get_pixel(0, 0)

    def test_locked_context_releases_on_error(self, source):
        with pytest.raises(KeyError):
            with source.locked():
                assert source.is_locked
                raise KeyError("boom")
        assert not source.is_locked
        source.lock()
        source.unlock()

    def test_view_is_read_only(self, source):
        with source.locked():
            pixel = source.get_pixel(1, 1)
            with pytest.raises(ValueError):
                pixel[0] = 0


class TestReads:
    """Pixel reads with clamping."""

    def test_get_pixel(self, source):
        with source.locked():
            assert list(source.get_pixel(2, 1)) == [21, 22, 23]

    def test_get_pixel_clamps(self, source):
        with source.locked():
            assert list(source.get_pixel(99, -4)) == list(source.get_pixel(4, 0))

    def test_get_pixels(self, source):
        with source.locked():
            px = source.get_pixels([(0, 0), (4, 3), (5, 4)])
        assert px.shape == (3, 3)
        assert list(px[1]) == list(px[2])

    def test_get_pixels_empty(self, source):
        with source.locked():
            assert source.get_pixels([]).shape == (0, 3)

    def test_grayscale_is_promoted(self):
        gray = np.full((2, 3), 77, dtype=np.uint8)
        src = PixelSource(gray)
        assert src.channels == 3
        with src.locked():
            assert list(src.get_pixel(1, 1)) == [77, 77, 77]

    def test_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            PixelSource(np.zeros((2, 2, 4), dtype=np.uint8))
