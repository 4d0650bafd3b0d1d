"""
Resampling of scan-line pixel paths into fixed-width 1-D textures.

Two regimes, chosen by comparing the path length n to the target width:

    n >= width   truncation: texture[i] = path[i] for i < width,
                 the tail of the path is dropped
    n <  width   upscale: sample i lands on round(i / n * width) and is
                 held backwards over the gap since the previous sample;
                 the positions after the last sample hold its colour
"""

from typing import Sequence, Tuple

import numpy as np

from models.pixel_source import PixelSource
from models.segment import LineSegment


def sample(path: Sequence[Tuple[int, int]], source: PixelSource, width: int) -> np.ndarray:
    """
    Resample the colours along `path` into exactly `width` samples.

    Parameters
    ----------
    path : sequence of (x, y)
        Ordered pixel coordinates, usually from generate_line_points().
    source : PixelSource
        Locked pixel source; out-of-range coordinates are clamped.
    width : int
        Requested texture width. Zero or negative gives an empty texture.

    Returns
    -------
    np.ndarray
        (max(width, 0), channels) array in the source dtype.
    """
    width = max(int(width), 0)
    texture = np.zeros((width, source.channels), dtype=source.dtype)

    n = len(path)
    if width == 0 or n == 0:
        return texture

    # Truncation regime
    if min(n, width) == width:
        texture[:] = source.get_pixels(path[:width])
        return texture

    # Upscale regime
    colors = source.get_pixels(path)
    last_x = 0
    for i in range(n):
        x = round(i / n * width)
        texture[x] = colors[i]
        texture[last_x + 1:x] = colors[i]
        last_x = x

    texture[last_x + 1:] = colors[-1]
    return texture


def get_1d_texture(source: PixelSource, segment: LineSegment, width=None) -> np.ndarray:
    """
    Rasterise `segment` and sample it; width defaults to the segment's
    Chebyshev length, which always selects the truncation regime.
    """
    if width is None:
        width = segment.length
    return sample(segment.points(), source, width)
