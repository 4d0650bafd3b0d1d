"""
Line rasterisation on top of the pybresenham library.

This module provides:
    • generate_line_points(start, end)
    • distance(start, end)
    • euclidean_length(start, end)

Coordinates are (x, y) integer tuples. Paths are ordered from start to
end and include both endpoints.
"""

import math
from typing import List, Tuple

import pybresenham as bres

Coordinate = Tuple[int, int]


# -----------------------------------------------------------
#   Line path
# -----------------------------------------------------------

def generate_line_points(start: Coordinate, end: Coordinate) -> List[Coordinate]:
    """
    Returns the Bresenham pixel path from start to end (both inclusive).

    One coordinate is produced per unit step along the dominant axis, so
    len(path) == distance(start, end) + 1. A degenerate segment
    (start == end) yields a single point.
    """
    x1, y1 = int(start[0]), int(start[1])
    x2, y2 = int(end[0]), int(end[1])

    if (x1, y1) == (x2, y2):
        return [(x1, y1)]

    points = [(int(x), int(y)) for x, y in bres.line(x1, y1, x2, y2)]

    # keep the path oriented start -> end
    if points and points[0] != (x1, y1):
        points.reverse()

    return points


# -----------------------------------------------------------
#   Lengths
# -----------------------------------------------------------

def distance(start: Coordinate, end: Coordinate) -> int:
    """
    Chebyshev distance max(|dx|, |dy|): the natural pixel width of a line.
    """
    return max(abs(end[0] - start[0]), abs(end[1] - start[1]))


def euclidean_length(start: Coordinate, end: Coordinate) -> float:
    return math.dist(start, end)
