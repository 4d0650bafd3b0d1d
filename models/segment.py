from dataclasses import dataclass
from typing import List, Tuple

from utils.bresenham_utils import distance, euclidean_length, generate_line_points


@dataclass(frozen=True)
class LineSegment:
    """
    One scan line: an ordered pair of integer pixel coordinates.

    The end point may lie one pixel past the image (e.g. (width, y) for a
    row scan); sampling truncates or clamps it.
    """

    start: Tuple[int, int]
    end: Tuple[int, int]

    @property
    def length(self) -> int:
        """Chebyshev length, the natural pixel width of the line."""
        return distance(self.start, self.end)

    @property
    def euclidean_length(self) -> float:
        return euclidean_length(self.start, self.end)

    def points(self) -> List[Tuple[int, int]]:
        return generate_line_points(self.start, self.end)
