"""
Scan strategies: full-image line coverage + per-line edge marking.

Each strategy enumerates LineSegments over a width x height image and,
for every segment:
    1. samples a 1-D texture from the PixelSource
    2. runs detect_edges() on it
    3. composites the marker strip onto the Canvas at the segment start

One scan() runs at a time per instance; a second call blocks until the
first returns. A failure on one line aborts the rest of the sweep and
leaves earlier strips on the canvas.
"""

import threading
import time
from typing import List

import cv2
import numpy as np

from config import validate_scan_params
from detectors.edge_detector import detect_edges
from detectors.texture_sampler import get_1d_texture
from errors import ConfigurationError
from models.pixel_source import PixelSource
from models.segment import LineSegment
from utils.geometry import incline_slopes
from visualization.canvas import Canvas


class LineBuffers:
    """Per-line temporaries, dropped on every exit path of a line."""

    def __init__(self):
        self.texture = None
        self.markers = None

    def release(self):
        self.texture = None
        self.markers = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False


def stretch_strip(markers: np.ndarray, length: int) -> np.ndarray:
    """
    Nearest-neighbour resize of an (n, 3) marker strip to `length` samples.
    """
    if length <= len(markers) or len(markers) == 0:
        return markers
    strip = np.ascontiguousarray(markers.reshape(1, len(markers), -1))
    stretched = cv2.resize(strip, (length, 1), interpolation=cv2.INTER_NEAREST)
    return stretched.reshape(length, -1)


class ScanStrategy:
    """
    Base class. Subclasses provide segments() and, when the strip is not
    drawn as-is, composite().
    """

    direction = None

    def __init__(self, source: PixelSource, canvas: Canvas, edge_color, distance_fn):
        self._sync = threading.Lock()
        with self._sync:
            self.source = source
            self.canvas = canvas
            self.edge_color = tuple(int(c) for c in edge_color)
            self._distance_fn = distance_fn

    @property
    def distance_fn(self):
        return self._distance_fn

    @distance_fn.setter
    def distance_fn(self, value):
        with self._sync:
            self._distance_fn = value

    # ------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------
    def segments(self, width: int, height: int) -> List[LineSegment]:
        raise NotImplementedError

    def sample_width(self, segment: LineSegment) -> int:
        return segment.length

    def composite(self, markers: np.ndarray, segment: LineSegment):
        self.canvas.draw_image(markers, segment.start)

    def prepare_canvas(self):
        pass

    # ------------------------------------------------------------
    # Scan
    # ------------------------------------------------------------
    def scan(self, width: int, height: int, max_edges: int, tolerance) -> float:
        """
        Run one full pass over the image.

        Returns:
            elapsed wall-clock time in milliseconds
        Raises:
            ConfigurationError: negative max_edges or tolerance
            ResourceError: the pixel source could not be locked
        """
        validate_scan_params(max_edges, tolerance)

        with self._sync:
            started = time.perf_counter()
            self.prepare_canvas()

            with self.source.locked():
                for segment in self.segments(width, height):
                    self._scan_line(segment, max_edges, tolerance)

            return (time.perf_counter() - started) * 1000.0

    def _scan_line(self, segment, max_edges, tolerance):
        width = self.sample_width(segment)
        if width <= 0:
            return

        with LineBuffers() as buffers:
            buffers.texture = get_1d_texture(self.source, segment, width)
            buffers.markers = detect_edges(
                buffers.texture, max_edges, self._distance_fn, tolerance, self.edge_color
            )
            self.composite(buffers.markers, segment)


class RowScan(ScanStrategy):
    """One segment per image row, strips drawn unrotated."""

    direction = "row"

    def segments(self, width, height):
        return [LineSegment((0, y), (width, y)) for y in range(height)]


class ColumnScan(ScanStrategy):
    """One segment per image column, strips turned 90° clockwise."""

    direction = "column"

    def segments(self, width, height):
        return [LineSegment((x, 0), (x, height)) for x in range(width)]

    def composite(self, markers, segment):
        strip = np.ascontiguousarray(markers.reshape(1, markers.shape[0], -1))
        self.canvas.draw_image(cv2.rotate(strip, cv2.ROTATE_90_CLOCKWISE), segment.start)


class InclinedScan(ScanStrategy):
    """
    Scan lines running `angle` degrees below the x axis (0 < angle < 90).

    Three families tile the rectangle:
        1. main sweep starting on the top edge
        2. left-border triangle, starting on the left edge
        3. right-border triangle, ending on the right edge
    Lines are sampled at their Chebyshev length like the axis scans; the
    marker strip is stretched to the Euclidean length and drawn rotated
    about the segment start.
    """

    direction = "inclined"

    def __init__(self, angle, source, canvas, edge_color, distance_fn):
        if not 0 < angle < 90:
            raise ConfigurationError(f"inclined scan needs 0 < angle < 90, got {angle}")
        super().__init__(source, canvas, edge_color, distance_fn)
        self.angle = angle

    def segments(self, width, height):
        run_per_drop, drop_per_run = incline_slopes(self.angle)

        start = round(height * run_per_drop)
        end = width - start

        result = []

        for i in range(end):
            result.append(LineSegment((i, 0), (i + start, height)))

        for i in range(1, height):
            result.append(LineSegment((0, i), (round(run_per_drop * (height - i)), height)))

        for i in range(max(end, 0), width):
            result.append(LineSegment((i, 0), (width, round(drop_per_run * (width - i)))))

        return result

    def prepare_canvas(self):
        self.canvas.interpolation = cv2.INTER_NEAREST

    def composite(self, markers, segment):
        strip = stretch_strip(markers, round(segment.euclidean_length))
        with self.canvas.saved_transform():
            self.canvas.rotate_about(segment.start, self.angle)
            self.canvas.draw_image(strip, segment.start)


def create_scan_strategy(direction, source, canvas, edge_color, distance_fn, angle=None):
    """
    Build a scan strategy by name.

    An inclined scan at 0° is a row scan and at 90° a column scan; other
    angles outside (0, 90) are rejected.
    """
    if direction == "row":
        return RowScan(source, canvas, edge_color, distance_fn)
    if direction == "column":
        return ColumnScan(source, canvas, edge_color, distance_fn)
    if direction == "inclined":
        if angle is None:
            raise ConfigurationError("inclined scan requires an angle")
        if angle == 0:
            return RowScan(source, canvas, edge_color, distance_fn)
        if angle == 90:
            return ColumnScan(source, canvas, edge_color, distance_fn)
        return InclinedScan(angle, source, canvas, edge_color, distance_fn)

    raise ConfigurationError(
        f"unknown scan direction {direction!r}; expected 'row', 'column' or 'inclined'"
    )
