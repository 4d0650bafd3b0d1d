"""
Destination surface for marker strips.

This module provides:
    • Canvas: a BGR numpy image with a 2-D affine transform stack

draw_image() composes a buffer at a position under the current
transform. Whole-pixel translations are pasted directly; anything else
(rotations) goes through cv2.warpAffine with the canvas interpolation
hint, nearest-neighbour by default so marker pixels are never blended.
"""

from contextlib import contextmanager

import cv2
import numpy as np

from utils.geometry import is_integer_translation, rotation_matrix, translation_matrix


class Canvas:

    def __init__(self, width: int, height: int, background=(0, 0, 0), dtype=np.uint8):
        self.image = np.empty((height, width, 3), dtype=dtype)
        self.image[:] = background
        self.interpolation = cv2.INTER_NEAREST

        self._transform = np.eye(3, dtype=np.float64)
        self._stack = []

    @property
    def width(self) -> int:
        return self.image.shape[1]

    @property
    def height(self) -> int:
        return self.image.shape[0]

    # ------------------------------------------------------------
    # Transform stack
    # ------------------------------------------------------------
    @property
    def transform(self) -> np.ndarray:
        return self._transform.copy()

    def translate(self, dx, dy):
        # object-space: the new operation applies before the current ones
        self._transform = self._transform @ translation_matrix(dx, dy)

    def rotate(self, angle):
        """Rotate by `angle` degrees, clockwise on screen."""
        self._transform = self._transform @ rotation_matrix(angle)

    def rotate_about(self, point, angle):
        x, y = point
        self.translate(x, y)
        self.rotate(angle)
        self.translate(-x, -y)

    def push_transform(self):
        self._stack.append(self._transform.copy())

    def pop_transform(self):
        if not self._stack:
            raise IndexError("transform stack is empty")
        self._transform = self._stack.pop()

    @contextmanager
    def saved_transform(self):
        self.push_transform()
        try:
            yield self
        finally:
            self.pop_transform()

    # ------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------
    def draw_image(self, buffer: np.ndarray, at):
        """
        Draw `buffer` with its top-left pixel at `at` (x, y).

        A 2-D buffer of shape (w, 3) is treated as a one-row strip.
        Pixels falling outside the canvas are clipped.
        """
        buf = np.asarray(buffer)
        if buf.ndim == 2:
            buf = buf.reshape(1, buf.shape[0], buf.shape[1])
        if buf.size == 0:
            return

        matrix = self._transform @ translation_matrix(at[0], at[1])

        if is_integer_translation(matrix):
            self._paste(buf, int(round(matrix[0, 2])), int(round(matrix[1, 2])))
        else:
            self._warp(buf, matrix)

    def _paste(self, buf, x, y):
        h, w = buf.shape[:2]

        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + w, self.width), min(y + h, self.height)
        if x0 >= x1 or y0 >= y1:
            return

        self.image[y0:y1, x0:x1] = buf[y0 - y:y1 - y, x0 - x:x1 - x]

    def _warp(self, buf, matrix):
        h, w = buf.shape[:2]

        # bounding box of the transformed pixel footprint
        corners = np.array([
            [-0.5, w - 0.5, -0.5, w - 0.5],
            [-0.5, -0.5, h - 0.5, h - 0.5],
            [1.0, 1.0, 1.0, 1.0],
        ])
        mapped = matrix @ corners

        x0 = max(int(np.floor(mapped[0].min())), 0)
        y0 = max(int(np.floor(mapped[1].min())), 0)
        x1 = min(int(np.ceil(mapped[0].max())) + 1, self.width)
        y1 = min(int(np.ceil(mapped[1].max())) + 1, self.height)
        if x0 >= x1 or y0 >= y1:
            return

        local = (translation_matrix(-x0, -y0) @ matrix)[:2]
        size = (x1 - x0, y1 - y0)

        src = np.ascontiguousarray(buf)
        warped = cv2.warpAffine(
            src, local, size,
            flags=self.interpolation,
            borderMode=cv2.BORDER_CONSTANT,
            borderValue=0,
        )
        mask = cv2.warpAffine(
            np.ones((h, w), dtype=np.uint8), local, size,
            flags=cv2.INTER_NEAREST,
            borderMode=cv2.BORDER_CONSTANT,
            borderValue=0,
        )

        region = self.image[y0:y1, x0:x1]
        covered = mask > 0
        region[covered] = warped.reshape(region.shape)[covered]
