import threading
from contextlib import contextmanager
from typing import Sequence, Tuple

import cv2
import numpy as np

from errors import ResourceError


class PixelSource:
    """
    Read access to a source image for scan-line sampling.

    It supports:
      - scoped lock/unlock around a batch of reads
      - single and vectorised pixel reads, clamped to the image bounds

    Notes:
      • Grayscale images are promoted to BGR on construction.
      • Reads are served from a read-only view that only exists while
        the source is locked; locking twice is a ResourceError, never a
        silent wait.
    """

    def __init__(self, image: np.ndarray):
        if image.ndim == 2:
            image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
        if image.ndim != 3 or image.shape[2] != 3:
            raise ValueError(f"expected an (H, W, 3) image, got shape {image.shape}")

        self._image = image
        self._view = None
        self._mutex = threading.Lock()

        self.height, self.width = image.shape[:2]
        self.channels = image.shape[2]
        self.dtype = image.dtype

    # ------------------------------------------------------------
    # Locking
    # ------------------------------------------------------------
    @property
    def is_locked(self) -> bool:
        return self._view is not None

    def lock(self):
        if not self._mutex.acquire(blocking=False):
            raise ResourceError("pixel source is already locked")
        view = self._image.view()
        view.flags.writeable = False
        self._view = view

    def unlock(self):
        if self._view is None:
            raise ResourceError("pixel source is not locked")
        self._view = None
        self._mutex.release()

    @contextmanager
    def locked(self):
        self.lock()
        try:
            yield self
        finally:
            self.unlock()

    # ------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------
    def _require_view(self) -> np.ndarray:
        if self._view is None:
            raise ResourceError("pixel source must be locked before reading")
        return self._view

    def get_pixel(self, x: int, y: int) -> np.ndarray:
        view = self._require_view()
        x = min(max(int(x), 0), self.width - 1)
        y = min(max(int(y), 0), self.height - 1)
        return view[y, x]

    def get_pixels(self, points: Sequence[Tuple[int, int]]) -> np.ndarray:
        """
        Returns an (n, 3) array with the colours at `points`.
        """
        view = self._require_view()
        if len(points) == 0:
            return np.zeros((0, self.channels), dtype=self.dtype)
        pts = np.asarray(points, dtype=np.int64).reshape(-1, 2)
        xs = np.clip(pts[:, 0], 0, self.width - 1)
        ys = np.clip(pts[:, 1], 0, self.height - 1)
        return view[ys, xs]
