"""
Pluggable colour-distance functions.

This module provides:
    • RankingPolicy                (MAGNITUDE / RECENCY tag)
    • ColorDistance                (base class)
    • LuminanceDistance, ChannelDistance, EuclideanDistance, HueDistance
    • get_distance_function(name)

Every distance maps a pair of BGR colours to a signed scalar and carries
the ranking policy the edge detector must use with it.
"""

from enum import Enum

import cv2
import numpy as np

from errors import ConfigurationError


# Rec.601 luma weights in BGR order
LUMA_WEIGHTS_BGR = np.array([0.114, 0.587, 0.299], dtype=np.float64)


class RankingPolicy(Enum):
    MAGNITUDE = "magnitude"
    RECENCY = "recency"


class ColorDistance:
    """
    Base class. Subclasses implement pairwise(); the scalar form reuses it.
    """

    name = "base"
    ranking = RankingPolicy.RECENCY

    def __call__(self, a, b) -> float:
        pair = np.stack([np.asarray(a), np.asarray(b)]).astype(np.float64)
        return float(self.pairwise(pair)[0])

    def pairwise(self, texture: np.ndarray) -> np.ndarray:
        """
        Returns d where d[i] = distance(texture[i], texture[i + 1]).

        Args:
            texture: (n, 3) BGR samples
        Returns:
            float64 array of length max(n - 1, 0)
        """
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"


class LuminanceDistance(ColorDistance):
    """Signed difference of Rec.601 luma; pairs with magnitude ranking."""

    name = "luminance"
    ranking = RankingPolicy.MAGNITUDE

    def pairwise(self, texture):
        luma = texture.astype(np.float64) @ LUMA_WEIGHTS_BGR
        return luma[:-1] - luma[1:]


class ChannelDistance(ColorDistance):
    """Mean of the signed per-channel differences."""

    name = "channel"

    def pairwise(self, texture):
        t = texture.astype(np.float64)
        return (t[:-1] - t[1:]).mean(axis=1)


class EuclideanDistance(ColorDistance):
    """
    Euclidean distance in BGR space, signed by the direction of the
    luma change (brighter -> darker is positive).
    """

    name = "euclidean"

    def pairwise(self, texture):
        t = texture.astype(np.float64)
        delta = t[:-1] - t[1:]
        magnitude = np.sqrt((delta ** 2).sum(axis=1))
        sign = np.where(delta @ LUMA_WEIGHTS_BGR < 0, -1.0, 1.0)
        return sign * magnitude


class HueDistance(ColorDistance):
    """
    Signed shortest angular hue difference in degrees, in [-180, 180).
    """

    name = "hue"

    def pairwise(self, texture):
        if len(texture) < 2:
            return np.zeros(0, dtype=np.float64)
        # cv2 hue conversion works on 8-bit BGR
        clipped = np.clip(texture.reshape(1, -1, 3), 0, 255)
        strip = np.ascontiguousarray(clipped, dtype=np.uint8)
        hsv = cv2.cvtColor(strip, cv2.COLOR_BGR2HSV)
        # OpenCV stores 8-bit hue as degrees / 2
        hue = hsv[0, :, 0].astype(np.float64) * 2.0
        delta = hue[:-1] - hue[1:]
        return (delta + 180.0) % 360.0 - 180.0


_REGISTRY = {
    cls.name: cls
    for cls in (LuminanceDistance, ChannelDistance, EuclideanDistance, HueDistance)
}


def get_distance_function(name: str) -> ColorDistance:
    """
    Resolve a configured distance-function name to an instance.
    """
    try:
        return _REGISTRY[name]()
    except KeyError:
        raise ConfigurationError(
            f"unknown distance function {name!r}; expected one of {sorted(_REGISTRY)}"
        ) from None
