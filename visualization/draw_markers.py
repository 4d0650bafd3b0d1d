"""
Visualization utilities for edge markers.

This module provides:
    • marker_mask(marker_map, edge_color)
    • combine_marker_masks(marker_maps, edge_color)
    • overlay_markers(image, mask, edge_color, thickness)

It is used by:
    - main.py
    - visualization.save_outputs
"""

from typing import Iterable, Tuple

import cv2
import numpy as np


def marker_mask(marker_map: np.ndarray, edge_color: Tuple[int, int, int]) -> np.ndarray:
    """
    Boolean (H, W) mask of the canvas pixels holding the marker colour.
    """
    return np.all(marker_map == np.asarray(edge_color, dtype=marker_map.dtype), axis=2)


def combine_marker_masks(marker_maps: Iterable[np.ndarray], edge_color) -> np.ndarray:
    """
    Union of the marker masks of several scans of the same image.
    """
    combined = None
    for marker_map in marker_maps:
        mask = marker_mask(marker_map, edge_color)
        combined = mask if combined is None else (combined | mask)
    return combined


def overlay_markers(
    image: np.ndarray,
    mask: np.ndarray,
    edge_color: Tuple[int, int, int] = (0, 0, 255),
    thickness: int = 1
) -> np.ndarray:
    """
    Paint masked pixels onto a copy of `image`.

    Args:
        image: BGR numpy array (left untouched)
        mask: boolean (H, W) marker mask
        edge_color: (B, G, R)
        thickness: > 1 dilates the markers with a square kernel
    """
    vis = image.copy()
    if mask is None:
        return vis

    if thickness > 1:
        kernel = np.ones((thickness, thickness), dtype=np.uint8)
        mask = cv2.dilate(mask.astype(np.uint8), kernel) > 0

    vis[mask] = edge_color
    return vis
