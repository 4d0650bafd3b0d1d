"""
Centralized output-saving utilities for the edge-profile scanner.

This module provides:
    • save_marker_map(...)
    • save_overlay(...)
    • save_all_outputs(...)

Uses draw_markers to visualize and utils.image_io for filesystem handling.
"""

import os
from typing import Dict

import numpy as np

from visualization.draw_markers import combine_marker_masks, marker_mask, overlay_markers
from utils.image_io import save_image, ensure_output_dir


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_marker_map(path: str, marker_map: np.ndarray):
    """
    Saves the raw canvas of one scan (strip backgrounds included).
    """
    save_image(path, marker_map)


def save_overlay(path: str, base_image: np.ndarray, mask: np.ndarray, edge_color, thickness: int = 1):
    """
    Draws the masked markers over the base image and saves the result.
    """
    save_image(path, overlay_markers(base_image, mask, edge_color, thickness))


# -------------------------------------------------------------------------
#   Save everything for one image
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    image_id: str,
    base_image: np.ndarray,
    marker_maps: Dict[str, np.ndarray],
    edge_color,
):
    """
    Writes, for every scan direction:
        <id>_<direction>_markers.png
        <id>_<direction>_overlay.png
    and, across all directions:
        <id>_combined_overlay.png
    """
    ensure_output_dir(output_dir)

    for direction, marker_map in marker_maps.items():
        save_marker_map(
            os.path.join(output_dir, f"{image_id}_{direction}_markers.png"),
            marker_map,
        )
        save_overlay(
            os.path.join(output_dir, f"{image_id}_{direction}_overlay.png"),
            base_image,
            marker_mask(marker_map, edge_color),
            edge_color,
        )

    if marker_maps:
        save_overlay(
            os.path.join(output_dir, f"{image_id}_combined_overlay.png"),
            base_image,
            combine_marker_masks(marker_maps.values(), edge_color),
            edge_color,
        )
