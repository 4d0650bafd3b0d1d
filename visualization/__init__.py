"""
Visualization Tools

Provides:
- The Canvas destination surface
- Marker masks and overlays
- Output saving
"""

from .canvas import Canvas
from .draw_markers import marker_mask, combine_marker_masks, overlay_markers
from .save_outputs import save_all_outputs, save_marker_map, save_overlay

__all__ = [
    "Canvas",
    "marker_mask",
    "combine_marker_masks",
    "overlay_markers",
    "save_all_outputs",
    "save_marker_map",
    "save_overlay",
]
