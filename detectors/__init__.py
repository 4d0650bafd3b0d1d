"""
Detectors Package

Contains the per-line processing stages:
- 1-D texture sampling along a scan line
- Edge candidate detection and marker strips
"""

from .texture_sampler import sample, get_1d_texture
from .edge_detector import detect_edges, find_edge_candidates, inverse_color

__all__ = [
    "sample",
    "get_1d_texture",
    "detect_edges",
    "find_edge_candidates",
    "inverse_color",
]
