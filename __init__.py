"""
Edge Profile Scanner Package

Samples images along scan lines into 1-D colour profiles, detects
significant colour transitions on each profile and composites edge
markers back onto a canvas:

- Bresenham line paths and 1-D texture sampling
- Tolerance-based edge detection with bounded candidate selection
- Row, column and inclined scan strategies
- Output visualization utilities
"""
__all__ = [
    "config",
    "errors",
    "main",
    "detectors",
    "models",
    "scanners",
    "utils",
    "visualization",
]
