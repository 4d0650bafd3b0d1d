"""
Data Models

Defines the core data structures:
- LineSegment
- EdgeCandidate
- BoundedSelection (magnitude-ranked / recency-bounded)
- PixelSource
"""

from .segment import LineSegment
from .edge_candidate import EdgeCandidate
from .selection import (
    BoundedSelection,
    MagnitudeRankedSelection,
    RecencyBoundedSelection,
    make_selection,
)
from .pixel_source import PixelSource

__all__ = [
    "LineSegment",
    "EdgeCandidate",
    "BoundedSelection",
    "MagnitudeRankedSelection",
    "RecencyBoundedSelection",
    "make_selection",
    "PixelSource",
]
