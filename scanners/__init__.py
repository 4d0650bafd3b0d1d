"""
Scanners Package

Scan strategies that cover an image with scan lines, detect edges on
each line and composite the marker strips onto a canvas:
- Row scan
- Column scan
- Inclined scan
"""

from .scan_strategy import (
    ScanStrategy,
    RowScan,
    ColumnScan,
    InclinedScan,
    LineBuffers,
    stretch_strip,
    create_scan_strategy,
)

__all__ = [
    "ScanStrategy",
    "RowScan",
    "ColumnScan",
    "InclinedScan",
    "LineBuffers",
    "stretch_strip",
    "create_scan_strategy",
]
