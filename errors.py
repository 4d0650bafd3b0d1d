"""
Exception types raised by the edge-profile scanning pipeline.

This module provides:
    • ScanError            (base class)
    • ConfigurationError   (bad scan parameters, unknown names)
    • ResourceError        (pixel buffer locking problems)
    • SelectionStateError  (bounded selection used out of order)

Geometry never raises: degenerate segments simply produce empty scans.
"""


class ScanError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(ScanError, ValueError):
    """Invalid scan parameters (negative tolerance, unknown direction, ...)."""


class ResourceError(ScanError, RuntimeError):
    """A pixel buffer could not be acquired or was used while unlocked."""


class SelectionStateError(ScanError, RuntimeError):
    """A bounded selection was read before finalize() or written after it."""
