"""
Configuration file for the edge-profile scanning system.

Contains a FINE and a COARSE parameter set.
Modules should read values using the get_active_params() function.
"""

from errors import ConfigurationError


# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to True for many low-contrast markers, False for few strong ones
FINE_MODE = True


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

SELECTED_IMAGE_PATTERN = "selected/*.png"
OUTPUT_FOLDER = "output"


# ===============================================================
# FINE-MODE PARAMETERS
# ===============================================================

FINE = {
    "TOLERANCE": 6,
    "MAX_EDGES": 32,
}


# ===============================================================
# COARSE-MODE PARAMETERS
# ===============================================================

COARSE = {
    "TOLERANCE": 20,
    "MAX_EDGES": 8,
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

DISTANCE_FUNCTION = "luminance"    # luminance | channel | euclidean | hue
SCAN_DIRECTIONS = ("row", "column", "inclined")
INCLINE_ANGLE = 45                 # degrees, 0 < angle < 90 for a true incline


# ---------------------------------------------------------------
# VISUALIZATION COLORS (BGR)
# ---------------------------------------------------------------

EDGE_COLOR = (0, 0, 255)           # markers - red
CANVAS_BACKGROUND = (0, 0, 0)      # untouched canvas - black


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by main.py and the scanners so they only import one dictionary.
    """

    base = {
        "DISTANCE_FUNCTION": DISTANCE_FUNCTION,
        "SCAN_DIRECTIONS": SCAN_DIRECTIONS,
        "INCLINE_ANGLE": INCLINE_ANGLE,
        "EDGE_COLOR": EDGE_COLOR,
        "CANVAS_BACKGROUND": CANVAS_BACKGROUND,
    }

    # Merge in fine or coarse mode values
    if FINE_MODE:
        base.update(FINE)
    else:
        base.update(COARSE)

    return base


def validate_scan_params(max_edges, tolerance):
    """
    Fail fast on parameters a scan cannot honour.

    Raises:
        ConfigurationError: negative max_edges or negative tolerance.
    """
    if max_edges < 0:
        raise ConfigurationError(f"max_edges must be >= 0, got {max_edges}")
    if tolerance < 0:
        raise ConfigurationError(f"tolerance must be >= 0, got {tolerance}")
