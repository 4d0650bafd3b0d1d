"""
Utility Functions

Provides Bresenham line paths, colour-distance functions, affine
geometry helpers and image I/O utilities.
"""

from .bresenham_utils import generate_line_points, distance, euclidean_length
from .color_distance import (
    RankingPolicy,
    ColorDistance,
    LuminanceDistance,
    ChannelDistance,
    EuclideanDistance,
    HueDistance,
    get_distance_function,
)
from .geometry import (
    degrees_to_radians,
    incline_slopes,
    translation_matrix,
    rotation_matrix,
    is_integer_translation,
)
from .image_io import load_images, extract_image_id, ensure_output_dir, save_image

__all__ = [
    "generate_line_points",
    "distance",
    "euclidean_length",
    "RankingPolicy",
    "ColorDistance",
    "LuminanceDistance",
    "ChannelDistance",
    "EuclideanDistance",
    "HueDistance",
    "get_distance_function",
    "degrees_to_radians",
    "incline_slopes",
    "translation_matrix",
    "rotation_matrix",
    "is_integer_translation",
    "load_images",
    "extract_image_id",
    "ensure_output_dir",
    "save_image",
]
