"""
Edge detection on 1-D textures.

A pair of neighbouring samples (i, i + 1) becomes an edge candidate when
both

    |d_i|                  > tolerance   (absolute test)
    | |d_i| - |d_(i-1)| |  > tolerance   (step test)

hold, with d_i = distance_fn(texture[i], texture[i + 1]) and
|d_(-1)| = 0. Candidates go through a BoundedSelection whose ranking
policy is the one carried by the distance function.
"""

import numpy as np

from config import validate_scan_params
from models.edge_candidate import EdgeCandidate
from models.selection import BoundedSelection, make_selection
from utils.color_distance import RankingPolicy


def inverse_color(color):
    """(255 - B, 255 - G, 255 - R): the background behind a marker."""
    return tuple(255 - int(c) for c in color)


def _pairwise_differences(texture, distance_fn) -> np.ndarray:
    if len(texture) < 2:
        return np.zeros(0, dtype=np.float64)
    if hasattr(distance_fn, "pairwise"):
        return distance_fn.pairwise(texture)
    # plain callables get the scalar form
    return np.array(
        [distance_fn(texture[i], texture[i + 1]) for i in range(len(texture) - 1)],
        dtype=np.float64,
    )


def find_edge_candidates(texture, distance_fn, tolerance, selection: BoundedSelection):
    """
    Feed every qualifying pair of `texture` into `selection` and finalize it.

    The step baseline advances on every pair, detected or not.

    Returns:
        the finalized selection
    """
    last_abs_diff = 0.0

    for i, diff in enumerate(_pairwise_differences(texture, distance_fn)):
        abs_diff = abs(float(diff))
        step_diff = abs(abs_diff - last_abs_diff)

        if abs_diff > tolerance and step_diff > tolerance:
            selection.add(EdgeCandidate(position=i, magnitude=float(diff)))

        last_abs_diff = abs_diff

    selection.finalize()
    return selection


def detect_edges(texture, max_edges, distance_fn, tolerance, edge_color):
    """
    Build a marker strip for `texture`.

    Args:
        texture: (n, 3) samples from the texture sampler
        max_edges: capacity of the bounded selection (>= 0)
        distance_fn: ColorDistance or any callable(a, b) -> float
        tolerance: absolute and step threshold (>= 0)
        edge_color: BGR marker colour
    Returns:
        (n, 3) array filled with inverse_color(edge_color), with
        edge_color at every retained candidate position
    Raises:
        ConfigurationError: negative max_edges or tolerance
    """
    validate_scan_params(max_edges, tolerance)

    markers = np.empty_like(texture)
    markers[:] = inverse_color(edge_color)

    policy = getattr(distance_fn, "ranking", RankingPolicy.RECENCY)
    selection = make_selection(policy, max_edges)
    find_edge_candidates(texture, distance_fn, tolerance, selection)

    for candidate in selection:
        markers[candidate.position] = edge_color

    return markers
