# sphere_nav/geometry/fibonacci.py
"""
FIBONACCI SPHERE: Even Point Distribution by the Golden Angle
=============================================================

PURPOSE:
--------
Place `count` points on the unit sphere so that they are spread roughly
evenly, with no randomness. The same count always gives the same points,
which keeps graphs (and therefore paths) reproducible.

METHOD:
-------
Walk down the y axis from +1 to -1 in equal steps. At each height y the
horizontal circle of the unit sphere has radius sqrt(1 - y²). Rotate each
successive point around the y axis by the golden angle:

    y_i     = 1 - 2 i / (count - 1)
    r_i     = sqrt(1 - y_i²)
    theta_i = i × π (3 - √5)
    x_i     = cos(theta_i) × r_i
    z_i     = sin(theta_i) × r_i

Point 0 is the north pole (0, 1, 0) and point count-1 the south pole.
For count == 1 the denominator is taken as 1, giving the north pole only.
"""

import math
from typing import Sequence

import numpy as np


GOLDEN_ANGLE = math.pi * (3.0 - math.sqrt(5.0))


def distribute(count: int) -> np.ndarray:
    """
    Unit vectors for `count` points on a Fibonacci spiral.

    Parameters:
    -----------
    count : int
        Number of points (>= 1)

    Returns:
    --------
    np.ndarray
        Array of shape (count, 3), one unit vector per row

    Raises:
    -------
    ValueError
        If count < 1
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    denominator = count - 1 if count > 1 else 1
    i = np.arange(count, dtype=float)

    y = 1.0 - (i / denominator) * 2.0
    # Clip guards tiny negative values from rounding at the poles
    r = np.sqrt(np.clip(1.0 - y * y, 0.0, None))
    theta = i * GOLDEN_ANGLE

    x = np.cos(theta) * r
    z = np.sin(theta) * r

    return np.column_stack([x, y, z])


def scale_to_radius(points: np.ndarray, radius: float) -> np.ndarray:
    """Scale unit vectors onto a sphere of the given radius."""
    if radius <= 0:
        raise ValueError(f"radius must be positive, got {radius}")
    return np.asarray(points, dtype=float) * radius


def pairwise_distances(points: np.ndarray) -> np.ndarray:
    """
    Full (N, N) Euclidean distance matrix.

    O(N²) in time and memory. Filled one row at a time so no (N, N, 3)
    temporary is ever allocated. Graphs are only rebuilt on explicit
    structural edits, so this is not on any per-frame path.
    """
    points = np.asarray(points, dtype=float).reshape(-1, 3)
    distances = np.empty((len(points), len(points)), dtype=float)
    for i, point in enumerate(points):
        diff = points - point
        distances[i] = np.sqrt(np.sum(diff * diff, axis=1))
    return distances


def nearest_index(points: np.ndarray, target: Sequence[float]) -> int:
    """
    Index of the point closest to `target` (first one on ties).

    Compares squared distances; used for "which node is the camera
    looking at" style queries.
    """
    points = np.asarray(points, dtype=float)
    if len(points) == 0:
        raise ValueError("no points to search")
    diff = points - np.asarray(target, dtype=float)
    return int(np.argmin(np.einsum('ij,ij->i', diff, diff)))
