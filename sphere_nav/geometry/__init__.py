# sphere_nav/geometry - Point distribution and distance utilities
"""
GEOMETRY: Points on a Sphere
============================

Deterministic placement of N points on a sphere and the distance queries
the graph builder and the viewer need.

USAGE:
------
    from sphere_nav.geometry import distribute, scale_to_radius

    unit = distribute(36)               # (36, 3) unit vectors
    points = scale_to_radius(unit, 2.0) # on a sphere of radius 2
"""

from .fibonacci import (
    GOLDEN_ANGLE,
    distribute,
    scale_to_radius,
    pairwise_distances,
    nearest_index,
)

__all__ = [
    'GOLDEN_ANGLE',
    'distribute',
    'scale_to_radius',
    'pairwise_distances',
    'nearest_index',
]
