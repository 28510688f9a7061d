# sphere_nav - Navigable Graphs on a Sphere
"""
SPHERE-NAV: Point Graphs on a Sphere and Paths Through Them
===========================================================

This package provides:
- Deterministic Fibonacci-sphere point placement
- Fixed-degree nearest-neighbor graphs over those points
- Structural edits (grow / shrink) with dense 1..N relabelling
- A constrained best-first search that avoids the previous trip

ARCHITECTURE:
-------------
    geometry/       Point distribution and distance utilities
    model.py        Node definition
    kernel/         Adjacency builder and path search
    graph.py        SphereGraph: lifecycle, mutation, travel state
    traversal.py    Edge-by-edge pacing of a found path
    viz/            Plotly viewer
    config.py       Defaults (GraphConfig)
"""

from .config import CONFIG, GraphConfig
from .model import Node
from .graph import SphereGraph, SearchResult
from .kernel import SearchOutcome, search_path, connect_nearest_neighbors
from .traversal import TraversalDriver, TraversalStep, GraphBusyError

__version__ = "0.1.0"

__all__ = [
    'CONFIG',
    'GraphConfig',
    'Node',
    'SphereGraph',
    'SearchResult',
    'SearchOutcome',
    'search_path',
    'connect_nearest_neighbors',
    'TraversalDriver',
    'TraversalStep',
    'GraphBusyError',
]
