# sphere_nav/kernel - Graph construction and pathfinding core
"""
KERNEL: ADJACENCY AND SEARCH
============================

The two algorithms everything else is built around:

- connect.py   Fixed-degree nearest-neighbor adjacency (GraphBuilder)
- search.py    Constrained best-first path search (PathSearch)

Both work on a plain list of Node objects whose neighbor lists hold
integer indices into that same list. Neither keeps any state between calls.
"""

from .connect import connect_nearest_neighbors, nearest_neighbor_indices
from .search import Path, SearchOutcome, heuristic, search_path

__all__ = [
    'connect_nearest_neighbors',
    'nearest_neighbor_indices',
    'Path',
    'SearchOutcome',
    'heuristic',
    'search_path',
]
