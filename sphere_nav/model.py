# sphere_nav/model.py
"""
GRAPH MODEL: Node
=================

A Node is one point on the sphere:
- label: 1-based integer, dense over the live node set (1..N)
- position: (x, y, z) in world coordinates
- neighbor indices into the owning graph's node list

Nodes never hold references to other Node objects. The graph owns one flat
list of nodes (the arena) and adjacency is stored as integer indices into
that list. Because labels are always dense, index i holds label i + 1.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class Node:
    """
    A vertex of the sphere graph.

    Parameters:
    -----------
    label : int
        Unique 1-based label. Reassigned when the graph is renumbered.

    position : Tuple[float, float, float]
        World coordinates (already scaled by the sphere radius).

    neighbor_indices : List[int]
        Indices of adjacent nodes in the owning graph. Written by
        connect_nearest_neighbors; read through `neighbors`.

    active : bool
        True for the single node the traveller currently stands on.
        Only the owning SphereGraph should set it.

    Examples:
    ---------
    >>> n = Node(label=1, position=(0.0, 2.0, 0.0))
    >>> n.neighbors
    ()
    """
    label: int
    position: Tuple[float, float, float]
    neighbor_indices: List[int] = field(default_factory=list)
    active: bool = False

    @property
    def index(self) -> int:
        """Position of this node in the owning graph's node list."""
        return self.label - 1

    @property
    def neighbors(self) -> Tuple[int, ...]:
        """Read-only view of the neighbor indices."""
        return tuple(self.neighbor_indices)

    @property
    def degree(self) -> int:
        return len(self.neighbor_indices)

    def neighbor_labels(self) -> List[int]:
        return [i + 1 for i in self.neighbor_indices]
