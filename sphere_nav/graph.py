# sphere_nav/graph.py
"""
SPHERE GRAPH: Build, Mutate and Travel a Graph on a Sphere
==========================================================

PURPOSE:
--------
SphereGraph owns the node list and everything that changes it:

    rebuild()       positions -> nodes -> adjacency, all from scratch
    add_nodes(n)    grow the target count and rebuild
    remove_node(x)  shrink by one node (never below two) and rebuild
    search(label)   travel from the active node towards a label

It also keeps the two pieces of traveller state:

- the ACTIVE node: where the traveller currently stands
- the LAST TRIP: the most recent successful path; none of its labels may
  be used by the next search

LIFECYCLE RULES:
----------------
- A rebuild replaces every Node object. Do not hold Node references
  across add_nodes/remove_node.
- The new node list is built completely before it replaces the old one,
  so a failed rebuild leaves the previous graph untouched.
- last_trip is cleared on every rebuild.
- The active node is re-anchored by label when that label still exists,
  otherwise it falls back to node 1. When the active node itself is
  removed, node 1 becomes active.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .config import CONFIG, GraphConfig
from .geometry.fibonacci import distribute, nearest_index, scale_to_radius
from .kernel.connect import connect_nearest_neighbors
from .kernel.search import SearchOutcome, search_path
from .model import Node


logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """
    Public outcome of SphereGraph.search.

    path : List[Node]
        Ordered nodes from the start to the target on success, or just the
        start node when nothing was found
    found : bool
        True when the target was reached (or already active)
    outcome : SearchOutcome
        Reason code for diagnostics
    """
    path: List[Node]
    found: bool
    outcome: SearchOutcome

    @property
    def labels(self) -> List[int]:
        return [node.label for node in self.path]

    @property
    def moved(self) -> bool:
        return self.found and len(self.path) > 1


class SphereGraph:
    """
    A navigable k-nearest-neighbor graph over Fibonacci-sphere points.

    Parameters:
    -----------
    target_count : int
        Number of nodes to build (clamped up to the two-node floor)
    radius : float
        Sphere radius
    k_neighbors, symmetrize_edges, max_iterations :
        Override the matching GraphConfig fields

    Examples:
    ---------
    >>> graph = SphereGraph(target_count=36, radius=2.0)
    >>> result = graph.search(10)
    >>> result.found, result.labels[0], result.labels[-1]
    (True, 1, 10)
    """

    def __init__(
        self,
        target_count: Optional[int] = None,
        radius: Optional[float] = None,
        k_neighbors: Optional[int] = None,
        symmetrize_edges: Optional[bool] = None,
        max_iterations: Optional[int] = None,
        config: Optional[GraphConfig] = None,
    ):
        base = config or CONFIG
        self.config = GraphConfig(
            target_count=base.target_count if target_count is None else target_count,
            radius=base.radius if radius is None else radius,
            k_neighbors=base.k_neighbors if k_neighbors is None else k_neighbors,
            symmetrize_edges=base.symmetrize_edges if symmetrize_edges is None else symmetrize_edges,
            max_iterations=base.max_iterations if max_iterations is None else max_iterations,
            min_nodes=base.min_nodes,
            step_delay=base.step_delay,
        ).validate()

        self.target_count = self.config.target_count
        self.nodes: List[Node] = []
        self.last_trip: List[Node] = []
        self._active_index: Optional[int] = None

        self.rebuild()

    @classmethod
    def build_initial(cls, target_count: int, radius: float, **overrides) -> "SphereGraph":
        """Build a graph ready for searching (first node active)."""
        return cls(target_count=target_count, radius=radius, **overrides)

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def radius(self) -> float:
        return self.config.radius

    @property
    def active_node(self) -> Node:
        return self.nodes[self._active_index]

    def __len__(self) -> int:
        return len(self.nodes)

    def node(self, label: int) -> Node:
        """Node carrying `label`. Raises KeyError outside 1..N."""
        if not 1 <= label <= len(self.nodes):
            raise KeyError(f"No node with label {label} (graph has {len(self.nodes)} nodes)")
        return self.nodes[label - 1]

    def positions(self) -> np.ndarray:
        """(N, 3) array of node positions in label order."""
        return np.array([node.position for node in self.nodes], dtype=float).reshape(-1, 3)

    def edges(self) -> Iterator[Tuple[int, int]]:
        """
        Yield (label_a, label_b) pairs.

        Mutual edges are reported once with label_a < label_b. In directed
        mode a one-way edge is reported in its own direction.
        """
        for node in self.nodes:
            for index in node.neighbor_indices:
                other = self.nodes[index]
                if other.label > node.label or node.index not in other.neighbor_indices:
                    yield node.label, other.label

    def nearest_node(self, point: Sequence[float]) -> Node:
        """Node closest to an arbitrary point (e.g. the camera position)."""
        return self.nodes[nearest_index(self.positions(), point)]

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def rebuild(self, anchor_label: Optional[int] = None) -> None:
        """
        Regenerate every node and all adjacency for the current target count.

        Parameters:
        -----------
        anchor_label : Optional[int]
            Label to make active afterwards. Defaults to the current active
            label. Falls back to label 1 when missing or out of range.
        """
        if anchor_label is None and self._active_index is not None:
            anchor_label = self.nodes[self._active_index].label

        count = max(self.config.min_nodes, self.target_count)
        points = scale_to_radius(distribute(count), self.config.radius)

        nodes = [
            Node(label=i + 1, position=(float(x), float(y), float(z)))
            for i, (x, y, z) in enumerate(points)
        ]
        connect_nearest_neighbors(
            nodes,
            k=self.config.k_neighbors,
            symmetrize_edges=self.config.symmetrize_edges,
        )

        if anchor_label is not None and 1 <= anchor_label <= count:
            active_index = anchor_label - 1
        else:
            active_index = 0
        nodes[active_index].active = True

        self.target_count = count
        self.nodes = nodes
        self.last_trip = []
        self._active_index = active_index

        logger.debug(f"Rebuilt graph: {count} nodes, active={active_index + 1}")

    def add_nodes(self, count: int = 1) -> None:
        """
        Grow the graph by `count` nodes and rebuild.

        Raises:
        -------
        ValueError
            If count < 1
        """
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")

        self.target_count += count
        logger.info(f"Adding {count} node(s): target count now {self.target_count}")
        self.rebuild()

    def remove_node(self, node: Node) -> bool:
        """
        Remove one node, renumber the rest and rebuild.

        A no-op (returns False) when the graph is at the two-node floor or
        when `node` is not one of this graph's current nodes.
        """
        if len(self.nodes) <= self.config.min_nodes:
            logger.debug("Remove ignored: graph is at its minimum size")
            return False

        removed = next((i for i, candidate in enumerate(self.nodes) if candidate is node), None)
        if removed is None:
            logger.debug("Remove ignored: node does not belong to this graph")
            return False

        removed_label = node.label
        active = self.nodes[self._active_index]

        # Detach, then close the gap in every remaining index list
        for other in self.nodes:
            other.neighbor_indices = [
                i if i < removed else i - 1
                for i in other.neighbor_indices
                if i != removed
            ]
        del self.nodes[removed]
        node.neighbor_indices = []
        node.active = False

        self.target_count -= 1
        for index, remaining in enumerate(self.nodes):
            remaining.label = index + 1

        anchor = None if active is node else active.label
        self._active_index = None
        logger.info(f"Removed node {removed_label}: target count now {self.target_count}")
        self.rebuild(anchor_label=anchor)
        return True

    # =========================================================================
    # TRAVEL
    # =========================================================================

    def search(self, target_label: int) -> SearchResult:
        """
        Travel from the active node towards `target_label`.

        Never raises for an unreachable or out-of-range label: those come
        back as found=False. On a successful move the path becomes the new
        last trip and its final node becomes active.
        """
        avoid = frozenset(node.label for node in self.last_trip)
        path = search_path(
            self.nodes,
            start=self._active_index,
            target_label=target_label,
            avoid=avoid,
            max_iterations=self.config.max_iterations,
        )
        trip = [self.nodes[index] for index in path.trip]

        if path.outcome is SearchOutcome.FOUND:
            self.nodes[self._active_index].active = False
            self._active_index = path.last
            self.nodes[path.last].active = True
            self.last_trip = trip
            logger.info(f"Trip {' -> '.join(str(node.label) for node in trip)}")
        elif not path.found:
            logger.debug(f"No path to {target_label}: {path.outcome.value}")

        return SearchResult(path=trip, found=path.found, outcome=path.outcome)
