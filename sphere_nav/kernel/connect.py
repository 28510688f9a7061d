# sphere_nav/kernel/connect.py
"""
GRAPH BUILDER: Fixed-Degree Nearest-Neighbor Adjacency
======================================================

PURPOSE:
--------
Give every node on the sphere a short list of neighbors: the k nodes that
are closest to it in straight-line (Euclidean) distance.

ALGORITHM:
----------
1. Build the full N×N distance matrix, with the diagonal set to +inf so a
   node can never pick itself.
2. For each row take the k smallest entries with a STABLE sort, so equal
   distances keep the node-list order.
3. Either:
   - directed (symmetrize_edges=False): node A's neighbors are exactly its
     k nearest, nothing else; or
   - symmetric (symmetrize_edges=True): walk the nodes in order, and for
     every pick B of node A add B to A and A to B when missing. The result
     is mutual (A lists B iff B lists A) and some nodes end up with more
     than k neighbors.

Neighbor lists never contain duplicates or the node itself.

COMPLEXITY:
-----------
O(N² log N) per call. It runs on rebuilds only.
"""

import logging
from typing import List, Sequence

import numpy as np

from ..geometry.fibonacci import pairwise_distances
from ..model import Node


logger = logging.getLogger(__name__)


def nearest_neighbor_indices(positions: np.ndarray, k: int) -> List[List[int]]:
    """
    The k nearest other points for every point, nearest first.

    Returns min(k, N - 1) indices per point.
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")

    n = len(positions)
    if n == 0:
        return []

    distances = pairwise_distances(positions)
    np.fill_diagonal(distances, np.inf)

    take = min(k, n - 1)
    order = np.argsort(distances, axis=1, kind='stable')
    return [order[i, :take].tolist() for i in range(n)]


def connect_nearest_neighbors(
    nodes: Sequence[Node],
    k: int = 6,
    symmetrize_edges: bool = True,
) -> None:
    """
    Fill each node's neighbor list in place.

    Existing neighbor lists are discarded first.

    Parameters:
    -----------
    nodes : Sequence[Node]
        The graph's node list; node i must sit at index i
    k : int
        Number of nearest neighbors each node picks
    symmetrize_edges : bool
        Back-fill reverse edges so adjacency is mutual
    """
    positions = np.array([node.position for node in nodes], dtype=float).reshape(-1, 3)
    picks = nearest_neighbor_indices(positions, k)

    for node in nodes:
        node.neighbor_indices = []

    if not symmetrize_edges:
        for node, nearest in zip(nodes, picks):
            node.neighbor_indices = list(nearest)
    else:
        # Membership sets mirror the ordered lists for O(1) lookups
        members = [set() for _ in nodes]
        for i, nearest in enumerate(picks):
            for j in nearest:
                if j in members[i]:
                    continue
                nodes[i].neighbor_indices.append(j)
                members[i].add(j)
                if i not in members[j]:
                    nodes[j].neighbor_indices.append(i)
                    members[j].add(i)

    logger.debug(
        f"Connected {len(nodes)} nodes (k={k}, symmetric={symmetrize_edges}, "
        f"edges={sum(node.degree for node in nodes)})"
    )
