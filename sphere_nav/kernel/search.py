# sphere_nav/kernel/search.py
"""
PATH SEARCH: Constrained Best-First Search over Node Labels
===========================================================

PURPOSE:
--------
Find A path (not necessarily the shortest) from a start node to the node
carrying a target label, without stepping on any label from the avoid set
and without visiting a node twice.

ALGORITHM:
----------
Greedy best-first search, A*-like in shape:

    frontier = [[start]]                       (score 0)
    loop:
        path  = frontier.pop(0)                lowest score
        tail  = last node of path
        nexts = neighbors(tail) - avoid - path
        if target in nexts:  return path + [target]     first hit wins
        for n in nexts:
            score = len(path) + |label(n) - target|
            insert path + [n] after every frontier entry with score <= it

The frontier is a plain list kept sorted by linear insertion, NOT a heap:
equal scores keep their discovery order, and that order is what makes
the result deterministic.

The heuristic |a - b| (label distance) does not follow the edge structure,
so it is neither admissible nor consistent. Paths are short in practice
because labels follow the spiral, but nothing is guaranteed.

TERMINATION:
------------
The search ends when the frontier is empty or after `max_iterations`
expansions, whichever comes first. No wall clock is involved.
"""

import logging
import operator
from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, List, Sequence

from ..model import Node


logger = logging.getLogger(__name__)


class SearchOutcome(str, Enum):
    """Why a search ended. Callers only need `Path.found`."""
    FOUND = 'found'
    ALREADY_THERE = 'already_there'
    OUT_OF_RANGE = 'out_of_range'
    AVOIDED = 'avoided'
    EXHAUSTED = 'exhausted'
    ITERATION_LIMIT = 'iteration_limit'


@dataclass
class Path:
    """
    A candidate (or final) path through the graph.

    trip holds node indices, always starting at the searching node.
    """
    trip: List[int]
    found: bool = False
    score: float = 0.0
    outcome: SearchOutcome = SearchOutcome.EXHAUSTED
    iterations: int = 0

    @property
    def last(self) -> int:
        return self.trip[-1]


def heuristic(label: int, target_label: int) -> int:
    """Absolute label distance."""
    return abs(label - target_label)


def _insert_by_score(frontier: List[Path], path: Path) -> None:
    """Insert `path` before the first entry with a strictly higher score."""
    for position, queued in enumerate(frontier):
        if queued.score > path.score:
            frontier.insert(position, path)
            return
    frontier.append(path)


def search_path(
    nodes: Sequence[Node],
    start: int,
    target_label: int,
    avoid: AbstractSet[int] = frozenset(),
    max_iterations: int = 1000,
) -> Path:
    """
    Search from node index `start` towards `target_label`.

    Parameters:
    -----------
    nodes : Sequence[Node]
        The graph's node list (index i holds label i + 1)
    start : int
        Index of the node the search starts from
    target_label : int
        Label to reach
    avoid : AbstractSet[int]
        Labels that may not appear anywhere after the start node
    max_iterations : int
        Maximum number of frontier expansions

    Returns:
    --------
    Path
        found=True with the full trip on success, otherwise found=False
        with trip=[start] and the reason in `outcome`
    """
    try:
        target_label = operator.index(target_label)
    except TypeError:
        return Path(trip=[start], outcome=SearchOutcome.OUT_OF_RANGE)

    if not 1 <= target_label <= len(nodes):
        return Path(trip=[start], outcome=SearchOutcome.OUT_OF_RANGE)

    if nodes[start].label == target_label:
        return Path(trip=[start], found=True, outcome=SearchOutcome.ALREADY_THERE)

    if target_label in avoid:
        return Path(trip=[start], outcome=SearchOutcome.AVOIDED)

    target = target_label - 1
    frontier: List[Path] = [Path(trip=[start], score=0.0)]
    iterations = 0

    while frontier:
        if iterations >= max_iterations:
            logger.warning(
                f"Search {nodes[start].label} -> {target_label} stopped after "
                f"{iterations} iterations ({len(frontier)} paths still queued)"
            )
            return Path(
                trip=[start],
                outcome=SearchOutcome.ITERATION_LIMIT,
                iterations=iterations,
            )
        iterations += 1

        path = frontier.pop(0)
        visited = set(path.trip)
        candidates = [
            index for index in nodes[path.last].neighbor_indices
            if nodes[index].label not in avoid and index not in visited
        ]

        if target in candidates:
            logger.debug(
                f"Search {nodes[start].label} -> {target_label} found a "
                f"{len(path.trip)}-edge path in {iterations} iterations"
            )
            return Path(
                trip=path.trip + [target],
                found=True,
                score=path.score,
                outcome=SearchOutcome.FOUND,
                iterations=iterations,
            )

        for index in candidates:
            _insert_by_score(frontier, Path(
                trip=path.trip + [index],
                score=len(path.trip) + heuristic(nodes[index].label, target_label),
            ))

    return Path(trip=[start], outcome=SearchOutcome.EXHAUSTED, iterations=iterations)
