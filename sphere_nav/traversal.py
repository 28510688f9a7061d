# sphere_nav/traversal.py
"""
TRAVERSAL DRIVER: Step Through a Found Path One Edge at a Time
==============================================================

The search returns its whole path at once. Presentation code usually wants
to move along it visibly: one edge, a pause, the next edge. This driver does
that pacing and nothing else. It never changes the graph.

    driver = TraversalDriver(on_step=print, step_delay=0.25)
    result = graph.search(10)
    await driver.travel(result.path)

Each edge produces exactly one await point (asyncio.sleep) followed by one
on_step notification. Only one traversal may run at a time per driver.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .model import Node


logger = logging.getLogger(__name__)


class GraphBusyError(RuntimeError):
    """Raised when an operation starts while another is still in flight."""
    pass


@dataclass(frozen=True)
class TraversalStep:
    """One completed edge of a traversal."""
    index: int
    source: int
    target: int
    total: int

    @property
    def is_last(self) -> bool:
        return self.index == self.total - 1


def path_edges(path: Sequence[Node]) -> List[TraversalStep]:
    """Split a node path into its edges, in travel order."""
    total = max(len(path) - 1, 0)
    return [
        TraversalStep(index=i, source=path[i].label, target=path[i + 1].label, total=total)
        for i in range(total)
    ]


class TraversalDriver:
    """
    Paces a path edge by edge.

    Parameters:
    -----------
    on_step : Optional[Callable[[TraversalStep], None]]
        Called after each edge's pause
    step_delay : float
        Seconds to sleep before each edge (0 still yields to the loop)
    """

    def __init__(
        self,
        on_step: Optional[Callable[[TraversalStep], None]] = None,
        step_delay: float = 0.0,
    ):
        if step_delay < 0:
            raise ValueError(f"step_delay must be >= 0, got {step_delay}")
        self.on_step = on_step
        self.step_delay = step_delay
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def travel(self, path: Sequence[Node]) -> List[TraversalStep]:
        """
        Walk `path`, returning the steps taken.

        Raises:
        -------
        GraphBusyError
            If this driver is already travelling
        """
        if self._in_flight:
            raise GraphBusyError("A traversal is already in progress")

        self._in_flight = True
        taken: List[TraversalStep] = []
        try:
            for step in path_edges(path):
                await asyncio.sleep(self.step_delay)
                if self.on_step is not None:
                    self.on_step(step)
                taken.append(step)
                logger.debug(f"Step {step.index + 1}/{step.total}: {step.source} -> {step.target}")
        finally:
            self._in_flight = False
        return taken
