# sphere_nav/config.py
"""
Graph configuration and defaults.
"""

from dataclasses import dataclass


@dataclass
class GraphConfig:
    """Global defaults for building and navigating a sphere graph."""

    # Geometry
    target_count: int = 36
    radius: float = 2.0

    # Connectivity
    k_neighbors: int = 6
    symmetrize_edges: bool = True

    # Search
    max_iterations: int = 1000

    # Structural floor (two poles)
    min_nodes: int = 2

    # Traversal pacing (seconds per edge)
    step_delay: float = 0.0

    def validate(self) -> "GraphConfig":
        """Raise ValueError on settings the graph cannot work with."""
        if self.radius <= 0:
            raise ValueError(f"radius must be positive, got {self.radius}")
        if self.k_neighbors < 1:
            raise ValueError(f"k_neighbors must be >= 1, got {self.k_neighbors}")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")
        if self.min_nodes < 2:
            raise ValueError(f"min_nodes must be >= 2, got {self.min_nodes}")
        if self.step_delay < 0:
            raise ValueError(f"step_delay must be >= 0, got {self.step_delay}")
        return self


# Global config instance
CONFIG = GraphConfig()
