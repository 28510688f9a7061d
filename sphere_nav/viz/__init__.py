# sphere_nav/viz - Visualization Tools
"""
VIZ: Interactive 3D View of a Sphere Graph
==========================================

- viz3d: Plotly figure with nodes, edges, labels, active node and last trip
"""

from .viz3d import create_sphere_figure, plot_sphere_graph

__all__ = ['create_sphere_figure', 'plot_sphere_graph']
