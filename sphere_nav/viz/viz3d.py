# sphere_nav/viz/viz3d.py
"""
3D VISUALIZATION: Interactive Sphere Graph Viewer
=================================================

PURPOSE:
--------
Draw a SphereGraph with Plotly so it can be rotated, zoomed and hovered:
- every node as a marker, with its label as text
- every edge as a thin line
- the last trip as a thick highlighted polyline
- the active node enlarged

Nothing here feeds back into the graph. Labels and positions flow out,
nothing flows in.
"""

import os
from typing import Optional

import plotly.graph_objects as go

from ..graph import SphereGraph


def create_sphere_figure(
    graph: SphereGraph,
    title: str = "Sphere Graph",
    show_edges: bool = True,
    show_labels: bool = True,
    show_trip: bool = True,
) -> go.Figure:
    """
    Create a Plotly figure for a sphere graph.

    Parameters:
    -----------
    graph : SphereGraph
        Graph to draw
    title : str
        Plot title
    show_edges : bool
        Draw adjacency lines
    show_labels : bool
        Print node labels next to the markers
    show_trip : bool
        Highlight graph.last_trip

    Returns:
    --------
    go.Figure
        Traces in order: edges (optional), trip (optional), nodes
    """
    fig = go.Figure()

    # =========================================================================
    # DRAW EDGES
    # =========================================================================

    if show_edges:
        edge_x, edge_y, edge_z = [], [], []
        for a, b in graph.edges():
            pa = graph.node(a).position
            pb = graph.node(b).position
            # None breaks the line between segments
            edge_x.extend([pa[0], pb[0], None])
            edge_y.extend([pa[1], pb[1], None])
            edge_z.extend([pa[2], pb[2], None])

        fig.add_trace(go.Scatter3d(
            x=edge_x, y=edge_y, z=edge_z,
            mode='lines',
            line=dict(color='lightsteelblue', width=2),
            name='Edges',
            hoverinfo='skip',
        ))

    # =========================================================================
    # DRAW LAST TRIP
    # =========================================================================

    if show_trip and graph.last_trip:
        fig.add_trace(go.Scatter3d(
            x=[n.position[0] for n in graph.last_trip],
            y=[n.position[1] for n in graph.last_trip],
            z=[n.position[2] for n in graph.last_trip],
            mode='lines+markers',
            line=dict(color='orange', width=6),
            marker=dict(size=4, color='orange'),
            name='Last trip',
            text=[f"Node {n.label}" for n in graph.last_trip],
            hoverinfo='text',
        ))

    # =========================================================================
    # DRAW NODES
    # =========================================================================

    nodes = graph.nodes
    fig.add_trace(go.Scatter3d(
        x=[n.position[0] for n in nodes],
        y=[n.position[1] for n in nodes],
        z=[n.position[2] for n in nodes],
        mode='markers+text' if show_labels else 'markers',
        marker=dict(
            size=[9 if n.active else 4 for n in nodes],
            color=['red' if n.active else '#00a8ff' for n in nodes],
            line=dict(width=1, color='black'),
        ),
        text=[str(n.label) for n in nodes],
        hovertext=[
            f"Node {n.label}: ({n.position[0]:.2f}, {n.position[1]:.2f}, {n.position[2]:.2f}), "
            f"{n.degree} neighbors"
            for n in nodes
        ],
        hoverinfo='text',
        name='Nodes',
    ))

    # =========================================================================
    # LAYOUT
    # =========================================================================

    extent = graph.radius * 1.2
    axis = dict(range=[-extent, extent], showbackground=False)

    fig.update_layout(
        title=dict(text=title, font=dict(size=16)),
        scene=dict(
            xaxis=dict(title='X', **axis),
            yaxis=dict(title='Y', **axis),
            zaxis=dict(title='Z', **axis),
            aspectmode='cube',
            camera=dict(eye=dict(x=0.0, y=0.0, z=2.5)),
        ),
        showlegend=True,
        legend=dict(x=0.02, y=0.98),
        margin=dict(l=0, r=0, t=40, b=0),
    )

    return fig


def plot_sphere_graph(
    graph: SphereGraph,
    title: str = "Sphere Graph",
    outpath: Optional[str] = None,
    show: bool = True,
    **kwargs
) -> go.Figure:
    """
    Create and optionally display/save the sphere graph figure.

    Example:
    --------
    >>> fig = plot_sphere_graph(graph, outpath="artifacts/sphere.html", show=False)
    """
    fig = create_sphere_figure(graph, title=title, **kwargs)

    if outpath:
        os.makedirs(os.path.dirname(outpath) or '.', exist_ok=True)
        fig.write_html(outpath)
        print(f"3D visualization saved to: {outpath}")

    if show:
        fig.show()

    return fig
