# api/main.py
"""
FastAPI backend for Sphere-Nav - exposes the sphere graph as a REST API.

One graph per process. Every operation runs under a single lock, so a
mutation or search always completes before the next one starts; a request
that arrives while another is in flight is rejected with 409.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Optional
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add project root to path to import sphere_nav
sys.path.insert(0, str(Path(__file__).parent.parent))

from sphere_nav import CONFIG, SphereGraph, TraversalDriver
from sphere_nav.viz import create_sphere_figure


logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)

# Largest graph the API will build or grow to
MAX_NODES = 5000

app = FastAPI(
    title="Sphere-Nav API",
    description="Navigable point graphs on a sphere",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class BuildParams(BaseModel):
    """Input parameters for building a graph."""
    target_count: int = Field(CONFIG.target_count, ge=2, le=MAX_NODES, description="Number of nodes")
    radius: float = Field(CONFIG.radius, gt=0.0, le=100.0, description="Sphere radius")
    k_neighbors: int = Field(CONFIG.k_neighbors, ge=1, le=32, description="Nearest neighbors per node")
    symmetrize_edges: bool = Field(CONFIG.symmetrize_edges, description="Make adjacency mutual")


class AddParams(BaseModel):
    """Number of nodes to add."""
    count: int = Field(1, ge=1, le=1000)


class SearchParams(BaseModel):
    """Target of a trip."""
    target: int = Field(..., description="Label to travel to")
    animate: bool = Field(False, description="Pace the trip edge by edge before answering")


class NodeData(BaseModel):
    """Node geometry and adjacency."""
    label: int
    x: float
    y: float
    z: float
    neighbors: List[int]
    active: bool


class GraphData(BaseModel):
    """Complete graph state."""
    n_nodes: int
    radius: float
    symmetrize_edges: bool
    active: int
    last_trip: List[int]
    nodes: List[NodeData]


class StepData(BaseModel):
    source: int
    target: int


class SearchData(BaseModel):
    """Result of a trip."""
    found: bool
    outcome: str
    path: List[int]
    active: int
    message: Optional[str] = None
    steps: List[StepData] = []


# =============================================================================
# Session
# =============================================================================

class GraphSession:
    """The process-wide graph plus its in-flight guard."""

    def __init__(self):
        self.graph = SphereGraph()
        self.driver = TraversalDriver(step_delay=CONFIG.step_delay)
        self.lock = asyncio.Lock()


session = GraphSession()


def graph_data(graph: SphereGraph) -> GraphData:
    return GraphData(
        n_nodes=len(graph),
        radius=graph.radius,
        symmetrize_edges=graph.config.symmetrize_edges,
        active=graph.active_node.label,
        last_trip=[n.label for n in graph.last_trip],
        nodes=[
            NodeData(
                label=n.label,
                x=round(n.position[0], 6),
                y=round(n.position[1], 6),
                z=round(n.position[2], 6),
                neighbors=n.neighbor_labels(),
                active=n.active,
            )
            for n in graph.nodes
        ],
    )


def _acquire_or_409():
    if session.lock.locked():
        raise HTTPException(status_code=409, detail="Another graph operation is in progress")
    return session.lock


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "Sphere-Nav API"}


@app.get("/api/graph", response_model=GraphData)
async def get_graph():
    """Current graph state."""
    return graph_data(session.graph)


@app.post("/api/graph", response_model=GraphData)
async def build_graph(params: BuildParams):
    """Replace the graph with a freshly built one."""
    async with _acquire_or_409():
        session.graph = SphereGraph.build_initial(
            target_count=params.target_count,
            radius=params.radius,
            k_neighbors=params.k_neighbors,
            symmetrize_edges=params.symmetrize_edges,
        )
        logger.info(f"Built graph with {len(session.graph)} nodes")
        return graph_data(session.graph)


@app.post("/api/graph/nodes", response_model=GraphData)
async def add_nodes(params: AddParams):
    """Grow the graph."""
    async with _acquire_or_409():
        if len(session.graph) + params.count > MAX_NODES:
            raise HTTPException(
                status_code=422,
                detail=f"Graph would exceed {MAX_NODES} nodes",
            )
        session.graph.add_nodes(params.count)
        return graph_data(session.graph)


@app.delete("/api/graph/nodes/{label}", response_model=GraphData)
async def remove_node(label: int):
    """Remove the node with `label` (ignored at the two-node floor)."""
    async with _acquire_or_409():
        graph = session.graph
        if not 1 <= label <= len(graph):
            raise HTTPException(status_code=404, detail=f"No node {label}")
        graph.remove_node(graph.node(label))
        return graph_data(graph)


@app.post("/api/search", response_model=SearchData)
async def search(params: SearchParams):
    """Travel from the active node to `target`."""
    async with _acquire_or_409():
        graph = session.graph
        if not 1 <= params.target <= len(graph):
            raise HTTPException(
                status_code=422,
                detail=f"Target must be between 1 and {len(graph)}",
            )

        result = graph.search(params.target)

        steps = []
        if result.moved and params.animate:
            steps = [
                StepData(source=s.source, target=s.target)
                for s in await session.driver.travel(result.path)
            ]

        message = None
        if not result.found:
            message = f"Node {params.target} not found"
        elif not result.moved:
            message = f"Already at node {params.target}"

        return SearchData(
            found=result.found,
            outcome=result.outcome.value,
            path=result.labels,
            active=graph.active_node.label,
            message=message,
            steps=steps,
        )


@app.get("/api/nearest")
async def nearest(x: float, y: float, z: float):
    """Node closest to a point, e.g. the camera position."""
    node = session.graph.nearest_node((x, y, z))
    return {"label": node.label, "position": list(node.position)}


@app.get("/api/figure")
async def figure():
    """Plotly figure JSON for the current graph."""
    fig = create_sphere_figure(session.graph)
    return json.loads(fig.to_json())


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
