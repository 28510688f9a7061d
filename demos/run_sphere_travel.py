#!/usr/bin/env python3
"""
RUN_SPHERE_TRAVEL: Build a Sphere Graph and Travel Across It
============================================================

This demo walks through the whole workflow:
1. Build 36 nodes on a sphere of radius 2
2. Inspect the adjacency of the two poles
3. Travel from node 1 to node 10, edge by edge
4. Show that the previous trip is off limits for the next search
5. Grow and shrink the graph

Run with:
    python demos/run_sphere_travel.py
    python demos/run_sphere_travel.py --html artifacts/sphere.html
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sphere_nav import SphereGraph, TraversalDriver


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 60)
    print(f"  {text}")
    print("=" * 60)


def main():
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('--count', type=int, default=36, help='Initial number of nodes')
    parser.add_argument('--radius', type=float, default=2.0, help='Sphere radius')
    parser.add_argument('--target', type=int, default=10, help='Label to travel to')
    parser.add_argument('--directed', action='store_true', help='Do not back-fill reverse edges')
    parser.add_argument('--html', type=str, default=None, help='Save an interactive plot here')
    args = parser.parse_args()

    # =========================================================================
    # STEP 1: BUILD
    # =========================================================================
    print_header("STEP 1: Build Graph")

    graph = SphereGraph.build_initial(
        target_count=args.count,
        radius=args.radius,
        symmetrize_edges=not args.directed,
    )
    n_edges = sum(1 for _ in graph.edges())
    print(f"\n  Nodes: {len(graph)}")
    print(f"  Edges: {n_edges}")
    print(f"  Active: node {graph.active_node.label}")

    # =========================================================================
    # STEP 2: POLES
    # =========================================================================
    print_header("STEP 2: Pole Adjacency")

    for label in (1, len(graph)):
        node = graph.node(label)
        x, y, z = node.position
        print(f"  Node {label:3d} at ({x:6.3f}, {y:6.3f}, {z:6.3f}) -> {node.neighbor_labels()}")

    # =========================================================================
    # STEP 3: TRAVEL
    # =========================================================================
    print_header(f"STEP 3: Travel to Node {args.target}")

    result = graph.search(args.target)
    if not result.found:
        print(f"\n  Node {args.target} not found ({result.outcome.value})")
        return

    driver = TraversalDriver(
        on_step=lambda step: print(f"  Edge {step.index + 1}/{step.total}: {step.source} -> {step.target}"),
        step_delay=0.1,
    )
    asyncio.run(driver.travel(result.path))
    print(f"\n  Path: {' -> '.join(str(label) for label in result.labels)}")
    print(f"  Active: node {graph.active_node.label}")

    # =========================================================================
    # STEP 4: AVOIDANCE
    # =========================================================================
    print_header("STEP 4: Previous Trip Is Off Limits")

    for label in result.labels[:-1]:
        retry = graph.search(label)
        print(f"  search({label}) -> found={retry.found} ({retry.outcome.value})")

    # =========================================================================
    # STEP 5: GROW AND SHRINK
    # =========================================================================
    print_header("STEP 5: Grow and Shrink")

    graph.add_nodes(4)
    print(f"\n  After add_nodes(4): {len(graph)} nodes, active node {graph.active_node.label}")
    graph.remove_node(graph.node(2))
    print(f"  After removing node 2: {len(graph)} nodes, active node {graph.active_node.label}")

    if args.html:
        from sphere_nav.viz import plot_sphere_graph
        plot_sphere_graph(graph, title="Sphere Graph", outpath=args.html, show=False)


if __name__ == "__main__":
    main()
