# tests/test_search.py
"""
Test the constrained best-first path search on hand-built graphs.

Each graph here is written out as an adjacency table of labels so the
expected paths can be checked by hand.
"""

from sphere_nav.kernel import SearchOutcome, heuristic, search_path
from sphere_nav.model import Node


def make_graph(adjacency, n_nodes):
    """Nodes 1..n_nodes; adjacency maps label -> neighbor labels (in order)."""
    nodes = [Node(label=i + 1, position=(float(i), 0.0, 0.0)) for i in range(n_nodes)]
    for label, neighbors in adjacency.items():
        nodes[label - 1].neighbor_indices = [n - 1 for n in neighbors]
    return nodes


def labels(nodes, path):
    return [nodes[i].label for i in path.trip]


CHAIN = {1: [2], 2: [1, 3], 3: [2, 4], 4: [3]}


class TestFastPaths:

    def test_target_is_start(self):
        nodes = make_graph(CHAIN, 4)
        path = search_path(nodes, start=2, target_label=3)
        assert path.found
        assert path.outcome is SearchOutcome.ALREADY_THERE
        assert labels(nodes, path) == [3]

    def test_out_of_range(self):
        nodes = make_graph(CHAIN, 4)
        for target in (0, -3, 5):
            path = search_path(nodes, start=0, target_label=target)
            assert not path.found
            assert path.outcome is SearchOutcome.OUT_OF_RANGE

    def test_avoided_target(self):
        nodes = make_graph(CHAIN, 4)
        path = search_path(nodes, start=0, target_label=4, avoid={4})
        assert not path.found
        assert path.outcome is SearchOutcome.AVOIDED

    def test_start_equal_beats_avoid(self):
        """Standing on a label from the last trip still counts as arrived."""
        nodes = make_graph(CHAIN, 4)
        path = search_path(nodes, start=0, target_label=1, avoid={1, 2})
        assert path.found and path.outcome is SearchOutcome.ALREADY_THERE


class TestFinding:

    def test_chain(self):
        nodes = make_graph(CHAIN, 4)
        path = search_path(nodes, start=0, target_label=4)
        assert path.found
        assert labels(nodes, path) == [1, 2, 3, 4]

    def test_avoid_forces_detour(self):
        square = {1: [2, 3], 2: [1, 4], 3: [1, 4], 4: [2, 3]}
        nodes = make_graph(square, 4)
        assert labels(nodes, search_path(nodes, 0, 4)) == [1, 3, 4]
        assert labels(nodes, search_path(nodes, 0, 4, avoid={3})) == [1, 2, 4]

    def test_avoid_applies_beyond_first_hop(self):
        graph = {1: [2, 4], 2: [1, 3], 3: [2, 5], 4: [1, 5], 5: [3, 4]}
        nodes = make_graph(graph, 5)
        path = search_path(nodes, 0, 5, avoid={3})
        assert path.found
        assert 3 not in labels(nodes, path)

    def test_first_hit_is_not_necessarily_shortest(self):
        """
        1 -> 2 -> 10 is two edges, but label 9 looks closer to 10, so the
        search follows 1 -> 9 -> 8 first and stops there.
        """
        graph = {1: [9, 2], 2: [1, 10], 9: [1, 8], 8: [9, 10], 10: [2, 8]}
        nodes = make_graph(graph, 10)
        path = search_path(nodes, 0, 10)
        assert path.found
        assert labels(nodes, path) == [1, 9, 8, 10]

    def test_equal_scores_keep_discovery_order(self):
        """4 and 6 are equally far from 5; whichever is listed first wins."""
        left = make_graph({1: [4, 6], 4: [5], 6: [5]}, 6)
        right = make_graph({1: [6, 4], 4: [5], 6: [5]}, 6)
        assert labels(left, search_path(left, 0, 5)) == [1, 4, 5]
        assert labels(right, search_path(right, 0, 5)) == [1, 6, 5]

    def test_paths_never_repeat_nodes(self):
        cyclic = {1: [2, 3], 2: [3, 1], 3: [1, 2, 4], 4: [3, 5], 5: [4, 6], 6: [5]}
        nodes = make_graph(cyclic, 6)
        path = search_path(nodes, 0, 6)
        assert path.found
        assert len(set(path.trip)) == len(path.trip)


class TestDirectedEdges:

    def test_one_way_edges_block_the_return_trip(self):
        """1 -> 2 -> 3 only points forward, so 3 cannot get back to 1."""
        one_way = {1: [2], 2: [3], 3: []}
        nodes = make_graph(one_way, 3)

        forward = search_path(nodes, 0, 3)
        assert forward.found
        assert labels(nodes, forward) == [1, 2, 3]

        back = search_path(nodes, 2, 1)
        assert not back.found
        assert back.outcome is SearchOutcome.EXHAUSTED
        assert back.iterations == 1

    def test_only_outgoing_edges_are_followed(self):
        """4 lists 1, but 1 does not list 4: the only way out of 1 is via 2."""
        graph = {1: [2], 2: [3], 3: [4], 4: [1]}
        nodes = make_graph(graph, 4)
        path = search_path(nodes, 0, 4)
        assert labels(nodes, path) == [1, 2, 3, 4]


class TestTermination:

    def test_disconnected_clusters_exhaust(self):
        clusters = {1: [2, 3], 2: [1, 3], 3: [1, 2], 4: [5, 6], 5: [4, 6], 6: [4, 5]}
        nodes = make_graph(clusters, 6)
        path = search_path(nodes, 0, 5)
        assert not path.found
        assert path.outcome is SearchOutcome.EXHAUSTED
        assert labels(nodes, path) == [1]

    def test_iteration_ceiling(self):
        """A complete graph on 1..7 has thousands of simple paths; 8 is cut off."""
        complete = {i: [j for j in range(1, 8) if j != i] for i in range(1, 8)}
        nodes = make_graph(complete, 8)
        path = search_path(nodes, 0, 8, max_iterations=50)
        assert not path.found
        assert path.outcome is SearchOutcome.ITERATION_LIMIT
        assert path.iterations == 50

    def test_small_complete_graph_exhausts_under_default_ceiling(self):
        complete = {i: [j for j in range(1, 5) if j != i] for i in range(1, 5)}
        nodes = make_graph(complete, 5)
        path = search_path(nodes, 0, 5)
        assert path.outcome is SearchOutcome.EXHAUSTED
        # 1 + 3 + 6 + 6 simple paths from node 1
        assert path.iterations == 16


def test_heuristic_is_label_distance():
    assert heuristic(3, 10) == 7
    assert heuristic(10, 3) == 7
    assert heuristic(4, 4) == 0
