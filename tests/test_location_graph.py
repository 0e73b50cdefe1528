import math
import random
from typing import Dict, List, Tuple

import pytest

from common.errors import InvalidWeight, NotFound
from routing.graph import LocationGraph


@pytest.fixture
def campus_graph():
    # The sample map: a triangle of gates plus a separate island.
    graph = LocationGraph()
    graph.add_location("Main Gate", (0.0, 0.0))
    graph.add_location("North Gate", (0.0, 1.0))
    graph.add_location("Reptile House", (1.0, 0.0))
    graph.add_route("Main Gate", "North Gate", 0.8)
    graph.add_route("Main Gate", "Reptile House", 0.9)
    graph.add_route("North Gate", "Reptile House", 1.2)
    graph.add_route("Island", "Lighthouse", 2.0)
    return graph


def brute_force_min_cost(edges: List[Tuple[str, str, float]], start: str, end: str) -> float:
    """
    Cheapest simple path by enumerating every one of them.
    """
    adjacency: Dict[str, Dict[str, float]] = {}
    for a, b, w in edges:
        for u, v in ((a, b), (b, a)):
            current = adjacency.setdefault(u, {}).get(v, math.inf)
            adjacency[u][v] = min(current, w)

    best = math.inf
    stack = [(start, 0.0, {start})]
    while stack:
        node, cost, seen = stack.pop()
        if node == end:
            best = min(best, cost)
            continue
        for neighbour, weight in adjacency.get(node, {}).items():
            if neighbour not in seen:
                stack.append((neighbour, cost + weight, seen | {neighbour}))
    return best


def test_shortest_path_prefers_direct_route(campus_graph):
    assert campus_graph.shortest_path("Main Gate", "North Gate") == ["Main Gate", "North Gate"]
    assert campus_graph.shortest_path("North Gate", "Main Gate") == ["North Gate", "Main Gate"]


def test_shortest_path_takes_cheaper_detour():
    graph = LocationGraph()
    graph.add_route("A", "B", 10)
    graph.add_route("A", "C", 1)
    graph.add_route("C", "B", 2)

    assert graph.shortest_path("A", "B") == ["A", "C", "B"]
    assert graph.route("A", "B").distance == pytest.approx(3.0)


def test_shortest_path_same_location(campus_graph):
    for name in ["Main Gate", "North Gate", "Reptile House", "Island"]:
        assert campus_graph.shortest_path(name, name) == [name]


def test_shortest_path_disconnected_is_empty(campus_graph):
    assert campus_graph.shortest_path("Main Gate", "Island") == []
    route = campus_graph.route("Main Gate", "Lighthouse")
    assert not route.reachable
    assert route.distance == math.inf


def test_shortest_path_unknown_location_is_empty(campus_graph):
    assert campus_graph.shortest_path("Main Gate", "Nowhere") == []
    assert campus_graph.shortest_path("Nowhere", "Main Gate") == []
    assert campus_graph.shortest_path("Nowhere", "Nowhere") == []


def test_edges_are_symmetric(campus_graph):
    assert ("North Gate", 0.8) in campus_graph.neighbours("Main Gate")
    assert ("Main Gate", 0.8) in campus_graph.neighbours("North Gate")


def test_negative_weight_rejected():
    graph = LocationGraph()
    with pytest.raises(InvalidWeight):
        graph.add_route("A", "B", -0.1)
    # nothing half-registered
    assert len(graph) == 0


def test_parallel_edges_use_cheapest():
    graph = LocationGraph()
    graph.add_route("A", "B", 5.0)
    graph.add_route("A", "B", 2.0)

    assert len(graph.neighbours("A")) == 2
    assert graph.shortest_path("A", "B") == ["A", "B"]
    assert graph.path_length(["A", "B"]) == pytest.approx(2.0)


def test_self_loop_never_used():
    graph = LocationGraph()
    graph.add_route("A", "A", 0.0)
    graph.add_route("A", "B", 1.0)

    assert graph.shortest_path("A", "B") == ["A", "B"]
    assert graph.shortest_path("A", "A") == ["A"]


def test_add_location_is_idempotent():
    graph = LocationGraph()
    graph.add_location("A", (1.0, 2.0))
    graph.add_route("A", "B", 1.0)
    graph.add_location("A", (3.0, 4.0))

    assert len(graph) == 2
    assert graph.coordinates("A") == (3.0, 4.0)
    # re-registration must not wipe existing edges
    assert graph.shortest_path("A", "B") == ["A", "B"]


def test_equal_cost_ties_are_deterministic():
    graph = LocationGraph()
    graph.add_route("S", "Y", 1.0)
    graph.add_route("S", "X", 1.0)
    graph.add_route("Y", "T", 1.0)
    graph.add_route("X", "T", 1.0)

    first = graph.shortest_path("S", "T")
    for _ in range(5):
        assert graph.shortest_path("S", "T") == first
    assert first == ["S", "X", "T"]


def test_unknown_location_queries_raise(campus_graph):
    with pytest.raises(NotFound):
        campus_graph.neighbours("Nowhere")
    with pytest.raises(NotFound):
        campus_graph.coordinates("Nowhere")
    with pytest.raises(NotFound):
        campus_graph.path_length(["Main Gate", "Island"])


def test_reachable_from(campus_graph):
    assert campus_graph.reachable_from("Main Gate") == {"Main Gate", "North Gate", "Reptile House"}
    assert campus_graph.reachable_from("Island") == {"Island", "Lighthouse"}
    assert campus_graph.reachable_from("Nowhere") == set()


def test_depth_first_order_follows_insertion_order():
    graph = LocationGraph()
    graph.add_route("A", "B", 1)
    graph.add_route("A", "C", 1)
    graph.add_route("B", "D", 1)
    graph.add_route("C", "E", 1)

    assert graph.depth_first_order("A") == ["A", "B", "D", "C", "E"]
    assert graph.depth_first_order("Nowhere") == []


def test_depth_first_order_handles_long_chain():
    graph = LocationGraph()
    for i in range(5000):
        graph.add_route(f"n{i}", f"n{i + 1}", 1)

    order = graph.depth_first_order("n0")
    assert len(order) == 5001
    assert order[-1] == "n5000"


@pytest.mark.parametrize("seed", range(10))
def test_shortest_path_matches_brute_force(seed):
    """
    Cross-check Dijkstra against exhaustive enumeration on small random graphs.
    """
    rng = random.Random(seed)
    names = [f"L{i}" for i in range(6)]

    graph = LocationGraph()
    for name in names:
        graph.add_location(name)

    edges = []
    for _ in range(rng.randint(3, 10)):
        a, b = rng.choice(names), rng.choice(names)
        w = round(rng.uniform(0, 10), 2)
        edges.append((a, b, w))
        graph.add_route(a, b, w)

    for start in names:
        for end in names:
            expected = brute_force_min_cost(edges, start, end)
            path = graph.shortest_path(start, end)

            if expected == math.inf:
                assert path == []
                continue

            # 1. Path is well formed
            assert path[0] == start
            assert path[-1] == end

            # 2. Path is optimal
            assert graph.path_length(path) == pytest.approx(expected)
