# Randomized checks against brute force and across engines.
import pytest

from graph_pathfinder.domain.entities.graph import Edge, GraphSnapshot, Vertex
from graph_pathfinder.domain.generators import random_snapshot
from graph_pathfinder.domain.heuristics import zero
from graph_pathfinder.runtime.rng import graph_rng
from graph_pathfinder.search.astar import find_path_astar
from graph_pathfinder.search.bellman_ford import find_path_bellman_ford
from graph_pathfinder.search.common import path_cost
from graph_pathfinder.search.dijkstra import find_path_dijkstra

TRIALS = 40


def brute_force_cost(g: GraphSnapshot, start: int, end: int):
    """Minimum cost over all simple paths, None if end is unreachable."""
    out: dict[int, list[tuple[int, int]]] = {v.id: [] for v in g.vertices}
    for e in g.edges:
        for u, v in e.arcs():
            out[u].append((v, e.cost()))
    best = None
    stack = [(start, 0, {start})]
    while stack:
        u, acc, seen = stack.pop()
        if u == end:
            best = acc if best is None else min(best, acc)
            continue
        for v, w in out[u]:
            if v not in seen:
                stack.append((v, acc + w, seen | {v}))
    return best


def _graphs(tag: str, **kw):
    for trial in range(TRIALS):
        rng = graph_rng(2024, tag, trial)
        n = int(rng.integers(2, 9))
        g = random_snapshot(rng, n, **kw)
        start, end = (int(x) + 1 for x in rng.integers(0, n, size=2))
        yield g, start, end


@pytest.fixture(scope="module")
def nonneg_graphs():
    return list(_graphs("nonneg", edge_prob=0.4, unweighted_share=0.2, weight_range=(0, 15)))


def test_dijkstra_matches_brute_force(nonneg_graphs):
    for g, s, t in nonneg_graphs:
        r = find_path_dijkstra(s, t, g.vertices, g.edges)
        assert r.cost == brute_force_cost(g, s, t)
        if r.found:
            assert path_cost(r.path, g.edges) == r.cost
            assert r.path_ids[0] == s and r.path_ids[-1] == t


def test_bellman_ford_agrees_with_dijkstra(nonneg_graphs):
    for g, s, t in nonneg_graphs:
        d = find_path_dijkstra(s, t, g.vertices, g.edges)
        b = find_path_bellman_ford(s, t, g.vertices, g.edges)
        assert not b.has_negative_cycle
        assert b.cost == d.cost


def test_zero_heuristic_astar_agrees_with_dijkstra(nonneg_graphs):
    for g, s, t in nonneg_graphs:
        d = find_path_dijkstra(s, t, g.vertices, g.edges)
        a = find_path_astar(s, t, g.vertices, g.edges, zero)
        assert a.cost == d.cost


def test_repeated_calls_are_identical(nonneg_graphs):
    for g, s, t in nonneg_graphs[:10]:
        for engine in (find_path_dijkstra, find_path_bellman_ford):
            a = engine(s, t, g.vertices, g.edges)
            b = engine(s, t, g.vertices, g.edges)
            assert (a.path_ids, a.cost, a.vertices_visited, a.edge_relaxations) == (
                b.path_ids,
                b.cost,
                b.vertices_visited,
                b.edge_relaxations,
            )


def test_bellman_ford_negative_weights_sound():
    for g, s, t in _graphs("neg", edge_prob=0.45, directed_share=0.8, weight_range=(-4, 12)):
        r = find_path_bellman_ford(s, t, g.vertices, g.edges)
        if r.has_negative_cycle:
            cycle = r.cycle_ids
            assert r.path == ()
            assert cycle
            closed = cycle + cycle[:1]
            # every hop exists and the loop is negative
            total = path_cost(closed, g.edges)
            assert total is not None and total < 0
        else:
            # no reachable negative cycle => shortest walk is a simple path
            assert r.cost == brute_force_cost(g, s, t)


@pytest.mark.parametrize("engine", ["dijkstra", "bellman_ford", "astar"])
@pytest.mark.parametrize("attempt, effective", [(100_000, 99_999), (-250_000, -99_999)])
def test_out_of_range_weights_are_clamped_for_every_engine(engine, attempt, effective):
    vertices = {Vertex(1), Vertex(2)}
    edges = {Edge(1, 2, is_directed=True, weight=attempt)}
    if engine == "dijkstra":
        r = find_path_dijkstra(1, 2, vertices, edges)
    elif engine == "bellman_ford":
        r = find_path_bellman_ford(1, 2, vertices, edges)
    else:
        r = find_path_astar(1, 2, vertices, edges, zero)
    assert r.cost == effective
