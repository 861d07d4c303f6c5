# search/dijkstra.py
import time
from collections.abc import Iterable

from graph_pathfinder.domain.entities.graph import Edge, Vertex
from graph_pathfinder.search.common import INF, prepare, walk_predecessors
from graph_pathfinder.search.frontier import Frontier
from graph_pathfinder.search.hooks import NoopHooks, SearchHooks
from graph_pathfinder.search.result import Result, assemble

NAME = "dijkstra"


def find_path_dijkstra(
    start: Vertex | int,
    end: Vertex | int,
    vertices: Iterable[Vertex],
    edges: Iterable[Edge],
    directed_default: bool = False,
    *,
    hooks: SearchHooks | None = None,
) -> Result:
    """
    Uniform-cost search. Assumes non-negative weights (not validated); an
    unweighted edge costs 1. `directed_default` does not change traversal,
    each edge's own flag decides which way it can be walked.
    Stops as soon as `end` is finalized.
    """
    hooks = hooks or NoopHooks()
    t0 = time.perf_counter()
    g = prepare(start, end, vertices, edges, algorithm=NAME, hooks=hooks)
    hooks.run_start(
        algorithm=NAME, start=g.start, end=g.end, vertices=len(g.vertices), edges=len(g.edges)
    )

    dist = dict.fromkeys(g.vertices, INF)
    dist[g.start] = 0
    prev: dict[int, int] = {}
    done: set[int] = set()
    relaxations = 0

    q = Frontier()
    q.push(g.start, 0)
    while q:
        u, _ = q.pop()
        if u in done:
            continue  # stale entry
        done.add(u)
        hooks.finalize(u, cost=dist[u])
        if u == g.end:
            break
        for v, w in g.adj[u]:
            if v in done:
                continue
            alt = dist[u] + w
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u
                q.push(v, alt)
                relaxations += 1
                hooks.relax(u, v, cost=alt)

    path: list[int] = []
    if dist[g.end] < INF:
        path, _ = walk_predecessors(prev, g.start, g.end)

    result = assemble(
        NAME,
        t0=t0,
        path=g.to_vertices(path),
        cost=dist[g.end],
        visited=len(done),
        relaxations=relaxations,
    )
    hooks.run_end(algorithm=NAME, result=result)
    return result
