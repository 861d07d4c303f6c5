# search/astar.py
import time
from collections.abc import Iterable

from graph_pathfinder.app.protocols import Heuristic
from graph_pathfinder.domain.entities.graph import Edge, Vertex
from graph_pathfinder.search.common import INF, prepare, walk_predecessors
from graph_pathfinder.search.frontier import Frontier
from graph_pathfinder.search.hooks import NoopHooks, SearchHooks
from graph_pathfinder.search.result import Result, assemble

NAME = "astar"


def find_path_astar(
    start: Vertex | int,
    end: Vertex | int,
    vertices: Iterable[Vertex],
    edges: Iterable[Edge],
    heuristic: Heuristic,
    directed_default: bool = False,
    *,
    hooks: SearchHooks | None = None,
) -> Result:
    """
    Heuristic-guided search.

    The frontier is ordered by (f, g, insertion order): lowest f first, ties go
    to the entry with the smaller g, remaining ties are FIFO.

    `heuristic(v, goal)` should be a non-negative estimate of the remaining
    cost. Admissibility is not checked; an overestimating heuristic still
    terminates but the path may not be the cheapest.
    """
    hooks = hooks or NoopHooks()
    t0 = time.perf_counter()
    g = prepare(start, end, vertices, edges, algorithm=NAME, hooks=hooks)
    hooks.run_start(
        algorithm=NAME, start=g.start, end=g.end, vertices=len(g.vertices), edges=len(g.edges)
    )
    goal = g.vertices[g.end]

    g_score = dict.fromkeys(g.vertices, INF)
    f_score = dict.fromkeys(g.vertices, INF)
    g_score[g.start] = 0
    f_score[g.start] = heuristic(g.vertices[g.start], goal)
    prev: dict[int, int] = {}
    closed: set[int] = set()
    relaxations = 0

    q = Frontier()
    q.push(g.start, f_score[g.start], 0)
    while q:
        u, _ = q.pop()
        if u in closed:
            continue
        closed.add(u)
        hooks.finalize(u, cost=g_score[u])
        if u == g.end:
            break
        for v, w in g.adj[u]:
            if v in closed:
                continue
            tentative = g_score[u] + w
            if tentative < g_score[v]:
                prev[v] = u
                g_score[v] = tentative
                f_score[v] = tentative + heuristic(g.vertices[v], goal)
                q.push(v, f_score[v], tentative)
                relaxations += 1
                hooks.relax(u, v, cost=tentative)

    path: list[int] = []
    if g.end in closed:
        path, _ = walk_predecessors(prev, g.start, g.end)

    result = assemble(
        NAME,
        t0=t0,
        path=g.to_vertices(path),
        cost=g_score[g.end],
        visited=len(closed),
        relaxations=relaxations,
    )
    hooks.run_end(algorithm=NAME, result=result)
    return result
