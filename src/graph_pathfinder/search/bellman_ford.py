# search/bellman_ford.py
import time
from collections.abc import Iterable

from graph_pathfinder.domain.entities.graph import Edge, Vertex
from graph_pathfinder.search.common import INF, prepare, walk_predecessors
from graph_pathfinder.search.hooks import NoopHooks, SearchHooks
from graph_pathfinder.search.result import Result, assemble

NAME = "bellman_ford"


def find_path_bellman_ford(
    start: Vertex | int,
    end: Vertex | int,
    vertices: Iterable[Vertex],
    edges: Iterable[Edge],
    directed_default: bool = False,
    *,
    hooks: SearchHooks | None = None,
) -> Result:
    """
    Label-correcting search, tolerant of negative weights.

    Unweighted edges cost 1, the same as in the other engines. An undirected
    edge is relaxed in both directions, so a negative undirected edge is
    itself a negative cycle (u -> v -> u).

    A negative cycle reachable from `start` is reported through
    `has_negative_cycle` / `negative_cycle` with an empty path; it is never
    raised. `vertices_visited` counts the vertices reached from `start`.
    """
    hooks = hooks or NoopHooks()
    t0 = time.perf_counter()
    g = prepare(start, end, vertices, edges, algorithm=NAME, hooks=hooks)
    hooks.run_start(
        algorithm=NAME, start=g.start, end=g.end, vertices=len(g.vertices), edges=len(g.edges)
    )

    arcs = [(u, v, w) for u, out in g.adj.items() for v, w in out]
    dist = dict.fromkeys(g.vertices, INF)
    dist[g.start] = 0
    prev: dict[int, int] = {}
    relaxations = 0

    for _ in range(len(g.vertices) - 1):
        changed = False
        for u, v, w in arcs:
            if dist[u] == INF:
                continue
            alt = dist[u] + w
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u
                relaxations += 1
                changed = True
                hooks.relax(u, v, cost=alt)
        if not changed:
            break  # fixed point

    # Detection pass. Relaxations found here are applied (but not counted) so
    # that the predecessor graph is guaranteed to close a cycle.
    unstable = False
    for u, v, w in arcs:
        if dist[u] != INF and dist[u] + w < dist[v]:
            dist[v] = dist[u] + w
            prev[v] = u
            unstable = True

    visited = sum(1 for d in dist.values() if d < INF)
    cycle: list[int] | None = None
    path: list[int] = []
    if unstable:
        cycle = find_predecessor_cycle(list(g.vertices), arcs, prev)
        if cycle is None:
            hooks.error(algorithm=NAME, reason="negative_cycle_unreconstructable")
            raise RuntimeError("negative cycle detected but no predecessor cycle found")
    elif dist[g.end] < INF:
        path, cycle = walk_predecessors(prev, g.start, g.end)

    if cycle is not None:
        hooks.negative_cycle(cycle, algorithm=NAME)
    result = assemble(
        NAME,
        t0=t0,
        path=g.to_vertices(path),
        cost=dist[g.end],
        visited=visited,
        relaxations=relaxations,
        cycle=None if cycle is None else g.to_vertices(cycle),
    )
    hooks.run_end(algorithm=NAME, result=result)
    return result


def find_predecessor_cycle(
    order: list[int], arcs: list[tuple[int, int, int]], prev: dict[int, int]
) -> list[int] | None:
    """
    Depth-first search restricted to arcs u -> v with prev[v] == u, using an
    explicit stack. The first arc that reaches a vertex still on the stack
    defines the cycle: the stack slice from that vertex to the current one.
    """
    succ: dict[int, list[int]] = {}
    for u, v, _ in arcs:
        if prev.get(v) == u and v not in succ.get(u, ()):
            succ.setdefault(u, []).append(v)

    on_stack, finished = set(), set()
    for root in order:
        if root in on_stack or root in finished:
            continue
        stack = [root]
        children = [iter(succ.get(root, ()))]
        on_stack.add(root)
        while stack:
            nxt = next(children[-1], None)
            if nxt is None:
                done = stack.pop()
                children.pop()
                on_stack.discard(done)
                finished.add(done)
            elif nxt in on_stack:
                return stack[stack.index(nxt) :]
            elif nxt not in finished:
                stack.append(nxt)
                children.append(iter(succ.get(nxt, ())))
                on_stack.add(nxt)
    return None
