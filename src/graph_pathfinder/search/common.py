# search/common.py
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from graph_pathfinder.domain.entities.graph import Edge, Vertex, vertex_id
from graph_pathfinder.domain.errors import (
    InvalidEndpointError,
    InvalidGraphError,
    PathfindingError,
)
from graph_pathfinder.search.hooks import NoopHooks, SearchHooks

INF = math.inf

Arc = tuple[int, int]  # (neighbor id, cost)


def _edge_key(e: Edge):
    return (e.source, e.target, e.is_directed, e.weight is None, e.weight or 0)


@dataclass(frozen=True)
class SearchInput:
    """Validated, id-indexed view of one snapshot, private to a single call."""

    start: int
    end: int
    vertices: dict[int, Vertex]
    edges: tuple[Edge, ...]
    adj: dict[int, list[Arc]]

    def to_vertices(self, ids: Iterable[int]) -> list[Vertex]:
        return [self.vertices[i] for i in ids]


def index_vertices(vertices: Iterable[Vertex]) -> dict[int, Vertex]:
    by_id: dict[int, Vertex] = {}
    for v in sorted(vertices, key=lambda v: v.id):
        if v.id in by_id:
            raise InvalidGraphError(f"duplicate vertex id {v.id}")
        by_id[v.id] = v
    return by_id


def prepare(
    start,
    end,
    vertices: Iterable[Vertex],
    edges: Iterable[Edge],
    *,
    algorithm: str,
    hooks: SearchHooks | None = None,
) -> SearchInput:
    """
    Copy the caller's collections into a canonical (id-sorted) form and build the
    outgoing-arc adjacency. A directed edge contributes one arc, an undirected edge
    two. Raises PathfindingError subclasses for invalid input.
    """
    hooks = hooks or NoopHooks()
    try:
        by_id = index_vertices(vertices)
        ordered = tuple(sorted(edges, key=_edge_key))
        for e in ordered:
            for vid in (e.source, e.target):
                if vid not in by_id:
                    raise InvalidGraphError(
                        f"edge {e.source}-{e.target} references unknown vertex {vid}"
                    )
        s, t = vertex_id(start), vertex_id(end)
        if s not in by_id:
            raise InvalidEndpointError("start", s)
        if t not in by_id:
            raise InvalidEndpointError("end", t)
    except PathfindingError as exc:
        hooks.error(algorithm=algorithm, reason=str(exc))
        raise

    adj: dict[int, list[Arc]] = {vid: [] for vid in by_id}
    for e in ordered:
        w = e.cost()
        for u, v in e.arcs():
            adj[u].append((v, w))
    return SearchInput(s, t, by_id, ordered, adj)


def walk_predecessors(
    prev: dict[int, int], start: int, end: int
) -> tuple[list[int], list[int] | None]:
    """
    Follow predecessor links from `end` back to `start`.
    Returns (path, None) on success, ([], None) if `end` is unreachable, and
    ([], cycle) if the links loop before reaching `start`; the cycle is in
    forward (traversal) order.
    """
    path, seen, v = [end], {end}, end
    while v != start:
        u = prev.get(v)
        if u is None:
            return [], None
        if u in seen:
            return [], path[path.index(u) :][::-1]
        path.append(u)
        seen.add(u)
        v = u
    return path[::-1], None


def path_cost(path: Sequence, edges: Iterable[Edge]) -> int | None:
    """Cheapest realisable cost of walking `path`; None if some hop has no edge."""
    best: dict[tuple[int, int], int] = {}
    for e in edges:
        w = e.cost()
        for arc in e.arcs():
            if w < best.get(arc, INF):
                best[arc] = w
    total = 0
    ids = [vertex_id(v) for v in path]
    for hop in zip(ids, ids[1:]):
        if hop not in best:
            return None
        total += best[hop]
    return total
