# graph_pathfinder/domain/graph_builder.py
from dataclasses import dataclass, field, replace

from graph_pathfinder.domain.entities.graph import (
    DEFAULT_COST,
    Edge,
    GraphSnapshot,
    Vertex,
    clamp_weight,
    vertex_id,
)
from graph_pathfinder.domain.errors import InvalidGraphError


@dataclass
class GraphBuilder:
    """
    Mutable editing state behind the search engines.
    Engines never see this object; they get `snapshot()`.
    """

    directed: bool = False  # default for edges added without an explicit flag
    weighted: bool = False  # unweighted additions get DEFAULT_COST when set
    vertices: dict[int, Vertex] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)

    # ---------------- vertices -----------------------

    def add_vertex(self, v: Vertex) -> bool:
        if v.id in self.vertices:
            return False
        self.vertices[v.id] = v
        return True

    def remove_vertex(self, v: Vertex | int) -> bool:
        vid = vertex_id(v)
        if vid not in self.vertices:
            return False
        self.edges = [e for e in self.edges if vid not in (e.source, e.target)]
        del self.vertices[vid]
        return True

    def next_vertex_id(self) -> int:
        return max(self.vertices, default=0) + 1

    # ---------------- edges --------------------------

    def add_edge(
        self,
        a: Vertex | int,
        b: Vertex | int,
        *,
        directed: bool | None = None,
        weight: int | None = None,
    ) -> bool:
        ua, ub = vertex_id(a), vertex_id(b)
        if ua not in self.vertices or ub not in self.vertices:
            raise InvalidGraphError("Both vertices must exist in the graph.")
        # one edge per vertex pair, whatever its orientation
        if any(e.joins(ua, ub) for e in self.edges):
            return False
        if weight is None and self.weighted:
            weight = DEFAULT_COST
        is_directed = self.directed if directed is None else directed
        self.edges.append(Edge(ua, ub, is_directed=is_directed, weight=weight))
        return True

    def remove_edge(self, e: Edge) -> bool:
        try:
            self.edges.remove(e)
        except ValueError:
            return False
        return True

    def set_weight(self, e: Edge, weight: int | None) -> Edge:
        return self._replace_edge(e, weight=clamp_weight(weight))

    def set_directed(self, e: Edge, directed: bool) -> Edge:
        return self._replace_edge(e, is_directed=directed)

    def _replace_edge(self, e: Edge, **changes) -> Edge:
        try:
            i = self.edges.index(e)
        except ValueError:
            raise InvalidGraphError(f"edge {e.source}-{e.target} is not in the graph")
        new = replace(e, **changes)
        self.edges[i] = new
        return new

    def clear(self) -> None:
        self.vertices.clear()
        self.edges.clear()

    def snapshot(self) -> GraphSnapshot:
        return GraphSnapshot.of(self.vertices.values(), self.edges, directed=self.directed)
