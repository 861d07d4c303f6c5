# domain/entities/graph.py
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

WEIGHT_MIN = -99_999
WEIGHT_MAX = 99_999
DEFAULT_COST = 1  # cost of an edge with no weight


def clamp_weight(w: int | None) -> int | None:
    if w is None:
        return None
    return max(WEIGHT_MIN, min(WEIGHT_MAX, int(w)))


def vertex_id(v) -> int:
    return v.id if isinstance(v, Vertex) else int(v)


# Core graph value types consumed by the search engines
@dataclass(frozen=True)
class Vertex:
    id: int
    x: float = field(default=0.0, compare=False)  # planar coords, heuristic input only
    y: float = field(default=0.0, compare=False)

    def __str__(self) -> str:
        return str(self.id)


@dataclass(frozen=True)
class Edge:
    source: int
    target: int
    is_directed: bool = False
    weight: int | None = None  # None => unweighted

    def __post_init__(self):
        object.__setattr__(self, "source", vertex_id(self.source))
        object.__setattr__(self, "target", vertex_id(self.target))
        object.__setattr__(self, "weight", clamp_weight(self.weight))

    @property
    def has_negative_weight(self) -> bool:
        return self.weight is not None and self.weight < 0

    def cost(self, default: int = DEFAULT_COST) -> int:
        return default if self.weight is None else self.weight

    def arcs(self) -> Iterator[tuple[int, int]]:
        """Yield the (from, to) directions this edge may be traversed in."""
        yield self.source, self.target
        if not self.is_directed:
            yield self.target, self.source

    def joins(self, a: int, b: int) -> bool:
        return {self.source, self.target} == {a, b}


@dataclass(frozen=True)
class GraphSnapshot:
    vertices: frozenset[Vertex]
    edges: tuple[Edge, ...]
    directed: bool = False  # graph-level default for new edges only
    _by_id: dict[int, Vertex] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_by_id", {v.id: v for v in self.vertices})

    @classmethod
    def of(
        cls, vertices: Iterable[Vertex], edges: Iterable[Edge], directed: bool = False
    ) -> "GraphSnapshot":
        return cls(frozenset(vertices), tuple(edges), directed)

    def vertex(self, vid: int) -> Vertex:
        return self._by_id[vid]

    def __contains__(self, v) -> bool:
        return vertex_id(v) in self._by_id
