# search/result.py
import time
from dataclasses import asdict, dataclass, replace

from graph_pathfinder.domain.entities.graph import Vertex


def _ids(vs) -> str:
    return " -> ".join(str(v.id) for v in vs)


@dataclass(frozen=True)
class Result:
    """
    Outcome of one engine call. Built once by `assemble`, never mutated.
    `negative_cycle` lists the cycle open (first vertex not repeated);
    the closing hop back to the first vertex is implied.
    """

    algorithm: str
    path: tuple[Vertex, ...] = ()
    cost: int | float | None = None
    elapsed_seconds: float = 0.0
    vertices_visited: int = 0
    edge_relaxations: int = 0
    has_negative_cycle: bool = False
    negative_cycle: tuple[Vertex, ...] | None = None
    status_message: str = ""

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def path_ids(self) -> list[int]:
        return [v.id for v in self.path]

    @property
    def cycle_ids(self) -> list[int] | None:
        return None if self.negative_cycle is None else [v.id for v in self.negative_cycle]

    def to_dict(self) -> dict:
        return asdict(self)

    def __str__(self) -> str:
        return self.status_message or describe(self)


def describe(r: Result) -> str:
    if r.has_negative_cycle:
        if r.negative_cycle:
            cycle = f"{_ids(r.negative_cycle)} -> {r.negative_cycle[0].id}"
        else:
            cycle = "unknown"
        return f"No shortest path exists due to a negative weight cycle: {cycle}"
    if not r.path:
        return "No path found."
    return (
        f"Path: {_ids(r.path)}"
        f"\nCost: {r.cost}, "
        f"Time: {r.elapsed_seconds:.4f}s, "
        f"Vertices: {r.vertices_visited}, "
        f"Relaxations: {r.edge_relaxations}"
    )


def assemble(
    algorithm: str,
    *,
    t0: float,
    path: list[Vertex],
    cost: int | float | None,
    visited: int,
    relaxations: int,
    cycle: list[Vertex] | None = None,
) -> Result:
    r = Result(
        algorithm=algorithm,
        path=() if cycle else tuple(path),
        cost=None if (cycle or not path) else cost,
        elapsed_seconds=time.perf_counter() - t0,
        vertices_visited=visited,
        edge_relaxations=relaxations,
        has_negative_cycle=cycle is not None,
        negative_cycle=None if cycle is None else tuple(cycle),
    )
    return replace(r, status_message=describe(r))
