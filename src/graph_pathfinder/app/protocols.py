from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from graph_pathfinder.domain.entities.graph import Edge, GraphSnapshot, Vertex
from graph_pathfinder.search.hooks import SearchHooks
from graph_pathfinder.search.result import Result


# ------------- Search --------------------
@runtime_checkable
class Heuristic(Protocol):
    """
    Estimated remaining cost from `v` to `goal`. Expected non-negative;
    admissibility is the caller's responsibility.
    """

    def __call__(self, v: Vertex, goal: Vertex) -> float: ...


@runtime_checkable
class SearchEngine(Protocol):
    """Signature shared by the Dijkstra and Bellman-Ford entry points."""

    def __call__(
        self,
        start: Vertex | int,
        end: Vertex | int,
        vertices: Iterable[Vertex],
        edges: Iterable[Edge],
        directed_default: bool = False,
        *,
        hooks: SearchHooks | None = None,
    ) -> Result: ...


@runtime_checkable
class PathFinder(Protocol):
    """
    Responsibilities:
      • Answer one start/end query against a frozen snapshot.
      • Report through a Result; only invalid input raises.
    """

    name: str

    def find(self, start: Vertex | int, end: Vertex | int, graph: GraphSnapshot) -> Result: ...
