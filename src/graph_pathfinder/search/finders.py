# graph_pathfinder/search/finders.py
from dataclasses import dataclass, field

from graph_pathfinder.app.protocols import Heuristic, PathFinder, SearchEngine
from graph_pathfinder.domain.entities.graph import GraphSnapshot, Vertex
from graph_pathfinder.search.astar import find_path_astar
from graph_pathfinder.search.hooks import NoopHooks, SearchHooks
from graph_pathfinder.search.result import Result


@dataclass
class EnginePathFinder(PathFinder):
    name: str
    engine: SearchEngine
    hooks: SearchHooks = field(default_factory=NoopHooks)

    def find(self, start: Vertex | int, end: Vertex | int, graph: GraphSnapshot) -> Result:
        return self.engine(
            start, end, graph.vertices, graph.edges, graph.directed, hooks=self.hooks
        )


@dataclass
class AStarPathFinder(PathFinder):
    heuristic: Heuristic
    hooks: SearchHooks = field(default_factory=NoopHooks)
    name: str = "astar"

    def find(self, start: Vertex | int, end: Vertex | int, graph: GraphSnapshot) -> Result:
        return find_path_astar(
            start,
            end,
            graph.vertices,
            graph.edges,
            self.heuristic,
            graph.directed,
            hooks=self.hooks,
        )
