from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from graph_pathfinder.domain.entities.graph import Edge, GraphSnapshot, Vertex, clamp_weight


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- GRAPH ---------------------


class VertexModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: int
    x: float = 0.0
    y: float = 0.0


class EdgeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    source: int
    target: int
    directed: bool | None = None  # None => graph default
    weight: int | None = None

    @field_validator("weight")
    @classmethod
    def _clamp(cls, v: int | None) -> int | None:
        # out-of-range weights are clamped, not rejected
        return clamp_weight(v)


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    directed: bool = False
    weighted: bool = False
    vertices: list[VertexModel] = Field(default_factory=list)
    edges: list[EdgeModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_refs(self):
        ids = [v.id for v in self.vertices]
        if len(ids) != len(set(ids)):
            raise ValueError("vertex ids must be unique")
        known = set(ids)
        for e in self.edges:
            missing = {e.source, e.target} - known
            if missing:
                raise ValueError(f"edge {e.source}-{e.target} references unknown vertices {sorted(missing)}")
        return self

    def to_snapshot(self) -> GraphSnapshot:
        vertices = [Vertex(v.id, v.x, v.y) for v in self.vertices]
        edges = []
        for e in self.edges:
            weight = e.weight
            if weight is None and self.weighted:
                weight = 1
            directed = self.directed if e.directed is None else e.directed
            edges.append(Edge(e.source, e.target, is_directed=directed, weight=weight))
        return GraphSnapshot.of(vertices, edges, directed=self.directed)


# ----------------- HEURISTICS ---------------------


class HeuristicEuclideanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["euclidean"] = "euclidean"


class HeuristicManhattanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["manhattan"] = "manhattan"


class HeuristicZeroModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["zero"] = "zero"


HeuristicUnion = Annotated[
    HeuristicEuclideanModel | HeuristicManhattanModel | HeuristicZeroModel,
    Field(discriminator="kind"),
]

# ----------------- ALGORITHMS ---------------------


class DijkstraModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"


class BellmanFordModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["bellman_ford"] = "bellman_ford"


class AStarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"
    heuristic: HeuristicUnion = Field(default_factory=HeuristicEuclideanModel)


AlgorithmUnion = Annotated[
    DijkstraModel | BellmanFordModel | AStarModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class QueryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    start: int
    end: int


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    graph: GraphModel
    algorithm: AlgorithmUnion = Field(default_factory=DijkstraModel)
    queries: list[QueryModel] = Field(default_factory=list)
    log: LogModel = LogModel()

    @model_validator(mode="after")
    def _check_queries(self):
        known = {v.id for v in self.graph.vertices}
        for q in self.queries:
            for role, vid in (("start", q.start), ("end", q.end)):
                if vid not in known:
                    raise ValueError(f"query {role} vertex {vid} is not in the graph")
        return self
