# graph_pathfinder/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from graph_pathfinder.app.protocols import PathFinder
from graph_pathfinder.config.models import ScenarioModel
from graph_pathfinder.domain.entities.graph import GraphSnapshot, Vertex
from graph_pathfinder.io.recorder import JsonlSink, Recorder, Sink
from graph_pathfinder.io.search_logging import SearchLogging
from graph_pathfinder.runtime.registries import make_path_finder
from graph_pathfinder.search.hooks import NoopHooks, SearchHooks
from graph_pathfinder.search.result import Result


@dataclass
class App:
    model: ScenarioModel
    graph: GraphSnapshot
    finder: PathFinder
    hooks: SearchHooks

    def find(self, start: Vertex | int, end: Vertex | int) -> Result:
        return self.finder.find(start, end, self.graph)

    def run(self) -> list[Result]:
        return [self.find(q.start, q.end) for q in self.model.queries]


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    sinks: list[Sink] | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Freeze the graph; engines only ever see this copy
    graph = model.graph.to_snapshot()

    # 2) Hooks (+ recorder for results)
    if use_logging:
        recorder = Recorder(*(sinks if sinks is not None else [JsonlSink()]))
        hooks = SearchLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
    else:
        hooks = NoopHooks()

    # 3) Path finder for the configured algorithm
    finder = make_path_finder(model.algorithm, deps={"hooks": hooks})

    return App(model, graph, finder, hooks)
