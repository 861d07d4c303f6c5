# runtime/registries.py
from collections.abc import Callable
from typing import Any

from graph_pathfinder.app.protocols import Heuristic, PathFinder
from graph_pathfinder.config.models import (
    AlgorithmUnion,
    AStarModel,
    BellmanFordModel,
    DijkstraModel,
    HeuristicUnion,
)
from graph_pathfinder.domain.heuristics import euclidean, manhattan, zero
from graph_pathfinder.search.bellman_ford import find_path_bellman_ford
from graph_pathfinder.search.dijkstra import find_path_dijkstra
from graph_pathfinder.search.finders import AStarPathFinder, EnginePathFinder
from graph_pathfinder.search.hooks import NoopHooks

PathFinderFactory = Callable[[AlgorithmUnion, dict[str, Any]], PathFinder]

_path_finder_registry: dict[str, PathFinderFactory] = {}
_heuristic_registry: dict[str, Heuristic] = {}


# ------------------- Heuristics ---------------------------


def register_heuristic(kind: str):
    def deco(fn: Heuristic):
        _heuristic_registry[kind] = fn
        return fn

    return deco


def make_heuristic(cfg: HeuristicUnion) -> Heuristic:
    try:
        return _heuristic_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown heuristic kind {cfg.kind!r}")


register_heuristic("euclidean")(euclidean)
register_heuristic("manhattan")(manhattan)
register_heuristic("zero")(zero)


# ------------------- Path finders ---------------------------


def register_path_finder(kind: str):
    def deco(fn: PathFinderFactory):
        _path_finder_registry[kind] = fn
        return fn

    return deco


def make_path_finder(cfg: AlgorithmUnion, *, deps: dict | None = None) -> PathFinder:
    """
    deps can include:
      - 'hooks': SearchHooks passed to every engine call
    """
    deps = deps or {}
    try:
        factory = _path_finder_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown algorithm kind {cfg.kind!r}")
    return factory(cfg, deps)


@register_path_finder("dijkstra")
def _make_dijkstra(cfg: DijkstraModel, deps):
    return EnginePathFinder("dijkstra", find_path_dijkstra, deps.get("hooks") or NoopHooks())


@register_path_finder("bellman_ford")
def _make_bellman_ford(cfg: BellmanFordModel, deps):
    return EnginePathFinder(
        "bellman_ford", find_path_bellman_ford, deps.get("hooks") or NoopHooks()
    )


@register_path_finder("astar")
def _make_astar(cfg: AStarModel, deps):
    return AStarPathFinder(make_heuristic(cfg.heuristic), deps.get("hooks") or NoopHooks())
