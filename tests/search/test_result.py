import json

import pytest

from graph_pathfinder.domain.entities.graph import Vertex
from graph_pathfinder.search.result import Result, assemble, describe


def test_describe_path():
    r = Result(
        "dijkstra",
        path=[Vertex(1), Vertex(2), Vertex(3)],
        cost=5,
        elapsed_seconds=0.00012,
        vertices_visited=3,
        edge_relaxations=3,
    )
    assert describe(r) == "Path: 1 -> 2 -> 3\nCost: 5, Time: 0.0001s, Vertices: 3, Relaxations: 3"


def test_describe_no_path_and_cycle():
    assert describe(Result("astar")) == "No path found."
    r = Result("bellman_ford", has_negative_cycle=True, negative_cycle=[Vertex(4), Vertex(6)])
    assert describe(r) == "No shortest path exists due to a negative weight cycle: 4 -> 6 -> 4"
    unknown = Result("bellman_ford", has_negative_cycle=True)
    assert describe(unknown).endswith("cycle: unknown")


def test_assemble_fills_status_and_drops_path_on_cycle():
    r = assemble(
        "bellman_ford",
        t0=0.0,
        path=[Vertex(1)],
        cost=-3,
        visited=2,
        relaxations=4,
        cycle=[Vertex(1), Vertex(2)],
    )
    assert r.path == () and r.cost is None
    assert r.has_negative_cycle and r.cycle_ids == [1, 2]
    assert str(r) == r.status_message == describe(r)


def test_to_dict_is_json_safe():
    r = assemble("dijkstra", t0=0.0, path=[Vertex(1, 2.5, 3.5)], cost=0, visited=1, relaxations=0)
    d = json.loads(json.dumps(r.to_dict()))
    assert d["path"] == [{"id": 1, "x": 2.5, "y": 3.5}]
    assert d["has_negative_cycle"] is False


def test_assembled_result_cannot_be_mutated_through_its_sequences():
    src = [Vertex(1), Vertex(2)]
    r = assemble("dijkstra", t0=0.0, path=src, cost=1, visited=2, relaxations=1)
    src.append(Vertex(3))
    assert r.path_ids == [1, 2]
    assert isinstance(r.path, tuple)
    with pytest.raises(AttributeError):
        r.path.append(Vertex(3))

    c = assemble("bellman_ford", t0=0.0, path=[], cost=None, visited=2, relaxations=2, cycle=[Vertex(1), Vertex(2)])
    assert c.negative_cycle == (Vertex(1), Vertex(2))
