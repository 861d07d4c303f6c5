import math

from graph_pathfinder.domain.entities.graph import Vertex


def euclidean(v: Vertex, goal: Vertex) -> float:
    return math.hypot(goal.x - v.x, goal.y - v.y)


def manhattan(v: Vertex, goal: Vertex) -> float:
    return abs(goal.x - v.x) + abs(goal.y - v.y)


def zero(v: Vertex, goal: Vertex) -> float:
    # degenerates A* into Dijkstra
    return 0.0
