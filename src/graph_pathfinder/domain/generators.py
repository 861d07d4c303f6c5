# graph_pathfinder/domain/generators.py
import numpy as np

from graph_pathfinder.domain.entities.graph import Edge, GraphSnapshot, Vertex


def _check_share(name: str, p: float) -> None:
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"{name} must lie in [0, 1], got {p}")


def random_snapshot(
    rng: np.random.Generator,
    n_vertices: int,
    *,
    edge_prob: float = 0.3,
    directed_share: float = 0.5,
    unweighted_share: float = 0.0,
    weight_range: tuple[int, int] = (0, 20),
    coord_range: tuple[float, float, float, float] = (0.0, 0.0, 1_000.0, 1_000.0),
) -> GraphSnapshot:
    """
    Erdős–Rényi style snapshot: every unordered vertex pair gets at most one edge
    with probability `edge_prob`. Weights are drawn from the closed `weight_range`.
    Same generator state => same graph.
    """
    if n_vertices < 0:
        raise ValueError("n_vertices must be >= 0")
    _check_share("edge_prob", edge_prob)
    _check_share("directed_share", directed_share)
    _check_share("unweighted_share", unweighted_share)
    lo, hi = weight_range
    if lo > hi:
        raise ValueError(f"empty weight_range {weight_range}")

    x0, y0, x1, y1 = coord_range
    xs = rng.uniform(x0, x1, size=n_vertices)
    ys = rng.uniform(y0, y1, size=n_vertices)
    vertices = [Vertex(i + 1, float(xs[i]), float(ys[i])) for i in range(n_vertices)]

    edges: list[Edge] = []
    for i in range(n_vertices):
        for j in range(i + 1, n_vertices):
            if rng.random() >= edge_prob:
                continue
            a, b = vertices[i].id, vertices[j].id
            if rng.random() < 0.5:
                a, b = b, a
            directed = bool(rng.random() < directed_share)
            weight = None if rng.random() < unweighted_share else int(rng.integers(lo, hi + 1))
            edges.append(Edge(a, b, is_directed=directed, weight=weight))
    return GraphSnapshot.of(vertices, edges)
