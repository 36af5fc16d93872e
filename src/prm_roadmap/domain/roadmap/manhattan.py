# domain/roadmap/manhattan.py
from collections.abc import Sequence
from numbers import Integral

import numpy as np

from prm_roadmap.domain.entities.geometry import Point


def manhattan_distance(a: Point, b: Point) -> float:
    return abs(a.x - b.x) + abs(a.y - b.y)


def manhattan_matrix(adj: np.ndarray, nodes: Sequence[Point]) -> np.ndarray:
    """L1 length of every edge marked exactly 1 in `adj`; zero elsewhere. `adj` is not touched."""
    integral = all(isinstance(p.x, Integral) and isinstance(p.y, Integral) for p in nodes)
    n = len(nodes)
    out = np.zeros((n, n), dtype=np.int64 if integral else np.float64)
    for i, j in zip(*np.nonzero(adj == 1)):
        out[i, j] = manhattan_distance(nodes[i], nodes[j])
    return out
