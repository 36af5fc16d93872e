# domain/roadmap/neighbors.py
import math
from collections.abc import Mapping, Sequence

import numpy as np

from prm_roadmap.domain.entities.geometry import Point

NeighborRelation = Mapping[int, tuple[int, ...]]


def distance_matrix(nodes: Sequence[Point]) -> np.ndarray:
    """Symmetric Euclidean distances, zero diagonal. Each pair is computed once."""
    n = len(nodes)
    adj = np.zeros((n, n), dtype=np.float64)
    for i in range(n - 1):
        a = nodes[i]
        for j in range(i + 1, n):
            b = nodes[j]
            adj[i, j] = math.hypot(a.x - b.x, a.y - b.y)
            adj[j, i] = adj[i, j]
    return adj


def nearest_neighbors(row: np.ndarray, k: int) -> tuple[int, ...]:
    """
    Indices of the k smallest nonzero entries of `row`.

    Repeatedly zeroes the largest remaining entry (first occurrence on ties)
    until at most k nonzero entries are left. Zero entries (self, duplicates)
    are never returned.
    """
    work = np.array(row, dtype=np.float64, copy=True)
    remaining = int(np.count_nonzero(work))
    while remaining > k:
        work[int(np.argmax(work))] = 0.0  # argmax returns the first maximum
        remaining -= 1
    return tuple(int(j) for j in np.flatnonzero(work))


def neighbor_relation(dist: np.ndarray, k: int) -> dict[int, tuple[int, ...]]:
    """Directed "j is among the k nearest of i" relation, one entry per node."""
    frozen = dist.copy()
    frozen.flags.writeable = False
    return {i: nearest_neighbors(frozen[i], k) for i in range(frozen.shape[0])}


# ------------- connectivity modes ------------------


def directed_connectivity(relation: NeighborRelation, n: int) -> np.ndarray:
    # row i only reflects i's own choices; may be asymmetric
    adj = np.zeros((n, n), dtype=np.float64)
    for i, nbrs in relation.items():
        adj[i, np.asarray(nbrs, dtype=np.intp)] = 1.0
    return adj


def union_connectivity(relation: NeighborRelation, n: int) -> np.ndarray:
    adj = directed_connectivity(relation, n)
    return np.maximum(adj, adj.T)


def intersection_connectivity(relation: NeighborRelation, n: int) -> np.ndarray:
    adj = directed_connectivity(relation, n)
    return np.minimum(adj, adj.T)


def count_edges(adj: np.ndarray) -> int:
    """Edges as read from the upper triangle."""
    return int(np.count_nonzero(np.triu(adj, k=1)))
