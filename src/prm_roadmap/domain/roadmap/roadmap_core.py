# prm_roadmap/domain/roadmap/roadmap_core.py
import time
from collections.abc import Iterator, Sequence

import numpy as np

from prm_roadmap.domain.entities.geometry import ObstacleSet, Point
from prm_roadmap.domain.roadmap.collision import filter_edges
from prm_roadmap.domain.roadmap.hooks import NoopHooks, RoadmapHooks
from prm_roadmap.domain.roadmap.manhattan import manhattan_matrix
from prm_roadmap.domain.roadmap.neighbors import count_edges, distance_matrix, neighbor_relation
from prm_roadmap.domain.roadmap.sample_filter import filter_samples
from prm_roadmap.runtime.registries import make_axis_rule, make_connectivity


def _readonly(a: np.ndarray) -> np.ndarray:
    view = a.copy()
    view.flags.writeable = False
    return view


class Roadmap:
    """
    Probabilistic roadmap over 2D samples among axis-aligned rectangular obstacles.

    Built in one pass: samples inside obstacles are dropped, every surviving
    node keeps its k nearest neighbours, and edges whose segment crosses an
    obstacle are removed. The result is exposed through read-only views.

    k:           desired neighbour count per node (>= 1)
    n_obstacles: number of corner pairs in obstacle_top_left/obstacle_bottom_right
    n_nodes:     number of samples given; replaced by the post-filter count
    dim:         opaque map dimension, kept for consumers
    """

    def __init__(
        self,
        samples: Sequence[Point],
        obstacle_top_left: Sequence[Point],
        obstacle_bottom_right: Sequence[Point],
        k: int,
        n_obstacles: int,
        n_nodes: int,
        dim: int,
        *,
        axis_rule: str = "literal",
        neighbor_mode: str = "directed",
        hooks: RoadmapHooks | None = None,
    ):
        if k < 1:
            raise ValueError(f"k must be >= 1, got {k}")
        self.k, self.dim = k, dim
        self.n_samples = n_nodes
        self.axis_rule, self.neighbor_mode = axis_rule, neighbor_mode
        self.obstacles = ObstacleSet(obstacle_top_left, obstacle_bottom_right, n_obstacles)
        self._hooks = hooks or NoopHooks()
        rule = make_axis_rule(axis_rule)
        connect = make_connectivity(neighbor_mode)

        t0 = time.perf_counter()
        self._hooks.build_start(
            n_samples=len(samples), n_obstacles=len(self.obstacles), k=k, dim=dim
        )

        # 1) drop samples that overlap obstacles
        self.nodes: tuple[Point, ...] = filter_samples(samples, self.obstacles)
        self.n_nodes = len(self.nodes)
        self._hooks.samples_filtered(kept=self.n_nodes, removed=len(samples) - self.n_nodes)

        # 2) distances -> k nearest -> 0/1
        self._distances = distance_matrix(self.nodes)
        self._relation = neighbor_relation(self._distances, k)
        adj = connect(self._relation, self.n_nodes)
        self._hooks.neighbors_selected(
            n_nodes=self.n_nodes, k=k, mode=neighbor_mode, edges=count_edges(adj)
        )

        # 3) remove edges that cross obstacles
        tested, removed = filter_edges(adj, self.nodes, self.obstacles, rule)
        self._hooks.edges_filtered(tested=tested, removed=removed, axis_rule=axis_rule)

        self._adj = _readonly(adj)
        self._manhattan = _readonly(manhattan_matrix(self._adj, self.nodes))
        self._hooks.build_end(
            n_nodes=self.n_nodes,
            edges=count_edges(self._adj),
            wall_ms=(time.perf_counter() - t0) * 1000,
        )

    # ------------- views ---------------------

    def adjacency(self) -> np.ndarray:
        """Final 0/1 connectivity matrix, n_nodes x n_nodes."""
        return self._adj

    def manhattan_adjacency(self) -> np.ndarray:
        """Manhattan length of every surviving edge, 0 elsewhere."""
        return self._manhattan

    # names used by existing planners
    get_adjacency = adjacency
    manhattanAdjacency = manhattan_adjacency

    def distances(self) -> np.ndarray:
        return _readonly(self._distances)

    def neighbors_of(self, i: int) -> tuple[int, ...]:
        """k nearest neighbours chosen by node i, before collision filtering."""
        return self._relation[i]

    def edges(self) -> Iterator[tuple[int, int]]:
        for i, j in zip(*np.nonzero(np.triu(self._adj, k=1))):
            yield int(i), int(j)

    def __repr__(self) -> str:
        return (
            f"Roadmap(n_nodes={self.n_nodes}, k={self.k}, obstacles={len(self.obstacles)}, "
            f"edges={count_edges(self._adj)})"
        )
