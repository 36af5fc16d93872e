# app/events.py
from dataclasses import dataclass


# Stage reports emitted once per roadmap construction
@dataclass(frozen=True)
class BuildStarted:
    run_id: str
    n_samples: int
    n_obstacles: int
    k: int
    dim: int


@dataclass(frozen=True)
class SamplesFiltered:
    run_id: str
    kept: int
    removed: int


@dataclass(frozen=True)
class NeighborsSelected:
    run_id: str
    n_nodes: int
    k: int
    mode: str
    edges: int  # upper-triangle count


@dataclass(frozen=True)
class EdgesFiltered:
    run_id: str
    tested: int
    removed: int
    axis_rule: str


@dataclass(frozen=True)
class RoadmapBuilt:
    run_id: str
    n_nodes: int
    edges: int
    wall_ms: float
