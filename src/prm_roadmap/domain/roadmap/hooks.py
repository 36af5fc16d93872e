# domain/roadmap/hooks.py
from typing import Protocol


class RoadmapHooks(Protocol):
    def build_start(self, *, n_samples, n_obstacles, k, dim): ...
    def samples_filtered(self, *, kept, removed): ...
    def neighbors_selected(self, *, n_nodes, k, mode, edges): ...
    def edges_filtered(self, *, tested, removed, axis_rule): ...
    def build_end(self, *, n_nodes, edges, wall_ms): ...


class NoopHooks:
    def build_start(self, **_):
        pass

    def samples_filtered(self, **_):
        pass

    def neighbors_selected(self, **_):
        pass

    def edges_filtered(self, **_):
        pass

    def build_end(self, **_):
        pass
