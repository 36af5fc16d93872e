from typing import Protocol, runtime_checkable

import numpy as np

from prm_roadmap.domain.entities.geometry import Obstacle, Point


# ------------- Roadmap stages --------------------
@runtime_checkable
class AxisRule(Protocol):
    """
    Decide whether an axis-aligned edge a-b (a.x == b.x or a.y == b.y) is
    blocked by one obstacle. Sloped edges never reach an AxisRule.
    """

    def __call__(self, a: Point, b: Point, o: Obstacle) -> bool: ...


@runtime_checkable
class ConnectivityMode(Protocol):
    """
    Turn the directed k-nearest relation {i: (j, ...)} into an n x n 0/1 matrix.
    Decides how the two directions of a pair combine into roadmap edges.
    """

    def __call__(self, relation: dict[int, tuple[int, ...]], n: int) -> np.ndarray: ...
